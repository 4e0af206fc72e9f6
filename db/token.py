from sqlalchemy import (
    Column,
    Integer,
    Numeric,
    String,
    Index,
)

from .base import Base
from .mixins import TimestampMixin


class Token(Base, TimestampMixin):
    __tablename__ = "tokens"

    id = Column(Integer, primary_key=True, autoincrement=True)
    chain_id = Column(Integer, nullable=False, index=True)
    address = Column(String(42), nullable=False)

    # Any of the metadata calls may fail, so every field is optional.
    name = Column(String(255), nullable=True)
    symbol = Column(String(255), nullable=True)
    decimals = Column(Integer, nullable=True)
    total_supply = Column(Numeric(78, 0), nullable=True)

    __table_args__ = (
        Index("idx_token_chain_address", "chain_id", "address", unique=True),
        Index("idx_token_symbol", "symbol"),
    )

    def __repr__(self) -> str:
        return (
            f"<Token(id={self.id}, symbol={self.symbol}, "
            f"address={self.address[:10]}..., chain_id={self.chain_id})>"
        )

    def to_metadata(self) -> dict:
        metadata = {}
        for key in ("name", "symbol", "decimals", "total_supply"):
            value = getattr(self, key)
            if value is not None:
                metadata[key] = int(value) if key == "total_supply" else value
        return metadata
