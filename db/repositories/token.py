from collections.abc import Mapping, Sequence
from typing import Any

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from db.token import Token
from db.repositories.base import BaseRepository
from enums.token import TokenField


def _storable(value: Any) -> Any:
    # Text columns cannot hold the partial character a byte cut may leave behind.
    if isinstance(value, str):
        return value.encode("utf-8", "surrogateescape").decode("utf-8", "ignore")
    return value


class TokenRepository(BaseRepository[Token]):
    def __init__(self, session: AsyncSession):
        super().__init__(session, Token)

    async def get_by_address(self, address: str, chain_id: int) -> Token | None:
        query = select(Token).where(
            Token.address == address.lower(),
            Token.chain_id == chain_id
        )
        result = await self.session.execute(query)
        return result.scalar_one_or_none()

    async def upsert_metadata(
        self,
        chain_id: int,
        address: str,
        metadata: Mapping[str, Any],
    ) -> Token:
        """Store a partial record; only the fields it carries are written."""
        token = await self.get_by_address(address, chain_id)

        if token is None:
            token = Token(chain_id=chain_id, address=address.lower())
            self.session.add(token)

        for field in TokenField:
            if field.value in metadata:
                setattr(token, field.value, _storable(metadata[field.value]))

        await self.session.flush()

        return token

    async def get_all(
        self,
        chain_id: int | None = None,
        order_by: str = "id",
        ascending: bool = True,
    ) -> Sequence[Token]:
        filters = {}
        if chain_id:
            filters["chain_id"] = chain_id

        return await super()._query_all(filters, order_by, ascending)
