from db.base import Base
from db.token import Token


__all__ = ["Base", "Token"]
