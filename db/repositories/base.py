from typing import Any, TypeVar, Generic, Type
from collections.abc import Sequence
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, func, desc, asc
from db.base import Base


ModelType = TypeVar("ModelType", bound=Base)

class BaseRepository(Generic[ModelType]):

    def __init__(self, session: AsyncSession, model: Type[ModelType]):
        self.session = session
        self.model = model

    async def _query_all(
        self,
        filters: dict[str, Any] | None = None,
        order_by: str = "id",
        ascending: bool = True
    ) -> Sequence[ModelType]:
        query = select(self.model)

        if filters:
            for field, value in filters.items():
                if value is not None:
                    column = getattr(self.model, field)
                    query = query.where(column == value)

        order_column = getattr(self.model, order_by, self.model.id)
        query = query.order_by(asc(order_column) if ascending else desc(order_column))

        result = await self.session.execute(query)
        return result.scalars().all()

    async def count(self) -> int:
        query = select(func.count()).select_from(self.model)
        result = await self.session.execute(query)
        return result.scalar_one()

