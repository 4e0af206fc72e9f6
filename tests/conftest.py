import pytest
import pytest_asyncio
from sqlalchemy.pool import StaticPool

from db.engine import create_engine, create_session_factory, create_tables


class FakeMulticall:
    """Stands in for the Multicall3 contract: records calls, returns canned results."""

    def __init__(self, results=None, error: Exception | None = None):
        self.results = results or []
        self.error = error
        self.calls = None

    @property
    def functions(self):
        return self

    def aggregate3(self, calls):
        self.calls = calls
        return self

    async def call(self):
        if self.error is not None:
            raise self.error
        return self.results


@pytest.fixture
def fake_multicall():
    return FakeMulticall


@pytest_asyncio.fixture
async def session():
    engine = create_engine("sqlite+aiosqlite:///:memory:", poolclass=StaticPool)
    await create_tables(engine)
    session_factory = create_session_factory(engine)

    async with session_factory() as session:
        yield session

    await engine.dispose()
