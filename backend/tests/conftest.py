import os

# Point the app at SQLite before customs_entry.database builds its engine
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///./test.db")
os.environ.setdefault("STORE_BACKEND", "sql")

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from customs_entry.models.base import Base
# Import all models so they register with Base.metadata for create_all
import customs_entry.models  # noqa: F401
from customs_entry.stores import InMemoryDocumentStore


@pytest.fixture
async def test_engine(tmp_path):
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}", echo=False)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
async def db_session(test_engine):
    session_factory = async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False
    )
    async with session_factory() as session:
        yield session
        await session.rollback()


@pytest.fixture
async def client(db_session):
    from customs_entry.database import get_db
    from customs_entry.main import app

    async def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest.fixture
def store() -> InMemoryDocumentStore:
    return InMemoryDocumentStore()


class SequentialIds:
    """Deterministic id factory: id-1, id-2, ..."""

    def __init__(self, prefix: str = "id"):
        self.prefix = prefix
        self.count = 0

    def __call__(self) -> str:
        self.count += 1
        return f"{self.prefix}-{self.count}"


@pytest.fixture
def ids() -> SequentialIds:
    return SequentialIds()


@pytest.fixture
def declaration_payload() -> dict:
    """A sea declaration with two priced lines, as the form submits it."""
    return {
        "transportMode": "SEA",
        "billNumber": "HBL-1001",
        "importer": {"name": "Island Traders", "number": "IMP-77"},
        "exporter": {
            "name": "Gulf Export Co",
            "number": "EXP-55",
            "address": "1 Harbor Rd",
            "city": "Miami",
            "state": "FL",
            "postalcode": "33101",
            "country": "USA",
            "phone": "305-555-0100",
        },
        "packages": {
            "pkgCount": 3,
            "pkgType": "CTN",
            "grossWt": "450",
            "grossVol": "32",
            "contents": "Household goods",
        },
        "valuation": {"netCost": "300.00", "netFreight": "100.00", "netInsurance": "10.00"},
        "items": [
            {"code": "94036000", "desc": "Wooden furniture", "qty": 2, "unit": "PCS", "cost": "200.00", "invNumber": "INV-1"},
            {"code": "63026000", "desc": "Towels", "qty": 10, "unit": "", "cost": "100.00", "invNumber": "INV-1"},
        ],
    }
