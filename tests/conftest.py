import pytest
from sqlalchemy import func, select

from db.session import build_engine, build_sessionmaker, init_models
from models.clients.model import AccountManager, Client
from models.positions.model import Position


@pytest.fixture
async def engine(tmp_path):
    engine = build_engine(f"sqlite+aiosqlite:///{tmp_path / 'recruiting_test.db'}")
    await init_models(engine)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine):
    return build_sessionmaker(engine)


@pytest.fixture
async def db(session_factory):
    async with session_factory() as session:
        yield session


@pytest.fixture
def seed(session_factory):
    """Insert rows in their own committed transaction and return them."""
    async def _seed(*rows):
        async with session_factory() as session:
            async with session.begin():
                session.add_all(rows)
        return rows[0] if len(rows) == 1 else rows
    return _seed


@pytest.fixture
def count_rows(session_factory):
    async def _count(model, *criteria):
        async with session_factory() as session:
            stmt = select(func.count()).select_from(model)
            if criteria:
                stmt = stmt.where(*criteria)
            return (await session.execute(stmt)).scalar_one()
    return _count


@pytest.fixture
def fetch_one(session_factory):
    async def _fetch(model, *criteria):
        async with session_factory() as session:
            result = await session.execute(select(model).where(*criteria))
            return result.scalars().first()
    return _fetch


@pytest.fixture
async def account_manager(seed):
    return await seed(AccountManager(name="John Manager", email="john.manager@example.com"))


@pytest.fixture
def make_client(seed, account_manager):
    async def _make(name="Acme Corporation"):
        return await seed(Client(name=name, contact_info="contact@acme.com", account_manager_id=account_manager.id))
    return _make


@pytest.fixture
async def client(make_client):
    return await make_client()


@pytest.fixture
async def other_client(make_client):
    return await make_client("Globex")


@pytest.fixture
def make_position(seed, account_manager):
    async def _make(owner, title="Senior Software Engineer"):
        return await seed(Position(
            client_id=owner.id,
            account_manager_id=account_manager.id,
            title=title,
            details="A challenging role for an experienced developer",
            min_salary=120000,
            max_salary=150000,
        ))
    return _make


@pytest.fixture
async def position(make_position, client):
    return await make_position(client)
