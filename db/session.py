import ssl

from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, create_async_engine
from sqlalchemy.orm import sessionmaker

from config import get_settings
from db.base import Base
import models.registry  # noqa: F401
from utils.logger import AppLogger

logger = AppLogger.get_logger(__name__)


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def build_engine(database_url: str, echo: bool = False, use_ssl: bool = False) -> AsyncEngine:
    connect_args = {}
    if use_ssl:
        connect_args["ssl"] = ssl.create_default_context()

    engine = create_async_engine(
        database_url,
        echo=echo,
        pool_pre_ping=True,
        connect_args=connect_args,
    )

    # SQLite leaves FK enforcement off unless asked per connection
    if engine.dialect.name == "sqlite":
        event.listen(engine.sync_engine, "connect", _enable_sqlite_foreign_keys)

    logger.info(f"Database engine ready ({engine.dialect.name})")
    return engine


def build_sessionmaker(engine: AsyncEngine) -> sessionmaker:
    return sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False
    )


async def init_models(engine: AsyncEngine) -> None:
    """Create every table registered on ``Base``; schema migrations are managed elsewhere."""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


settings = get_settings()
engine = build_engine(settings.database_url, echo=settings.db_echo, use_ssl=settings.db_ssl)
AsyncSessionLocal = build_sessionmaker(engine)


async def get_db():
    async with AsyncSessionLocal() as session:
        yield session
