from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession
from config import ApplicationConfig


def engine_options(db_uri: str, lock_timeout_ms: int) -> dict:
    """Bound lock waits per backend so a stuck transaction fails fast"""
    if db_uri.startswith("postgresql+asyncpg"):
        return {
            "pool_size": ApplicationConfig.DB_POOL_SIZE,
            "pool_pre_ping": True,
            "connect_args": {"server_settings": {"lock_timeout": str(lock_timeout_ms)}},
        }
    if db_uri.startswith("sqlite"):
        return {"connect_args": {"timeout": lock_timeout_ms / 1000}}
    return {}


engine = create_async_engine(
    ApplicationConfig.DB_URI,
    echo=False,
    future=True,
    **engine_options(ApplicationConfig.DB_URI, ApplicationConfig.LOCK_TIMEOUT_MS),
)

AsyncSessionLocal = sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
)


async def get_session() -> AsyncSession:
    async with AsyncSessionLocal() as session:
        yield session
