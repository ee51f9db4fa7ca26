import logging
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

logger = logging.getLogger(__name__)


class Database:
    """
    Owns the async engine and the session factory for the record store.

    Built once by the app factory, stored on ``app.state`` and disposed when the
    application shuts down. Engine creation is lazy: no connection is opened
    until the first session needs one.
    """

    def __init__(self, uri: str, echo: bool = False, pool_size: int = None, max_overflow: int = None):
        engine_kwargs = {"echo": echo, "future": True}
        # SQLite drivers do not accept pool sizing arguments
        if not uri.startswith("sqlite"):
            if pool_size is not None:
                engine_kwargs["pool_size"] = pool_size
            if max_overflow is not None:
                engine_kwargs["max_overflow"] = max_overflow
            engine_kwargs["pool_pre_ping"] = True

        self.engine: AsyncEngine = create_async_engine(uri, **engine_kwargs)
        self.session_factory = sessionmaker(
            self.engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
        )
        logger.info(f"Database configured for dialect {self.engine.dialect.name}")

    @classmethod
    def from_engine(cls, engine: AsyncEngine) -> "Database":
        database = cls.__new__(cls)
        database.engine = engine
        database.session_factory = sessionmaker(
            engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
        )
        return database

    async def ping(self) -> None:
        """Run a trivial query, raising if the store cannot be reached"""
        async with self.engine.connect() as conn:
            await conn.execute(text("SELECT 1"))

    async def create_all(self) -> None:
        import src.domain  # noqa: F401  registers tables on SQLModel.metadata

        async with self.engine.begin() as conn:
            await conn.run_sync(SQLModel.metadata.create_all)

    async def dispose(self) -> None:
        logger.info("Disposing database engine")
        await self.engine.dispose()
