# eshop/infra/database.py
"""
PostgreSQL database manager.
Connection pool, retry on connection errors, transactions, JSONB codecs.
"""

from __future__ import annotations

import asyncio
import json
from contextlib import asynccontextmanager
from functools import partial, wraps
from typing import Any, AsyncGenerator, Callable, TypeVar

import asyncpg
from asyncpg import Connection, Pool, Record

from eshop.common.constants import TypeMsg
from eshop.common.logger import log_error, log_info, log_warning

T = TypeVar("T")

# Fixed key for pg_advisory_xact_lock while the schema is applied
SCHEMA_LOCK_ID = 731_905_114


def retry_on_connection_error(
    max_attempts: int = 3,
    delay: float = 1.0,
) -> Callable[[Callable[..., T]], Callable[..., T]]:
    """
    Retries a coroutine when the database connection fails.

    Args:
        max_attempts: Maximum number of attempts
        delay: Base delay between attempts in seconds (multiplied by attempt)
    """
    def decorator(func: Callable[..., T]) -> Callable[..., T]:
        @wraps(func)
        async def wrapper(*args: Any, **kwargs: Any) -> T:
            last_error: Exception | None = None

            for attempt in range(1, max_attempts + 1):
                try:
                    return await func(*args, **kwargs)
                except (
                    asyncpg.PostgresConnectionError,
                    asyncpg.InterfaceError,
                    ConnectionRefusedError,
                    OSError,
                ) as e:
                    last_error = e
                    if attempt < max_attempts:
                        await log_warning(
                            f"Database connection error (attempt {attempt}/{max_attempts}): {e}"
                        )
                        await asyncio.sleep(delay * attempt)
                    else:
                        await log_error(f"Database unreachable after {max_attempts} attempts: {e}")

            raise last_error  # type: ignore

        return wrapper  # type: ignore

    return decorator


async def _init_connection(connection: Connection) -> None:
    """Decodes json/jsonb columns to Python objects and back."""
    dumps = partial(json.dumps, default=str)
    for type_name in ("json", "jsonb"):
        await connection.set_type_codec(
            type_name,
            encoder=dumps,
            decoder=json.loads,
            schema="pg_catalog",
        )


class DatabaseManager:
    """
    PostgreSQL connection manager.
    Singleton around one asyncpg pool per process.
    """

    _instance: DatabaseManager | None = None
    _pool: Pool | None = None

    def __new__(cls) -> DatabaseManager:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self) -> None:
        if hasattr(self, "_initialized"):
            return
        self._initialized = True
        self._pool = None

    @property
    def pool(self) -> Pool:
        """The connection pool."""
        if self._pool is None:
            raise RuntimeError("Connection pool is not initialised. Call connect() first.")
        return self._pool

    @retry_on_connection_error(max_attempts=3, delay=1.0)
    async def connect(
        self,
        dsn: str | None = None,
        min_size: int = 5,
        max_size: int = 20,
        command_timeout: int = 60,
    ) -> None:
        """
        Creates the connection pool.

        Args:
            dsn: Connection string (taken from settings when None)
            min_size: Minimum pool size
            max_size: Maximum pool size
            command_timeout: Statement timeout in seconds
        """
        if self._pool is not None:
            return

        if dsn is None:
            from eshop.config import settings
            dsn = settings.database.dsn
            min_size = settings.database.DB_MIN_POOL_SIZE
            max_size = settings.database.DB_MAX_POOL_SIZE
            command_timeout = settings.database.DB_COMMAND_TIMEOUT

        await log_info("Connecting to PostgreSQL...")

        self._pool = await asyncpg.create_pool(
            dsn=dsn,
            min_size=min_size,
            max_size=max_size,
            command_timeout=command_timeout,
            init=_init_connection,
        )

        await log_info("PostgreSQL connection pool ready")

    async def disconnect(self) -> None:
        """Closes the pool."""
        if self._pool is not None:
            await self._pool.close()
            self._pool = None
            await log_info("PostgreSQL connection pool closed")

    @asynccontextmanager
    async def acquire(self) -> AsyncGenerator[Connection, None]:
        """
        Borrows a connection from the pool.

        Example:
            async with db.acquire() as conn:
                rows = await conn.fetch("SELECT * FROM orders")
        """
        async with self.pool.acquire() as connection:
            yield connection

    @asynccontextmanager
    async def transaction(self) -> AsyncGenerator[Connection, None]:
        """
        Borrows a connection and opens a transaction on it.
        Commits on success, rolls back on error.
        """
        async with self.pool.acquire() as connection:
            async with connection.transaction():
                yield connection

    @retry_on_connection_error()
    async def execute(self, query: str, *args: Any) -> str:
        """Runs a statement and returns its status string."""
        async with self.acquire() as conn:
            return await conn.execute(query, *args)

    @retry_on_connection_error()
    async def fetch(self, query: str, *args: Any) -> list[Record]:
        """Runs a query and returns every row."""
        async with self.acquire() as conn:
            return await conn.fetch(query, *args)

    @retry_on_connection_error()
    async def fetchrow(self, query: str, *args: Any) -> Record | None:
        """Runs a query and returns the first row or None."""
        async with self.acquire() as conn:
            return await conn.fetchrow(query, *args)

    @retry_on_connection_error()
    async def fetchval(self, query: str, *args: Any, column: int = 0) -> Any:
        """Runs a query and returns a single value."""
        async with self.acquire() as conn:
            return await conn.fetchval(query, *args, column=column)

    async def health_check(self) -> bool:
        """True when `SELECT 1` succeeds."""
        try:
            result = await self.fetchval("SELECT 1")
            return result == 1
        except Exception as e:
            await log_error(f"PostgreSQL health check failed: {e}")
            return False


_db_manager: DatabaseManager | None = None


def get_db() -> DatabaseManager:
    """Returns the process-wide DatabaseManager."""
    global _db_manager
    if _db_manager is None:
        _db_manager = DatabaseManager()
    return _db_manager


async def init_db() -> None:
    """
    Connects using settings and applies migrations/init.sql.
    """
    from eshop.config import settings

    db = get_db()
    await db.connect(
        dsn=settings.database.dsn,
        min_size=settings.database.DB_MIN_POOL_SIZE,
        max_size=settings.database.DB_MAX_POOL_SIZE,
        command_timeout=settings.database.DB_COMMAND_TIMEOUT,
    )
    await log_info(
        f"PostgreSQL connected: {settings.database.DB_HOST}:{settings.database.DB_PORT}/{settings.database.DB_NAME}",
        type_msg=TypeMsg.INFO,
    )

    await _init_schema(db)


async def _init_schema(db: DatabaseManager) -> None:
    """Applies the idempotent schema script."""
    from eshop.config.loader import get_project_root

    schema_path = get_project_root() / "migrations" / "init.sql"
    if not schema_path.exists():
        await log_error(f"Schema file not found: {schema_path}")
        return

    schema_sql = schema_path.read_text(encoding="utf-8")

    try:
        await log_info("Applying database schema...")
        async with db.transaction() as conn:
            await conn.execute(f"SELECT pg_advisory_xact_lock({SCHEMA_LOCK_ID})")
            await conn.execute(schema_sql)
        await log_info("Database schema applied")
    except asyncpg.DuplicateObjectError as e:
        # Two processes racing at start-up; the other one won
        await log_warning(f"Schema already applied by another process: {e}")


async def close_db() -> None:
    """Closes the process-wide pool."""
    db = get_db()
    await db.disconnect()
