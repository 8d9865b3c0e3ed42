"""데이터베이스 엔진 및 세션 설정 모듈.

Database engine and session configuration module.
Sets up the async SQLAlchemy engine, session factory, and ORM base class.
Only the unit of work (app.unit_of_work) opens sessions from this factory.
"""

from typing import Any

from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncSession, AsyncEngine, create_async_engine, async_sessionmaker
from sqlalchemy.orm import DeclarativeBase

from app.config import settings


def build_engine(url: str, echo: bool = False, **engine_options: Any) -> AsyncEngine:
    """드라이버별 옵션을 적용하여 비동기 엔진을 생성합니다.

    Create an async engine with driver-specific options.
    PostgreSQL gets pool sizing and a disabled asyncpg statement cache
    (transaction-mode poolers); SQLite gets foreign keys switched on per
    connection so referential integrity is enforced by the engine.

    Args:
        url: 비동기 SQLAlchemy URL (Async SQLAlchemy URL)
        echo: SQL 로그 출력 여부 (Whether to echo SQL)
        **engine_options: 추가 엔진 옵션 (Extra create_async_engine options, e.g. poolclass)

    Returns:
        AsyncEngine: 생성된 엔진 (The configured engine)
    """
    options: dict[str, Any] = {"echo": echo}
    if url.startswith("postgresql"):
        options.update(
            pool_pre_ping=True,
            pool_size=settings.DB_POOL_SIZE,
            max_overflow=settings.DB_MAX_OVERFLOW,
            connect_args={"statement_cache_size": 0},
        )

    options.update(engine_options)
    new_engine: AsyncEngine = create_async_engine(url, **options)

    if new_engine.dialect.name == "sqlite":
        @event.listens_for(new_engine.sync_engine, "connect")
        def _enable_sqlite_foreign_keys(dbapi_connection: Any, connection_record: Any) -> None:
            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()

    return new_engine


# 비동기 데이터베이스 엔진 — Async database engine
engine: AsyncEngine = build_engine(settings.DATABASE_URL, echo=settings.DEBUG)

# 비동기 세션 팩토리 — Async session factory
# expire_on_commit=False: 커밋 후에도 객체 속성 접근 가능 (Allows attribute access after commit without refresh)
async_session: async_sessionmaker[AsyncSession] = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


class Base(DeclarativeBase):
    """SQLAlchemy 선언적 베이스 클래스.

    Declarative base class for all ORM models.
    All models inherit from this class to register with the metadata.
    """

    pass


async def create_all(target: AsyncEngine | None = None) -> None:
    """ORM 메타데이터로 모든 테이블을 생성합니다 (이미 있으면 건너뜀).

    Create every table registered on Base.metadata. Existing tables are left alone.
    """
    import app.models  # noqa: F401 — register all models with metadata

    async with (target or engine).begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
