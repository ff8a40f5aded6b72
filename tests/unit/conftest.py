"""Pytest configuration for unit tests."""

from typing import AsyncGenerator

import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from groupkeeper.infrastructure.persistence.database import Base, enable_sqlite_foreign_keys
from groupkeeper.infrastructure.persistence.models import PermissionModel, UserModel


@pytest_asyncio.fixture
async def db_session() -> AsyncGenerator[AsyncSession, None]:
    """Create a test database session.

    Uses an in-memory SQLite database with foreign keys enforced.
    """
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
        echo=False,
    )
    enable_sqlite_foreign_keys(engine)

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async_session_maker = async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

    async with async_session_maker() as session:
        yield session
        await session.rollback()

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest_asyncio.fixture
async def seeded_session(db_session: AsyncSession) -> AsyncSession:
    """Session with permissions 5 and 6 and users 9 and 10 already stored."""
    db_session.add_all(
        [
            PermissionModel(id=5, name="records.read"),
            PermissionModel(id=6, name="records.write"),
            UserModel(id=9, email="alice@example.com"),
            UserModel(id=10, email="bob@example.com"),
        ]
    )
    await db_session.commit()
    return db_session
