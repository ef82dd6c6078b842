"""
Fixtures for store tests against a temporary SQLite database.
"""

from typing import AsyncGenerator

import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from gaia.kernel.models import Base, Stack, Team, TerraformImage, TerraformModule, User


@pytest_asyncio.fixture
async def db_engine(tmp_path):
    """File-based SQLite so every session sees the same database."""
    engine = create_async_engine(
        f"sqlite+aiosqlite:///{tmp_path / 'gaia-test.db'}",
        echo=False,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest_asyncio.fixture
async def session_maker(db_engine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        db_engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )


@pytest_asyncio.fixture
async def db_session(session_maker) -> AsyncGenerator[AsyncSession, None]:
    async with session_maker() as session:
        yield session
        await session.rollback()


@pytest_asyncio.fixture
async def seeded(db_session: AsyncSession) -> dict:
    """Two teams, four users, one module and a stack per ownership class."""
    red = Team(name="red")
    blue = Team(name="blue")
    admin = User(username="admin", is_admin=True)
    alice = User(username="alice", team=red)
    bob = User(username="bob")
    carol = User(username="carol", team=blue)
    module = TerraformModule(
        id="module-1",
        name="vpc",
        git_repository_url="https://github.com/gaia-app/modules.git",
        git_branch="main",
        directory="vpc",
        terraform_image=TerraformImage(repository="hashicorp/terraform", tag="1.5.7"),
    )
    red_stack = Stack(id="red-stack", name="red network", module=module, owner_team=red, created_by=alice)
    blue_stack = Stack(id="blue-stack", name="blue network", module=module, owner_team=blue, created_by=carol)
    bob_stack = Stack(id="bob-stack", name="bob sandbox", module=module, created_by=bob)

    # Relationships are read-only, so parents are flushed before children
    db_session.add_all([red, blue])
    await db_session.flush()
    db_session.add_all([admin, alice, bob, carol, module])
    await db_session.flush()
    db_session.add_all([red_stack, blue_stack, bob_stack])
    await db_session.commit()

    return {
        "red": red,
        "blue": blue,
        "admin": admin,
        "alice": alice,
        "bob": bob,
        "carol": carol,
        "module": module,
        "red_stack": red_stack,
        "blue_stack": blue_stack,
        "bob_stack": bob_stack,
    }
