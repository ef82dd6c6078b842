"""
Stack store.
"""

from typing import List, Optional

from sqlalchemy import select, and_
from sqlalchemy.ext.asyncio import AsyncSession

from gaia.kernel.models.stack import Stack
from gaia.kernel.models.user import Team, User


class StackRepository:
    """
    Query-by-key access to stacks.

    Finders return None on a miss; writes are flushed, the unit of work
    commits.
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def find_all(self) -> List[Stack]:
        result = await self.session.execute(select(Stack).order_by(Stack.created_at))
        return list(result.scalars().unique().all())

    async def find_by_owner_team(self, team: Team) -> List[Stack]:
        query = (
            select(Stack)
            .where(Stack.owner_team_name == team.name)
            .order_by(Stack.created_at)
        )
        result = await self.session.execute(query)
        return list(result.scalars().unique().all())

    async def find_by_created_by(self, user: User) -> List[Stack]:
        query = (
            select(Stack)
            .where(Stack.created_by_username == user.username)
            .order_by(Stack.created_at)
        )
        result = await self.session.execute(query)
        return list(result.scalars().unique().all())

    async def find_by_id(self, stack_id: str) -> Optional[Stack]:
        result = await self.session.execute(select(Stack).where(Stack.id == stack_id))
        return result.scalars().unique().one_or_none()

    async def find_by_id_and_owner_team(self, stack_id: str, team: Team) -> Optional[Stack]:
        query = select(Stack).where(
            and_(
                Stack.id == stack_id,
                Stack.owner_team_name == team.name,
            )
        )
        result = await self.session.execute(query)
        return result.scalars().unique().one_or_none()

    async def save(self, stack: Stack) -> Stack:
        """
        Insert a new stack or flush changes to one loaded by this session.

        Only key columns are written for related teams, users and modules,
        so the objects a caller passes in are left out of the session.
        """
        self.session.add(stack)
        await self.session.flush()
        await self.session.refresh(stack)
        return stack
