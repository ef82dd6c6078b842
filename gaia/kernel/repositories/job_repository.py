"""
Job store.
"""

from typing import List

from sqlalchemy import select, desc
from sqlalchemy.ext.asyncio import AsyncSession

from gaia.kernel.models.job import Job


class JobRepository:
    """Persists launched jobs and lists them per stack."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def save(self, job: Job) -> Job:
        self.session.add(job)
        await self.session.flush()
        # Load the launching user from its row, not from the caller object
        await self.session.refresh(job)
        return job

    async def find_by_stack_id(self, stack_id: str) -> List[Job]:
        """Jobs of a stack, newest first."""
        query = (
            select(Job)
            .where(Job.stack_id == stack_id)
            .order_by(desc(Job.created_at))
        )
        result = await self.session.execute(query)
        return list(result.scalars().unique().all())
