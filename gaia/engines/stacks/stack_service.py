"""
Stack orchestration service.

Entry point for stack reads, writes and job launches on behalf of a
caller. Holds no state between calls; every operation is one unit of
work against the stores it was built with.
"""

from typing import List, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from gaia.config import Settings, get_settings
from gaia.engines.stacks.cost import StackCostCalculator
from gaia.engines.stacks.credential_resolver import CredentialResolver
from gaia.engines.stacks.job_assembler import JobAssembler
from gaia.kernel.models.base import generate_id, utcnow
from gaia.kernel.models.job import JobType
from gaia.kernel.models.stack import Stack
from gaia.kernel.models.user import Team, User
from gaia.kernel.permissions.stack_scope import StackScopeResolver
from gaia.kernel.repositories.credentials_repository import CredentialsRepository
from gaia.kernel.repositories.job_repository import JobRepository
from gaia.kernel.repositories.stack_repository import StackRepository
from gaia.logging_config import caller_context, get_logger
from gaia.schemas.job import JobLaunched

logger = get_logger(__name__)

EDITABLE_FIELDS = ("name", "description", "module_id", "credentials_id", "variable_values")


class StackService:
    """
    Service for stack operations scoped to a caller.

    Usage:
        service = StackService.from_session(session, cost_calculator)
        stacks = await service.list_stacks(current_user)
        ack = await service.launch_job(stack_id, JobType.RUN, current_user)
    """

    def __init__(
        self,
        stacks: StackRepository,
        jobs: JobRepository,
        credentials: CredentialsRepository,
        cost_calculator: StackCostCalculator,
        settings: Optional[Settings] = None,
    ):
        settings = settings or get_settings()
        self.stacks = stacks
        self.cost_calculator = cost_calculator
        self.scope = StackScopeResolver(stacks)
        self.job_assembler = JobAssembler(
            scope=self.scope,
            credential_resolver=CredentialResolver(
                credentials,
                strict=settings.fail_launch_on_missing_credentials,
            ),
            jobs=jobs,
        )

    @classmethod
    def from_session(
        cls,
        session: AsyncSession,
        cost_calculator: StackCostCalculator,
        settings: Optional[Settings] = None,
    ) -> "StackService":
        """Build a service whose stores share one database session."""
        return cls(
            stacks=StackRepository(session),
            jobs=JobRepository(session),
            credentials=CredentialsRepository(session),
            cost_calculator=cost_calculator,
            settings=settings,
        )

    async def list_stacks(self, caller: User) -> List[Stack]:
        with caller_context(caller.username):
            stacks = await self.scope.list_visible_stacks(caller)
            logger.debug("Listed %d stacks", len(stacks))
            return stacks

    async def get_stack(self, stack_id: str, caller: User) -> Stack:
        """
        Get a stack in the caller's scope, with its running cost estimated.

        A failing cost calculator leaves estimated_running_cost unset and
        does not fail the read.

        Raises:
            StackNotFoundError: If the stack is not visible to the caller
        """
        with caller_context(caller.username):
            stack = await self.scope.fetch_visible_stack(stack_id, caller)
            try:
                stack.estimated_running_cost = (
                    self.cost_calculator.calculate_running_cost_estimation(stack)
                )
            except Exception:
                logger.warning(
                    "Running cost estimation failed for stack %s",
                    stack_id,
                    exc_info=True,
                    extra={"stack_id": stack_id},
                )
            return stack

    async def save(self, stack: Stack, owner_team: Optional[Team], caller: User) -> Stack:
        """Create a stack owned by owner_team, or by the caller when None."""
        with caller_context(caller.username):
            if not stack.id:
                stack.id = generate_id()
            stack.owner_team_name = owner_team.name if owner_team else None
            stack.created_by_username = caller.username
            stack.created_at = utcnow()

            saved = await self.stacks.save(stack)
            logger.info(
                "Stack %s created",
                stack.id,
                extra={"stack_id": stack.id, "owner_team": stack.owner_team_name},
            )
            return saved

    async def update(self, stack_id: str, changes: Stack, caller: User) -> Stack:
        """
        Apply the editable fields of changes to a stack in the caller's scope.

        Only name, description, module, credentials and variable values are
        copied, and only when set. Ownership and state stay as stored.

        Raises:
            StackNotFoundError: If the stack is not visible to the caller
        """
        with caller_context(caller.username):
            stack = await self.scope.fetch_visible_stack(stack_id, caller)
            for field in EDITABLE_FIELDS:
                value = getattr(changes, field)
                if value is not None:
                    setattr(stack, field, value)
            stack.updated_by_username = caller.username
            stack.updated_at = utcnow()

            saved = await self.stacks.save(stack)
            logger.info("Stack %s updated", stack_id, extra={"stack_id": stack_id})
            return saved

    async def launch_job(self, stack_id: str, job_type: JobType, caller: User) -> JobLaunched:
        """
        Launch a job against a stack in the caller's scope.

        Raises:
            StackNotFoundError: If the stack is not visible to the caller
            StackArchivedError: If the stack is archived
            CredentialsNotFoundError: strict credential policy only
        """
        with caller_context(caller.username):
            job = await self.job_assembler.launch(stack_id, job_type, caller)
            return JobLaunched(job_id=job.id)
