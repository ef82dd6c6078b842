"""
Job assembly: turns a launch request into a persisted job.
"""

from gaia.engines.stacks.credential_resolver import CredentialResolver
from gaia.kernel.exceptions import StackArchivedError
from gaia.kernel.models.base import generate_id
from gaia.kernel.models.job import Job, JobType
from gaia.kernel.models.user import User
from gaia.kernel.permissions.stack_scope import StackScopeResolver
from gaia.kernel.repositories.job_repository import JobRepository
from gaia.logging_config import get_logger
from gaia.orchestration.state_machine import assert_accepts_work

logger = get_logger(__name__)


class JobAssembler:
    """
    Builds and persists a job for a stack.

    Steps, in this order:
    1. Fetch the stack within the caller's scope
    2. Refuse archived stacks
    3. Resolve the stack's credentials
    4. Build the job, snapshotting image and credentials
    5. Persist it

    The scoped fetch comes before the lifecycle check so an out-of-scope
    stack never reveals whether it is archived. Nothing is written when
    steps 1 or 2 fail.
    """

    def __init__(
        self,
        scope: StackScopeResolver,
        credential_resolver: CredentialResolver,
        jobs: JobRepository,
    ):
        self.scope = scope
        self.credential_resolver = credential_resolver
        self.jobs = jobs

    async def launch(self, stack_id: str, job_type: JobType, caller: User) -> Job:
        """
        Raises:
            StackNotFoundError: If the stack is not visible to the caller
            StackArchivedError: If the stack is archived
            CredentialsNotFoundError: strict credential policy only
        """
        stack = await self.scope.fetch_visible_stack(stack_id, caller)
        try:
            assert_accepts_work(stack)
        except StackArchivedError:
            logger.info(
                "Refused %s job on archived stack %s",
                job_type.value,
                stack_id,
                extra={"stack_id": stack_id, "job_type": job_type.value},
            )
            raise

        credentials = await self.credential_resolver.resolve(stack.credentials_id)

        job = Job(
            id=generate_id(),
            stack_id=stack_id,
            type=job_type,
            user_username=caller.username,
            terraform_image=stack.module.terraform_image,
            credentials=credentials,
        )
        await self.jobs.save(job)

        logger.info(
            "Launched %s job %s on stack %s",
            job_type.value,
            job.id,
            stack_id,
            extra={
                "job_id": job.id,
                "stack_id": stack_id,
                "job_type": job_type.value,
                "with_credentials": credentials is not None,
            },
        )
        return job
