"""
Pytest fixtures for Gaia tests.
"""

from unittest.mock import AsyncMock, MagicMock

import pytest

from gaia.config import Settings
from gaia.engines.stacks.cost import StackCostCalculator
from gaia.engines.stacks.stack_service import StackService
from gaia.kernel.models import Stack, Team, TerraformImage, TerraformModule, User
from gaia.kernel.repositories import CredentialsRepository, JobRepository, StackRepository


@pytest.fixture
def user_team() -> Team:
    return Team(name="Red Is Dead")


@pytest.fixture
def admin_user() -> User:
    return User(username="admin", team=None, is_admin=True)


@pytest.fixture
def standard_user(user_team: Team) -> User:
    return User(username="Serge Karamazov", team=user_team)


@pytest.fixture
def user_with_no_team() -> User:
    return User(username="Émile Gravier", team=None)


@pytest.fixture
def terraform_module() -> TerraformModule:
    return TerraformModule(
        name="vpc",
        git_repository_url="https://github.com/gaia-app/modules.git",
        git_branch="main",
        directory="vpc",
        terraform_image=TerraformImage(repository="hashicorp/terraform", tag="1.5.7"),
    )


@pytest.fixture
def stack(terraform_module: TerraformModule) -> Stack:
    return Stack(name="network", module=terraform_module)


# Collaborator mocks

@pytest.fixture
def stack_repository() -> AsyncMock:
    return AsyncMock(spec=StackRepository)


@pytest.fixture
def job_repository() -> AsyncMock:
    return AsyncMock(spec=JobRepository)


@pytest.fixture
def credentials_repository() -> AsyncMock:
    repository = AsyncMock(spec=CredentialsRepository)
    repository.find_by_id.return_value = None
    return repository


@pytest.fixture
def cost_calculator() -> MagicMock:
    return MagicMock(spec=StackCostCalculator)


@pytest.fixture
def settings() -> Settings:
    return Settings(fail_launch_on_missing_credentials=False)


@pytest.fixture
def stack_service(
    stack_repository: AsyncMock,
    job_repository: AsyncMock,
    credentials_repository: AsyncMock,
    cost_calculator: MagicMock,
    settings: Settings,
) -> StackService:
    return StackService(
        stacks=stack_repository,
        jobs=job_repository,
        credentials=credentials_repository,
        cost_calculator=cost_calculator,
        settings=settings,
    )
