"""
Kernel Layer

Foundational components the orchestration engines build on:
- Data models (teams, users, modules, stacks, jobs, stored credentials)
- Stores over those models
- Stack visibility scoping
- Core exceptions
"""

from gaia.kernel.models import (
    Job,
    JobStatus,
    JobType,
    Stack,
    StackState,
    Team,
    TerraformImage,
    TerraformModule,
    User,
)
from gaia.kernel.exceptions import (
    CredentialsNotFoundError,
    GaiaError,
    StackArchivedError,
    StackNotFoundError,
)

__all__ = [
    # Identity
    "Team",
    "User",
    # Stacks & modules
    "Stack",
    "StackState",
    "TerraformImage",
    "TerraformModule",
    # Jobs
    "Job",
    "JobStatus",
    "JobType",
    # Errors
    "GaiaError",
    "StackNotFoundError",
    "StackArchivedError",
    "CredentialsNotFoundError",
]
