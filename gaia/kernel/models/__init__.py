"""
Kernel Data Models

Core SQLAlchemy models for teams, users, modules, stacks, jobs and
stored credentials.
"""

from gaia.kernel.models.base import Base, generate_id, utcnow
from gaia.kernel.models.user import Team, User
from gaia.kernel.models.module import TerraformImage, TerraformModule
from gaia.kernel.models.stack import Stack, StackState
from gaia.kernel.models.job import Job, JobStatus, JobType
from gaia.kernel.models.credentials import CredentialsType, StoredCredentials

__all__ = [
    # Base
    "Base",
    "generate_id",
    "utcnow",
    # Identity
    "Team",
    "User",
    # Modules
    "TerraformImage",
    "TerraformModule",
    # Stacks
    "Stack",
    "StackState",
    # Jobs
    "Job",
    "JobStatus",
    "JobType",
    # Credentials
    "CredentialsType",
    "StoredCredentials",
]
