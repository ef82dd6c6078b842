"""
Stores - async SQLAlchemy access to stacks, jobs and credentials.
"""

from gaia.kernel.repositories.stack_repository import StackRepository
from gaia.kernel.repositories.job_repository import JobRepository
from gaia.kernel.repositories.credentials_repository import CredentialsRepository

__all__ = [
    "StackRepository",
    "JobRepository",
    "CredentialsRepository",
]
