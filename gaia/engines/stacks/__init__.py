"""
Stack Engine - scoped stack access and job launch.
"""

from gaia.engines.stacks.cost import StackCostCalculator
from gaia.engines.stacks.credential_resolver import CredentialResolver
from gaia.engines.stacks.job_assembler import JobAssembler
from gaia.engines.stacks.stack_service import StackService

__all__ = [
    "StackCostCalculator",
    "CredentialResolver",
    "JobAssembler",
    "StackService",
]
