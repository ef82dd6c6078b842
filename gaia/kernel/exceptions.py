"""Core exceptions for stack and job operations."""

from typing import Optional


class GaiaError(Exception):
    """Base exception for Gaia operations."""


class StackNotFoundError(GaiaError):
    """No stack with this id is visible to the caller."""

    def __init__(self, stack_id: Optional[str]):
        self.stack_id = stack_id
        super().__init__(f"Stack not found: {stack_id}")


class StackArchivedError(GaiaError):
    """The stack is archived and accepts no new jobs."""

    def __init__(self, stack_id: Optional[str]):
        self.stack_id = stack_id
        super().__init__(f"Stack is archived: {stack_id}")


class CredentialsNotFoundError(GaiaError):
    """A stack references credentials the credential store does not hold."""

    def __init__(self, credentials_id: str):
        self.credentials_id = credentials_id
        super().__init__(f"Credentials not found: {credentials_id}")
