"""
Credential resolution for job launch.
"""

from typing import Optional

from gaia.kernel.exceptions import CredentialsNotFoundError
from gaia.kernel.repositories.credentials_repository import CredentialsRepository
from gaia.logging_config import get_logger
from gaia.schemas.credentials import BaseCredentials

logger = get_logger(__name__)


class CredentialResolver:
    """
    Turns a stack's credentials reference into the credentials value.

    A reference the store cannot satisfy resolves to None and the job
    runs without injected credentials, unless strict is set, in which
    case the launch fails instead.
    """

    def __init__(self, credentials: CredentialsRepository, strict: bool = False):
        self.credentials = credentials
        self.strict = strict

    async def resolve(self, credentials_id: Optional[str]) -> Optional[BaseCredentials]:
        """
        Args:
            credentials_id: The stack's credentials reference, if any

        Returns:
            A copy of the stored credentials, or None

        Raises:
            CredentialsNotFoundError: strict mode and the id is unknown
        """
        if not credentials_id:
            return None

        found = await self.credentials.find_by_id(credentials_id)
        if found is None:
            if self.strict:
                raise CredentialsNotFoundError(credentials_id)
            logger.warning(
                "Credentials %s not found, launching without credentials",
                credentials_id,
                extra={"credentials_id": credentials_id},
            )
            return None
        return found.model_copy()
