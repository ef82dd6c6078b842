"""
Credential store.
"""

from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession

from gaia.kernel.models.credentials import StoredCredentials
from gaia.kernel.models.user import User
from gaia.schemas.credentials import BaseCredentials


class CredentialsRepository:
    """Holds provider credentials addressed by id."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def find_by_id(self, credentials_id: str) -> Optional[BaseCredentials]:
        """The credentials value object stored under this id, if any."""
        stored = await self.session.get(StoredCredentials, credentials_id)
        if stored is None:
            return None
        return stored.payload

    async def save(
        self,
        name: str,
        credentials: BaseCredentials,
        created_by: Optional[User] = None,
        credentials_id: Optional[str] = None,
    ) -> StoredCredentials:
        stored = StoredCredentials(
            name=name,
            provider=credentials.provider,
            payload=credentials,
            created_by_username=created_by.username if created_by else None,
        )
        if credentials_id:
            stored.id = credentials_id
        self.session.add(stored)
        await self.session.flush()
        return stored
