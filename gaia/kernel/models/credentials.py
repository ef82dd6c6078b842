"""
Credential store rows and the column type embedding credentials in jobs.
"""

from typing import Any, Dict, Optional

from sqlalchemy import JSON, ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.types import TypeDecorator

from gaia.kernel.models.base import Base, generate_id
from gaia.schemas.credentials import BaseCredentials, parse_credentials


class CredentialsType(TypeDecorator):
    """Stores a credentials value object as its JSON dump."""

    impl = JSON
    cache_ok = True

    def process_bind_param(self, value: Optional[BaseCredentials], dialect) -> Optional[Dict[str, Any]]:
        if value is None:
            return None
        return value.model_dump()

    def process_result_value(self, value: Optional[Dict[str, Any]], dialect) -> Optional[BaseCredentials]:
        if value is None:
            return None
        return parse_credentials(value)


class StoredCredentials(Base):
    """A named credential held by the credential store."""

    __tablename__ = "credentials"

    id: Mapped[str] = mapped_column(
        String(36),
        primary_key=True,
        default=generate_id,
    )
    name: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
    )
    provider: Mapped[str] = mapped_column(
        String(20),
        nullable=False,
    )
    payload: Mapped[BaseCredentials] = mapped_column(
        CredentialsType,
        nullable=False,
    )
    created_by_username: Mapped[Optional[str]] = mapped_column(
        String(255),
        ForeignKey("users.username"),
        nullable=True,
    )

    def __repr__(self) -> str:
        return f"<StoredCredentials {self.id} {self.provider}>"
