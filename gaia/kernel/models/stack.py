"""
Stack model: a deployed instance of a terraform module.
"""

from datetime import datetime
from enum import Enum
from typing import Any, Dict, Optional

from sqlalchemy import JSON, DateTime, ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from gaia.kernel.models.base import Base, fill_foreign_keys, generate_id, utcnow
from gaia.kernel.models.module import TerraformModule
from gaia.kernel.models.user import Team, User


class StackState(str, Enum):
    """Stack lifecycle state."""
    ACTIVE = "active"
    ARCHIVED = "archived"


class Stack(Base):
    """
    A deployable instance of a module.

    Owned by a team when owner_team is set, personally owned by its
    creator otherwise. Ownership fields never change after creation.
    """

    __tablename__ = "stacks"

    id: Mapped[str] = mapped_column(
        String(36),
        primary_key=True,
        default=generate_id,
    )
    name: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
    )
    description: Mapped[Optional[str]] = mapped_column(
        Text,
        nullable=True,
    )
    module_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("terraform_modules.id"),
        nullable=False,
        index=True,
    )
    # Lookup key into the credential store, not a foreign key
    credentials_id: Mapped[Optional[str]] = mapped_column(
        String(36),
        nullable=True,
    )
    variable_values: Mapped[Dict[str, Any]] = mapped_column(
        JSON,
        default=dict,
        nullable=False,
    )
    state: Mapped[StackState] = mapped_column(
        String(20),
        default=StackState.ACTIVE,
        nullable=False,
    )

    # Ownership
    owner_team_name: Mapped[Optional[str]] = mapped_column(
        String(255),
        ForeignKey("teams.name"),
        nullable=True,
        index=True,
    )
    created_by_username: Mapped[str] = mapped_column(
        String(255),
        ForeignKey("users.username"),
        nullable=False,
        index=True,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utcnow,
        nullable=False,
    )
    updated_by_username: Mapped[Optional[str]] = mapped_column(
        String(255),
        ForeignKey("users.username"),
        nullable=True,
    )
    updated_at: Mapped[Optional[datetime]] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
    )

    # Read-only views of the key columns above. A save writes the keys
    # only, so related objects handed in by a caller are never persisted.
    module: Mapped[TerraformModule] = relationship(TerraformModule, lazy="joined", viewonly=True)
    owner_team: Mapped[Optional[Team]] = relationship(Team, lazy="joined", viewonly=True)
    created_by: Mapped[User] = relationship(
        User,
        foreign_keys=[created_by_username],
        lazy="joined",
        viewonly=True,
    )
    updated_by: Mapped[Optional[User]] = relationship(
        User,
        foreign_keys=[updated_by_username],
        lazy="joined",
        viewonly=True,
    )

    # Filled on read by the cost calculator, never persisted
    estimated_running_cost = None

    def __init__(self, **kwargs):
        kwargs.setdefault("state", StackState.ACTIVE)
        fill_foreign_keys(kwargs, {
            "module": ("module_id", "id"),
            "owner_team": ("owner_team_name", "name"),
            "created_by": ("created_by_username", "username"),
            "updated_by": ("updated_by_username", "username"),
        })
        super().__init__(**kwargs)

    def __repr__(self) -> str:
        return f"<Stack {self.id} {self.name}>"
