"""
Team and user models for identity and ownership.
"""

from typing import Optional

from sqlalchemy import Boolean, ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from gaia.kernel.models.base import Base, fill_foreign_keys


class Team(Base):
    """A group of users jointly owning stacks."""

    __tablename__ = "teams"

    name: Mapped[str] = mapped_column(
        String(255),
        primary_key=True,
    )

    def __repr__(self) -> str:
        return f"<Team {self.name}>"


class User(Base):
    """A caller: optionally a team member, optionally an admin."""

    __tablename__ = "users"

    username: Mapped[str] = mapped_column(
        String(255),
        primary_key=True,
    )
    team_name: Mapped[Optional[str]] = mapped_column(
        String(255),
        ForeignKey("teams.name"),
        nullable=True,
        index=True,
    )
    is_admin: Mapped[bool] = mapped_column(
        Boolean,
        default=False,
        nullable=False,
    )

    # Read-only: membership is written through team_name
    team: Mapped[Optional[Team]] = relationship(Team, lazy="joined", viewonly=True)

    def __init__(self, **kwargs):
        kwargs.setdefault("is_admin", False)
        fill_foreign_keys(kwargs, {"team": ("team_name", "name")})
        super().__init__(**kwargs)

    def __repr__(self) -> str:
        return f"<User {self.username}>"
