"""
Job model: one plan/apply/destroy request against a stack.

A job snapshots its execution inputs at launch time, so later edits to
the stack, its module or its credentials never change a queued job.
"""

from datetime import datetime
from enum import Enum
from typing import Optional

from sqlalchemy import DateTime, ForeignKey, String
from sqlalchemy.orm import Mapped, composite, mapped_column, relationship

from gaia.kernel.models.base import Base, fill_foreign_keys, generate_id, utcnow
from gaia.kernel.models.credentials import CredentialsType
from gaia.kernel.models.module import TerraformImage
from gaia.kernel.models.user import User
from gaia.schemas.credentials import BaseCredentials


class JobType(str, Enum):
    """What the worker runs for the job."""
    PLAN = "plan"
    RUN = "run"
    DESTROY = "destroy"


class JobStatus(str, Enum):
    """Job status. Launch only ever writes PENDING; workers own the rest."""
    PENDING = "pending"


class Job(Base):
    """An execution request with its inputs copied from the stack."""

    __tablename__ = "jobs"

    id: Mapped[str] = mapped_column(
        String(36),
        primary_key=True,
        default=generate_id,
    )
    # The stack may be deleted independently of its jobs
    stack_id: Mapped[str] = mapped_column(
        String(36),
        nullable=False,
        index=True,
    )
    type: Mapped[JobType] = mapped_column(
        String(20),
        nullable=False,
    )
    status: Mapped[JobStatus] = mapped_column(
        String(20),
        default=JobStatus.PENDING,
        nullable=False,
    )
    user_username: Mapped[str] = mapped_column(
        String(255),
        ForeignKey("users.username"),
        nullable=False,
    )
    terraform_image: Mapped[TerraformImage] = composite(
        mapped_column("image_repository", String(255), nullable=False),
        mapped_column("image_tag", String(100), nullable=False),
    )
    credentials: Mapped[Optional[BaseCredentials]] = mapped_column(
        CredentialsType,
        nullable=True,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utcnow,
        nullable=False,
    )

    user: Mapped[User] = relationship(User, lazy="joined", viewonly=True)

    def __init__(self, **kwargs):
        kwargs.setdefault("status", JobStatus.PENDING)
        fill_foreign_keys(kwargs, {"user": ("user_username", "username")})
        super().__init__(**kwargs)

    def __repr__(self) -> str:
        return f"<Job {self.id} {self.type} stack={self.stack_id}>"
