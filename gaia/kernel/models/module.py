"""
Terraform module models.
"""

import dataclasses
from typing import Optional

from sqlalchemy import ForeignKey, String, Text
from sqlalchemy.orm import Mapped, composite, mapped_column

from gaia.kernel.models.base import Base, generate_id


@dataclasses.dataclass(frozen=True)
class TerraformImage:
    """Docker image a job runs terraform in."""

    repository: str = "hashicorp/terraform"
    tag: str = "latest"

    @classmethod
    def default(cls) -> "TerraformImage":
        return cls()

    @property
    def image(self) -> str:
        return f"{self.repository}:{self.tag}"


class TerraformModule(Base):
    """A reusable infrastructure definition hosted in a git repository."""

    __tablename__ = "terraform_modules"

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
    git_repository_url: Mapped[Optional[str]] = mapped_column(
        String(1000),
        nullable=True,
    )
    git_branch: Mapped[Optional[str]] = mapped_column(
        String(255),
        nullable=True,
    )
    directory: Mapped[Optional[str]] = mapped_column(
        String(1000),
        nullable=True,
    )
    terraform_image: Mapped[TerraformImage] = composite(
        mapped_column("image_repository", String(255), nullable=False),
        mapped_column("image_tag", String(100), nullable=False),
    )
    created_by_username: Mapped[Optional[str]] = mapped_column(
        String(255),
        ForeignKey("users.username"),
        nullable=True,
    )

    def __init__(self, **kwargs):
        kwargs.setdefault("terraform_image", TerraformImage.default())
        super().__init__(**kwargs)

    def __repr__(self) -> str:
        return f"<TerraformModule {self.name}>"
