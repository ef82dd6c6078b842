"""
Base model with common fields and utilities.
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """Base class for all SQLAlchemy models."""


def generate_id() -> str:
    """Generate a new string identifier."""
    return str(uuid.uuid4())


def utcnow() -> datetime:
    """Timezone-aware current time."""
    return datetime.now(timezone.utc)


def fill_foreign_keys(kwargs: dict, links: dict) -> dict:
    """
    Set foreign key columns from related objects passed to a constructor.

    links maps a relationship name to (column, key attribute), e.g.
    {"team": ("team_name", "name")}. An explicit column value wins.
    """
    for relation, (column, key) in links.items():
        related = kwargs.get(relation)
        if related is not None and kwargs.get(column) is None:
            kwargs[column] = getattr(related, key)
    return kwargs
