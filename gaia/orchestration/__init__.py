"""Orchestration layer - stack lifecycle guard."""

from gaia.orchestration.state_machine import accepts_work, assert_accepts_work
from gaia.kernel.models.stack import StackState

__all__ = [
    "accepts_work",
    "assert_accepts_work",
    "StackState",
]
