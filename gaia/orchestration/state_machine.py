"""
Stack lifecycle guard.

ACTIVE stacks accept new jobs; ARCHIVED stacks accept none. Archiving
and unarchiving happen elsewhere; this module only answers whether a
stack in its current state may take new work.
"""

from typing import FrozenSet, Union

from gaia.kernel.exceptions import StackArchivedError
from gaia.kernel.models.stack import Stack, StackState


_NO_WORK_STATES: FrozenSet[str] = frozenset({StackState.ARCHIVED.value})


def _state_value(state: Union[StackState, str, None]) -> str:
    """Enum value of a state (SQLite hands back plain strings)."""
    if state is None:
        return StackState.ACTIVE.value
    return state.value if hasattr(state, "value") else str(state)


def accepts_work(state: Union[StackState, str, None]) -> bool:
    """Whether a stack in this state may have new jobs launched."""
    return _state_value(state) not in _NO_WORK_STATES


def assert_accepts_work(stack: Stack) -> None:
    """
    Raises:
        StackArchivedError: If the stack is archived
    """
    if not accepts_work(stack.state):
        raise StackArchivedError(stack.id)
