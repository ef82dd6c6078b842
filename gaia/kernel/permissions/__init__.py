"""
Permission Core - stack visibility scoping.
"""

from gaia.kernel.permissions.stack_scope import StackScopeResolver

__all__ = [
    "StackScopeResolver",
]
