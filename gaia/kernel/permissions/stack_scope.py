"""
Stack visibility scoping.

Which stacks a caller may see, in order of precedence:
1. Admins see every stack
2. Team members see the stacks owned by their team
3. Users without a team see the stacks they created
"""

from typing import List

from gaia.kernel.exceptions import StackNotFoundError
from gaia.kernel.models.stack import Stack
from gaia.kernel.models.user import User
from gaia.kernel.repositories.stack_repository import StackRepository
from gaia.logging_config import get_logger

logger = get_logger(__name__)


class StackScopeResolver:
    """
    Resolves the stacks visible to a caller.

    Every lookup goes through the narrowest store query for the caller's
    scope. A miss is reported as not found and never retried in a wider
    scope, so out-of-scope stacks are indistinguishable from absent ones.
    """

    def __init__(self, stacks: StackRepository):
        self.stacks = stacks

    async def list_visible_stacks(self, caller: User) -> List[Stack]:
        if caller.is_admin:
            return await self.stacks.find_all()
        if caller.team is not None:
            return await self.stacks.find_by_owner_team(caller.team)
        return await self.stacks.find_by_created_by(caller)

    async def fetch_visible_stack(self, stack_id: str, caller: User) -> Stack:
        """
        Fetch one stack within the caller's scope.

        Raises:
            StackNotFoundError: If no stack with this id is in scope
        """
        if caller.is_admin:
            stack = await self.stacks.find_by_id(stack_id)
        elif caller.team is not None:
            stack = await self.stacks.find_by_id_and_owner_team(stack_id, caller.team)
        else:
            # Personal stacks carry no team to scope the lookup by
            stack = await self.stacks.find_by_id(stack_id)

        if stack is None:
            logger.info("Stack %s not visible to %s", stack_id, caller.username)
            raise StackNotFoundError(stack_id)
        return stack
