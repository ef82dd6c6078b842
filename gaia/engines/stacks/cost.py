"""
Running cost estimation seam.
"""

from abc import ABC, abstractmethod
from decimal import Decimal

from gaia.kernel.models.stack import Stack


class StackCostCalculator(ABC):
    """Estimates what a stack costs to keep running."""

    @abstractmethod
    def calculate_running_cost_estimation(self, stack: Stack) -> Decimal:
        """Estimated running cost of the stack's resources."""
        pass
