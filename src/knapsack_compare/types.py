"""
Common type definitions for knapsack-compare.

Provides type aliases and the solver result record shared by both solvers.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, TypeAlias

import numpy as np
from numpy.typing import NDArray

# Type aliases
IntArray: TypeAlias = NDArray[np.int64]
ReportDict: TypeAlias = dict[str, Any]
MetricsDict: TypeAlias = dict[str, int | float]

# Path types
PathLike: TypeAlias = str | Path


@dataclass
class SolveResult:
    """
    Outcome of one solver on one instance.

    Attributes:
        solver: Solver name ("greedy" or "dp")
        total_weight: Sum of weights of the chosen positions (<= capacity)
        total_profit: Sum of profits of the chosen positions
        items: Chosen 0-based positions, ascending and unique
        marginal_profit: dp[n][capacity] - dp[n-1][capacity], DP only.
            Reported as-is; it is not the profit of any particular item.
        elapsed_ms: Wall-clock solve time, when measured
    """

    solver: str
    total_weight: int = 0
    total_profit: int = 0
    items: list[int] = field(default_factory=list)
    marginal_profit: int | None = None
    elapsed_ms: float | None = None

    def display_items(self) -> list[int]:
        """Chosen positions shifted to 1-based numbering."""
        return [i + 1 for i in self.items]

    def to_dict(self) -> ReportDict:
        result: ReportDict = {
            "total_weight": self.total_weight,
            "total_profit": self.total_profit,
            "items": self.display_items(),
            "elapsed_ms": self.elapsed_ms,
        }
        if self.marginal_profit is not None:
            result["marginal_profit"] = self.marginal_profit
        return result
