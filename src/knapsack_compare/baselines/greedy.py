"""
Greedy Solver for Knapsack Problem
Packs items in the order they are given, relying on profits being sorted descending
"""

import time
from collections.abc import Sequence

import numpy as np

from knapsack_compare.data.generator import KnapsackInstance
from knapsack_compare.types import SolveResult
from knapsack_compare.utils.error_handler import validate_knapsack_arrays
from knapsack_compare.utils.logger import get_logger

logger = get_logger(__name__)


def greedy_knapsack_by_profit(
    capacity: int,
    weights: Sequence[int] | np.ndarray,
    profits: Sequence[int] | np.ndarray,
) -> SolveResult:
    """
    Scan positions 0..n-1 and take each item that still fits.

    Skipped items are never reconsidered and weights are not re-sorted, so
    the result is a lower bound on the optimum, not the optimum itself.

    Args:
        capacity: Knapsack capacity
        weights: Item weights
        profits: Item profits, expected in descending order

    Returns:
        SolveResult with ascending 0-based positions
    """
    capacity, weights, profits = validate_knapsack_arrays(capacity, weights, profits)

    total_weight = 0
    total_profit = 0
    items: list[int] = []

    for i in range(weights.size):
        if total_weight + int(weights[i]) <= capacity:
            total_weight += int(weights[i])
            total_profit += int(profits[i])
            items.append(i)

    return SolveResult(
        solver="greedy",
        total_weight=total_weight,
        total_profit=total_profit,
        items=items,
    )


class GreedySolver:
    """
    Greedy algorithm for 0-1 Knapsack Problem

    Algorithm:
    1. Walk items in their given (profit-descending) order
    2. Add an item whenever it fits in the remaining capacity
    """

    name = "greedy"

    def solve(self, instance: KnapsackInstance, timed: bool = False) -> SolveResult:
        """
        Solve knapsack instance using greedy heuristic

        Args:
            instance: KnapsackInstance object
            timed: Record wall-clock time in ``elapsed_ms``

        Returns:
            SolveResult
        """
        start_time = time.perf_counter()
        result = greedy_knapsack_by_profit(instance.capacity, instance.weights, instance.profits)
        if timed:
            result.elapsed_ms = (time.perf_counter() - start_time) * 1000.0

        logger.debug(
            f"greedy picked {len(result.items)}/{instance.n_items} items, "
            f"weight {result.total_weight}/{instance.capacity}"
        )
        return result
