"""
Exact dynamic-programming solver for the 0/1 knapsack problem.

Fills the classic (n + 1) x (capacity + 1) profit table and walks it back
from the last cell to recover one optimal item selection.
"""

import time
from collections.abc import Sequence

import numpy as np

from knapsack_compare.data.generator import KnapsackInstance
from knapsack_compare.types import IntArray, SolveResult
from knapsack_compare.utils.error_handler import ValidationError, validate_knapsack_arrays
from knapsack_compare.utils.logger import get_logger

logger = get_logger(__name__)

DEFAULT_MAX_TABLE_CELLS = 50_000_000


def check_table_size(n_items: int, capacity: int, max_table_cells: int | None) -> None:
    """
    Reject instances whose DP table would exceed ``max_table_cells``.

    Raises:
        ValidationError: If (n_items + 1) * (capacity + 1) is over the limit
    """
    if max_table_cells is None:
        return
    cells = (n_items + 1) * (capacity + 1)
    if cells > max_table_cells:
        raise ValidationError(
            f"DP table of {n_items + 1} x {capacity + 1} = {cells} cells "
            f"exceeds the limit of {max_table_cells}",
            suggestion="Lower capacity or item count, or raise limits.max_table_cells.",
        )


def fill_table(capacity: int, weights: np.ndarray, profits: np.ndarray) -> IntArray:
    """
    Build the profit table.

    ``table[i, j]`` is the best profit using the first ``i`` items with
    budget ``j``. Row 0 and column 0 stay zero. Each row is computed from
    the previous one with the standard recurrence, vectorised over ``j``.

    Args:
        capacity: Non-negative capacity
        weights: Non-negative int64 weights
        profits: int64 profits, same length as weights

    Returns:
        int64 array of shape (n + 1, capacity + 1)
    """
    n_items = weights.size
    table = np.zeros((n_items + 1, capacity + 1), dtype=np.int64)

    for i in range(1, n_items + 1):
        w_i = int(weights[i - 1])
        p_i = int(profits[i - 1])
        prev = table[i - 1]
        row = table[i]

        row[:] = prev
        # j == 0 is pinned to zero even for zero-weight items
        start = max(w_i, 1)
        if start <= capacity:
            row[start:] = np.maximum(prev[start:], p_i + prev[start - w_i : capacity + 1 - w_i])

    return table


def reconstruct_items(table: np.ndarray, weights: np.ndarray) -> list[int]:
    """
    Recover the chosen 0-based positions from a filled table.

    Walks from (n, capacity): a cell that differs from the one above means
    item i - 1 was taken, so its weight is removed from the budget. Stops
    when either index reaches zero.

    Returns:
        Positions in ascending order
    """
    i = table.shape[0] - 1
    j = table.shape[1] - 1
    items: list[int] = []

    while i > 0 and j > 0:
        if table[i, j] != table[i - 1, j]:
            items.append(i - 1)
            j -= int(weights[i - 1])
        i -= 1

    items.sort()
    return items


def dp_knapsack_by_profit(
    capacity: int,
    weights: Sequence[int] | np.ndarray,
    profits: Sequence[int] | np.ndarray,
    max_table_cells: int | None = DEFAULT_MAX_TABLE_CELLS,
) -> SolveResult:
    """
    Solve the 0/1 knapsack exactly.

    Args:
        capacity: Knapsack capacity (>= 0)
        weights: Item weights (>= 0)
        profits: Item profits
        max_table_cells: Upper bound on table size, None to disable

    Returns:
        SolveResult whose ``total_profit`` equals ``table[n, capacity]``.
        ``marginal_profit`` is ``table[n, capacity] - table[n - 1, capacity]``
        (0 for an empty instance).

    Raises:
        ValidationError: On invalid input or an oversized table
    """
    capacity, weights, profits = validate_knapsack_arrays(capacity, weights, profits)
    n_items = weights.size
    check_table_size(n_items, capacity, max_table_cells)

    logger.debug(f"Filling DP table {n_items + 1} x {capacity + 1}")
    table = fill_table(capacity, weights, profits)
    items = reconstruct_items(table, weights)

    best = int(table[n_items, capacity])
    marginal = best - int(table[n_items - 1, capacity]) if n_items > 0 else 0

    return SolveResult(
        solver="dp",
        total_weight=int(weights[items].sum()) if items else 0,
        total_profit=best,
        items=items,
        marginal_profit=marginal,
    )


class DynamicProgrammingSolver:
    """
    Exact solver backed by the full DP table.

    Args:
        max_table_cells: Upper bound on (n + 1) * (capacity + 1), None to disable
    """

    name = "dp"

    def __init__(self, max_table_cells: int | None = DEFAULT_MAX_TABLE_CELLS):
        self.max_table_cells = max_table_cells

    def solve(self, instance: KnapsackInstance, timed: bool = False) -> SolveResult:
        start_time = time.perf_counter()
        result = dp_knapsack_by_profit(
            instance.capacity,
            instance.weights,
            instance.profits,
            max_table_cells=self.max_table_cells,
        )
        if timed:
            result.elapsed_ms = (time.perf_counter() - start_time) * 1000.0
        return result
