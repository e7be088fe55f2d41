"""Exact dynamic-programming solver."""

from knapsack_compare.solvers.dp import (
    DynamicProgrammingSolver,
    dp_knapsack_by_profit,
    fill_table,
    reconstruct_items,
)

__all__ = [
    "DynamicProgrammingSolver",
    "dp_knapsack_by_profit",
    "fill_table",
    "reconstruct_items",
]
