"""Greedy heuristic baseline."""

from knapsack_compare.baselines.greedy import GreedySolver, greedy_knapsack_by_profit

__all__ = [
    "GreedySolver",
    "greedy_knapsack_by_profit",
]
