"""
Knapsack Compare
================

Greedy-by-profit heuristic versus exact dynamic programming on randomly
generated 0/1 knapsack instances.

Main modules:
- data: Random instance generation
- baselines: Greedy heuristic
- solvers: Exact DP solver with reconstruction
- eval: Comparison facade and reporting
- config: YAML configuration with Pydantic validation
"""

__version__ = "1.0.0"

# Public API exports
from knapsack_compare import baselines, config, data, eval, solvers
from knapsack_compare.baselines import GreedySolver, greedy_knapsack_by_profit
from knapsack_compare.data import Item, KnapsackGenerator, KnapsackInstance
from knapsack_compare.eval import ComparisonReport, compare_solvers
from knapsack_compare.solvers import DynamicProgrammingSolver, dp_knapsack_by_profit
from knapsack_compare.types import IntArray, SolveResult

__all__ = [
    "data",
    "baselines",
    "solvers",
    "eval",
    "config",
    "__version__",
    # Core API
    "Item",
    "KnapsackInstance",
    "KnapsackGenerator",
    "GreedySolver",
    "greedy_knapsack_by_profit",
    "DynamicProgrammingSolver",
    "dp_knapsack_by_profit",
    "ComparisonReport",
    "compare_solvers",
    # Types
    "IntArray",
    "SolveResult",
]
