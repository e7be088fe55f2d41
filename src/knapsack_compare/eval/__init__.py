"""Solver comparison and report output."""

from knapsack_compare.eval.comparison import (
    ComparisonReport,
    KnapsackComparison,
    compare_solvers,
)
from knapsack_compare.eval.reporting import (
    export_items_to_csv,
    export_report_to_json,
    format_report,
)

__all__ = [
    "ComparisonReport",
    "KnapsackComparison",
    "compare_solvers",
    "format_report",
    "export_report_to_json",
    "export_items_to_csv",
]
