"""
Comparison report rendering and I/O utilities.

Handles console output and export of a run to JSON and CSV.
"""

import csv
import json
from datetime import datetime
from pathlib import Path

import numpy as np

from knapsack_compare.eval.comparison import ComparisonReport
from knapsack_compare.types import PathLike, SolveResult
from knapsack_compare.utils.logger import get_logger

logger = get_logger(__name__)


def _format_positions(positions: list[int]) -> str:
    return ", ".join(str(p) for p in positions) if positions else "-"


def _format_solver_block(title: str, result: SolveResult) -> list[str]:
    lines = [
        f"{title}:",
        f"  Total weight: {result.total_weight}",
        f"  Total profit: {result.total_profit}",
        f"  Items:        {_format_positions(result.display_items())}",
    ]
    if result.elapsed_ms is not None:
        lines.append(f"  Time:         {result.elapsed_ms:.3f} ms")
    return lines


def format_report(report: ComparisonReport, title: str = "Knapsack 0/1 Comparison") -> str:
    """
    Render a report as plain text for the console.

    Args:
        report: Result of a comparison run
        title: Heading line

    Returns:
        Multi-line string: item table, capacity, then greedy and DP blocks
    """
    lines = ["=" * 60, f"{title:^60}", "=" * 60, ""]

    lines.append(f"{'No':>6} {'Weight':>10} {'Profit':>10}")
    lines.append(f"{'-' * 6} {'-' * 10} {'-' * 10}")
    for item in report.items:
        lines.append(f"{item.no:>6} {item.weight:>10} {item.profit:>10}")
    if not report.items:
        lines.append(f"{'(no items)':>28}")

    lines.append("")
    lines.append(f"Knapsack capacity: {report.capacity}")
    if report.seed is not None:
        lines.append(f"Seed: {report.seed}")
    lines.append("")

    lines.extend(_format_solver_block("Greedy (by profit)", report.greedy))
    lines.append("")
    lines.extend(_format_solver_block("Dynamic programming", report.dp))
    lines.append("")
    lines.append(f"Profit gap (DP - greedy): {report.profit_gap}")
    lines.append("=" * 60)

    return "\n".join(lines)


def export_report_to_json(report: ComparisonReport, filepath: PathLike) -> Path:
    """
    Save a report to JSON with proper type conversion.

    Args:
        report: Result of a comparison run
        filepath: Output filepath

    Returns:
        Path written
    """

    # Convert numpy types to Python types
    def convert(obj):
        if isinstance(obj, np.ndarray):
            return obj.tolist()
        if isinstance(obj, np.integer):
            return int(obj)
        if isinstance(obj, np.floating):
            return float(obj)
        raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")

    payload = report.to_dict()
    payload["timestamp"] = datetime.now().isoformat()

    filepath = Path(filepath)
    filepath.parent.mkdir(parents=True, exist_ok=True)

    with open(filepath, "w") as f:
        json.dump(payload, f, indent=2, default=convert)

    logger.info(f"Report saved to {filepath}")
    return filepath


def export_items_to_csv(report: ComparisonReport, filepath: PathLike) -> Path:
    """
    Export the item table with each solver's choice to CSV.

    Columns: no, weight, profit, in_greedy, in_dp (0/1 flags).

    Args:
        report: Result of a comparison run
        filepath: Path to save CSV file

    Returns:
        Path written
    """
    filepath = Path(filepath)
    filepath.parent.mkdir(parents=True, exist_ok=True)

    greedy_positions = set(report.greedy.items)
    dp_positions = set(report.dp.items)

    with open(filepath, "w", newline="") as f:
        writer = csv.DictWriter(f, fieldnames=["no", "weight", "profit", "in_greedy", "in_dp"])
        writer.writeheader()
        for position, item in enumerate(report.items):
            writer.writerow(
                {
                    "no": item.no,
                    "weight": item.weight,
                    "profit": item.profit,
                    "in_greedy": int(position in greedy_positions),
                    "in_dp": int(position in dp_positions),
                }
            )

    logger.info(f"Items exported to CSV: {filepath}")
    return filepath
