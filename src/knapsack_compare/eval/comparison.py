"""
Greedy vs. DP comparison on a freshly generated instance.
"""

from dataclasses import dataclass

import numpy as np

from knapsack_compare.baselines.greedy import GreedySolver
from knapsack_compare.config.schemas import CompareConfig
from knapsack_compare.data.generator import Item, KnapsackGenerator, KnapsackInstance
from knapsack_compare.solvers.dp import DynamicProgrammingSolver, check_table_size
from knapsack_compare.types import ReportDict, SolveResult
from knapsack_compare.utils.error_handler import require_non_negative_int
from knapsack_compare.utils.logger import get_logger, log_metrics

logger = get_logger(__name__)


@dataclass
class ComparisonReport:
    """Everything the presentation layer needs for one run."""

    instance: KnapsackInstance
    greedy: SolveResult
    dp: SolveResult
    seed: int | None = None

    @property
    def capacity(self) -> int:
        return self.instance.capacity

    @property
    def items(self) -> list[Item]:
        return self.instance.items()

    @property
    def profit_gap(self) -> int:
        """How much profit greedy left on the table."""
        return self.dp.total_profit - self.greedy.total_profit

    def to_dict(self) -> ReportDict:
        return {
            "capacity": self.capacity,
            "n_items": self.instance.n_items,
            "seed": self.seed,
            "items": [
                {"no": item.no, "weight": item.weight, "profit": item.profit}
                for item in self.items
            ],
            "greedy": self.greedy.to_dict(),
            "dp": self.dp.to_dict(),
            "profit_gap": self.profit_gap,
        }


class KnapsackComparison:
    """
    Runs both solvers on one generated instance per call.

    Args:
        config: Run configuration; defaults are used when None
    """

    def __init__(self, config: CompareConfig | None = None):
        self.config = config or CompareConfig()
        self.greedy_solver = GreedySolver()
        self.dp_solver = DynamicProgrammingSolver(
            max_table_cells=self.config.limits.max_table_cells
        )

    def run(
        self,
        capacity: int,
        n_items: int,
        rng: np.random.RandomState | None = None,
        seed: int | None = None,
        timed: bool | None = None,
    ) -> ComparisonReport:
        """
        Generate an instance and solve it with greedy and DP.

        Args:
            capacity: Knapsack capacity
            n_items: Number of items to generate
            rng: Caller-owned random source (takes precedence over seed)
            seed: Seed for this run. Without rng, falls back to config.seed,
                then a fresh seed. With rng and no seed the report has seed=None.
            timed: Measure solver times; falls back to config.timing.enabled

        Returns:
            ComparisonReport
        """
        capacity = require_non_negative_int(capacity, "capacity")
        n_items = require_non_negative_int(n_items, "n_items")
        # config.seed would not describe draws from a caller-owned rng
        if seed is None and rng is None:
            seed = self.config.seed
        if timed is None:
            timed = self.config.timing.enabled

        # Table size is known from the arguments alone
        check_table_size(n_items, capacity, self.dp_solver.max_table_cells)

        generator = KnapsackGenerator(seed=seed, rng=rng)
        instance = generator.generate_instance(
            capacity,
            n_items,
            min_value=self.config.generator.min_value,
            max_value=self.config.generator.max_value,
        )
        logger.debug(f"Generated {instance!r} (seed={generator.seed})")

        greedy = self.greedy_solver.solve(instance, timed=timed)
        dp = self.dp_solver.solve(instance, timed=timed)

        for result in (greedy, dp):
            metrics = {"weight": result.total_weight, "profit": result.total_profit}
            if result.elapsed_ms is not None:
                metrics["elapsed_ms"] = result.elapsed_ms
            log_metrics(logger, metrics, prefix=f"{result.solver} |")

        return ComparisonReport(instance=instance, greedy=greedy, dp=dp, seed=generator.seed)


def compare_solvers(
    capacity: int,
    n_items: int,
    *,
    rng: np.random.RandomState | None = None,
    seed: int | None = None,
    config: CompareConfig | None = None,
    timed: bool | None = None,
) -> ComparisonReport:
    """
    Convenience wrapper around ``KnapsackComparison(config).run(...)``.

    Example:
        >>> report = compare_solvers(50, 10, seed=7)
        >>> report.dp.total_profit >= report.greedy.total_profit
        True
    """
    return KnapsackComparison(config).run(capacity, n_items, rng=rng, seed=seed, timed=timed)
