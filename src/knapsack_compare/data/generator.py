"""
Knapsack Problem Instance Generator
Generates random weights and descending-sorted profits for a comparison run
"""

from dataclasses import dataclass

import numpy as np

from knapsack_compare.types import IntArray
from knapsack_compare.utils.error_handler import (
    ValidationError,
    require_non_negative_int,
    validate_knapsack_arrays,
)
from knapsack_compare.utils.logger import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class Item:
    """
    One row of the instance as shown to the user.

    Attributes:
        no: 1-based position
        weight: Weight at that position
        profit: Profit at that position
    """

    no: int
    weight: int
    profit: int


class KnapsackInstance:
    """Represents a single Knapsack problem instance"""

    def __init__(self, weights: np.ndarray, profits: np.ndarray, capacity: int):
        capacity, weights, profits = validate_knapsack_arrays(capacity, weights, profits)

        self.weights: IntArray = weights
        self.profits: IntArray = profits
        self.capacity: int = capacity

    @property
    def n_items(self) -> int:
        return int(self.weights.size)

    def items(self) -> list[Item]:
        """Instance rows with 1-based numbering."""
        return [
            Item(no=i + 1, weight=int(w), profit=int(p))
            for i, (w, p) in enumerate(zip(self.weights, self.profits))
        ]

    def __repr__(self) -> str:
        return f"KnapsackInstance(n_items={self.n_items}, capacity={self.capacity})"


class KnapsackGenerator:
    """
    Generates random Knapsack problem instances

    Weights are drawn first, then profits, each uniformly from
    [min_value, max_value). Profits are then sorted descending on their own,
    so weight[i] and profit[i] only share a position, not an origin.

    Args:
        seed: Seed for a fresh RandomState. Ignored when ``rng`` is given.
            With neither, a seed is drawn from OS entropy and kept in
            ``self.seed`` so the run can be replayed.
        rng: Caller-owned random source
    """

    def __init__(self, seed: int | None = None, rng: np.random.RandomState | None = None):
        if rng is not None:
            self.seed = seed
            self.rng = rng
        else:
            if seed is None:
                seed = int(np.random.SeedSequence().generate_state(1)[0])
            self.seed = seed
            self.rng = np.random.RandomState(seed)

    def random_weights_and_profits(
        self, min_value: int, max_value: int, count: int
    ) -> tuple[IntArray, IntArray]:
        """
        Draw ``count`` weights and ``count`` profits

        Args:
            min_value: Smallest value drawn
            max_value: Exclusive upper bound
            count: Number of items (0 gives two empty arrays)

        Returns:
            Tuple of (weights, profits); profits sorted descending
        """
        count = require_non_negative_int(count, "count")
        # Zero weights would let items into a zero-capacity knapsack
        if min_value < 1:
            raise ValidationError(
                f"min_value must be >= 1, got {min_value}",
                suggestion="Draw weights and profits from a range starting at 1 or more.",
            )
        if min_value >= max_value:
            raise ValidationError(
                f"min_value ({min_value}) must be < max_value ({max_value})",
                suggestion="Widen the value range in generator settings.",
            )

        weights = self.rng.randint(min_value, max_value, size=count).astype(np.int64)
        profits = self.rng.randint(min_value, max_value, size=count).astype(np.int64)

        profits = np.sort(profits)[::-1].copy()

        logger.debug(f"Generated {count} items in [{min_value}, {max_value})")
        return weights, profits

    def generate_instance(
        self,
        capacity: int,
        n_items: int,
        min_value: int = 1,
        max_value: int = 100,
    ) -> KnapsackInstance:
        """
        Generate a random Knapsack instance

        Args:
            capacity: Knapsack capacity
            n_items: Number of items
            min_value: Smallest weight/profit
            max_value: Exclusive upper bound for weight/profit

        Returns:
            KnapsackInstance object
        """
        capacity = require_non_negative_int(capacity, "capacity")
        weights, profits = self.random_weights_and_profits(min_value, max_value, n_items)
        return KnapsackInstance(weights, profits, capacity)


def random_weights_and_profits(
    min_value: int,
    max_value: int,
    count: int,
    rng: np.random.RandomState | None = None,
    seed: int | None = None,
) -> tuple[IntArray, IntArray]:
    """
    Draw weights and descending profits without keeping a generator around.

    Args:
        min_value: Smallest value drawn
        max_value: Exclusive upper bound
        count: Number of items
        rng: Optional caller-owned random source
        seed: Optional seed, used when rng is None

    Returns:
        Tuple of (weights, profits)
    """
    generator = KnapsackGenerator(seed=seed, rng=rng)
    return generator.random_weights_and_profits(min_value, max_value, count)
