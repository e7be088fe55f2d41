"""Random instance generation for knapsack comparisons."""

from knapsack_compare.data.generator import (
    Item,
    KnapsackGenerator,
    KnapsackInstance,
    random_weights_and_profits,
)

__all__ = [
    # Classes
    "Item",
    "KnapsackInstance",
    "KnapsackGenerator",
    # Functions
    "random_weights_and_profits",
]
