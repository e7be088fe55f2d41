"""
Pytest configuration and shared fixtures for testing.
"""

import itertools
import logging

import numpy as np
import pytest

from knapsack_compare.config.schemas import CompareConfig


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Drop handlers installed by CLI runs so later tests log nowhere stale."""
    yield
    logger = logging.getLogger("knapsack_compare")
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


def brute_force_best_profit(capacity, weights, profits):
    """Optimal profit by enumerating every subset (small instances only)."""
    best = 0
    n_items = len(weights)
    for mask in itertools.product((0, 1), repeat=n_items):
        weight = sum(w for w, take in zip(weights, mask) if take)
        if weight <= capacity:
            best = max(best, sum(p for p, take in zip(profits, mask) if take))
    return best


@pytest.fixture
def brute_force():
    """Exhaustive reference solver for small instances."""
    return brute_force_best_profit


@pytest.fixture
def matching_instance():
    """
    Instance where greedy already finds the optimum.

    Returns:
        dict with keys: weights, profits, capacity, optimal_profit, optimal_items
    """
    return {
        "weights": [2, 3, 4, 5],
        "profits": [10, 8, 6, 4],
        "capacity": 5,
        "optimal_profit": 18,
        "optimal_items": [0, 1],
    }


@pytest.fixture
def diverging_instance():
    """
    Instance where scanning in order leaves profit behind.

    Greedy takes positions 0 and 1 (weight 9, profit 50); the optimum is
    positions 1 and 3 (weight 7, profit 90).
    """
    return {
        "weights": [5, 4, 6, 3],
        "profits": [10, 40, 30, 50],
        "capacity": 10,
        "greedy_profit": 50,
        "greedy_weight": 9,
        "greedy_items": [0, 1],
        "optimal_profit": 90,
        "optimal_items": [1, 3],
    }


@pytest.fixture
def random_small_instances():
    """
    Batch of small random instances, generated the same way as a comparison run.

    Returns:
        list of (capacity, weights, profits) tuples
    """
    rng = np.random.RandomState(2024)
    instances = []
    for _ in range(25):
        n_items = int(rng.randint(0, 11))
        capacity = int(rng.randint(0, 120))
        weights = rng.randint(1, 40, size=n_items)
        profits = np.sort(rng.randint(1, 100, size=n_items))[::-1]
        instances.append((capacity, weights.tolist(), profits.tolist()))
    return instances


@pytest.fixture
def default_config():
    """Default configuration with a fixed seed."""
    return CompareConfig(seed=42)


@pytest.fixture
def config_file(tmp_path):
    """
    Write a valid YAML config to a temporary directory.

    Returns:
        Path to the config file
    """
    path = tmp_path / "compare.yaml"
    path.write_text(
        "seed: 7\n"
        "generator:\n"
        "  min_value: 5\n"
        "  max_value: 20\n"
        "limits:\n"
        "  max_table_cells: 100000\n"
        "timing:\n"
        "  enabled: false\n"
        "logging:\n"
        "  level: info\n"
    )
    return path
