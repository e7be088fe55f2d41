"""
Tests for knapsack instance generation.
"""

import numpy as np
import pytest

from knapsack_compare.data.generator import (
    Item,
    KnapsackGenerator,
    KnapsackInstance,
    random_weights_and_profits,
)
from knapsack_compare.utils.error_handler import ValidationError


class TestKnapsackGenerator:
    """Test suite for weight/profit generation."""

    def test_generate_shapes(self):
        """Test that both arrays have the requested length."""
        weights, profits = random_weights_and_profits(1, 100, 25, seed=42)

        assert len(weights) == 25
        assert len(profits) == 25

    def test_values_within_half_open_range(self):
        """Test that every value lies in [min_value, max_value)."""
        weights, profits = random_weights_and_profits(3, 9, 500, seed=1)

        assert weights.min() >= 3 and weights.max() < 9
        assert profits.min() >= 3 and profits.max() < 9

    def test_upper_bound_is_exclusive(self):
        """Test that a range of width one always yields min_value."""
        weights, profits = random_weights_and_profits(5, 6, 50, seed=3)

        assert np.all(weights == 5)
        assert np.all(profits == 5)

    def test_profits_non_increasing(self):
        """Test that profits come back sorted descending."""
        _, profits = random_weights_and_profits(1, 100, 200, seed=11)

        assert np.all(np.diff(profits) <= 0), "Profits must be non-increasing"

    def test_weights_keep_draw_order(self):
        """Test that weights are not sorted along with profits."""
        seed = 5
        weights, _ = random_weights_and_profits(1, 100, 50, seed=seed)

        expected = np.random.RandomState(seed).randint(1, 100, size=50)
        assert np.array_equal(weights, expected), "Weights must stay in draw order"

    def test_profits_sorted_independently_of_weights(self):
        """Test that profits are the second draw, sorted on their own."""
        seed = 9
        _, profits = random_weights_and_profits(1, 100, 30, seed=seed)

        rng = np.random.RandomState(seed)
        rng.randint(1, 100, size=30)
        expected = np.sort(rng.randint(1, 100, size=30))[::-1]
        assert np.array_equal(profits, expected)

    def test_zero_count_gives_empty_arrays(self):
        """Test that count == 0 yields two empty arrays."""
        weights, profits = random_weights_and_profits(1, 100, 0, seed=0)

        assert weights.size == 0
        assert profits.size == 0

    def test_deterministic_with_seed(self):
        """Test that same seed produces same arrays."""
        w1, p1 = random_weights_and_profits(1, 100, 15, seed=42)
        w2, p2 = random_weights_and_profits(1, 100, 15, seed=42)

        assert np.array_equal(w1, w2)
        assert np.array_equal(p1, p2)

    def test_different_seeds_differ(self):
        """Test that different seeds produce different instances."""
        w1, _ = random_weights_and_profits(1, 100, 15, seed=42)
        w2, _ = random_weights_and_profits(1, 100, 15, seed=123)

        assert not np.array_equal(w1, w2)

    def test_injected_rng_is_used(self):
        """Test that a caller-supplied RandomState drives generation."""
        generator = KnapsackGenerator(rng=np.random.RandomState(77))
        weights, _ = generator.random_weights_and_profits(1, 100, 10)

        assert np.array_equal(weights, np.random.RandomState(77).randint(1, 100, size=10))

    def test_unseeded_generator_records_seed(self):
        """Test that a fresh seed is drawn and kept for replay."""
        generator = KnapsackGenerator()
        first = generator.random_weights_and_profits(1, 100, 20)

        assert generator.seed is not None
        replay = KnapsackGenerator(seed=generator.seed).random_weights_and_profits(1, 100, 20)
        assert np.array_equal(first[0], replay[0])
        assert np.array_equal(first[1], replay[1])

    def test_negative_count_rejected(self):
        """Test that a negative item count raises ValidationError."""
        with pytest.raises(ValidationError):
            random_weights_and_profits(1, 100, -1, seed=0)

    def test_zero_min_value_rejected(self):
        """Test that zero weights cannot be drawn."""
        with pytest.raises(ValidationError, match="min_value must be >= 1"):
            random_weights_and_profits(0, 5, 3, seed=0)

    def test_empty_range_rejected(self):
        """Test that min_value >= max_value raises ValidationError."""
        with pytest.raises(ValidationError):
            random_weights_and_profits(10, 10, 5, seed=0)


class TestKnapsackInstance:
    """Test suite for the instance container."""

    def test_generate_instance(self):
        """Test that generate_instance wires capacity and arrays together."""
        instance = KnapsackGenerator(seed=1).generate_instance(capacity=30, n_items=6)

        assert instance.capacity == 30
        assert instance.n_items == 6
        assert instance.weights.dtype == np.int64
        assert repr(instance) == "KnapsackInstance(n_items=6, capacity=30)"

    def test_items_are_one_based(self):
        """Test that display rows number items from 1."""
        instance = KnapsackInstance(np.array([4, 7]), np.array([9, 2]), capacity=10)

        assert instance.items() == [Item(no=1, weight=4, profit=9), Item(no=2, weight=7, profit=2)]

    def test_mismatched_lengths_rejected(self):
        """Test that weights and profits must line up."""
        with pytest.raises(ValidationError):
            KnapsackInstance(np.array([1, 2, 3]), np.array([1, 2]), capacity=5)

    def test_negative_capacity_rejected(self):
        """Test that a negative capacity raises ValidationError."""
        with pytest.raises(ValidationError):
            KnapsackGenerator(seed=0).generate_instance(capacity=-1, n_items=3)

    def test_float_arrays_rejected(self):
        """Test that fractional weights are not silently truncated."""
        with pytest.raises(ValidationError, match="integers"):
            KnapsackInstance(np.array([1.5, 2.0]), np.array([3, 4]), capacity=5)
