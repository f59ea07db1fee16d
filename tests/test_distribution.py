"""Tests for liq.entropy.distribution module."""

import numpy as np
import polars as pl
import pytest

from liq.entropy.config import configure_defaults
from liq.entropy.distribution import (
    Discretizer,
    IdentityDiscretizer,
    ScaledFloorDiscretizer,
    estimate_distribution,
)
from liq.entropy.exceptions import ConfigurationError


class TestEstimateDistribution:
    """Tests for estimate_distribution function."""

    def test_binary_counts(self) -> None:
        """Test raw 0/1 symbols are counted and normalized."""
        probs = estimate_distribution([0, 1, 1, 1])
        assert probs == {0: 0.25, 1: 0.75}

    def test_symbols_are_ints_for_integral_values(self) -> None:
        """Test integral float values become int symbols."""
        probs = estimate_distribution(np.array([0.0, 1.0]))
        assert all(isinstance(k, int) for k in probs)

    def test_probabilities_sum_to_one(self, noisy_series: np.ndarray) -> None:
        """Test probabilities sum to 1 for a non-empty series."""
        probs = estimate_distribution(noisy_series, discretize=True)
        assert sum(probs.values()) == pytest.approx(1.0)
        assert all(p > 0 for p in probs.values())

    def test_empty_series(self) -> None:
        """Test empty series gives empty distribution."""
        assert estimate_distribution([]) == {}

    def test_discretize_buckets_by_hundredths(self) -> None:
        """Test values sharing floor(v * 100) share a symbol."""
        probs = estimate_distribution([0.011, 0.019, 0.5], discretize=True)
        assert set(probs) == {1, 50}
        assert probs[1] == pytest.approx(2 / 3)
        assert probs[50] == pytest.approx(1 / 3)

    def test_discretize_floors_negative_values(self) -> None:
        """Test negative values floor away from zero."""
        probs = estimate_distribution([-0.001, 0.001], discretize=True)
        assert set(probs) == {-1, 0}

    def test_discretize_rejects_nan(self) -> None:
        """Test non-finite values cannot be discretized."""
        with pytest.raises(ConfigurationError):
            estimate_distribution([0.1, float("nan")], discretize=True)

    def test_explicit_discretizer_overrides_flag(self) -> None:
        """Test an explicit discretizer takes precedence."""
        probs = estimate_distribution(
            [0.11, 0.19, 0.25], discretize=False, discretizer=ScaledFloorDiscretizer(10)
        )
        assert probs == {1: pytest.approx(2 / 3), 2: pytest.approx(1 / 3)}

    def test_configured_scale_does_not_apply(self) -> None:
        """Test discretize=True always buckets by hundredths."""
        configure_defaults(discretization_scale=10)
        probs = estimate_distribution([0.11, 0.19], discretize=True)
        assert probs == {11: 0.5, 19: 0.5}

    def test_accepts_polars_series(self) -> None:
        """Test Polars Series input."""
        probs = estimate_distribution(pl.Series("bits", [1, 1, 0, 0]))
        assert probs == {0: 0.5, 1: 0.5}

    def test_fresh_mapping_per_call(self) -> None:
        """Test each call builds a new mapping."""
        first = estimate_distribution([0, 1])
        first[1] = 99.0
        assert estimate_distribution([0, 1]) == {0: 0.5, 1: 0.5}


class TestDiscretizers:
    """Tests for discretizer implementations."""

    def test_protocol_conformance(self) -> None:
        """Test both discretizers satisfy the protocol."""
        assert isinstance(ScaledFloorDiscretizer(), Discretizer)
        assert isinstance(IdentityDiscretizer(), Discretizer)

    def test_invalid_scale(self) -> None:
        """Test non-positive scale is rejected."""
        with pytest.raises(ConfigurationError):
            ScaledFloorDiscretizer(0)

    def test_identity_returns_values(self) -> None:
        """Test identity discretizer leaves values unchanged."""
        values = np.array([0.5, 1.5])
        np.testing.assert_array_equal(IdentityDiscretizer()(values), values)
