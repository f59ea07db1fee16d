"""Tests for liq.entropy.shannon module."""

import math

import numpy as np
import pytest

from liq.entropy.config import configure_defaults
from liq.entropy.distribution import ScaledFloorDiscretizer
from liq.entropy.exceptions import ConfigurationError
from liq.entropy.shannon import shannon_entropy_discrete


class TestShannonEntropyDiscrete:
    """Tests for shannon_entropy_discrete function."""

    def test_short_series_is_nan(self) -> None:
        """Test fewer than 2 values is undefined."""
        assert math.isnan(shannon_entropy_discrete([]))
        assert math.isnan(shannon_entropy_discrete([0.3]))

    def test_single_symbol_is_zero(self) -> None:
        """Test a repeated value has zero entropy."""
        value = shannon_entropy_discrete([0.5] * 10)
        assert value == 0.0
        assert math.copysign(1.0, value) == 1.0

    def test_same_bucket_is_zero(self) -> None:
        """Test values within one hundredth bucket collapse to one symbol."""
        assert shannon_entropy_discrete([1.001, 1.004, 1.009]) == 0.0

    @pytest.mark.parametrize("n", [2, 8, 50])
    def test_distinct_symbols_give_log2_n(self, n: int) -> None:
        """Test uniform distribution over N symbols gives log2(N)."""
        series = list(range(n))
        assert shannon_entropy_discrete(series) == pytest.approx(math.log2(n))

    def test_two_symbol_split(self) -> None:
        """Test a 1:3 split gives the binary entropy of 0.25."""
        expected = -(0.25 * math.log2(0.25) + 0.75 * math.log2(0.75))
        assert shannon_entropy_discrete([0, 1, 1, 1]) == pytest.approx(expected)

    def test_floor_discretization(self) -> None:
        """Test values either side of zero fall into different buckets."""
        assert shannon_entropy_discrete([-0.001, 0.001]) == pytest.approx(1.0)

    def test_nan_value_raises(self) -> None:
        """Test non-finite values are rejected."""
        with pytest.raises(ConfigurationError):
            shannon_entropy_discrete([0.1, float("inf"), 0.2])

    def test_idempotent(self, noisy_series: np.ndarray) -> None:
        """Test repeated calls give identical results."""
        assert shannon_entropy_discrete(noisy_series) == shannon_entropy_discrete(noisy_series)

    def test_explicit_discretizer(self) -> None:
        """Test a coarser discretizer merges buckets."""
        series = [0.11, 0.19]
        assert shannon_entropy_discrete(series) == pytest.approx(1.0)
        assert shannon_entropy_discrete(series, discretizer=ScaledFloorDiscretizer(10)) == 0.0

    def test_configured_scale_does_not_apply(self) -> None:
        """Test batch defaults do not change the engine's hundredths buckets."""
        configure_defaults(discretization_scale=10)
        assert shannon_entropy_discrete([0.11, 0.19]) == pytest.approx(1.0)
