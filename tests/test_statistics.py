"""Tests for liq.entropy.statistics module."""

import math

import numpy as np
import pytest

from liq.entropy.exceptions import InsufficientDataError
from liq.entropy.statistics import mean, standard_deviation


class TestMean:
    """Tests for mean function."""

    def test_basic_mean(self) -> None:
        """Test arithmetic mean of a short list."""
        assert mean([1.0, 2.0, 3.0]) == 2.0

    def test_single_value(self) -> None:
        """Test mean of one value is the value itself."""
        assert mean([4.25]) == 4.25

    def test_empty_raises(self) -> None:
        """Test empty series raises InsufficientDataError."""
        with pytest.raises(InsufficientDataError) as exc_info:
            mean([])
        assert exc_info.value.required == 1
        assert exc_info.value.actual == 0


class TestStandardDeviation:
    """Tests for standard_deviation function."""

    def test_uses_bessel_correction(self) -> None:
        """Test the N-1 denominator is used."""
        series = [2, 4, 4, 4, 5, 5, 7, 9]
        assert standard_deviation(series) == pytest.approx(math.sqrt(32 / 7))

    def test_constant_series_is_zero(self) -> None:
        """Test constant series has zero deviation."""
        assert standard_deviation([3.0] * 5) == 0.0

    def test_two_values(self) -> None:
        """Test smallest valid input."""
        assert standard_deviation([0.0, 2.0]) == pytest.approx(math.sqrt(2.0))

    def test_single_value_raises(self) -> None:
        """Test fewer than 2 values raises InsufficientDataError."""
        with pytest.raises(InsufficientDataError) as exc_info:
            standard_deviation([1.0])
        assert exc_info.value.required == 2
        assert exc_info.value.actual == 1

    def test_does_not_mutate_input(self) -> None:
        """Test the caller's array is left untouched."""
        arr = np.array([1.0, 5.0, 2.0])
        standard_deviation(arr)
        np.testing.assert_array_equal(arr, [1.0, 5.0, 2.0])
