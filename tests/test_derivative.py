"""Tests for liq.entropy.derivative module."""

import numpy as np
import pytest

from liq.entropy.derivative import binary_derivative
from liq.entropy.exceptions import ConfigurationError


class TestBinaryDerivative:
    """Tests for binary_derivative function."""

    def test_xor_of_neighbours(self) -> None:
        """Test each element is the XOR of adjacent bits."""
        np.testing.assert_array_equal(binary_derivative([0, 1, 1, 0, 0]), [1, 0, 1, 0])

    def test_length_shrinks_by_one(self, random_bits: np.ndarray) -> None:
        """Test output is one element shorter."""
        assert len(binary_derivative(random_bits)) == len(random_bits) - 1

    def test_alternating_gives_all_ones(self) -> None:
        """Test alternating bits differentiate to a constant 1 sequence."""
        np.testing.assert_array_equal(binary_derivative([0, 1, 0, 1, 0]), [1, 1, 1, 1])

    def test_short_inputs(self) -> None:
        """Test single and empty inputs give empty output."""
        assert len(binary_derivative([1])) == 0
        assert len(binary_derivative([])) == 0

    def test_non_binary_raises(self) -> None:
        """Test values other than 0/1 are rejected."""
        with pytest.raises(ConfigurationError) as exc_info:
            binary_derivative([0, 2, 1])
        assert exc_info.value.parameter == "series"
