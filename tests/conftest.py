"""Pytest configuration and shared fixtures for liq-entropy tests."""

from collections.abc import Iterator

import numpy as np
import pytest

from liq.entropy.config import reset_defaults


@pytest.fixture(autouse=True)
def _restore_defaults() -> Iterator[None]:
    """Reset global defaults after every test."""
    yield
    reset_defaults()


@pytest.fixture
def noisy_series() -> np.ndarray:
    """Create a reproducible Gaussian noise series."""
    rng = np.random.default_rng(42)
    return rng.normal(0.0, 1.0, 300)


@pytest.fixture
def random_bits() -> np.ndarray:
    """Create a reproducible random 0/1 series."""
    rng = np.random.default_rng(7)
    return rng.integers(0, 2, 64).astype(float)
