"""Empirical probability distributions over discretized symbols.

A distribution maps each observed symbol to ``count / N``. Symbols come
from a discretizer: real-valued series are bucketed with
``floor(value * 100)``, binary series use their raw 0/1 values.

Example:
    >>> from liq.entropy.distribution import estimate_distribution
    >>>
    >>> estimate_distribution([0, 1, 1, 1])
    {0: 0.25, 1: 0.75}
    >>> estimate_distribution([0.011, 0.019, 0.5], discretize=True)
    {1: 0.6666666666666666, 50: 0.3333333333333333}
"""

from __future__ import annotations

import math
from typing import Protocol, Union, runtime_checkable

import numpy as np
from numpy.typing import NDArray

from liq.entropy.config import validate_discretization_scale
from liq.entropy.exceptions import ConfigurationError
from liq.entropy.numpy_utils import SeriesLike, as_series

Symbol = Union[int, float]
Distribution = dict[Symbol, float]


@runtime_checkable
class Discretizer(Protocol):
    """Protocol for mapping real values to hashable symbols.

    Implementations must be total and deterministic: equal inputs always
    produce equal symbols.
    """

    def __call__(self, values: NDArray[np.float64]) -> NDArray[np.float64]:
        """Map each value to its symbol."""
        ...


class ScaledFloorDiscretizer:
    """Bucket values by ``floor(value * scale)``.

    Two values share a symbol iff their scaled, floored parts coincide.
    """

    def __init__(self, scale: float = 100.0) -> None:
        self.scale = validate_discretization_scale(scale)

    def __call__(self, values: NDArray[np.float64]) -> NDArray[np.float64]:
        if not np.all(np.isfinite(values)):
            raise ConfigurationError(
                "Cannot discretize non-finite values",
                parameter="series",
                value=f"<{int(np.count_nonzero(~np.isfinite(values)))} non-finite values>",
                valid_range="finite values",
            )
        return np.floor(values * self.scale)

    def __repr__(self) -> str:
        return f"ScaledFloorDiscretizer(scale={self.scale})"


class IdentityDiscretizer:
    """Use each value as its own symbol."""

    def __call__(self, values: NDArray[np.float64]) -> NDArray[np.float64]:
        return values

    def __repr__(self) -> str:
        return "IdentityDiscretizer()"


def _as_symbol(value: float) -> Symbol:
    # Integral symbols become plain ints so {0, 1} keys read naturally
    if math.isfinite(value) and float(value).is_integer():
        return int(value)
    return float(value)


def estimate_distribution(
    series: SeriesLike,
    discretize: bool = False,
    discretizer: Discretizer | None = None,
) -> Distribution:
    """Estimate the empirical distribution of a series.

    Args:
        series: Values to count.
        discretize: If True, bucket values with ``floor(value * 100)``.
            If False, values are their own symbols.
        discretizer: Explicit discretizer, overriding ``discretize``.

    Returns:
        Mapping of symbol to probability. Empty for an empty series,
        otherwise the probabilities sum to 1.
    """
    x = as_series(series)
    n = len(x)
    if n == 0:
        return {}

    if discretizer is None:
        if discretize:
            discretizer = ScaledFloorDiscretizer(100.0)
        else:
            discretizer = IdentityDiscretizer()

    symbols, counts = np.unique(discretizer(x), return_counts=True)
    return {
        _as_symbol(symbol): count / n
        for symbol, count in zip(symbols.tolist(), counts.tolist())
    }
