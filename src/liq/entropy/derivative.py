"""Binary derivative of a 0/1 sequence."""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray

from liq.entropy.numpy_utils import SeriesLike, as_series, require_binary


def binary_derivative(series: SeriesLike) -> NDArray[np.float64]:
    """XOR each pair of adjacent bits.

    ``d_i = 1`` if exactly one of ``x_i``, ``x_{i+1}`` is 1, else ``0``.
    The result is one element shorter than the input (empty for N < 2).

    Raises:
        ConfigurationError: If the series holds values other than 0 and 1.
    """
    x = as_series(series)
    require_binary(x)
    if len(x) < 2:
        return np.empty(0, dtype=np.float64)
    return (x[:-1] != x[1:]).astype(np.float64)
