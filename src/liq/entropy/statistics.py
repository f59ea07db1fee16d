"""Mean and sample standard deviation of a series."""

from __future__ import annotations

import numpy as np

from liq.entropy.exceptions import InsufficientDataError
from liq.entropy.numpy_utils import SeriesLike, as_series


def mean(series: SeriesLike) -> float:
    """Arithmetic mean of a series.

    Raises:
        InsufficientDataError: If the series is empty.
    """
    x = as_series(series)
    if len(x) < 1:
        raise InsufficientDataError("Mean requires at least 1 value", required=1, actual=0)
    return float(np.mean(x))


def standard_deviation(series: SeriesLike) -> float:
    """Sample standard deviation with Bessel's correction.

    Computes ``sqrt(sum((x_i - mean)^2) / (N - 1))``.

    Args:
        series: Values to summarize.

    Returns:
        Sample standard deviation (always >= 0).

    Raises:
        InsufficientDataError: If the series has fewer than 2 values.
    """
    x = as_series(series)
    n = len(x)
    if n < 2:
        raise InsufficientDataError(
            "Sample standard deviation requires at least 2 values",
            required=2,
            actual=n,
        )
    return float(np.std(x, ddof=1))
