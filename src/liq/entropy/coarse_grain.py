"""Coarse-graining by non-overlapping block averages."""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray

from liq.entropy.config import validate_scale_factor
from liq.entropy.numpy_utils import SeriesLike, as_series
from liq.entropy.statistics import mean


def aggregate(series: SeriesLike, scale_factor: int) -> NDArray[np.float64]:
    """Average consecutive blocks of ``scale_factor`` values.

    Blocks start at index 0 and advance by ``scale_factor``. When N is not
    a multiple of the scale factor the last block is shorter and is
    averaged over the values it actually holds, so the output has
    ``ceil(N / scale_factor)`` elements.

    Args:
        series: Values to coarse-grain.
        scale_factor: Block length (integer >= 1).

    Returns:
        The coarse-grained series.

    Raises:
        ConfigurationError: If scale_factor is not an integer >= 1.
    """
    scale_factor = validate_scale_factor(scale_factor)
    x = as_series(series)
    if scale_factor == 1:
        return x
    return np.array(
        [mean(x[start : start + scale_factor]) for start in range(0, len(x), scale_factor)],
        dtype=np.float64,
    )
