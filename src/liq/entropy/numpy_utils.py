"""NumPy conversion helpers for series inputs.

Every engine works on a private float64 copy so the caller's data is
never modified, whether it arrived as a list, a NumPy array or a Polars
Series.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Union

import numpy as np
import polars as pl
from numpy.typing import NDArray

from liq.entropy.exceptions import ConfigurationError

SeriesLike = Union[Sequence[float], NDArray[np.floating], pl.Series]


def as_series(data: SeriesLike) -> NDArray[np.float64]:
    """Convert series-like input to a one-dimensional float64 array copy."""
    if isinstance(data, pl.Series):
        arr = data.cast(pl.Float64).to_numpy(allow_copy=True)
    else:
        arr = np.asarray(data, dtype=np.float64)

    if arr.ndim != 1:
        raise ConfigurationError(
            "Series must be one-dimensional",
            parameter="series",
            value=f"<ndim={arr.ndim}>",
            valid_range="ndim == 1",
        )
    return np.array(arr, dtype=np.float64, copy=True)


def is_binary(values: NDArray[np.float64]) -> bool:
    """Check whether every value is exactly 0 or 1."""
    return bool(np.all((values == 0.0) | (values == 1.0)))


def require_binary(values: NDArray[np.float64], parameter: str = "series") -> None:
    """Raise ConfigurationError unless the series only holds 0/1 values."""
    if not is_binary(values):
        bad = values[(values != 0.0) & (values != 1.0)]
        raise ConfigurationError(
            "Binary series must contain only 0 and 1",
            parameter=parameter,
            value=f"<{len(bad)} non-binary values, first={bad[0]!r}>",
            valid_range="{0, 1}",
        )
