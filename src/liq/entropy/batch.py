"""Batch computation of entropy features over DataFrame columns.

Sample and Shannon entropy here follow the configurable defaults in
``liq.entropy.config``; the engines called directly do not.

Example:
    >>> import polars as pl
    >>> from liq.entropy import compute_entropy_features
    >>>
    >>> df = pl.DataFrame({"close": closes, "up": up_flags})
    >>> features = compute_entropy_features(
    ...     df, measures=["sample_entropy", "shannon_entropy", "binary_entropy"]
    ... )
"""

from __future__ import annotations

import math
from collections.abc import Callable, Sequence

import numpy as np
import polars as pl

from liq.entropy.binary import binary_entropy
from liq.entropy.config import get_defaults
from liq.entropy.distribution import ScaledFloorDiscretizer
from liq.entropy.exceptions import ConfigurationError
from liq.entropy.logging_config import get_logger, log_result, log_warning
from liq.entropy.numpy_utils import is_binary
from liq.entropy.sample import sample_entropy
from liq.entropy.shannon import shannon_entropy_discrete

logger = get_logger("batch")


def _sample(values: np.ndarray) -> float:
    defaults = get_defaults()
    return sample_entropy(values, m=defaults.embedding_dimension, r=defaults.tolerance_ratio)


def _shannon(values: np.ndarray) -> float:
    discretizer = ScaledFloorDiscretizer(get_defaults().discretization_scale)
    return shannon_entropy_discrete(values, discretizer=discretizer)


def _binary(tres: bool) -> Callable[[np.ndarray], float]:
    def compute(values: np.ndarray) -> float:
        if not is_binary(values):
            return math.nan
        return binary_entropy(values, tres=tres)

    return compute


MEASURES: dict[str, Callable[[np.ndarray], float]] = {
    "sample_entropy": _sample,
    "shannon_entropy": _shannon,
    "binary_entropy": _binary(tres=False),
    "tres_binary_entropy": _binary(tres=True),
}

DEFAULT_MEASURES = ("sample_entropy", "shannon_entropy")


def compute_entropy_features(
    df: pl.DataFrame,
    columns: Sequence[str] | None = None,
    measures: Sequence[str] | None = None,
) -> pl.DataFrame:
    """Compute entropy measures for each numeric column of a DataFrame.

    Nulls and NaNs are dropped from each column before computing; a
    warning is logged when NaNs are removed. Binary measures are NaN for
    columns that are not strictly 0/1.

    Args:
        df: Input DataFrame.
        columns: Columns to process (all numeric columns if None).
        measures: Measure names from MEASURES (sample and Shannon entropy
            if None).

    Returns:
        DataFrame with a ``column`` column and one Float64 column per measure.

    Raises:
        ConfigurationError: If a measure or column is unknown.
    """
    measures = list(measures) if measures is not None else list(DEFAULT_MEASURES)
    for name in measures:
        if name not in MEASURES:
            raise ConfigurationError(
                f"Unknown measure: {name}",
                parameter="measures",
                value=name,
                valid_range=", ".join(MEASURES),
            )

    if columns is None:
        columns = [c for c, dtype in df.schema.items() if dtype.is_numeric()]
    else:
        missing = [c for c in columns if c not in df.columns]
        if missing:
            raise ConfigurationError(
                "Unknown columns", parameter="columns", value=missing
            )

    rows = []
    for column in columns:
        series = df[column].drop_nulls().cast(pl.Float64)
        n_nan = int(series.is_nan().sum())
        if n_nan:
            log_warning(logger, "Dropping NaN values", column=column, count=n_nan)
            series = series.drop_nans()
        values = series.to_numpy()
        row: dict[str, object] = {"column": column}
        for name in measures:
            row[name] = MEASURES[name](values)
        rows.append(row)

    log_result(logger, "Entropy features computed", columns=len(rows), measures=len(measures))
    schema = {"column": pl.Utf8, **{name: pl.Float64 for name in measures}}
    return pl.DataFrame(rows, schema=schema)
