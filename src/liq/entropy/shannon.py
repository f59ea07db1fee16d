"""Shannon entropy of a discretized series."""

from __future__ import annotations

import math

from liq.entropy.distribution import (
    Discretizer,
    ScaledFloorDiscretizer,
    estimate_distribution,
)
from liq.entropy.logging_config import (
    get_logger,
    log_degenerate,
    log_function_entry,
    log_function_exit,
)
from liq.entropy.numpy_utils import SeriesLike, as_series

logger = get_logger("shannon")


def shannon_entropy_discrete(
    series: SeriesLike,
    discretizer: Discretizer | None = None,
) -> float:
    """Compute ``-sum(p * log2(p))`` over the discretized distribution.

    Args:
        series: Values to measure.
        discretizer: Symbol mapping; ``floor(value * 100)`` if None.

    Returns:
        Entropy in bits, or NaN for a series with fewer than 2 values.
    """
    x = as_series(series)
    log_function_entry(logger, "shannon_entropy_discrete", series=x)
    if len(x) < 2:
        log_degenerate(logger, "Shannon entropy undefined: insufficient data", n_points=len(x))
        return math.nan

    if discretizer is None:
        discretizer = ScaledFloorDiscretizer(100.0)

    entropy = 0.0
    for p in estimate_distribution(x, discretizer=discretizer).values():
        if p > 0:
            entropy -= p * math.log2(p)

    log_function_exit(logger, "shannon_entropy_discrete", f"value={entropy}")
    return entropy
