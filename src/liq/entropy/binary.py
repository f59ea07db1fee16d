"""Binary entropy (biEntropy) and its logarithmic variant (TBiEn).

Croll, "BiEntropy - The Approximate Entropy of a Finite Binary String",
2013. The Shannon entropy of the fraction of ones is accumulated over the
successive binary derivatives of the string, each derivative order
weighted and the total normalized:

- biEntropy: weight ``2^k``, normalization ``1 / (2^(N-1) - 1)``
- TBiEn: weight ``log2(k+2)``, normalization ``1 / sum(log2(k+2))``

Accumulation stops as soon as a derivative is constant.
"""

from __future__ import annotations

import math

import numpy as np

from liq.entropy.derivative import binary_derivative
from liq.entropy.distribution import estimate_distribution
from liq.entropy.logging_config import (
    get_logger,
    log_degenerate,
    log_function_entry,
    log_function_exit,
)
from liq.entropy.numpy_utils import SeriesLike, as_series, require_binary

logger = get_logger("binary")


def binary_entropy_term(p: float) -> float:
    """Shannon entropy in bits of a Bernoulli(p) variable.

    Returns 0 for ``p`` equal to 0 or 1.
    """
    if p <= 0.0 or p >= 1.0:
        return 0.0
    return -p * math.log2(p) - (1.0 - p) * math.log2(1.0 - p)


def _weights(n: int, tres: bool) -> np.ndarray:
    """Normalized per-order weights for derivative orders ``0 .. n-2``."""
    k = np.arange(n - 1, dtype=np.float64)
    if tres:
        log_weights = np.log2(k + 2.0)
        return log_weights / log_weights.sum()
    # 2^k / (2^(n-1) - 1) rewritten so long strings do not overflow
    return np.exp2(k - (n - 1)) / -np.expm1(-(n - 1) * math.log(2.0))


def binary_entropy(series: SeriesLike, tres: bool = False) -> float:
    """Compute biEntropy (or TBiEn when ``tres`` is True) of a 0/1 series.

    Args:
        series: Binary series of 0s and 1s.
        tres: Use the logarithmic (Tres) weighting instead of powers of 2.

    Returns:
        Normalized binary entropy in [0, 1], or NaN for fewer than 2 values.

    Raises:
        ConfigurationError: If the series holds values other than 0 and 1.
    """
    x = as_series(series)
    require_binary(x)
    n = len(x)
    log_function_entry(logger, "binary_entropy", series=x, tres=tres)
    if n < 2:
        log_degenerate(logger, "Binary entropy undefined: insufficient data", n_points=n)
        return math.nan

    weights = _weights(n, tres)
    total = 0.0
    orders = 0
    dk = x
    for k in range(n - 1):
        p1 = estimate_distribution(dk).get(1, 0.0)
        if p1 == 0.0 or p1 == 1.0:
            break
        total += binary_entropy_term(p1) * weights[k]
        orders += 1
        dk = binary_derivative(dk)

    log_function_exit(logger, "binary_entropy", f"value={total}, orders={orders}")
    return float(total)
