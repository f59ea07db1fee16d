"""Sample entropy (Richman & Moorman, 2000).

Counts pairs of templates that stay within a Chebyshev tolerance at
length m (cm) and at length m+1 (cm1), and reports ``ln(cm / cm1)``.
Degenerate cases are reported as NaN (undefined) or +inf (no match
extends to length m+1) rather than replaced by a small constant.
"""

from __future__ import annotations

import math

import numpy as np
from numpy.lib.stride_tricks import sliding_window_view
from numpy.typing import NDArray

from liq.entropy.config import validate_embedding_dimension, validate_tolerance_ratio
from liq.entropy.logging_config import (
    get_logger,
    log_degenerate,
    log_function_entry,
    log_function_exit,
)
from liq.entropy.numpy_utils import SeriesLike, as_series
from liq.entropy.results import EntropyStatus, SampleEntropyResult
from liq.entropy.statistics import standard_deviation

logger = get_logger("sample")


def count_template_matches(
    x: NDArray[np.float64],
    m: int,
    tolerance: float,
) -> tuple[int, int]:
    """Count matching template pairs at lengths m and m+1.

    Templates start at indices ``0 .. N-m-1`` so that the (m+1)-th element
    of every template is in bounds. Each unordered pair ``i < j`` is
    tested once.

    Args:
        x: Series values.
        m: Embedding dimension.
        tolerance: Maximum Chebyshev distance for a match.

    Returns:
        Tuple of (cm, cm1).
    """
    # Signed bound, clamped: m >= N leaves no templates at all
    n_templates = max(len(x) - m, 0)
    if n_templates < 2:
        return 0, 0

    windows = sliding_window_view(x, m + 1)
    cm = 0
    cm1 = 0
    for i in range(n_templates - 1):
        diffs = np.abs(windows[i + 1 :] - windows[i])
        match_m = np.all(diffs[:, :m] <= tolerance, axis=1)
        cm += int(np.count_nonzero(match_m))
        cm1 += int(np.count_nonzero(match_m & (diffs[:, m] <= tolerance)))
    return cm, cm1


def sample_entropy_result(
    series: SeriesLike,
    m: int = 2,
    r: float = 0.2,
) -> SampleEntropyResult:
    """Compute sample entropy and keep the match counts.

    Args:
        series: Time series values.
        m: Embedding (template) length, integer >= 1.
        r: Tolerance ratio; the absolute tolerance is ``std(series) * r``
            using the sample standard deviation.

    Returns:
        SampleEntropyResult with value, counts and status.

    Raises:
        ConfigurationError: If m or r is invalid.
    """
    m = validate_embedding_dimension(m)
    r = validate_tolerance_ratio(r)
    x = as_series(series)
    n = len(x)
    log_function_entry(logger, "sample_entropy", series=x, m=m, r=r)

    if n < 2:
        log_degenerate(logger, "Sample entropy undefined: insufficient data", n_points=n)
        return SampleEntropyResult(
            value=math.nan,
            matches_m=0,
            matches_m1=0,
            tolerance=math.nan,
            n_points=n,
            m=m,
            r=r,
            status=EntropyStatus.INSUFFICIENT_DATA,
        )

    tolerance = standard_deviation(x) * r
    cm, cm1 = count_template_matches(x, m, tolerance)

    if cm > 0 and cm1 > 0:
        value = math.log(cm / cm1)
        status = EntropyStatus.OK
    elif cm > 0:
        value = math.inf
        status = EntropyStatus.NO_EXTENDED_MATCHES
        log_degenerate(logger, "Sample entropy infinite: no match extends to m+1", cm=cm)
    else:
        value = math.nan
        status = (
            EntropyStatus.INSUFFICIENT_DATA if n - m < 2 else EntropyStatus.NO_MATCHES
        )
        log_degenerate(logger, "Sample entropy undefined", status=status.value, n_points=n)

    log_function_exit(logger, "sample_entropy", f"value={value}, cm={cm}, cm1={cm1}")
    return SampleEntropyResult(
        value=value,
        matches_m=cm,
        matches_m1=cm1,
        tolerance=tolerance,
        n_points=n,
        m=m,
        r=r,
        status=status,
    )


def sample_entropy(series: SeriesLike, m: int = 2, r: float = 0.2) -> float:
    """Compute sample entropy for a series.

    Returns:
        ``ln(cm / cm1)``; +inf if cm > 0 and cm1 == 0; NaN if the series
        has fewer than 2 values or no templates match.
    """
    return sample_entropy_result(series, m=m, r=r).value
