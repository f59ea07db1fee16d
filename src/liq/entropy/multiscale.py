"""Multiscale entropy (Costa, Goldberger & Peng, 2005).

Sample entropy evaluated on coarse-grained copies of a series, one per
scale factor. Scale factors are independent of each other and can be
evaluated on a thread pool.

Example:
    >>> from liq.entropy import multiscale_entropy
    >>>
    >>> mse = multiscale_entropy(series, [1, 2, 3, 4, 5])
    >>> mse[1] == sample_entropy(series, 2, 0.2)
    True
"""

from __future__ import annotations

from collections.abc import Iterable
from concurrent.futures import ThreadPoolExecutor

import polars as pl

from liq.entropy.coarse_grain import aggregate
from liq.entropy.config import (
    validate_embedding_dimension,
    validate_n_jobs,
    validate_scale_factor,
    validate_tolerance_ratio,
)
from liq.entropy.exceptions import ConfigurationError
from liq.entropy.logging_config import (
    get_logger,
    log_function_entry,
    log_function_exit,
    log_result,
)
from liq.entropy.numpy_utils import SeriesLike, as_series
from liq.entropy.results import SampleEntropyResult
from liq.entropy.sample import sample_entropy_result

logger = get_logger("multiscale")


def _unique_scale_factors(scale_factors: Iterable[int]) -> list[int]:
    factors = list(dict.fromkeys(validate_scale_factor(s) for s in scale_factors))
    if not factors:
        raise ConfigurationError(
            "At least one scale factor is required",
            parameter="scale_factors",
            value=[],
            valid_range="non-empty collection of integers >= 1",
        )
    return factors


def multiscale_entropy_results(
    series: SeriesLike,
    scale_factors: Iterable[int],
    m: int = 2,
    r: float = 0.2,
    n_jobs: int = 1,
) -> dict[int, SampleEntropyResult]:
    """Compute the full sample entropy result for each scale factor.

    Args:
        series: Time series values.
        scale_factors: Block lengths for coarse-graining. Duplicates collapse.
        m: Embedding dimension.
        r: Tolerance ratio. The tolerance
            is recomputed from each coarse-grained series.
        n_jobs: Number of worker threads. 1 evaluates sequentially.

    Returns:
        Mapping of scale factor to SampleEntropyResult.

    Raises:
        ConfigurationError: If scale factors, m, r or n_jobs are invalid.
    """
    m = validate_embedding_dimension(m)
    r = validate_tolerance_ratio(r)
    n_jobs = validate_n_jobs(n_jobs)

    factors = _unique_scale_factors(scale_factors)
    x = as_series(series)
    log_function_entry(
        logger, "multiscale_entropy", series=x, scale_factors=factors, m=m, r=r, n_jobs=n_jobs
    )

    def evaluate(scale_factor: int) -> SampleEntropyResult:
        return sample_entropy_result(aggregate(x, scale_factor), m=m, r=r)

    results: dict[int, SampleEntropyResult] = {}
    if n_jobs == 1 or len(factors) == 1:
        for scale_factor in factors:
            results[scale_factor] = evaluate(scale_factor)
    else:
        with ThreadPoolExecutor(max_workers=n_jobs) as executor:
            futures = {s: executor.submit(evaluate, s) for s in factors}
            for scale_factor, future in futures.items():
                results[scale_factor] = future.result()

    log_function_exit(logger, "multiscale_entropy", f"{len(results)} scales")
    log_result(
        logger,
        "Multiscale entropy computed",
        **{f"scale_{s}": res.value for s, res in sorted(results.items())},
    )
    return results


def multiscale_entropy(
    series: SeriesLike,
    scale_factors: Iterable[int],
    m: int = 2,
    r: float = 0.2,
    n_jobs: int = 1,
) -> dict[int, float]:
    """Compute sample entropy of the coarse-grained series at each scale.

    Uses m=2 and r=0.2 unless passed otherwise.

    Returns:
        Mapping of scale factor to sample entropy (NaN / +inf sentinels
        preserved).
    """
    results = multiscale_entropy_results(series, scale_factors, m=m, r=r, n_jobs=n_jobs)
    return {scale_factor: result.value for scale_factor, result in results.items()}


def multiscale_entropy_frame(
    series: SeriesLike,
    scale_factors: Iterable[int],
    m: int = 2,
    r: float = 0.2,
    n_jobs: int = 1,
) -> pl.DataFrame:
    """Multiscale entropy as a DataFrame sorted by scale factor.

    Returns:
        DataFrame with columns ``scale_factor``, ``n_points`` (length of
        the coarse-grained series), ``sample_entropy`` and ``status``.
    """
    results = multiscale_entropy_results(series, scale_factors, m=m, r=r, n_jobs=n_jobs)
    factors = sorted(results)
    return pl.DataFrame(
        {
            "scale_factor": factors,
            "n_points": [results[s].n_points for s in factors],
            "sample_entropy": [results[s].value for s in factors],
            "status": [results[s].status.value for s in factors],
        },
        schema={
            "scale_factor": pl.Int64,
            "n_points": pl.Int64,
            "sample_entropy": pl.Float64,
            "status": pl.Utf8,
        },
    )
