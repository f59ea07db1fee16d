"""Complexity and entropy measures for numeric time series.

This package provides:
- Sample entropy with tolerance-based template matching
- Shannon entropy over a discretized distribution
- Binary entropy (biEntropy) and its logarithmic Tres variant
- Multiscale entropy built on coarse-graining and sample entropy
- Batch computation over Polars DataFrame columns

Degenerate inputs never raise: undefined results are NaN and an absence
of extended matches in sample entropy is +inf. Invalid parameters raise
ConfigurationError.

Example:
    >>> from liq.entropy import (
    ...     binary_entropy,
    ...     multiscale_entropy,
    ...     sample_entropy,
    ...     shannon_entropy_discrete,
    ... )
    >>>
    >>> sample_entropy(series, m=2, r=0.2)
    >>> shannon_entropy_discrete(series)
    >>> binary_entropy([0, 1, 0, 1], tres=True)
    >>> multiscale_entropy(series, [1, 2, 3])
"""

from liq.entropy.batch import MEASURES, compute_entropy_features
from liq.entropy.binary import binary_entropy, binary_entropy_term
from liq.entropy.coarse_grain import aggregate
from liq.entropy.config import (
    EntropyDefaults,
    configure_defaults,
    get_defaults,
    reset_defaults,
)
from liq.entropy.derivative import binary_derivative
from liq.entropy.distribution import (
    Discretizer,
    IdentityDiscretizer,
    ScaledFloorDiscretizer,
    estimate_distribution,
)
from liq.entropy.exceptions import (
    ConfigurationError,
    EntropyError,
    InsufficientDataError,
)
from liq.entropy.multiscale import (
    multiscale_entropy,
    multiscale_entropy_frame,
    multiscale_entropy_results,
)
from liq.entropy.results import EntropyStatus, SampleEntropyResult
from liq.entropy.sample import sample_entropy, sample_entropy_result
from liq.entropy.shannon import shannon_entropy_discrete
from liq.entropy.statistics import mean, standard_deviation

__all__ = [
    # Engines
    "sample_entropy",
    "sample_entropy_result",
    "shannon_entropy_discrete",
    "binary_entropy",
    "binary_entropy_term",
    "multiscale_entropy",
    "multiscale_entropy_results",
    "multiscale_entropy_frame",
    # Building blocks
    "mean",
    "standard_deviation",
    "estimate_distribution",
    "Discretizer",
    "ScaledFloorDiscretizer",
    "IdentityDiscretizer",
    "binary_derivative",
    "aggregate",
    # Results
    "EntropyStatus",
    "SampleEntropyResult",
    # Batch
    "MEASURES",
    "compute_entropy_features",
    # Configuration
    "EntropyDefaults",
    "get_defaults",
    "configure_defaults",
    "reset_defaults",
    # Exceptions
    "EntropyError",
    "InsufficientDataError",
    "ConfigurationError",
]
