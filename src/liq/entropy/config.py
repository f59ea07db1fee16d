"""Default parameters for batch feature computation, plus parameter validators.

The engines themselves take explicit arguments with fixed defaults
(m=2, r=0.2, floor(v * 100)). These configurable defaults are only read
by ``compute_entropy_features``.

Example:
    >>> from liq.entropy.config import configure_defaults, reset_defaults
    >>>
    >>> configure_defaults(tolerance_ratio=0.15)
    >>> # ... compute_entropy_features now uses r=0.15 ...
    >>> reset_defaults()
"""

from __future__ import annotations

import math
import numbers
from dataclasses import asdict, dataclass, replace
from typing import Any

from liq.entropy.exceptions import ConfigurationError


@dataclass(frozen=True)
class EntropyDefaults:
    """Default parameters used when callers do not pass their own.

    Attributes:
        embedding_dimension: Template length m for sample entropy.
        tolerance_ratio: Tolerance r as a fraction of the standard deviation.
        discretization_scale: Multiplier applied before flooring values
            into Shannon entropy symbols.
    """

    embedding_dimension: int = 2
    tolerance_ratio: float = 0.2
    discretization_scale: float = 100.0

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return asdict(self)


_ORIGINAL_DEFAULTS = EntropyDefaults()
_defaults = _ORIGINAL_DEFAULTS


def validate_embedding_dimension(m: Any) -> int:
    """Check that m is an integer >= 1 and return it as int."""
    if isinstance(m, bool) or not isinstance(m, numbers.Integral) or m < 1:
        raise ConfigurationError(
            "Embedding dimension must be a positive integer",
            parameter="m",
            value=m,
            valid_range="integer >= 1",
        )
    return int(m)


def validate_tolerance_ratio(r: Any) -> float:
    """Check that r is a finite, non-negative real number and return it as float."""
    if isinstance(r, bool) or not isinstance(r, numbers.Real) or not math.isfinite(r) or r < 0:
        raise ConfigurationError(
            "Tolerance ratio must be a finite non-negative number",
            parameter="r",
            value=r,
            valid_range="finite, >= 0",
        )
    return float(r)


def validate_scale_factor(scale_factor: Any) -> int:
    """Check that a scale factor is an integer >= 1 and return it as int."""
    if (
        isinstance(scale_factor, bool)
        or not isinstance(scale_factor, numbers.Integral)
        or scale_factor < 1
    ):
        raise ConfigurationError(
            "Scale factor must be a positive integer",
            parameter="scale_factor",
            value=scale_factor,
            valid_range="integer >= 1",
        )
    return int(scale_factor)


def validate_n_jobs(n_jobs: Any) -> int:
    """Check that a worker count is an integer >= 1 and return it as int."""
    if isinstance(n_jobs, bool) or not isinstance(n_jobs, numbers.Integral) or n_jobs < 1:
        raise ConfigurationError(
            "n_jobs must be a positive integer",
            parameter="n_jobs",
            value=n_jobs,
            valid_range="integer >= 1",
        )
    return int(n_jobs)


def validate_discretization_scale(scale: Any) -> float:
    """Check that the discretization scale is a finite positive number."""
    if (
        isinstance(scale, bool)
        or not isinstance(scale, numbers.Real)
        or not math.isfinite(scale)
        or scale <= 0
    ):
        raise ConfigurationError(
            "Discretization scale must be a finite positive number",
            parameter="discretization_scale",
            value=scale,
            valid_range="finite, > 0",
        )
    return float(scale)


_VALIDATORS = {
    "embedding_dimension": validate_embedding_dimension,
    "tolerance_ratio": validate_tolerance_ratio,
    "discretization_scale": validate_discretization_scale,
}


def get_defaults() -> EntropyDefaults:
    """Return the currently active defaults."""
    return _defaults


def configure_defaults(**overrides: Any) -> EntropyDefaults:
    """Override default parameters globally.

    Args:
        **overrides: Field names of EntropyDefaults with new values,
            e.g. ``configure_defaults(tolerance_ratio=0.15)``.

    Returns:
        The new active defaults.

    Raises:
        ConfigurationError: If a key is unknown or a value is invalid.
    """
    global _defaults

    validated = {}
    for key, value in overrides.items():
        if key not in _VALIDATORS:
            raise ConfigurationError(
                f"Unknown default: {key}",
                parameter=key,
                value=value,
                valid_range=", ".join(sorted(_VALIDATORS)),
            )
        validated[key] = _VALIDATORS[key](value)

    _defaults = replace(_defaults, **validated)
    return _defaults


def reset_defaults() -> EntropyDefaults:
    """Reset all defaults to their original values.

    This undoes any changes made by configure_defaults().
    """
    global _defaults
    _defaults = _ORIGINAL_DEFAULTS
    return _defaults
