"""Result dataclasses for entropy computations.

The scalar APIs return plain floats with NaN / +inf sentinels. These
classes keep the intermediate counts and the reason behind a sentinel so
callers can tell insufficient data apart from an absence of matches.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Any


class EntropyStatus(str, Enum):
    """Outcome classification for sample entropy."""

    OK = "ok"
    INSUFFICIENT_DATA = "insufficient_data"
    NO_MATCHES = "no_matches"
    NO_EXTENDED_MATCHES = "no_extended_matches"


@dataclass(frozen=True)
class SampleEntropyResult:
    """Sample entropy together with its template-match counts.

    Attributes:
        value: ``ln(matches_m / matches_m1)``, +inf when no match extends
            to length m+1, NaN when undefined.
        matches_m: Number of template pairs matching at length m (cm).
        matches_m1: Number of those pairs still matching at length m+1 (cm1).
        tolerance: Absolute tolerance ``std(series) * r`` (NaN if N < 2).
        n_points: Length of the input series.
        m: Embedding dimension used.
        r: Tolerance ratio used.
        status: Why the value is (or is not) finite.
    """

    value: float
    matches_m: int
    matches_m1: int
    tolerance: float
    n_points: int
    m: int
    r: float
    status: EntropyStatus

    @property
    def is_defined(self) -> bool:
        """Check if the entropy is a finite number."""
        return math.isfinite(self.value)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "value": self.value,
            "matches_m": self.matches_m,
            "matches_m1": self.matches_m1,
            "tolerance": self.tolerance,
            "n_points": self.n_points,
            "m": self.m,
            "r": self.r,
            "status": self.status.value,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> SampleEntropyResult:
        """Create from dictionary."""
        return cls(
            value=float(data["value"]),
            matches_m=int(data["matches_m"]),
            matches_m1=int(data["matches_m1"]),
            tolerance=float(data["tolerance"]),
            n_points=int(data["n_points"]),
            m=int(data["m"]),
            r=float(data["r"]),
            status=EntropyStatus(data["status"]),
        )
