"""Tests for the entropy exception hierarchy."""

from __future__ import annotations

from liq.entropy.exceptions import (
    ConfigurationError,
    EntropyError,
    InsufficientDataError,
)


class TestEntropyError:
    """Tests for EntropyError base class."""

    def test_message_only(self) -> None:
        """EntropyError with message only."""
        err = EntropyError("Something went wrong")
        assert str(err) == "Something went wrong"
        assert err.context == {}

    def test_message_with_context(self) -> None:
        """EntropyError with context dictionary."""
        err = EntropyError("Failed", {"scale_factor": 3})
        assert str(err) == "Failed (scale_factor=3)"


class TestInsufficientDataError:
    """Tests for InsufficientDataError."""

    def test_basic_usage(self) -> None:
        """Required and actual sizes appear in the message."""
        err = InsufficientDataError("Too short", required=2, actual=1)
        assert err.required == 2
        assert "required=2" in str(err)
        assert "actual=1" in str(err)
        assert isinstance(err, EntropyError)


class TestConfigurationError:
    """Tests for ConfigurationError."""

    def test_basic_usage(self) -> None:
        """Parameter, value and range are recorded."""
        err = ConfigurationError("Bad m", parameter="m", value=0, valid_range="integer >= 1")
        assert err.parameter == "m"
        assert err.value == 0
        assert "valid_range=integer >= 1" in str(err)
        assert isinstance(err, EntropyError)

    def test_without_range(self) -> None:
        """valid_range is optional."""
        err = ConfigurationError("Bad", parameter="columns", value=["x"])
        assert "valid_range" not in str(err)
