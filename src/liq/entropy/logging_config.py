"""Logging helpers for the entropy engines.

Loggers live under the ``liq.entropy`` hierarchy. The library never
installs handlers; applications (or the CLI) configure them.
"""

from __future__ import annotations

import logging
from typing import Any

# Package logger
logger = logging.getLogger("liq.entropy")


def get_logger(name: str) -> logging.Logger:
    """Get a child logger for a specific submodule.

    Args:
        name: Submodule name (e.g., "sample", "multiscale").

    Returns:
        Logger configured for the submodule.
    """
    return logging.getLogger(f"liq.entropy.{name}")


def log_function_entry(
    logger: logging.Logger,
    func_name: str,
    **params: Any,
) -> None:
    """Log function entry with parameters.

    Arrays are summarized by type and length; raw series values are
    never written to the log.

    Args:
        logger: Logger instance.
        func_name: Name of the function.
        **params: Key parameters to log.
    """
    if not logger.isEnabledFor(logging.DEBUG):
        return

    safe_params = {}
    for key, value in params.items():
        if isinstance(value, (int, float, str, bool, type(None))):
            safe_params[key] = value
        elif isinstance(value, (list, tuple)) and len(value) <= 10:
            safe_params[key] = list(value)
        elif hasattr(value, "__len__") and not isinstance(value, dict):
            safe_params[key] = f"<{type(value).__name__} len={len(value)}>"
        else:
            safe_params[key] = f"<{type(value).__name__}>"

    param_str = ", ".join(f"{k}={v}" for k, v in safe_params.items())
    logger.debug(f"Entering {func_name}({param_str})")


def log_function_exit(
    logger: logging.Logger,
    func_name: str,
    result_summary: str | None = None,
) -> None:
    """Log function exit with optional result summary.

    Args:
        logger: Logger instance.
        func_name: Name of the function.
        result_summary: Optional summary of the result.
    """
    if result_summary:
        logger.debug(f"Exiting {func_name}: {result_summary}")
    else:
        logger.debug(f"Exiting {func_name}")


def log_degenerate(
    logger: logging.Logger,
    message: str,
    **context: Any,
) -> None:
    """Log a degenerate (NaN / +inf) outcome with its cause at DEBUG level.

    Args:
        logger: Logger instance.
        message: Description of the degenerate case.
        **context: Additional context.
    """
    if context:
        context_str = ", ".join(f"{k}={v}" for k, v in context.items())
        logger.debug(f"{message} ({context_str})")
    else:
        logger.debug(message)


def log_result(
    logger: logging.Logger,
    message: str,
    **metrics: Any,
) -> None:
    """Log a result or key metric at INFO level.

    Args:
        logger: Logger instance.
        message: Description of the result.
        **metrics: Key metrics to include.
    """
    if metrics:
        metric_str = ", ".join(f"{k}={v}" for k, v in metrics.items())
        logger.info(f"{message}: {metric_str}")
    else:
        logger.info(message)


def log_warning(
    logger: logging.Logger,
    message: str,
    **context: Any,
) -> None:
    """Log a warning with context.

    Args:
        logger: Logger instance.
        message: Warning message.
        **context: Additional context.
    """
    if context:
        context_str = ", ".join(f"{k}={v}" for k, v in context.items())
        logger.warning(f"{message} ({context_str})")
    else:
        logger.warning(message)
