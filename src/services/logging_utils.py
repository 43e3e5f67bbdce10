"""Service layer logging utilities.

Provides structured logging functions for service operations, enabling
consistent log format and context across the registry and the conversion
engine.

Usage:
    from src.services.logging_utils import get_service_logger, log_operation

    logger = get_service_logger(__name__)

    # Log successful operation
    log_operation(
        logger,
        operation="convert",
        outcome="success",
        level=logging.DEBUG,
        from_unit="kilometers",
        to_unit="meters",
    )
"""

import logging
from typing import Any

# Root of every logger the application creates
LOGGER_NAMESPACE = "unicon"


def get_service_logger(name: str) -> logging.Logger:
    """
    Get a logger configured for service operations.

    Args:
        name: Logger name (typically __name__ of the calling module)

    Returns:
        Logger instance with the 'unicon.services' prefix.

    Example:
        >>> logger = get_service_logger(__name__)
        >>> logger.name
        'unicon.services.unit_converter'
    """
    # Extract just the module name if full path is provided
    if "." in name:
        name = name.split(".")[-1]
    return logging.getLogger(f"{LOGGER_NAMESPACE}.services.{name}")


def log_operation(
    logger: logging.Logger,
    operation: str,
    outcome: str,
    level: int = logging.INFO,
    **context: Any,
) -> None:
    """
    Log a service operation with structured context.

    The context is passed via the 'extra' parameter for structured logging.

    Args:
        logger: Logger instance to use
        operation: Operation name (e.g., "convert", "lookup")
        outcome: Outcome description (e.g., "success", "incompatible_families")
        level: Log level (default: INFO). Use DEBUG for verbose/frequent logs.
        **context: Additional context fields (unit names, values, error details)

    Example:
        >>> log_operation(
        ...     logger,
        ...     operation="lookup",
        ...     outcome="not_found",
        ...     level=logging.DEBUG,
        ...     unit_name="parsecs",
        ... )
        # Logs: "lookup: not_found" with extra context
    """
    extra = {
        "operation": operation,
        "outcome": outcome,
        **context,
    }
    logger.log(level, f"{operation}: {outcome}", extra=extra)
