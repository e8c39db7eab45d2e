"""
Centralized logging configuration for the prospect tracker.

This module provides standardized logging configuration using structlog
for all components. Store mutations, persistence outcomes, scan ingestion
and reminder scheduling all log through loggers obtained here so that
output stays structured and consistent.
"""
import logging
import sys
from typing import Any, Optional

import structlog
from structlog.types import FilteringBoundLogger


def configure_logging(
    level: str = "INFO",
    format_json: bool = False,
    include_timestamp: bool = True,
    include_caller: bool = False,
    extra_processors: Optional[list] = None,
    cache_loggers: bool = True
) -> None:
    """
    Configure structlog for the entire application.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_json: If True, output JSON format; otherwise human-readable
        include_timestamp: Include timestamp in log output
        include_caller: Include caller information (filename, line number)
        extra_processors: Additional structlog processors to include
        cache_loggers: Cache bound loggers on first use
    """
    log_level = getattr(logging, level.upper())

    logging.basicConfig(
        level=log_level,
        stream=sys.stdout,
        format="%(message)s"  # structlog will handle formatting
    )

    processors = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    if include_timestamp:
        processors.append(structlog.processors.TimeStamper(fmt="iso"))

    if include_caller:
        processors.append(structlog.processors.CallsiteParameterAdder(
            parameters=[structlog.processors.CallsiteParameter.FILENAME,
                       structlog.processors.CallsiteParameter.LINENO]
        ))

    if extra_processors:
        processors.extend(extra_processors)

    if format_json:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=True))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=cache_loggers,
    )


def get_logger(name: str) -> FilteringBoundLogger:
    """
    Get a configured structlog logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger instance
    """
    return structlog.get_logger(name)


def get_store_logger(name: str) -> FilteringBoundLogger:
    """
    Get a logger bound for prospect store events.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger for store mutations and persistence
    """
    logger = get_logger(name)

    return logger.bind(
        subsystem="prospect_store",
        audit_trail=True
    )


def log_store_mutation(
    logger: FilteringBoundLogger,
    action: str,
    prospect_id: str,
    count: int,
    context: Optional[dict[str, Any]] = None
) -> None:
    """
    Log a store mutation with standardized format.

    Args:
        logger: Structlog logger instance
        action: Mutation kind ("added", "toggled")
        prospect_id: ID of the affected prospect
        count: Collection size after the mutation
        context: Additional context data
    """
    bound_logger = logger.bind(
        action=action,
        prospect_id=prospect_id,
        count=count
    )

    if context:
        bound_logger = bound_logger.bind(context=context)

    bound_logger.info("Store mutation")
