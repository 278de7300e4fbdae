"""
Logging configuration for the technical analysis engine.

Engine modules obtain loggers through get_logger/get_signal_logger and never
configure logging themselves; applications call configure_logging once at
startup. Log output defaults to stderr so reports written to stdout stay
machine readable.
"""
import logging
import sys
from typing import IO, Any, Optional

import structlog
from structlog.types import FilteringBoundLogger, Processor

PACKAGE_LOGGER = "market_ta"


def _build_processors(
    format_json: bool,
    include_timestamp: bool,
    include_caller: bool,
    extra_processors: Optional[list[Processor]],
) -> list[Processor]:
    """Assemble the processor chain, renderer last."""
    processors: list[Processor] = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if include_timestamp:
        processors.append(structlog.processors.TimeStamper(fmt="iso", utc=True))

    if include_caller:
        processors.append(structlog.processors.CallsiteParameterAdder(
            parameters=[structlog.processors.CallsiteParameter.MODULE,
                        structlog.processors.CallsiteParameter.FUNC_NAME]
        ))

    processors.extend(extra_processors or [])

    if format_json:
        processors.append(structlog.processors.JSONRenderer(sort_keys=True))
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    return processors


def configure_logging(
    level: str = "INFO",
    format_json: bool = False,
    include_timestamp: bool = True,
    include_caller: bool = False,
    extra_processors: Optional[list[Processor]] = None,
    stream: Optional[IO[str]] = None,
) -> None:
    """
    Configure structlog output for the engine.

    Calling it again replaces the previous handler and processor chain.

    Args:
        level: Level name applied to the market_ta logger hierarchy
        format_json: Render events as sorted-key JSON instead of console text
        include_timestamp: Add a UTC ISO timestamp to every event
        include_caller: Add the emitting module and function
        extra_processors: Processors inserted before the renderer
        stream: Output stream (stderr when omitted)
    """
    log_level = logging.getLevelName(level.upper())
    if not isinstance(log_level, int):
        raise ValueError(f"Unknown log level: {level}")

    logging.basicConfig(
        level=log_level,
        stream=stream or sys.stderr,
        format="%(message)s",
        force=True,
    )
    logging.getLogger(PACKAGE_LOGGER).setLevel(log_level)

    structlog.configure(
        processors=_build_processors(
            format_json, include_timestamp, include_caller, extra_processors
        ),
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
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


def get_signal_logger(name: str) -> FilteringBoundLogger:
    """
    Get a logger bound for signal classification decisions.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger for classifier output
    """
    return structlog.get_logger(name, subsystem="signals")


def log_signal_decision(
    logger: FilteringBoundLogger,
    signal_name: str,
    label: str,
    reason: str,
    context: Optional[dict[str, Any]] = None
) -> None:
    """
    Log a classifier decision with standardized format.

    Args:
        logger: Structlog logger instance
        signal_name: Classifier producing the label (e.g. "sentiment")
        label: Resulting categorical label
        reason: Short description of the rule that fired
        context: Indicator readings the decision was based on
    """
    bound_logger = logger.bind(
        signal_name=signal_name,
        label=label,
        reason=reason,
    )

    if context:
        bound_logger = bound_logger.bind(context=context)

    bound_logger.debug("Signal classified")
