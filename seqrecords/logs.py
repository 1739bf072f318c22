import logging
import os

import structlog

NO_COLOR = os.environ.get("NO_COLOR") is not None


def get_log_level(verbosity: int) -> int:
    """Return the logging level for a count of ``--verbose`` flags."""
    if verbosity <= 0:
        return logging.WARNING

    if verbosity == 1:
        return logging.INFO

    return logging.DEBUG


def configure_logger(verbosity: int, no_color: bool = False) -> None:
    """Configure structlog-based logging for record operations.

    Events are printed to standard output with their level and an ISO timestamp.
    At debug verbosity, the module and function that emitted each event are added.

    :param verbosity: The verbosity level of the logger.
    :param no_color: Render events as JSON, even if global settings allow color.
    """
    level = get_log_level(verbosity)

    processors = [
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
    ]

    if level == logging.DEBUG:
        processors.append(
            structlog.processors.CallsiteParameterAdder(
                [
                    structlog.processors.CallsiteParameter.MODULE,
                    structlog.processors.CallsiteParameter.FUNC_NAME,
                ]
            )
        )

    processors.append(
        structlog.processors.JSONRenderer()
        if no_color or NO_COLOR
        else structlog.dev.ConsoleRenderer()
    )

    structlog.configure(
        logger_factory=structlog.PrintLoggerFactory(),
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(level),
    )
