from __future__ import annotations

import logging
from pathlib import Path

import structlog
from beartype import beartype

LOGGER_NAME: str = "numeric_core"

shared_processors = [
    structlog.stdlib.add_log_level,
    structlog.stdlib.add_logger_name,
    structlog.processors.TimeStamper(fmt="%Y-%m-%d %H:%M:%S"),
]


def _handler(handler: logging.Handler, colors: bool) -> logging.Handler:
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                structlog.dev.ConsoleRenderer(colors=colors),
            ],
            foreign_pre_chain=shared_processors,
        )
    )
    return handler


@beartype
def configure(log_level: str = "WARNING", log_file: str | Path | None = None) -> logging.Logger:
    """
    Route the library's structlog events through the `numeric_core` stdlib logger.

    Only the package logger is touched, so the host application keeps control of
    the root logger. Calling it again replaces the handlers of the previous call.

    Args:
        log_level: Minimum log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional file that receives an uncolored copy of the events.

    Returns:
        The configured package logger.
    """
    package_logger: logging.Logger = logging.getLogger(LOGGER_NAME)
    for old in list(package_logger.handlers):
        package_logger.removeHandler(old)
        old.close()

    package_logger.addHandler(_handler(logging.StreamHandler(), colors=True))
    if log_file is not None:
        log_path: Path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        package_logger.addHandler(_handler(logging.FileHandler(log_path, encoding="utf-8"), colors=False))
    package_logger.setLevel(log_level.upper())
    package_logger.propagate = False

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            *shared_processors,
            structlog.processors.format_exc_info,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
    )
    return package_logger


logger: structlog.stdlib.BoundLogger = structlog.get_logger(LOGGER_NAME)
