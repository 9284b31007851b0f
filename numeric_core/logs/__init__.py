from numeric_core.logs.structlog import LOGGER_NAME, configure, logger

__all__ = ["LOGGER_NAME", "configure", "logger"]
