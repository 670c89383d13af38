# es_units/core/logging_config.py - Structured logging for the es_units package
import logging
import os

from pythonjsonlogger.json import JsonFormatter

PACKAGE_LOGGER = "es_units"
LOG_FORMAT_ENV_VAR = "ES_UNITS_LOG_FORMAT"
LOG_LEVEL_ENV_VAR = "ES_UNITS_LOG_LEVEL"

logging.getLogger(PACKAGE_LOGGER).addHandler(logging.NullHandler())


def configure_package_logging(
    level: str | None = None, handler: logging.Handler | None = None
) -> logging.Logger:
    """
    Emit es_units records as JSON through a handler of the package logger.

    Only the "es_units" logger is touched; the root logger and the host's
    handlers are left alone. Calling again replaces the previous handler.

    Args:
        level: Log level. Defaults to env ES_UNITS_LOG_LEVEL or WARNING
        handler: Destination handler. Defaults to a stderr StreamHandler

    Returns:
        The package logger
    """
    level = (level or os.getenv(LOG_LEVEL_ENV_VAR, "WARNING")).upper()
    logger = logging.getLogger(PACKAGE_LOGGER)

    for existing in list(logger.handlers):
        if not isinstance(existing, logging.NullHandler):
            logger.removeHandler(existing)

    handler = handler or logging.StreamHandler()
    handler.setFormatter(
        JsonFormatter(
            "%(levelname)s %(name)s %(message)s",
            rename_fields={"levelname": "level", "name": "logger"},
            static_fields={"library": PACKAGE_LOGGER},
        )
    )
    logger.addHandler(handler)
    logger.setLevel(level)

    return logger


def get_logger(name: str) -> logging.Logger:
    """
    Get a module logger under the es_units package logger.

    Setting ES_UNITS_LOG_FORMAT=json configures JSON output on first use;
    otherwise records propagate to the host application's handlers.

    Args:
        name: Module name (usually __name__)

    Returns:
        Logger instance
    """
    if not name.startswith(PACKAGE_LOGGER):
        name = f"{PACKAGE_LOGGER}.{name}"

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    configured = any(not isinstance(h, logging.NullHandler) for h in package_logger.handlers)
    if not configured and os.getenv(LOG_FORMAT_ENV_VAR, "").lower() == "json":
        configure_package_logging()

    return logging.getLogger(name)


def log_with_context(logger: logging.Logger, level: str, message: str, **context):
    """
    Log a message with context fields, skipping the call when the level is off.

    Args:
        logger: Logger instance
        level: Log level name (debug, info, warning, error, critical)
        message: Log message
        **context: Extra fields; they become JSON keys with the package formatter
    """
    levelno = logging.getLevelName(level.upper())
    if logger.isEnabledFor(levelno):
        logger.log(levelno, message, extra=context)
