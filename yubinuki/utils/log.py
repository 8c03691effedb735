# =======================================================================================
# yubinuki/utils/log.py - Logging Setup
# =======================================================================================
import logging
from logging.handlers import RotatingFileHandler
from .exceptions import ConfigError

LOG_FORMAT = "%(asctime)s %(levelname)-7s [%(name)s] %(message)s"
AUDIT_LOGGER = "yubinuki.audit"


def configure_logging(settings) -> logging.Logger:
    """
    Configure the package logger once at process startup.

    Console output always; a rotating file when LOG_FILE is set.
    Audit lines go through the package logger so they land in both.
    """
    level = logging.DEBUG if settings.DEBUG else logging.getLevelName(str(settings.LOG_LEVEL).upper())
    if not isinstance(level, int):
        raise ConfigError(f"unknown LOG_LEVEL: {settings.LOG_LEVEL!r}")

    logger = logging.getLogger("yubinuki")
    logger.setLevel(level)
    logger.handlers.clear()

    formatter = logging.Formatter(LOG_FORMAT)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if settings.LOG_FILE:
        file_handler = RotatingFileHandler(
            settings.LOG_FILE, maxBytes=1024 * 1024, backupCount=5
        )
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.propagate = False
    return logger


def get_audit_logger() -> logging.Logger:
    return logging.getLogger(AUDIT_LOGGER)
