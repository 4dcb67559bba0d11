"""
Logging configuration for the analytics service.
"""
import logging
import threading

_logging_initialized = False
_logging_lock = threading.Lock()

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(log_level="INFO"):
    """
    Configure the root logger with a single console handler.

    Safe to call more than once; only the first call installs the handler,
    later calls just update the level.

    Args:
        log_level: Level name or number (default: "INFO")

    Returns:
        logging.Logger: The root logger
    """
    global _logging_initialized

    with _logging_lock:
        logger = logging.getLogger()
        logger.setLevel(log_level)
        if _logging_initialized:
            return logger

        console_handler = logging.StreamHandler()
        console_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(console_handler)

        logger.info("Logging initialized at level %s", logging.getLevelName(logger.level))
        _logging_initialized = True
        return logger


def get_logger(name):
    """Logger for a module (typically ``__name__``)."""
    return logging.getLogger(name)
