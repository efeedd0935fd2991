# scriptgen/logs.py
import logging

LOG_FORMAT = "%(asctime)s %(levelname)s: %(message)s"


def setup_logging(level: str = "INFO") -> logging.Logger:
    """Attach a single stream handler to the package logger."""
    logger = logging.getLogger("scriptgen")
    if not logger.handlers:
        h = logging.StreamHandler()
        h.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(h)
    logger.setLevel(level.upper())
    return logger
