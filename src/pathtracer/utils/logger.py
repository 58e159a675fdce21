# utils/logger.py
import logging

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def init_logger(level: int = logging.INFO) -> logging.Logger:
    """Configure root logging for scripts; the library itself only emits records."""
    logging.basicConfig(level=level, format=LOG_FORMAT)
    return logging.getLogger("pathtracer")
