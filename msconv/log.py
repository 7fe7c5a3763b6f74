import logging, sys
from typing import Optional, TextIO

LOG_FORMAT = "[%(asctime)s] %(levelname)s> %(message)s"
DATE_FORMAT = "%H:%M:%S"


def verbosity_level(verbose: int) -> int:
    """Map a ``-v`` count onto a logging level."""
    if verbose >= 2:
        return logging.DEBUG
    if verbose == 1:
        return logging.INFO
    return logging.WARNING


def get_logger(
    name: str = "msconv", level: int = logging.WARNING, stream: Optional[TextIO] = None
) -> logging.Logger:
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler(stream or sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, DATE_FORMAT))
        logger.addHandler(handler)
    logger.setLevel(level)
    return logger
