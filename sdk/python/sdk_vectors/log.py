import logging
import sys

from . import config


def get_logger():
    logger = logging.getLogger("sdk_vectors")
    if not logger.handlers:
        h = logging.StreamHandler(sys.stderr)
        fmt = logging.Formatter("[%(asctime)s] %(levelname)s %(message)s")
        h.setFormatter(fmt)
        logger.addHandler(h)
        logger.setLevel(getattr(logging, config.LOG_LEVEL.upper(), logging.WARNING))
    return logger
