import logging
import sys
from typing import Optional

from common.settings import settings


def get_logger(name: Optional[str] = None) -> logging.Logger:
    logger = logging.getLogger(name or "wordcount")
    if logger.handlers:
        return logger
    logger.setLevel(settings.log_level.upper())

    # stdout is reserved for the report itself
    handler = logging.StreamHandler(sys.stderr)
    fmt = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
    handler.setFormatter(logging.Formatter(fmt))
    logger.addHandler(handler)
    logger.propagate = False
    return logger
