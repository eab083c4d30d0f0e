"""
Logging helpers.

Every module logs through a child of the ``tiny_seqbatch`` logger so that
applications can filter the whole library with a single name.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional, Union

ROOT_NAME = "tiny_seqbatch"
DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

logger = logging.getLogger(ROOT_NAME)
logger.addHandler(logging.NullHandler())


def get_logger(name: Optional[str] = None) -> logging.Logger:
    if not name or name == ROOT_NAME:
        return logger
    if name.startswith(ROOT_NAME + "."):
        name = name[len(ROOT_NAME) + 1 :]
    return logger.getChild(name)


def setup_logging(
    level: Union[int, str] = logging.INFO,
    log_format: Optional[str] = None,
) -> logging.Logger:
    """
    Attach a stderr handler to the library logger.

    Calling this more than once replaces the previously installed handler
    rather than stacking duplicates.
    """
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.INFO)

    for handler in list(logger.handlers):
        if getattr(handler, "_tiny_seqbatch", False):
            logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(log_format or DEFAULT_FORMAT))
    handler._tiny_seqbatch = True  # type: ignore[attr-defined]
    logger.addHandler(handler)
    logger.setLevel(level)
    return logger
