"""
Miscellaneous utilities shared across tiny-seqbatch.
"""

from .logging import get_logger, logger, setup_logging
from .config import SBConfig, config

__all__ = ["logger", "get_logger", "setup_logging", "config", "SBConfig"]
