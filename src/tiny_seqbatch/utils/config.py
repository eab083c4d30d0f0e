"""
Global / experimental configuration flags.
"""

from __future__ import annotations

import os
from dataclasses import dataclass


def _env_flag(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


@dataclass
class SBConfig:
    debug: bool = False
    # Verify that slots dropped by prune() stay absent at every timestep.
    check_prune: bool = True

    @classmethod
    def from_env(cls) -> "SBConfig":
        return cls(
            debug=_env_flag("TINY_SEQBATCH_DEBUG", False),
            check_prune=_env_flag("TINY_SEQBATCH_CHECK_PRUNE", True),
        )


config = SBConfig.from_env()
