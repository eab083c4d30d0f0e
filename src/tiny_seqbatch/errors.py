"""
Error kinds raised by tiny-seqbatch.
"""

from __future__ import annotations


class InvalidArgumentError(ValueError):
    """
    A caller broke a batch/sequence contract (e.g. re-adding a sequence
    during a reduce, or expanding to a mask that is not a superset).
    """
