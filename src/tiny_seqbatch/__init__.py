"""
tiny-seqbatch

Differentiable compaction and expansion of packed variable-length sequence batches.
"""

from .errors import InvalidArgumentError
from .graph import Grad, Var, VarSet
from .seq import (
    Batch,
    ConstSeq,
    Seq,
    VarSeq,
    const_seq_list,
    prune,
    reduce,
    separate_seqs,
)
from .utils import config, setup_logging
from .vector import Creator, NumpyCreator, creator_for, register_creator

if config.debug:
    setup_logging("DEBUG")

__all__ = [
    "InvalidArgumentError",
    "Grad",
    "Var",
    "VarSet",
    "Batch",
    "Seq",
    "ConstSeq",
    "VarSeq",
    "const_seq_list",
    "separate_seqs",
    "reduce",
    "prune",
    "Creator",
    "NumpyCreator",
    "creator_for",
    "register_creator",
]
