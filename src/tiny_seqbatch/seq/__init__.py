"""
Packed batches of variable-length sequences and the graph nodes over them.

- `Batch` (see `batch.py`): one timestep, flat vector plus presence mask.
- `Seq`, `ConstSeq`, `VarSeq` (see `base.py`): sequences of batches.
- `reduce` / `prune`: differentiable sequence nodes.
"""

from .batch import Batch
from .base import ConstSeq, Seq, VarSeq, const_seq_list, separate_seqs
from .reduce import ReduceSeq, reduce
from .prune import PruneSeq, prune

__all__ = [
    "Batch",
    "Seq",
    "ConstSeq",
    "VarSeq",
    "const_seq_list",
    "separate_seqs",
    "ReduceSeq",
    "reduce",
    "PruneSeq",
    "prune",
]
