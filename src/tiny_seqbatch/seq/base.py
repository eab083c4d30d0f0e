"""
The `Seq` capability set and leaf sequences.

Every node (leaf or derived) exposes `creator`, `output`, `vars` and
`propagate`, so nodes compose by wrapping one another.
"""

from __future__ import annotations

from typing import Any, List, Protocol, Sequence, runtime_checkable

from tiny_seqbatch.graph.grad import Grad
from tiny_seqbatch.graph.vars import Var, VarSet
from tiny_seqbatch.seq.batch import Batch
from tiny_seqbatch.seq.validate import ensure_uniform_masks, ensure_upstream_length
from tiny_seqbatch.vector.creator import Creator


@runtime_checkable
class Seq(Protocol):
    def creator(self) -> Creator:
        ...

    def output(self) -> List[Batch]:
        """Batches, one per timestep, earliest first."""
        ...

    def vars(self) -> VarSet:
        ...

    def propagate(self, upstream: Sequence[Batch], grad: Grad) -> None:
        """
        Push upstream gradients (one batch per output timestep, shaped like
        that output) back into `grad`.
        """
        ...


class ConstSeq:
    """A sequence with no differentiable inputs."""

    def __init__(self, creator: Creator, batches: Sequence[Batch]) -> None:
        ensure_uniform_masks([b.present for b in batches])
        self._creator = creator
        self._out = list(batches)

    def creator(self) -> Creator:
        return self._creator

    def output(self) -> List[Batch]:
        return self._out

    def vars(self) -> VarSet:
        return VarSet()

    def propagate(self, upstream: Sequence[Batch], grad: Grad) -> None:
        pass


class VarSeq:
    """
    A sequence whose packed vectors are graph variables, one per timestep.
    """

    def __init__(self, creator: Creator, batches: Sequence[Batch]) -> None:
        ensure_uniform_masks([b.present for b in batches])
        self._creator = creator
        self._out = list(batches)
        self.variables = [Var(b.packed, name=f"t{t}") for t, b in enumerate(self._out)]

    def creator(self) -> Creator:
        return self._creator

    def output(self) -> List[Batch]:
        return self._out

    def vars(self) -> VarSet:
        return VarSet(self.variables)

    def propagate(self, upstream: Sequence[Batch], grad: Grad) -> None:
        ensure_upstream_length(upstream, len(self._out))
        for var, up in zip(self.variables, upstream):
            grad.accumulate(var, up.packed)


def const_seq_list(creator: Creator, seqs: Sequence[Sequence[Any]]) -> ConstSeq:
    """
    Pack per-sequence lists of timestep vectors into a `ConstSeq`.

    `seqs[i][t]` is the vector of sequence `i` at timestep `t`. Sequences may
    have different lengths; a sequence is present at `t` iff `t < len(seqs[i])`.
    """
    max_len = max((len(s) for s in seqs), default=0)
    batches: List[Batch] = []
    for t in range(max_len):
        present = [t < len(s) for s in seqs]
        chunks = [s[t] for s in seqs if t < len(s)]
        batches.append(Batch(packed=creator.concat(chunks), present=tuple(present)))
    return ConstSeq(creator, batches)


def separate_seqs(batches: Sequence[Batch]) -> List[List[Any]]:
    """Split a batch list back into per-sequence lists of timestep vectors."""
    if not batches:
        return []
    ensure_uniform_masks([b.present for b in batches])
    res: List[List[Any]] = [[] for _ in batches[0].present]
    for batch in batches:
        creator = batch.creator()
        inc = batch.width()
        offset = 0
        for slot, pres in enumerate(batch.present):
            if pres:
                res[slot].append(creator.slice(batch.packed, offset, offset + inc))
                offset += inc
    return res
