"""
Differentiable reduction of a whole sequence of batches.
"""

from __future__ import annotations

from typing import List, Sequence

from tiny_seqbatch.graph.grad import Grad
from tiny_seqbatch.graph.vars import VarSet
from tiny_seqbatch.seq.base import Seq
from tiny_seqbatch.seq.batch import Batch
from tiny_seqbatch.seq.validate import ensure_same_length, ensure_upstream_length
from tiny_seqbatch.utils.logging import get_logger
from tiny_seqbatch.vector.creator import Creator

log = get_logger(__name__)


class ReduceSeq:
    """Node produced by `reduce`; see that function for semantics."""

    def __init__(self, inp: Seq, present: Sequence[bool]) -> None:
        self.input = inp
        self.present = tuple(bool(p) for p in present)
        self._out = self._forward()

    def _forward(self) -> List[Batch]:
        out: List[Batch] = []
        for step, batch in enumerate(self.input.output()):
            ensure_same_length(self.present, batch.present)
            mask = [want and had for want, had in zip(self.present, batch.present)]
            reduced = batch.reduce(mask)
            if reduced.num_present() == 0:
                log.debug("reduce: all sequences ended at timestep %d", step)
                break
            out.append(reduced)
        return out

    def creator(self) -> Creator:
        return self.input.creator()

    def output(self) -> List[Batch]:
        return self._out

    def vars(self) -> VarSet:
        return self.input.vars()

    def propagate(self, upstream: Sequence[Batch], grad: Grad) -> None:
        ensure_upstream_length(upstream, len(self._out))
        in_out = self.input.output()
        expanded: List[Batch] = [
            up.expand(orig.present) for up, orig in zip(upstream, in_out)
        ]
        for orig in in_out[len(upstream):]:
            creator = orig.creator()
            zeros = creator.make_vector(creator.length(orig.packed))
            expanded.append(Batch(packed=zeros, present=orig.present))
        log.debug(
            "reduce: propagating %d upstream batches as %d input batches",
            len(upstream),
            len(expanded),
        )
        self.input.propagate(expanded, grad)


def reduce(seq: Seq, present: Sequence[bool]) -> Seq:
    """
    Reduce every batch in `seq` to a subset of `present`.

    Unlike `Batch.reduce`, `present` may name slots that are absent at some
    timesteps; each timestep keeps `present[i] and batch.present[i]`.
    Removed sequences keep their slots, so sequence indices are preserved; use
    `prune` to drop them. The output ends at the first timestep where no
    sequence remains.
    """
    return ReduceSeq(seq, present)
