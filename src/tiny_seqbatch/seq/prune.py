"""
Removal of empty sequence slots.
"""

from __future__ import annotations

from typing import List, Sequence

from tiny_seqbatch.graph.grad import Grad
from tiny_seqbatch.graph.vars import VarSet
from tiny_seqbatch.seq.base import Seq
from tiny_seqbatch.seq.batch import Batch
from tiny_seqbatch.seq.validate import (
    ensure_prunable,
    ensure_uniform_masks,
    ensure_upstream_length,
)
from tiny_seqbatch.utils.config import config
from tiny_seqbatch.utils.logging import get_logger
from tiny_seqbatch.vector.creator import Creator

log = get_logger(__name__)


class PruneSeq:
    """Node produced by `prune`; packed vectors are shared with the input."""

    def __init__(self, inp: Seq) -> None:
        self.input = inp
        in_out = inp.output()
        masks = [b.present for b in in_out]
        if config.check_prune:
            ensure_prunable(masks)
        else:
            ensure_uniform_masks(masks)

        keep = [slot for slot, pres in enumerate(in_out[0].present) if pres]
        self._out: List[Batch] = [
            Batch(packed=b.packed, present=tuple(b.present[slot] for slot in keep))
            for b in in_out
        ]
        log.debug("prune: kept %d of %d slots", len(keep), len(in_out[0].present))

    def creator(self) -> Creator:
        return self.input.creator()

    def output(self) -> List[Batch]:
        return self._out

    def vars(self) -> VarSet:
        return self.input.vars()

    def propagate(self, upstream: Sequence[Batch], grad: Grad) -> None:
        ensure_upstream_length(upstream, len(self._out))
        in_out = self.input.output()
        matching = [
            Batch(packed=up.packed, present=orig.present)
            for up, orig in zip(upstream, in_out)
        ]
        self.input.propagate(matching, grad)


def prune(seq: Seq) -> Seq:
    """
    Remove every sequence slot that is absent at the first timestep.

    A sequence with no timesteps is returned unchanged.
    """
    if not seq.output():
        return seq
    return PruneSeq(seq)
