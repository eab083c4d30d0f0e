from __future__ import annotations

from dataclasses import dataclass
from typing import Any, List, Sequence, Tuple

from tiny_seqbatch.errors import InvalidArgumentError
from tiny_seqbatch.seq.validate import (
    ensure_packed_divisible,
    ensure_subset,
    ensure_superset,
)
from tiny_seqbatch.vector.creator import Creator, creator_for


@dataclass(frozen=True, eq=False)
class Batch:
    """
    One timestep of a batch of sequences.

    `packed` holds one equally-sized chunk per present sequence, in slot
    order; `present[i]` says whether slot `i` contributes a chunk.
    """

    packed: Any
    present: Tuple[bool, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "present", tuple(bool(p) for p in self.present))
        ensure_packed_divisible(self.creator().length(self.packed), self.num_present())

    def creator(self) -> Creator:
        return creator_for(self.packed)

    def num_present(self) -> int:
        return sum(self.present)

    def width(self) -> int:
        """Entries per present sequence (0 for an empty batch)."""
        n = self.num_present()
        if n == 0:
            return 0
        return self.creator().length(self.packed) // n

    def reduce(self, present: Sequence[bool]) -> "Batch":
        """
        Drop sequences to get a batch with the requested present map.

        It is invalid for present[i] to be true when self.present[i] is
        false. The result always has a freshly allocated packed vector.
        """
        present = tuple(bool(p) for p in present)
        ensure_subset(present, self.present)

        creator = self.creator()
        inc = self.width()
        chunks: List[Any] = []
        chunk_start = 0
        chunk_size = 0
        for keep, had in zip(present, self.present):
            if keep:
                chunk_size += inc
            elif had:
                if chunk_size:
                    chunks.append(creator.slice(self.packed, chunk_start, chunk_start + chunk_size))
                    chunk_start += chunk_size
                    chunk_size = 0
                chunk_start += inc
        if chunk_size:
            chunks.append(creator.slice(self.packed, chunk_start, chunk_start + chunk_size))

        return Batch(packed=creator.concat(chunks), present=present)

    def expand(self, present: Sequence[bool]) -> "Batch":
        """
        Reverse `reduce` by inserting zero chunks for newly present slots.

        It is invalid for present[i] to be false when self.present[i] is
        true. The result always has a freshly allocated packed vector.
        """
        present = tuple(bool(p) for p in present)
        ensure_superset(present, self.present)

        creator = self.creator()
        inc = self.width()
        if not self.num_present() and any(present):
            raise InvalidArgumentError("cannot infer sequence width when expanding an empty batch")
        filler = creator.make_vector(inc)

        chunks: List[Any] = []
        chunk_start = 0
        chunk_size = 0
        for keep, had in zip(present, self.present):
            if had:
                chunk_size += inc
            elif keep:
                if chunk_size:
                    chunks.append(creator.slice(self.packed, chunk_start, chunk_start + chunk_size))
                    chunk_start += chunk_size
                    chunk_size = 0
                chunks.append(filler)
        if chunk_size:
            chunks.append(creator.slice(self.packed, chunk_start, chunk_start + chunk_size))

        return Batch(packed=creator.concat(chunks), present=present)
