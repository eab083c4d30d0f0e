"""
Gradient accumulator passed through `Seq.propagate`.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable

from tiny_seqbatch.graph.vars import Var
from tiny_seqbatch.vector.creator import creator_for


class Grad:
    """
    Maps graph variables to accumulated gradient vectors.

    Only variables that are already tracked receive contributions; anything
    else passed to `accumulate` is ignored, so callers choose which leaves they
    want gradients for by seeding the accumulator.
    """

    def __init__(self) -> None:
        self._store: Dict[Var, Any] = {}

    @classmethod
    def for_vars(cls, variables: Iterable[Var]) -> "Grad":
        grad = cls()
        for var in variables:
            grad.track(var)
        return grad

    def track(self, var: Var) -> None:
        if var not in self._store:
            creator = creator_for(var.vector)
            self._store[var] = creator.make_vector(creator.length(var.vector))

    def accumulate(self, var: Var, vec: Any) -> None:
        if var not in self._store:
            return
        current = self._store[var]
        self._store[var] = creator_for(current).add(current, vec)

    def get(self, var: Var) -> Any:
        return self._store[var]

    def has(self, var: Var) -> bool:
        return var in self._store

    def clear(self) -> None:
        self._store.clear()

    def items(self) -> Iterable[tuple[Var, Any]]:
        return self._store.items()

    def __contains__(self, var: object) -> bool:
        return var in self._store

    def __len__(self) -> int:
        return len(self._store)
