from __future__ import annotations

from typing import Any, Iterable, Iterator, Optional, Set


class Var:
    """
    Leaf differentiable parameter.

    Vars are compared and hashed by identity: two vars holding equal values
    are still distinct graph variables.
    """

    __slots__ = ("vector", "name")

    def __init__(self, vector: Any, name: Optional[str] = None) -> None:
        self.vector = vector
        self.name = name

    def __repr__(self) -> str:
        label = self.name or hex(id(self))
        return f"Var({label})"


class VarSet:
    """Set of graph variables involved in a computation."""

    def __init__(self, variables: Iterable[Var] = ()) -> None:
        self._vars: Set[Var] = set(variables)

    def add(self, var: Var) -> None:
        self._vars.add(var)

    def merge(self, *others: "VarSet") -> "VarSet":
        merged = VarSet(self._vars)
        for other in others:
            merged._vars.update(other._vars)
        return merged

    def __contains__(self, var: object) -> bool:
        return var in self._vars

    def __iter__(self) -> Iterator[Var]:
        return iter(self._vars)

    def __len__(self) -> int:
        return len(self._vars)

    def __repr__(self) -> str:
        return f"VarSet({sorted(repr(v) for v in self._vars)})"
