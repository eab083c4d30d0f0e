"""
Flat-vector backends.

A `Creator` owns every operation the batch code needs on its flat vectors,
so batches never depend on a particular array library. `creator_for` maps a
vector instance back to the creator that can operate on it.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, List, Sequence, Tuple, Type

import numpy as np

from tiny_seqbatch.errors import InvalidArgumentError

Vector = Any
CreatorFactory = Callable[[Vector], "Creator"]


class Creator:
    """
    Factory and operation set for one kind of 1-D vector.
    """

    def make_vector(self, size: int) -> Vector:
        """Return a zero vector of the given length."""
        raise NotImplementedError

    def make_vector_data(self, values: Sequence[float]) -> Vector:
        raise NotImplementedError

    def length(self, vec: Vector) -> int:
        return int(vec.shape[0])

    def slice(self, vec: Vector, start: int, end: int) -> Vector:
        return vec[start:end]

    def concat(self, chunks: Sequence[Vector]) -> Vector:
        """Join chunks into a newly allocated vector."""
        raise NotImplementedError

    def add(self, a: Vector, b: Vector) -> Vector:
        if self.length(a) != self.length(b):
            raise InvalidArgumentError(
                f"Cannot add vectors of length {self.length(a)} and {self.length(b)}."
            )
        return a + b


class NumpyCreator(Creator):
    """Vectors backed by 1-D `numpy.ndarray`."""

    def __init__(self, dtype: Any = np.float64) -> None:
        self.dtype = np.dtype(dtype)

    def make_vector(self, size: int) -> np.ndarray:
        return np.zeros(size, dtype=self.dtype)

    def make_vector_data(self, values: Sequence[float]) -> np.ndarray:
        return np.array(values, dtype=self.dtype).reshape(-1)

    def concat(self, chunks: Sequence[np.ndarray]) -> np.ndarray:
        if not chunks:
            return self.make_vector(0)
        return np.concatenate(list(chunks)).astype(self.dtype, copy=False)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, NumpyCreator) and other.dtype == self.dtype

    def __hash__(self) -> int:
        return hash(("numpy", self.dtype.str))

    def __repr__(self) -> str:
        return f"NumpyCreator(dtype={self.dtype.name})"


_REGISTRY: List[Tuple[Type[Any], CreatorFactory]] = []


def register_creator(vector_type: Type[Any], factory: CreatorFactory) -> None:
    """
    Teach `creator_for` how to recover a creator from `vector_type` instances.

    Later registrations win over earlier ones for the same type.
    """
    _REGISTRY.insert(0, (vector_type, factory))


def creator_for(vec: Vector) -> Creator:
    for vector_type, factory in _REGISTRY:
        if isinstance(vec, vector_type):
            return factory(vec)
    raise TypeError(f"No creator registered for vector type {type(vec).__name__}.")


_NUMPY_CREATORS: Dict[str, NumpyCreator] = {}


def _numpy_factory(vec: np.ndarray) -> NumpyCreator:
    key = vec.dtype.str
    if key not in _NUMPY_CREATORS:
        _NUMPY_CREATORS[key] = NumpyCreator(vec.dtype)
    return _NUMPY_CREATORS[key]


register_creator(np.ndarray, _numpy_factory)
