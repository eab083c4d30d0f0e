from __future__ import annotations

import pytest

from tiny_seqbatch.errors import InvalidArgumentError
from tiny_seqbatch.seq.validate import (
    ensure_packed_divisible,
    ensure_prunable,
    ensure_subset,
    ensure_superset,
    ensure_uniform_masks,
)


def test_subset_and_superset_checks() -> None:
    ensure_subset([True, False], [True, True])
    ensure_superset([True, True], [False, True])

    with pytest.raises(InvalidArgumentError, match="re-add"):
        ensure_subset([False, True], [True, False])
    with pytest.raises(InvalidArgumentError, match="superset"):
        ensure_superset([False, True], [True, False])


def test_invalid_argument_is_a_value_error() -> None:
    with pytest.raises(ValueError):
        ensure_subset([True], [True, True])


def test_packed_divisible() -> None:
    ensure_packed_divisible(6, 3)
    ensure_packed_divisible(0, 0)
    with pytest.raises(InvalidArgumentError):
        ensure_packed_divisible(5, 2)


def test_uniform_and_prunable_masks() -> None:
    ensure_uniform_masks([])
    ensure_prunable([[True, False], [False, False]])

    with pytest.raises(InvalidArgumentError):
        ensure_uniform_masks([[True], [True, True]])
    with pytest.raises(InvalidArgumentError):
        ensure_prunable([[True, False], [True, True]])
