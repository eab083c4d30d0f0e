"""
Validation of presence masks and batch lists.
"""

from __future__ import annotations

from typing import Sequence

from tiny_seqbatch.errors import InvalidArgumentError


def ensure_same_length(mask: Sequence[bool], other: Sequence[bool], *, what: str = "mask") -> None:
    if len(mask) != len(other):
        raise InvalidArgumentError(
            f"{what} has {len(mask)} slots but the batch has {len(other)}."
        )


def ensure_subset(present: Sequence[bool], source: Sequence[bool]) -> None:
    ensure_same_length(present, source)
    for keep, had in zip(present, source):
        if keep and not had:
            raise InvalidArgumentError("cannot re-add sequences")


def ensure_superset(present: Sequence[bool], source: Sequence[bool]) -> None:
    ensure_same_length(present, source)
    for keep, had in zip(present, source):
        if had and not keep:
            raise InvalidArgumentError("argument to Expand must be a superset")


def ensure_packed_divisible(length: int, num_present: int) -> None:
    if num_present == 0:
        if length != 0:
            raise InvalidArgumentError(
                f"Batch with no present sequences has {length} packed entries."
            )
        return
    if length % num_present:
        raise InvalidArgumentError(
            f"Packed length {length} is not divisible by {num_present} present sequences."
        )


def ensure_uniform_masks(masks: Sequence[Sequence[bool]]) -> None:
    """Every timestep must describe the same number of slots."""
    if not masks:
        return
    expected = len(masks[0])
    for step, mask in enumerate(masks):
        if len(mask) != expected:
            raise InvalidArgumentError(
                f"Timestep {step} has {len(mask)} slots; expected {expected}."
            )


def ensure_prunable(masks: Sequence[Sequence[bool]]) -> None:
    """
    Slots absent at the first timestep must stay absent afterwards; otherwise
    pruning would drop a mask entry whose data is still in the packed vector.
    """
    ensure_uniform_masks(masks)
    if not masks:
        return
    first = masks[0]
    for step, mask in enumerate(masks[1:], start=1):
        for slot, (alive, pres) in enumerate(zip(first, mask)):
            if pres and not alive:
                raise InvalidArgumentError(
                    f"Sequence {slot} is absent at timestep 0 but present at timestep {step}."
                )


def ensure_upstream_length(upstream: Sequence[object], expected: int) -> None:
    if len(upstream) != expected:
        raise InvalidArgumentError(
            f"Expected {expected} upstream batches, got {len(upstream)}."
        )
