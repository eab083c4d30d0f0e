from __future__ import annotations

import numpy as np
import pytest

from tiny_seqbatch.errors import InvalidArgumentError
from tiny_seqbatch.graph.grad import Grad
from tiny_seqbatch.seq.base import ConstSeq, VarSeq
from tiny_seqbatch.seq.batch import Batch
from tiny_seqbatch.seq.reduce import ReduceSeq, reduce
from tiny_seqbatch.vector.creator import NumpyCreator

CREATOR = NumpyCreator()


class RecordingSeq(ConstSeq):
    """Leaf that remembers what was propagated into it."""

    def __init__(self, batches) -> None:
        super().__init__(CREATOR, batches)
        self.received = None

    def propagate(self, upstream, grad) -> None:
        self.received = list(upstream)


def _shrinking_batches():
    # Sequence A lasts two steps, B one step, C is never present.
    return [
        Batch(packed=np.array([1.0, 2.0, 3.0, 4.0]), present=(True, True, False)),
        Batch(packed=np.array([5.0, 6.0]), present=(True, False, False)),
        Batch(packed=np.array([]), present=(False, False, False)),
    ]


def test_reduce_truncates_at_first_empty_timestep() -> None:
    seq = reduce(ConstSeq(CREATOR, _shrinking_batches()), [True, True, False])

    out = seq.output()
    assert len(out) == 2
    np.testing.assert_array_equal(out[0].packed, [1, 2, 3, 4])
    np.testing.assert_array_equal(out[1].packed, [5, 6])
    assert out[1].present == (True, False, False)


def test_reduce_intersects_target_with_each_timestep() -> None:
    batches = [
        Batch(packed=np.array([1.0, 2.0, 3.0]), present=(True, True, True)),
        Batch(packed=np.array([4.0, 5.0]), present=(False, True, True)),
        Batch(packed=np.array([6.0]), present=(True, False, False)),
    ]
    seq = reduce(ConstSeq(CREATOR, batches), [True, False, True])

    out = seq.output()
    assert [b.present for b in out] == [
        (True, False, True),
        (False, False, True),
        (True, False, False),
    ]
    np.testing.assert_array_equal(out[0].packed, [1, 3])
    np.testing.assert_array_equal(out[1].packed, [5])
    np.testing.assert_array_equal(out[2].packed, [6])


def test_reduce_output_is_cached() -> None:
    seq = reduce(ConstSeq(CREATOR, _shrinking_batches()), [True, True, True])
    assert isinstance(seq, ReduceSeq)
    assert seq.output() is seq.output()


def test_reduce_drops_everything_when_target_is_empty() -> None:
    seq = reduce(ConstSeq(CREATOR, _shrinking_batches()), [False, False, False])
    assert seq.output() == []


def test_propagate_expands_gradients_and_pads_dropped_timesteps() -> None:
    leaf = RecordingSeq(_shrinking_batches())
    seq = reduce(leaf, [False, True, False])
    assert len(seq.output()) == 1

    upstream = [Batch(packed=np.array([7.0, 8.0]), present=(False, True, False))]
    seq.propagate(upstream, Grad())

    received = leaf.received
    assert received is not None
    assert len(received) == 3
    assert [b.present for b in received] == [b.present for b in leaf.output()]
    np.testing.assert_array_equal(received[0].packed, [0, 0, 7, 8])
    np.testing.assert_array_equal(received[1].packed, [0, 0])
    assert len(received[2].packed) == 0


def test_propagate_accumulates_into_leaf_vars() -> None:
    leaf = VarSeq(CREATOR, _shrinking_batches())
    seq = reduce(leaf, [True, False, True])
    grad = Grad.for_vars(seq.vars())

    upstream = [Batch(packed=np.ones_like(b.packed), present=b.present) for b in seq.output()]
    seq.propagate(upstream, grad)
    seq.propagate(upstream, grad)

    first, second, third = leaf.variables
    np.testing.assert_array_equal(grad.get(first), [2, 2, 0, 0])
    np.testing.assert_array_equal(grad.get(second), [2, 2])
    assert len(grad.get(third)) == 0


def test_propagate_rejects_wrong_number_of_batches() -> None:
    seq = reduce(ConstSeq(CREATOR, _shrinking_batches()), [True, True, False])
    with pytest.raises(InvalidArgumentError):
        seq.propagate(seq.output()[:1], Grad())


def test_reduce_rejects_mask_of_wrong_length() -> None:
    with pytest.raises(InvalidArgumentError):
        reduce(ConstSeq(CREATOR, _shrinking_batches()), [True, True])


def test_reduce_delegates_creator_and_vars() -> None:
    leaf = VarSeq(CREATOR, _shrinking_batches())
    seq = reduce(leaf, [True, True, True])
    assert seq.creator() is CREATOR
    assert set(seq.vars()) == set(leaf.variables)
