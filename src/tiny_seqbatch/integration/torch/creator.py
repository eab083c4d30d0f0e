"""
Batch storage backed by PyTorch tensors.
"""

from __future__ import annotations

from typing import Any, Dict, Optional, Sequence, Tuple

import torch

from tiny_seqbatch.vector.creator import Creator, register_creator


class TorchCreator(Creator):
    """Vectors backed by 1-D `torch.Tensor` on a fixed dtype/device."""

    def __init__(
        self,
        dtype: torch.dtype = torch.float32,
        device: Optional[torch.device | str] = None,
    ) -> None:
        self.dtype = dtype
        self.device = torch.device(device) if device is not None else torch.device("cpu")

    def make_vector(self, size: int) -> torch.Tensor:
        return torch.zeros(size, dtype=self.dtype, device=self.device)

    def make_vector_data(self, values: Sequence[float]) -> torch.Tensor:
        return torch.as_tensor(values, dtype=self.dtype, device=self.device).reshape(-1).clone()

    def length(self, vec: torch.Tensor) -> int:
        return int(vec.shape[0])

    def concat(self, chunks: Sequence[torch.Tensor]) -> torch.Tensor:
        if not chunks:
            return self.make_vector(0)
        return torch.cat(list(chunks))

    def __eq__(self, other: object) -> bool:
        return (
            isinstance(other, TorchCreator)
            and other.dtype == self.dtype
            and other.device == self.device
        )

    def __hash__(self) -> int:
        return hash(("torch", self.dtype, str(self.device)))

    def __repr__(self) -> str:
        return f"TorchCreator(dtype={self.dtype}, device={self.device})"


_CREATORS: Dict[Tuple[Any, str], TorchCreator] = {}


def _torch_factory(vec: torch.Tensor) -> TorchCreator:
    key = (vec.dtype, str(vec.device))
    if key not in _CREATORS:
        _CREATORS[key] = TorchCreator(vec.dtype, vec.device)
    return _CREATORS[key]


register_creator(torch.Tensor, _torch_factory)
