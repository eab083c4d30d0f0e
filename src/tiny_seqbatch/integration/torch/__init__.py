"""
PyTorch integration for tiny-seqbatch.

Exports:
- `TorchCreator`: stores packed batches in torch tensors. Importing this
  package registers it with `creator_for`.
"""

from .creator import TorchCreator

__all__ = ["TorchCreator"]
