"""
Framework integration entry points.

Subpackages:
- `torch`: PyTorch-backed vector storage (`TorchCreator`).

Subpackages are imported on demand so the core only requires numpy.
"""
