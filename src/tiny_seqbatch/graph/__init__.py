"""
Autodiff graph leaves.

- `Var` / `VarSet` (see `vars.py`): differentiable leaf parameters.
- `Grad` (see `grad.py`): the accumulator gradients propagate into.
"""

from .vars import Var, VarSet
from .grad import Grad

__all__ = ["Var", "VarSet", "Grad"]
