"""
Flat vector backends used as batch storage.
"""

from .creator import Creator, NumpyCreator, creator_for, register_creator

__all__ = ["Creator", "NumpyCreator", "creator_for", "register_creator"]
