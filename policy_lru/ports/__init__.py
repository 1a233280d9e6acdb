"""Ports - interfaces the cache calls out through (Dependency Inversion)."""

from .eviction_policy import EvictionPolicy
from .change_handler import ChangeHandler

__all__ = [
    'EvictionPolicy',
    'ChangeHandler',
]
