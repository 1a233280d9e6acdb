"""Core cache engine."""

from .cache import OrderedCache

__all__ = ['OrderedCache']
