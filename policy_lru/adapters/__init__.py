"""Adapters - implementations of the EvictionPolicy and ChangeHandler ports."""

from .functions import PolicyFunc, AddedFunc, RemovedFunc
from .handlers import LoggingHandler, HandlerChain

__all__ = [
    'PolicyFunc',
    'AddedFunc',
    'RemovedFunc',
    'LoggingHandler',
    'HandlerChain',
]
