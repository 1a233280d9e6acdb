"""policy_lru - a generic LRU cache with a pluggable eviction policy."""

__version__ = "1.0.0"

from .config import CacheConfig
from .core import OrderedCache
from .ports import EvictionPolicy, ChangeHandler
from .adapters import (
    PolicyFunc,
    AddedFunc,
    RemovedFunc,
    LoggingHandler,
    HandlerChain,
)
from .policies import MaxCountPolicy, SizeLimitPolicy, max_count
from .exceptions import (
    PolicyLRUError,
    ConfigurationError,
    ValidationError,
)
from .utils.env import setup_logging

__all__ = [
    '__version__',
    'OrderedCache',
    'CacheConfig',
    # Ports
    'EvictionPolicy',
    'ChangeHandler',
    # Adapters
    'PolicyFunc',
    'AddedFunc',
    'RemovedFunc',
    'LoggingHandler',
    'HandlerChain',
    # Policies
    'MaxCountPolicy',
    'SizeLimitPolicy',
    'max_count',
    'setup_logging',
    # Exceptions
    'PolicyLRUError',
    'ConfigurationError',
    'ValidationError',
]
