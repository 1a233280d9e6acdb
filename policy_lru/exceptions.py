"""Exceptions raised by policy_lru.

The cache itself never raises: misses are reported through return values.
These cover the setup side, i.e. building policies and configurations.
"""

from typing import ClassVar, Optional


class PolicyLRUError(Exception):
    """Root of the library's exception hierarchy.

    Each subclass carries a fixed ``code`` for programmatic handling,
    which is also the prefix of its string form.
    """

    code: ClassVar[str] = "POLICY_LRU_ERROR"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"


class ConfigurationError(PolicyLRUError):
    """A CacheConfig, or an argument combined with one, is inconsistent."""

    code = "CONFIG_ERROR"

    def __init__(self, message: str, config_key: Optional[str] = None):
        super().__init__(message)
        self.config_key = config_key


class ValidationError(PolicyLRUError, ValueError):
    """A policy bound is not a non-negative integer.

    Also a ValueError, so callers validating user input can catch either.
    """

    code = "VALIDATION_ERROR"

    def __init__(self, message: str, field: str):
        super().__init__(message)
        self.field = field

    def __str__(self) -> str:
        return f"{super().__str__()} (field: {self.field})"
