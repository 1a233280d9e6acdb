"""Configuration and constants for policy_lru."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable

from pydantic import BaseModel, Field, model_validator

from .exceptions import ConfigurationError

if TYPE_CHECKING:
    from .ports.eviction_policy import EvictionPolicy


# Logging
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATE_FORMAT = "%H:%M:%S"
DEFAULT_LOGGER_NAME = "policy_lru"


class CacheConfig(BaseModel):
    """Declarative cache configuration with validation.

    At most one of ``max_count`` and ``max_size`` may be set. Leaving both
    unset describes an unbounded cache.
    """

    model_config = {"validate_assignment": False, "frozen": True}

    # Eviction bounds
    max_count: int | None = Field(default=None, ge=0)
    max_size: int | None = Field(default=None, ge=0)

    # Attach a LoggingHandler to the cache
    log_events: bool = False

    @model_validator(mode='after')
    def check_single_bound(self) -> CacheConfig:
        """Reject configurations that name more than one eviction bound."""
        if self.max_count is not None and self.max_size is not None:
            raise ConfigurationError(
                "max_count and max_size are mutually exclusive",
                config_key="max_size",
            )
        return self

    def create_policy(self, sizer: Callable[[Any], int] | None = None) -> EvictionPolicy | None:
        """Build the built-in policy this configuration describes.

        Args:
            sizer: Maps a value to its size for ``max_size`` (defaults to ``len``)

        Returns:
            A MaxCountPolicy, a SizeLimitPolicy, or None when unbounded
        """
        from .policies import MaxCountPolicy, SizeLimitPolicy

        if sizer is not None and self.max_size is None:
            raise ConfigurationError("sizer requires max_size", config_key="sizer")
        if self.max_count is not None:
            return MaxCountPolicy(self.max_count)
        if self.max_size is not None:
            return SizeLimitPolicy(self.max_size, sizer or len)
        return None
