"""Unit tests for configuration."""

import logging

import pytest

from policy_lru import (
    CacheConfig,
    ConfigurationError,
    HandlerChain,
    LoggingHandler,
    OrderedCache,
    RemovedFunc,
)
from policy_lru.config import LOG_FORMAT, LOG_DATE_FORMAT
from policy_lru.policies import MaxCountPolicy, SizeLimitPolicy


class TestCacheConfig:
    """Tests for CacheConfig."""

    def test_default_values(self):
        config = CacheConfig()
        assert config.max_count is None
        assert config.max_size is None
        assert config.log_events is False

    def test_custom_values(self):
        config = CacheConfig(max_count=10, log_events=True)
        assert config.max_count == 10
        assert config.log_events is True

    def test_validation_negative_bound(self):
        with pytest.raises(Exception):  # pydantic ValidationError
            CacheConfig(max_count=-1)

        with pytest.raises(Exception):
            CacheConfig(max_size=-1)

    def test_mutually_exclusive_bounds(self):
        with pytest.raises(ConfigurationError) as exc_info:
            CacheConfig(max_count=1, max_size=1)
        assert exc_info.value.config_key == "max_size"

    def test_create_policy(self):
        assert CacheConfig().create_policy() is None
        count_policy = CacheConfig(max_count=3).create_policy()
        assert isinstance(count_policy, MaxCountPolicy)
        assert count_policy.limit == 3
        size_policy = CacheConfig(max_size=64).create_policy()
        assert isinstance(size_policy, SizeLimitPolicy)
        assert size_policy.max_size == 64

    def test_create_policy_with_sizer(self):
        policy = CacheConfig(max_size=10).create_policy(sizer=abs)
        assert policy.sizer is abs

    def test_sizer_without_max_size(self):
        with pytest.raises(ConfigurationError) as exc_info:
            CacheConfig(max_count=3).create_policy(sizer=abs)
        assert exc_info.value.config_key == "sizer"


class TestFromConfig:
    """Tests for OrderedCache.from_config."""

    def test_unbounded(self):
        cache = OrderedCache.from_config(CacheConfig())
        assert cache.policy is None
        assert cache.handler is None

    def test_max_count(self):
        cache = OrderedCache.from_config(CacheConfig(max_count=2))
        for key in "abc":
            cache.add(key, key)
        assert list(cache) == ["c", "b"]
        assert cache.handler is None

    def test_max_size_installs_policy_as_handler(self):
        cache = OrderedCache.from_config(CacheConfig(max_size=5))
        assert cache.handler is cache.policy
        cache.add("a", "abc")
        cache.add("b", "abc")
        assert list(cache) == ["b"]

    def test_max_size_with_sizer(self):
        cache = OrderedCache.from_config(CacheConfig(max_size=10), sizer=lambda v: v)
        cache.add("a", 5)
        cache.add("b", 4)
        assert list(cache) == ["b", "a"]
        cache.add("c", 3)
        # 5 + 4 + 3 > 10, so the oldest entry goes
        assert list(cache) == ["c", "b"]
        assert cache.policy.total_size == 7

    def test_default_sizer_rejects_unsized_values(self):
        cache = OrderedCache.from_config(CacheConfig(max_size=10))
        cache.add("a", "abc")
        with pytest.raises(TypeError):
            cache.add("b", 5)
        assert cache.policy.total_size == 3

    def test_log_events(self):
        cache = OrderedCache.from_config(CacheConfig(log_events=True))
        assert isinstance(cache.handler, LoggingHandler)

    def test_handlers_chained(self):
        removed = []
        extra = RemovedFunc(lambda k, v: removed.append(k))
        cache = OrderedCache.from_config(
            CacheConfig(max_size=3, log_events=True), extra, default=""
        )
        assert isinstance(cache.handler, HandlerChain)
        kinds = [type(h) for h in cache.handler.handlers]
        assert kinds == [SizeLimitPolicy, LoggingHandler, RemovedFunc]
        cache.add("a", "xx")
        cache.add("b", "xx")
        assert removed == ["a"]
        assert cache.get("a") == ("", False)


class TestLoggingConstants:
    """Tests for logging constants."""

    def test_format_is_usable(self):
        formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)
        record = logging.LogRecord("policy_lru", logging.INFO, __file__, 1, "hello", None, None)
        assert formatter.format(record).endswith("policy_lru - INFO - hello")
