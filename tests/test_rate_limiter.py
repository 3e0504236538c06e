"""
Unit tests for the fixed-window rate limiters and client identification.
"""

import pytest
import redis
from django.test import RequestFactory

from apps.inquiries.services.rate_limiter import (
    InMemoryRateLimiter,
    RedisRateLimiter,
    build_rate_limiter,
    client_identifier,
)


class FakeClock:
    def __init__(self, now=1000.0):
        self.now = now

    def __call__(self):
        return self.now


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def limiter(clock):
    return InMemoryRateLimiter(max_requests=5, window_seconds=60, clock=clock)


def test_allows_five_then_rejects_sixth(limiter):
    assert [limiter.allow("1.2.3.4") for _ in range(6)] == [True] * 5 + [False]


def test_window_reopens_after_reset_time(limiter, clock):
    for _ in range(6):
        limiter.allow("1.2.3.4")

    clock.now += 61
    assert limiter.allow("1.2.3.4") is True


def test_window_is_still_closed_at_exact_reset_time(limiter, clock):
    for _ in range(5):
        limiter.allow("1.2.3.4")

    clock.now += 60
    assert limiter.allow("1.2.3.4") is False


def test_window_is_fixed_not_sliding(limiter, clock):
    # Requests late in one window do not carry into the next
    limiter.allow("1.2.3.4")
    clock.now += 59
    for _ in range(4):
        assert limiter.allow("1.2.3.4") is True
    clock.now += 2
    assert [limiter.allow("1.2.3.4") for _ in range(5)] == [True] * 5


def test_clients_are_counted_separately(limiter):
    for _ in range(5):
        limiter.allow("1.2.3.4")

    assert limiter.allow("1.2.3.4") is False
    assert limiter.allow("5.6.7.8") is True


def test_reset_forgets_all_windows(limiter):
    for _ in range(5):
        limiter.allow("1.2.3.4")
    limiter.reset()
    assert limiter.allow("1.2.3.4") is True


def test_expired_windows_are_pruned_when_map_is_full(clock):
    limiter = InMemoryRateLimiter(max_requests=5, window_seconds=60, clock=clock, max_tracked_clients=3)
    for ip in ("10.0.0.1", "10.0.0.2", "10.0.0.3"):
        limiter.allow(ip)

    clock.now += 30
    limiter.allow("10.0.0.4")
    assert len(limiter._windows) == 4

    clock.now += 31
    limiter.allow("10.0.0.5")
    assert set(limiter._windows) == {"10.0.0.4", "10.0.0.5"}


def test_pruning_keeps_open_windows_counting(clock):
    limiter = InMemoryRateLimiter(max_requests=2, window_seconds=60, clock=clock, max_tracked_clients=1)
    limiter.allow("10.0.0.1")
    limiter.allow("10.0.0.1")
    limiter.allow("10.0.0.2")

    assert limiter.allow("10.0.0.1") is False


class FakePipeline:
    def __init__(self, client):
        self._client = client
        self._ops = []

    def incr(self, key):
        self._ops.append((self._client.incr, key))

    def ttl(self, key):
        self._ops.append((self._client.ttl, key))

    def execute(self):
        return [op(key) for op, key in self._ops]


class FakeRedis:
    """Counters and expiries without the passage of time; TTL semantics as Redis."""

    def __init__(self):
        self.store = {}
        self.expiries = {}
        self.expire_calls = 0

    def pipeline(self):
        return FakePipeline(self)

    def incr(self, key):
        self.store[key] = self.store.get(key, 0) + 1
        return self.store[key]

    def ttl(self, key):
        if key not in self.store:
            return -2
        return self.expiries.get(key, -1)

    def expire(self, key, seconds):
        self.expire_calls += 1
        self.expiries[key] = seconds
        return True

    def scan_iter(self, match):
        prefix = match.rstrip("*")
        return [key for key in self.store if key.startswith(prefix)]

    def delete(self, *keys):
        for key in keys:
            self.store.pop(key, None)
            self.expiries.pop(key, None)


def test_redis_limiter_counts_per_window_key():
    client = FakeRedis()
    limiter = RedisRateLimiter(client, max_requests=5, window_seconds=60)

    assert [limiter.allow("1.2.3.4") for _ in range(6)] == [True] * 5 + [False]
    assert client.store == {"inquiry_rate_limit:1.2.3.4": 6}
    assert client.expiries == {"inquiry_rate_limit:1.2.3.4": 60}
    assert client.expire_calls == 1


def test_redis_limiter_sets_missing_expiry():
    # A counter left without a TTL still gets one on the next request
    client = FakeRedis()
    client.store["inquiry_rate_limit:1.2.3.4"] = 2
    limiter = RedisRateLimiter(client, max_requests=5, window_seconds=60)

    assert limiter.allow("1.2.3.4") is True
    assert client.expiries == {"inquiry_rate_limit:1.2.3.4": 60}


def test_redis_limiter_reset_deletes_counters():
    client = FakeRedis()
    limiter = RedisRateLimiter(client, max_requests=1, window_seconds=60)
    limiter.allow("1.2.3.4")
    limiter.reset()
    assert client.store == {}
    assert limiter.allow("1.2.3.4") is True


def test_redis_limiter_fails_open_when_unreachable():
    class UnreachableRedis:
        def pipeline(self):
            raise redis.ConnectionError("Connection refused")

    limiter = RedisRateLimiter(UnreachableRedis(), max_requests=1, window_seconds=60)
    assert limiter.allow("1.2.3.4") is True


def test_build_rate_limiter_uses_configured_backend(settings):
    settings.INQUIRY_RATE_LIMIT = {"BACKEND": "redis", "MAX_REQUESTS": 3, "WINDOW_SECONDS": 30}
    limiter = build_rate_limiter()
    assert isinstance(limiter, RedisRateLimiter)
    assert (limiter.max_requests, limiter.window_seconds) == (3, 30)

    settings.INQUIRY_RATE_LIMIT = {"BACKEND": "memory"}
    assert isinstance(build_rate_limiter(), InMemoryRateLimiter)


def test_build_rate_limiter_rejects_unknown_backend(settings):
    settings.INQUIRY_RATE_LIMIT = {"BACKEND": "memcached"}
    with pytest.raises(ValueError):
        build_rate_limiter()


@pytest.mark.parametrize("header, expected", [
    ("198.51.100.1", "198.51.100.1"),
    ("198.51.100.1, 10.0.0.1, 10.0.0.2", "198.51.100.1"),
    ("  198.51.100.1 ,10.0.0.1", "198.51.100.1"),
    ("", "unknown"),
    (None, "unknown"),
])
def test_client_identifier(header, expected):
    extra = {"HTTP_X_FORWARDED_FOR": header} if header is not None else {}
    request = RequestFactory().post("/api/inquiries", **extra)
    assert client_identifier(request) == expected
