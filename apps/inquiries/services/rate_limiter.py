"""
Rate limiter service: bound the number of inquiry submissions a client may
make within a fixed time window.

Both backends implement the same fixed-window counter. The first request of a
window opens it for ``window_seconds``; up to ``max_requests`` requests are
admitted until it closes. A burst straddling two windows can therefore admit
up to twice the nominal rate.
"""

import threading
import time
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Callable, Dict, Optional

import redis
import structlog
from django.conf import settings

logger = structlog.get_logger(__name__)

UNKNOWN_CLIENT = 'unknown'


def client_identifier(request) -> str:
    """First address of X-Forwarded-For, or 'unknown' when the header is missing."""
    forwarded_for = request.META.get('HTTP_X_FORWARDED_FOR', '')
    client_ip = forwarded_for.split(',')[0].strip()
    return client_ip or UNKNOWN_CLIENT


class RateLimiter(ABC):
    """Capability: decide whether a client may make another request."""

    def __init__(self, max_requests: int = 5, window_seconds: int = 60):
        self.max_requests = max_requests
        self.window_seconds = window_seconds

    @abstractmethod
    def allow(self, client_key: str) -> bool:
        """Record a request from ``client_key`` and return whether it is admitted."""

    @abstractmethod
    def reset(self) -> None:
        """Forget every client's window."""


@dataclass
class _Window:
    count: int
    reset_at: float


class InMemoryRateLimiter(RateLimiter):
    """
    Process-local fixed-window counter.

    State is lost on restart and not shared between instances. A lock
    serializes check-and-increment, since Django may serve requests from
    several threads. Once ``max_tracked_clients`` windows are held, expired
    ones are dropped before a new client gets a window.
    """

    def __init__(self, max_requests: int = 5, window_seconds: int = 60,
                 clock: Callable[[], float] = time.monotonic, max_tracked_clients: int = 10000):
        super().__init__(max_requests, window_seconds)
        self._clock = clock
        self.max_tracked_clients = max_tracked_clients
        self._windows: Dict[str, _Window] = {}
        self._lock = threading.Lock()

    def allow(self, client_key: str) -> bool:
        with self._lock:
            now = self._clock()
            window = self._windows.get(client_key)

            if window is None or now > window.reset_at:
                if window is None and len(self._windows) >= self.max_tracked_clients:
                    self._prune(now)
                self._windows[client_key] = _Window(count=1, reset_at=now + self.window_seconds)
                return True

            if window.count >= self.max_requests:
                return False

            window.count += 1
            return True

    def _prune(self, now: float) -> None:
        expired = [key for key, window in self._windows.items() if now > window.reset_at]
        for key in expired:
            del self._windows[key]
        logger.debug("Pruned expired rate limit windows", pruned=len(expired), tracked=len(self._windows))

    def reset(self) -> None:
        with self._lock:
            self._windows.clear()


class RedisRateLimiter(RateLimiter):
    """
    Fixed-window counter shared through Redis.

    Redis Key Structure:
        inquiry_rate_limit:{client_key} -> request count, expiring with the window

    The expiry is set with a plain EXPIRE when the key has none, so any
    Redis server version works.
    """

    KEY_PREFIX = 'inquiry_rate_limit:'

    def __init__(self, client: redis.Redis, max_requests: int = 5, window_seconds: int = 60):
        super().__init__(max_requests, window_seconds)
        self._redis = client

    def _get_key(self, client_key: str) -> str:
        return f"{self.KEY_PREFIX}{client_key}"

    def allow(self, client_key: str) -> bool:
        key = self._get_key(client_key)
        try:
            pipe = self._redis.pipeline()
            pipe.incr(key)
            pipe.ttl(key)
            count, ttl = pipe.execute()
            # -1: counter has no expiry yet, so this request opened the window
            if ttl == -1:
                self._redis.expire(key, self.window_seconds)
        except redis.RedisError as e:
            # Fail open while the counter store is unreachable
            logger.warning("Rate limit check failed, admitting request", client_key=client_key, error=str(e))
            return True
        return int(count) <= self.max_requests

    def reset(self) -> None:
        keys = list(self._redis.scan_iter(match=f"{self.KEY_PREFIX}*"))
        if keys:
            self._redis.delete(*keys)


_rate_limiter: Optional[RateLimiter] = None


def build_rate_limiter() -> RateLimiter:
    """Create the limiter described by settings.INQUIRY_RATE_LIMIT."""
    config = settings.INQUIRY_RATE_LIMIT
    backend = config.get('BACKEND', 'memory')
    max_requests = config.get('MAX_REQUESTS', 5)
    window_seconds = config.get('WINDOW_SECONDS', 60)

    if backend == 'redis':
        client = redis.Redis(
            host=settings.REDIS_HOST,
            port=settings.REDIS_PORT,
            db=settings.REDIS_DB,
            decode_responses=True,
        )
        logger.info("Using Redis rate limiter", host=settings.REDIS_HOST, port=settings.REDIS_PORT)
        return RedisRateLimiter(client, max_requests, window_seconds)

    if backend != 'memory':
        raise ValueError(f"Unknown rate limit backend: {backend}")
    return InMemoryRateLimiter(
        max_requests, window_seconds,
        max_tracked_clients=config.get('MAX_TRACKED_CLIENTS', 10000),
    )


def get_rate_limiter() -> RateLimiter:
    """Get or create the process-wide rate limiter."""
    global _rate_limiter
    if _rate_limiter is None:
        _rate_limiter = build_rate_limiter()
    return _rate_limiter
