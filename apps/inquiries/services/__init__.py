from .inquiry_service import InquiryService
from .notification_service import EmailNotifier
from .rate_limiter import RateLimiter, InMemoryRateLimiter, RedisRateLimiter, client_identifier, get_rate_limiter

__all__ = [
    'InquiryService',
    'EmailNotifier',
    'RateLimiter',
    'InMemoryRateLimiter',
    'RedisRateLimiter',
    'client_identifier',
    'get_rate_limiter',
]
