from __future__ import annotations

from slowapi import Limiter
from slowapi.util import get_remote_address

from resume_matcher.core.config import settings

limiter = Limiter(key_func=get_remote_address)


def rate_limit(limit: str | None = None):
    """Apply the configured per-client limit, or ``limit`` when given."""
    if settings.rate_limit_enabled:
        return limiter.limit(limit or settings.rate_limit)

    def decorator(func):
        return func

    return decorator


def reset_rate_limits() -> None:
    limiter.reset()
