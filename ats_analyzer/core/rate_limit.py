from __future__ import annotations

from fastapi import Request
from slowapi import Limiter
from slowapi.util import get_remote_address

from ats_analyzer.core.config import settings


def client_key(request: Request) -> str:
    """Rate-limit bucket for a caller; the first X-Forwarded-For hop when the proxy is trusted."""
    if settings.trust_x_forwarded_for:
        forwarded_for = request.headers.get("x-forwarded-for", "").strip()
        if forwarded_for:
            return forwarded_for.split(",")[0].strip()
    return get_remote_address(request)


limiter = Limiter(key_func=client_key)


def rate_limit(limit: str | None = None):
    if not settings.rate_limit_enabled:
        return lambda endpoint: endpoint
    return limiter.limit(limit or settings.rate_limit)
