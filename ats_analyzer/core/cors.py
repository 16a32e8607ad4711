from __future__ import annotations

from typing import Any

from ats_analyzer.core.config import settings


def cors_options() -> dict[str, Any]:
    """Keyword arguments for CORSMiddleware; the API is read-only and cookie-free."""
    return {
        "allow_origins": list(settings.cors_allowed_origins),
        "allow_credentials": False,
        "allow_methods": ["GET", "POST", "OPTIONS"],
        "allow_headers": ["Content-Type", "X-API-Key"],
    }
