from __future__ import annotations

import hmac
import logging

from fastapi import HTTPException, status

from ats_analyzer.core.config import settings

logger = logging.getLogger(__name__)


def check_api_key(x_api_key: str | None) -> None:
    expected = settings.api_key
    if not expected:
        return
    if x_api_key and hmac.compare_digest(x_api_key.encode("utf-8"), expected.encode("utf-8")):
        return
    logger.info("ats_api_key_rejected header_present=%s", bool(x_api_key))
    raise HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="A valid X-API-Key header is required for the ATS analyzer.",
    )
