from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping

from dotenv import load_dotenv

load_dotenv()

_TRUTHY = {"1", "true", "yes", "y", "on"}
_DEFAULT_CORS_ORIGINS = (
    "http://localhost:5173",
    "http://127.0.0.1:5173",
    "http://localhost:3000",
)


class _EnvReader:
    """Typed lookups over an environment mapping; blank values count as unset."""

    def __init__(self, environ: Mapping[str, str]):
        self._environ = environ

    def text(self, name: str, default: str | None = None) -> str | None:
        value = self._environ.get(name)
        if value is None or not value.strip():
            return default
        return value.strip()

    def flag(self, name: str, default: bool) -> bool:
        raw = self.text(name)
        return default if raw is None else raw.lower() in _TRUTHY

    def integer(self, name: str, default: int) -> int:
        raw = self.text(name)
        if raw is None:
            return default
        try:
            return int(raw)
        except ValueError as exc:
            raise RuntimeError(f"{name} must be an integer, got '{raw}'.") from exc

    def csv(self, name: str, default: tuple[str, ...]) -> tuple[str, ...]:
        raw = self.text(name)
        if raw is None:
            return default
        items = tuple(item.strip() for item in raw.split(",") if item.strip())
        return items or default


@dataclass(frozen=True)
class Settings:
    api_key: str | None
    log_level: str
    sentry_dsn: str | None
    rate_limit: str
    rate_limit_enabled: bool
    trust_x_forwarded_for: bool
    cors_allowed_origins: tuple[str, ...]
    max_job_description_chars: int
    scoring_config_path: str | None
    taxonomy_synonyms_path: str | None


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    env = _EnvReader(os.environ if environ is None else environ)
    loaded = Settings(
        api_key=env.text("API_KEY"),
        log_level=(env.text("LOG_LEVEL", "INFO") or "INFO").upper(),
        sentry_dsn=env.text("SENTRY_DSN"),
        rate_limit=env.text("RATE_LIMIT", "60/minute") or "60/minute",
        rate_limit_enabled=env.flag("RATE_LIMIT_ENABLED", True),
        trust_x_forwarded_for=env.flag("TRUST_X_FORWARDED_FOR", False),
        cors_allowed_origins=env.csv("CORS_ALLOWED_ORIGINS", _DEFAULT_CORS_ORIGINS),
        max_job_description_chars=env.integer("MAX_JOB_DESCRIPTION_CHARS", 20000),
        scoring_config_path=env.text("SCORING_CONFIG_PATH"),
        taxonomy_synonyms_path=env.text("TAXONOMY_SYNONYMS_PATH"),
    )
    if loaded.max_job_description_chars < 1:
        raise RuntimeError("MAX_JOB_DESCRIPTION_CHARS must be a positive integer.")
    return loaded


settings = load_settings()
