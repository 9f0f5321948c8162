from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()


def _get_env(name: str, default: str | None = None) -> str | None:
    value = os.getenv(name)
    if value is None or value == "":
        return default
    return value


def _get_env_bool(name: str, default: bool) -> bool:
    raw = _get_env(name, None)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _get_env_int(name: str, default: int) -> int:
    raw = _get_env(name, None)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _get_env_float(name: str, default: float) -> float:
    raw = _get_env(name, None)
    if raw is None:
        return default
    try:
        return float(raw)
    except ValueError:
        return default


@dataclass(frozen=True)
class Settings:
    log_level: str
    sentry_dsn: str | None
    ats_scorer: str
    ai_provider: str
    ai_model: str
    ai_scorer_enabled: bool
    ai_scorer_timeout_s: float
    resume_max_bytes: int


def load_settings() -> Settings:
    return Settings(
        log_level=(_get_env("LOG_LEVEL", "INFO") or "INFO").upper(),
        sentry_dsn=_get_env("SENTRY_DSN"),
        ats_scorer=(_get_env("ATS_SCORER", "deterministic") or "deterministic").strip().lower(),
        ai_provider=(_get_env("AI_PROVIDER", "openai") or "openai").strip().lower(),
        ai_model=(_get_env("AI_MODEL", "gpt-4o-mini") or "gpt-4o-mini").strip(),
        ai_scorer_enabled=_get_env_bool("AI_SCORER_ENABLED", True),
        ai_scorer_timeout_s=_get_env_float("AI_SCORER_TIMEOUT_S", 15.0),
        resume_max_bytes=_get_env_int("RESUME_MAX_BYTES", 10 * 1024 * 1024),
    )


settings = load_settings()

if settings.ats_scorer not in {"deterministic", "ai"}:
    raise RuntimeError("ATS_SCORER must be either 'deterministic' or 'ai'.")

__all__ = ["Settings", "load_settings", "settings"]
