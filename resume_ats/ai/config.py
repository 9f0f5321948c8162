import os
from dataclasses import dataclass

from resume_ats.core.config import settings


@dataclass(frozen=True)
class AIConfig:
    provider: str
    model: str
    timeout_s: float
    enabled: bool


# Values copied from a sample .env rather than a real OpenAI key.
PLACEHOLDER_KEY_PREFIXES = ("your_", "replace_", "<")
PLACEHOLDER_KEYS = frozenset({"changeme", "todo", "none", "sk-..."})


def is_placeholder_key(api_key: str) -> bool:
    key = api_key.strip().lower()
    return key in PLACEHOLDER_KEYS or key.startswith(PLACEHOLDER_KEY_PREFIXES)


def load_ai_config() -> AIConfig:
    return AIConfig(
        provider=settings.ai_provider,
        model=settings.ai_model,
        timeout_s=settings.ai_scorer_timeout_s,
        enabled=settings.ai_scorer_enabled,
    )


def ai_scoring_available(cfg: AIConfig | None = None) -> bool:
    cfg = cfg or load_ai_config()
    if not cfg.enabled or cfg.provider != "openai":
        return False
    api_key = (os.getenv("OPENAI_API_KEY") or "").strip()
    return bool(api_key) and not is_placeholder_key(api_key)
