import logging

from resume_ats.core.config import settings
from resume_ats.scoring.fallback import DeterministicScorer, FallbackScorer
from resume_ats.scoring.types import ExternalScorer, Scorer

from .config import ai_scoring_available, load_ai_config
from .scorer import LLMResumeScorer

logger = logging.getLogger(__name__)


def get_ai_scorer() -> ExternalScorer | None:
    cfg = load_ai_config()
    if cfg.provider != "openai":
        raise ValueError(f"Unsupported AI_PROVIDER='{cfg.provider}'")
    if not ai_scoring_available(cfg):
        logger.info("ai_scorer_unavailable provider=%s", cfg.provider)
        return None
    return LLMResumeScorer()


def get_scorer(mode: str | None = None) -> Scorer:
    selected = (mode or settings.ats_scorer).strip().lower()
    if selected == "deterministic":
        return DeterministicScorer()
    if selected == "ai":
        return FallbackScorer(get_ai_scorer())
    raise ValueError(f"Unsupported ATS_SCORER='{selected}'")
