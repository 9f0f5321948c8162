from __future__ import annotations

import logging

from pydantic import ValidationError

from resume_ats.schemas.resume import ParsedResume
from resume_ats.schemas.scoring import AtsResult, ExternalScore, ScoredResume

from .ats import score_resume
from .types import ExternalScorer, ScorerError

logger = logging.getLogger(__name__)


def hybrid_reasoning(result: AtsResult) -> str:
    breakdown = result.score_breakdown
    return (
        "Calculated using hybrid method "
        f"(Skills: {breakdown.skills}, Experience: {breakdown.experience}, "
        f"Education: {breakdown.education}, Keywords: {breakdown.keywords})"
    )


def _from_ats_result(result: AtsResult, *, fallback_used: bool) -> ScoredResume:
    return ScoredResume(
        ats_score=result.ats_score,
        source="deterministic",
        fallback_used=fallback_used,
        score_breakdown=result.score_breakdown,
        keywords_found=list(result.keywords_found),
        reasoning=hybrid_reasoning(result),
        keyword_matches=list(result.keywords_found),
    )


class DeterministicScorer:
    """Scores with the fixed weighted formula only."""

    def try_score(self, parsed: ParsedResume) -> ScoredResume | None:
        return self.score(parsed)

    def score(self, parsed: ParsedResume) -> ScoredResume:
        return _from_ats_result(score_resume(parsed), fallback_used=False)


class FallbackScorer:
    """Asks an external scorer first and falls back to the deterministic formula.

    Timeouts, transport errors, empty answers and payloads that fail validation
    all land on the deterministic path with ``fallback_used=True``.
    """

    def __init__(self, external: ExternalScorer | None = None):
        self._external = external

    def try_score(self, parsed: ParsedResume) -> ScoredResume | None:
        if self._external is None:
            return None
        try:
            payload = self._external.try_score(parsed)
        except ScorerError as exc:
            logger.warning("external_score_failed code=%s: %s", exc.code, exc)
            return None
        except Exception as exc:  # noqa: BLE001 - deterministic fallback is expected
            logger.warning("external_score_failed scorer=%s: %s", type(self._external).__name__, exc)
            return None
        if not payload:
            return None
        try:
            external = ExternalScore.model_validate(payload)
        except ValidationError as exc:
            logger.warning("external_score_invalid errors=%s", exc.error_count())
            return None
        return ScoredResume(
            ats_score=external.ats_score,
            source="ai",
            fallback_used=False,
            reasoning=external.reasoning,
            strengths=external.strengths,
            improvements=external.improvements,
            keyword_matches=external.keyword_matches,
        )

    def score(self, parsed: ParsedResume) -> ScoredResume:
        if parsed is None:
            raise TypeError("parsed resume is required")
        scored = self.try_score(parsed)
        if scored is not None:
            logger.info("ats_score_source source=ai score=%s", scored.ats_score)
            return scored
        result = _from_ats_result(score_resume(parsed), fallback_used=True)
        logger.info("ats_score_source source=deterministic score=%s fallback=true", result.ats_score)
        return result
