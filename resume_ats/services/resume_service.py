from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from resume_ats.parser import parse_resume
from resume_ats.parsing.models import ExtractedText
from resume_ats.parsing.parse import extract_text
from resume_ats.schemas.resume import ParsedResume
from resume_ats.schemas.scoring import ScoredResume
from resume_ats.scoring.fallback import FallbackScorer
from resume_ats.scoring.types import Scorer

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ResumeIntakeResult:
    extraction: ExtractedText
    parsed: ParsedResume
    scored: ScoredResume

    @property
    def partial(self) -> bool:
        return self.extraction.error is not None


def process_resume(
    content: bytes,
    media_type: str | None = None,
    *,
    filename: str | None = None,
    scorer: Scorer | None = None,
) -> ResumeIntakeResult:
    """Extract, parse and score one uploaded resume.

    Unreadable files still produce a result: the parsed resume is empty and
    the score comes from the deterministic formula.
    """
    extraction = extract_text(content, media_type, filename=filename)
    if extraction.error is not None:
        logger.warning(
            "resume_intake_partial filename=%s code=%s",
            filename,
            extraction.error.code,
        )

    parsed = parse_resume(extraction.text)
    active_scorer = scorer if scorer is not None else FallbackScorer()
    scored = active_scorer.score(parsed)
    logger.info(
        "resume_intake_completed filename=%s score=%s source=%s fallback=%s",
        filename,
        scored.ats_score,
        scored.source,
        scored.fallback_used,
    )
    return ResumeIntakeResult(extraction=extraction, parsed=parsed, scored=scored)


def build_candidate_record(result: ResumeIntakeResult) -> dict[str, Any]:
    """Fields written onto the candidate document by the storage layer."""
    record: dict[str, Any] = {
        "extractedData": {"resume": result.parsed.to_record()},
        "atsScore": result.scored.ats_score,
    }
    if result.scored.source == "ai" and not result.scored.fallback_used:
        record["atsScoreDetails"] = result.scored.to_details()
    return record
