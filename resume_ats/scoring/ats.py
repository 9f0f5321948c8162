from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import Sequence

from resume_ats.core.config.scoring import get_scoring_value
from resume_ats.schemas.resume import ExperienceEntry, ParsedResume
from resume_ats.schemas.scoring import AtsResult, ResumeMetrics, ScoreBreakdown

logger = logging.getLogger(__name__)

SKILLS_MAX = 40.0
EXPERIENCE_MAX = 30.0
EDUCATION_MAX = 20.0
KEYWORDS_MAX = 10.0
YEARS_PER_ROLE = 2


@dataclass(slots=True)
class KeywordBonus:
    score: float
    keywords: list[str] = field(default_factory=list)


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def calculate_skills_score(skills: Sequence[str]) -> float:
    count = len(skills)
    if count < 3:
        score = count * 8.0
    elif count < 8:
        score = 24.0 + (count - 3) * 3.0
    else:
        score = min(39.0 + (count - 8) * 0.1, SKILLS_MAX)
    return min(score, SKILLS_MAX)


def calculate_experience_score(experience: Sequence[ExperienceEntry]) -> float:
    # Roles are not dated arithmetically; every role counts as two years.
    years = len(experience) * YEARS_PER_ROLE
    if years < 1:
        score = years * 10.0
    elif years < 3:
        score = 10.0 + (years - 1) * 5.0
    elif years < 7:
        score = 20.0 + (years - 3) * 2.5
    else:
        score = EXPERIENCE_MAX
    return min(score, EXPERIENCE_MAX)


def _education_points(entry: str) -> float:
    lowered = entry.lower()
    if "phd" in lowered or "doctorate" in lowered:
        return 20.0
    if "master" in lowered or "m." in lowered:
        return 15.0
    if "bachelor" in lowered or "b." in lowered:
        return 10.0
    if "diploma" in lowered or "certificate" in lowered:
        return 5.0
    return 3.0


def calculate_education_score(education: Sequence[str]) -> float:
    return min(sum(_education_points(entry) for entry in education), EDUCATION_MAX)


def keyword_weights() -> dict[str, int]:
    weights = get_scoring_value("ats.keyword_weights", {}) or {}
    return {str(keyword): int(weight) for keyword, weight in weights.items()}


def _keyword_corpus(parsed: ParsedResume) -> str:
    chunks: list[str] = list(parsed.skills)
    for entry in parsed.experience:
        if entry.title:
            chunks.append(entry.title)
        chunks.extend(entry.description)
    if parsed.summary:
        chunks.append(parsed.summary)
    return " ".join(chunks).lower()


def calculate_keyword_bonus(parsed: ParsedResume) -> KeywordBonus:
    corpus = _keyword_corpus(parsed)
    limit = int(get_scoring_value("ats.max_keywords_reported", 5))
    score = 0.0
    found: list[str] = []
    for keyword, weight in keyword_weights().items():
        if keyword.lower() in corpus:
            score += min(weight / 10, 1.0)
            found.append(keyword)
    return KeywordBonus(score=min(score, KEYWORDS_MAX), keywords=found[:limit])


def score_resume(parsed: ParsedResume) -> AtsResult:
    """Deterministic 0-100 ATS score.

    Skills carry 40%, experience 30%, education 20% and the keyword bonus 10%.
    Component scores are combined unrounded; only the reported breakdown and
    the final score are rounded.
    """
    if parsed is None:
        raise TypeError("parsed resume is required")

    skills_score = calculate_skills_score(parsed.skills)
    experience_score = calculate_experience_score(parsed.experience)
    education_score = calculate_education_score(parsed.education)
    bonus = calculate_keyword_bonus(parsed)

    weighted = (
        skills_score * float(get_scoring_value("ats.weights.skills", 0.40))
        + experience_score * float(get_scoring_value("ats.weights.experience", 0.30))
        + education_score * float(get_scoring_value("ats.weights.education", 0.20))
        + bonus.score * float(get_scoring_value("ats.weights.keywords", 0.10))
    )
    final_score = max(0, min(100, round_half_up(weighted)))

    result = AtsResult(
        ats_score=final_score,
        score_breakdown=ScoreBreakdown(
            skills=round_half_up(skills_score),
            experience=round_half_up(experience_score),
            education=round_half_up(education_score),
            keywords=round_half_up(bonus.score),
        ),
        keywords_found=bonus.keywords,
        resume_metrics=ResumeMetrics(
            total_skills=len(parsed.skills),
            total_experience=len(parsed.experience),
            education_entries=len(parsed.education),
        ),
    )
    logger.debug(
        "ats_score_calculated score=%s skills=%.1f experience=%.1f education=%.1f keywords=%.1f",
        final_score,
        skills_score,
        experience_score,
        education_score,
        bonus.score,
    )
    return result
