from __future__ import annotations

import math
from typing import Literal

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

ScoreSource = Literal["ai", "deterministic"]


class ScoreBreakdown(BaseModel):
    model_config = ConfigDict(frozen=True)

    skills: int = Field(default=0, ge=0, le=40)
    experience: int = Field(default=0, ge=0, le=30)
    education: int = Field(default=0, ge=0, le=20)
    keywords: int = Field(default=0, ge=0, le=10)


class ResumeMetrics(BaseModel):
    model_config = ConfigDict(frozen=True)

    total_skills: int = 0
    total_experience: int = 0
    education_entries: int = 0


class AtsResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    ats_score: int = Field(ge=0, le=100)
    score_breakdown: ScoreBreakdown = Field(default_factory=ScoreBreakdown)
    keywords_found: list[str] = Field(default_factory=list, max_length=5)
    resume_metrics: ResumeMetrics = Field(default_factory=ResumeMetrics)


class ExternalScore(BaseModel):
    """Score payload returned by an external (LLM) scoring service."""

    ats_score: int = Field(ge=0, le=100, validation_alias=AliasChoices("atsScore", "ats_score"))
    reasoning: str = ""
    strengths: list[str] = Field(default_factory=list)
    improvements: list[str] = Field(default_factory=list)
    keyword_matches: list[str] = Field(
        default_factory=list,
        validation_alias=AliasChoices("keywordMatches", "keyword_matches"),
    )

    @field_validator("ats_score", mode="before")
    @classmethod
    def _clamp_score(cls, value: object) -> object:
        if isinstance(value, bool):
            raise ValueError("ats_score must be numeric")
        if isinstance(value, float) and not math.isfinite(value):
            raise ValueError("ats_score must be a finite number")
        if isinstance(value, (int, float)):
            return int(max(0.0, min(100.0, float(value))) + 0.5)
        return value

    @field_validator("reasoning", mode="before")
    @classmethod
    def _coerce_reasoning(cls, value: object) -> object:
        return "" if value is None else str(value)

    @field_validator("strengths", "improvements", "keyword_matches", mode="before")
    @classmethod
    def _coerce_str_list(cls, value: object) -> object:
        if value is None:
            return []
        if isinstance(value, str):
            return [value]
        if isinstance(value, list):
            return [str(item) for item in value if item is not None]
        return value


class ScoredResume(BaseModel):
    ats_score: int = Field(ge=0, le=100)
    source: ScoreSource
    fallback_used: bool
    score_breakdown: ScoreBreakdown | None = None
    keywords_found: list[str] = Field(default_factory=list)
    reasoning: str = ""
    strengths: list[str] = Field(default_factory=list)
    improvements: list[str] = Field(default_factory=list)
    keyword_matches: list[str] = Field(default_factory=list)

    def to_details(self) -> dict:
        """Shape stored under a candidate's ``atsScoreDetails`` when the AI path succeeded."""
        return {
            "atsScore": self.ats_score,
            "reasoning": self.reasoning,
            "strengths": list(self.strengths),
            "improvements": list(self.improvements),
            "keywordMatches": list(self.keyword_matches),
            "source": self.source,
            "fallbackUsed": self.fallback_used,
        }
