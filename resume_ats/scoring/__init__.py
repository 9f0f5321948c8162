from .ats import (
    calculate_education_score,
    calculate_experience_score,
    calculate_keyword_bonus,
    calculate_skills_score,
    score_resume,
)
from .fallback import DeterministicScorer, FallbackScorer
from .types import Scorer, ScorerError

__all__ = [
    "calculate_education_score",
    "calculate_experience_score",
    "calculate_keyword_bonus",
    "calculate_skills_score",
    "score_resume",
    "DeterministicScorer",
    "FallbackScorer",
    "Scorer",
    "ScorerError",
]
