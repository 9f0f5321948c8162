from .factory import get_ai_scorer, get_scorer
from .scorer import LLMResumeScorer, format_resume_for_prompt

__all__ = ["get_ai_scorer", "get_scorer", "LLMResumeScorer", "format_resume_for_prompt"]
