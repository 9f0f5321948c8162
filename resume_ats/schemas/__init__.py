from .resume import Contact, ExperienceEntry, ParsedResume, ProjectEntry, SectionKind
from .scoring import AtsResult, ExternalScore, ResumeMetrics, ScoreBreakdown, ScoredResume

__all__ = [
    "SectionKind",
    "Contact",
    "ExperienceEntry",
    "ProjectEntry",
    "ParsedResume",
    "ScoreBreakdown",
    "ResumeMetrics",
    "AtsResult",
    "ExternalScore",
    "ScoredResume",
]
