from __future__ import annotations

from typing import Any, Protocol

from resume_ats.schemas.resume import ParsedResume
from resume_ats.schemas.scoring import ScoredResume


class ScorerError(RuntimeError):
    def __init__(self, message: str, *, code: str = "scorer_unavailable"):
        super().__init__(message)
        self.code = code


class ExternalScorer(Protocol):
    def try_score(self, parsed: ParsedResume) -> dict[str, Any] | None:
        """Return a raw score payload, or None when no score could be produced."""


class Scorer(Protocol):
    def try_score(self, parsed: ParsedResume) -> ScoredResume | None: ...

    def score(self, parsed: ParsedResume) -> ScoredResume: ...
