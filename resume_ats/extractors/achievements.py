from __future__ import annotations

import logging

from resume_ats.normalize.utils import iter_content_lines
from resume_ats.schemas.resume import MAX_ACHIEVEMENTS

_MIN_CHARS = 10
_MAX_CHARS = 150


def extract_achievements(section: str | None, *, logger: logging.Logger | None = None) -> list[str]:
    log = logger if logger is not None else logging.getLogger(__name__)
    if not section:
        return []
    achievements = [line for line in iter_content_lines(section) if _MIN_CHARS < len(line) < _MAX_CHARS]
    if len(achievements) > MAX_ACHIEVEMENTS:
        log.debug("achievements_truncated found=%s kept=%s", len(achievements), MAX_ACHIEVEMENTS)
    return achievements[:MAX_ACHIEVEMENTS]
