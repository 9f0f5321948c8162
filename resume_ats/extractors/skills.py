from __future__ import annotations

import logging
import re

from resume_ats.normalize.utils import iter_content_lines
from resume_ats.schemas.resume import MAX_SKILLS

_SKILL_SPLIT_RE = re.compile(r"[,•·\-|]")
_ORDINAL_RE = re.compile(r"^\d+\.")
_MAX_LINE_CHARS = 100
_MAX_SKILL_CHARS = 50


def extract_skills(section: str | None, *, logger: logging.Logger | None = None) -> list[str]:
    log = logger if logger is not None else logging.getLogger(__name__)
    if not section:
        return []

    skills: list[str] = []
    seen: set[str] = set()
    for line in iter_content_lines(section):
        if len(line) > _MAX_LINE_CHARS:
            continue
        for token in _SKILL_SPLIT_RE.split(line):
            item = token.strip()
            if not item or len(item) > _MAX_SKILL_CHARS or _ORDINAL_RE.match(item):
                continue
            if item in seen:
                continue
            seen.add(item)
            skills.append(item)

    if len(skills) > MAX_SKILLS:
        log.debug("skills_truncated found=%s kept=%s", len(skills), MAX_SKILLS)
    return skills[:MAX_SKILLS]
