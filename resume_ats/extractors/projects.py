from __future__ import annotations

import logging

from resume_ats.normalize.utils import is_bullet_line, split_lines, strip_bullet_prefix
from resume_ats.schemas.resume import MAX_PROJECTS, ProjectEntry

_TITLE_MIN_CHARS = 5
_TITLE_MAX_CHARS = 80
_DESCRIPTION_MIN_CHARS = 10


def _is_title(raw_line: str, line: str) -> bool:
    if raw_line[:1].isspace() or is_bullet_line(line):
        return False
    return _TITLE_MIN_CHARS < len(line) < _TITLE_MAX_CHARS


def extract_projects(section: str | None, *, logger: logging.Logger | None = None) -> list[ProjectEntry]:
    log = logger if logger is not None else logging.getLogger(__name__)
    if not section:
        return []

    projects: list[ProjectEntry] = []
    title: str | None = None
    description: list[str] = []

    for raw_line in split_lines(section):
        line = raw_line.strip()
        if not line:
            continue
        if _is_title(raw_line, line):
            if title is not None:
                projects.append(ProjectEntry(title=title, description=description))
            title, description = line, []
        elif title is not None and len(line) > _DESCRIPTION_MIN_CHARS:
            description.append(strip_bullet_prefix(line))

    if title is not None:
        projects.append(ProjectEntry(title=title, description=description))

    if len(projects) > MAX_PROJECTS:
        log.debug("projects_truncated found=%s kept=%s", len(projects), MAX_PROJECTS)
    return projects[:MAX_PROJECTS]
