from __future__ import annotations

import logging
import re

from resume_ats.normalize.sections import is_section_header
from resume_ats.normalize.utils import YEAR_RE, iter_content_lines, strip_bullet_prefix
from resume_ats.schemas.resume import MAX_EDUCATION

# Degree families; abbreviations must not start mid-word ("web.app" is not "b.a").
_DEGREE_PATTERNS = (
    r"bachelor|(?<![a-z0-9])b\.e|(?<![a-z0-9])b\.tech|(?<![a-z0-9])b\.s|(?<![a-z0-9])b\.a|(?<![a-z0-9])b\.com",
    r"master|(?<![a-z0-9])m\.tech|(?<![a-z0-9])m\.s|(?<![a-z0-9])m\.a|\bmba",
    r"ph\.d|phd",
    r"diploma",
    r"associate",
    r"certificate",
)
_DEGREE_RES = tuple(re.compile(pattern, re.IGNORECASE) for pattern in _DEGREE_PATTERNS)
_INSTITUTION_RE = re.compile(r"university|college|institute|school|academy", re.IGNORECASE)
_MAX_LINE_CHARS = 150


def has_degree(line: str) -> bool:
    return any(pattern.search(line) for pattern in _DEGREE_RES)


def _is_institution(line: str) -> bool:
    return bool(_INSTITUTION_RE.search(line))


def _is_degree_or_date(line: str) -> bool:
    return has_degree(line) or bool(YEAR_RE.search(line))


def _qualifies(line: str) -> bool:
    return has_degree(line) or _is_institution(line) or bool(YEAR_RE.search(line))


def _candidate_lines(text: str) -> list[str]:
    lines: list[str] = []
    for raw in iter_content_lines(text):
        if is_section_header(raw):
            continue
        line = strip_bullet_prefix(raw)
        if line and len(line) <= _MAX_LINE_CHARS:
            lines.append(line)
    return lines


def _dedupe(entries: list[str]) -> list[str]:
    seen: set[str] = set()
    unique: list[str] = []
    for entry in entries:
        if entry not in seen:
            seen.add(entry)
            unique.append(entry)
    return unique


def extract_education(
    section: str | None,
    *,
    logger: logging.Logger | None = None,
) -> list[str]:
    """Collect degree, institution and graduation-year lines of the education section.

    An institution line directly followed by a degree or dated line is merged
    into ``"<institution>, <degree line>"``. Without a section there is nothing
    to collect; the rest of the document is never scanned for degree words.
    """
    log = logger if logger is not None else logging.getLogger(__name__)

    if not section:
        log.debug("education_section_missing")
        return []

    entries: list[str] = []
    pending_institution: str | None = None
    for line in _candidate_lines(section):
        institution = _is_institution(line) and not has_degree(line)
        if pending_institution is not None:
            if not _is_institution(line) and _is_degree_or_date(line):
                entries.append(f"{pending_institution}, {line}")
                pending_institution = None
                continue
            entries.append(pending_institution)
            pending_institution = None

        if institution:
            pending_institution = line
        elif _qualifies(line):
            entries.append(line)

    if pending_institution is not None:
        entries.append(pending_institution)

    unique = _dedupe(entries)
    if len(unique) > MAX_EDUCATION:
        log.debug("education_entries_truncated found=%s kept=%s", len(unique), MAX_EDUCATION)
    return unique[:MAX_EDUCATION]
