from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from enum import Enum

from resume_ats.normalize.sections import is_section_header
from resume_ats.normalize.utils import (
    find_date_range,
    is_bullet_line,
    iter_content_lines,
    normalize_line,
    strip_bullet_prefix,
)
from resume_ats.schemas.resume import MAX_EXPERIENCE, MAX_TITLE_CHARS, ExperienceEntry

_ORDINAL_PREFIX_RE = re.compile(r"^\d+\.\s*")
# Upper-case link captions only; "GitHub Actions" or "Live Site Operations" are title words.
_LINK_LABEL_RE = re.compile(r"\b(?:GITHUB|LIVE\s+SITE|LIVE\s+DEMO|SOURCE\s+CODE)\b")
_TITLE_EDGE_CHARS = " \t|,-–—:;@"
_LOCATION_RE = re.compile(
    r"^(?i:remote|hybrid|on-?site)$"
    r"|^[A-Z][A-Za-z .'-]+,\s*[A-Z][A-Za-z .'-]+$"
)
_MAX_LOCATION_CHARS = 40


class _State(Enum):
    SEEKING = "seeking"
    IN_ENTRY_HEADER = "in_entry_header"
    IN_ENTRY_BODY = "in_entry_body"


@dataclass
class _OpenEntry:
    title: str
    company: str | None
    period: str
    location: str | None = None
    description: list[str] = field(default_factory=list)

    def close(self) -> ExperienceEntry | None:
        if not self.title:
            return None
        return ExperienceEntry(
            title=self.title,
            company=self.company,
            location=self.location,
            period=self.period,
            description=self.description,
        )


def clean_title(line: str, date_match: re.Match[str]) -> str:
    """Strip the period, a leading ordinal, link labels and pipes from a dated line."""
    remaining = line[: date_match.start()] + " " + line[date_match.end():]
    remaining = _ORDINAL_PREFIX_RE.sub("", remaining.strip())
    remaining = _LINK_LABEL_RE.sub(" ", remaining)
    remaining = remaining.replace("|", " ")
    return normalize_line(remaining).strip(_TITLE_EDGE_CHARS)[:MAX_TITLE_CHARS]


def _is_location(line: str) -> bool:
    if len(line) > _MAX_LOCATION_CHARS or len(line.split()) > 5:
        return False
    return bool(_LOCATION_RE.match(line))


def extract_experience(section: str | None, *, logger: logging.Logger | None = None) -> list[ExperienceEntry]:
    """Split an experience section into entries keyed on dated lines.

    A non-bullet line carrying a period opens an entry; its leftover text is the
    title and the non-bullet, undated line just before it is the company. Lines
    that follow become the description until the next dated line or header.
    """
    log = logger if logger is not None else logging.getLogger(__name__)
    if not section:
        return []

    entries: list[ExperienceEntry] = []
    state = _State.SEEKING
    current: _OpenEntry | None = None
    # Last non-bullet, undated line; it becomes the company of the next entry.
    candidate: str | None = None
    candidate_in_description = False
    dated_lines = 0

    def flush() -> None:
        if current is None:
            return
        entry = current.close()
        if entry is not None:
            entries.append(entry)

    for line in iter_content_lines(section):
        if is_section_header(line):
            break

        bullet = is_bullet_line(line)
        date_match = None if bullet else find_date_range(line)

        if date_match is not None:
            dated_lines += 1
            if current is not None and candidate is not None and candidate_in_description:
                current.description.pop()
            flush()

            title = clean_title(line, date_match)
            company = candidate
            if not title and company:
                title, company = company[:MAX_TITLE_CHARS], None
            current = _OpenEntry(title=title, company=company, period=date_match.group(0).strip())
            state = _State.IN_ENTRY_HEADER
            candidate, candidate_in_description = None, False
            continue

        if state is _State.SEEKING or current is None:
            candidate = None if bullet else line
            candidate_in_description = False
            continue

        if state is _State.IN_ENTRY_HEADER:
            state = _State.IN_ENTRY_BODY
            if not bullet and current.location is None and _is_location(line):
                current.location = line
                candidate, candidate_in_description = None, False
                continue

        current.description.append(strip_bullet_prefix(line) if bullet else line)
        candidate = None if bullet else line
        candidate_in_description = not bullet

    flush()

    if dated_lines == 0:
        log.info("experience_no_date_patterns lines=%s", sum(1 for _ in iter_content_lines(section)))
    if len(entries) > MAX_EXPERIENCE:
        log.warning("experience_entries_truncated found=%s kept=%s", len(entries), MAX_EXPERIENCE)
    log.debug("experience_extracted entries=%s dated_lines=%s", min(len(entries), MAX_EXPERIENCE), dated_lines)
    return entries[:MAX_EXPERIENCE]
