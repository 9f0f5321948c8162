from __future__ import annotations

import logging
import re
from dataclasses import dataclass

from resume_ats.schemas.resume import SectionKind

from .utils import YEAR_RE, find_date_range, is_bullet_line, normalize_line, split_lines


# Synonyms that open a section; matched as lowercase substrings of a line.
SECTION_KEYWORDS: dict[SectionKind, tuple[str, ...]] = {
    "contact": ("contact", "personal"),
    "summary": ("summary", "objective", "professional summary"),
    "skills": ("skills", "technical skills", "competencies"),
    "experience": (
        "experience",
        "work experience",
        "employment",
        "professional experience",
        "career history",
        "work history",
    ),
    "education": ("education", "academic", "qualifications"),
    "projects": ("projects", "portfolio"),
    "achievements": ("achievements", "awards", "certifications"),
}

# Vocabulary of headers that close a section.
HEADER_VOCABULARY = (
    "contact",
    "summary",
    "objective",
    "skills",
    "experience",
    "education",
    "projects",
    "achievements",
    "certifications",
    "languages",
    "references",
)

_HEADER_MAX_CHARS = 60
_HEADER_KEYWORD_SHARE = 0.7
_CONNECTOR_WORDS = {"and", "of", "the", "my"}
_CONTENT_MARKERS = ("remote", "location", "at ", "in ")
_WORD_RE = re.compile(r"[a-z0-9]+")


@dataclass(frozen=True, slots=True)
class Section:
    name: SectionKind
    start_line: int
    end_line: int
    text: str


def _looks_like_content(line: str) -> bool:
    lowered = line.lower()
    if "@" in lowered or is_bullet_line(line):
        return True
    if find_date_range(line) or YEAR_RE.search(line):
        return True
    return any(marker in lowered for marker in _CONTENT_MARKERS)


def is_section_header(line: str) -> bool:
    """Return True when a line is a standalone section header rather than content.

    The keyword must open the line and cover at least 70% of it, anything after
    the keyword may only be punctuation or connector words, and the line must
    carry none of the content signals (dates, bullets, ``@``, location words).
    """
    stripped = normalize_line(line)
    if not stripped or len(stripped) >= _HEADER_MAX_CHARS:
        return False
    if _looks_like_content(stripped):
        return False

    lowered = stripped.lower()
    for keyword in HEADER_VOCABULARY:
        if not lowered.startswith(keyword):
            continue
        if len(keyword) / len(lowered) < _HEADER_KEYWORD_SHARE:
            continue
        remainder = _WORD_RE.findall(lowered[len(keyword):])
        if all(word in _CONNECTOR_WORDS for word in remainder):
            return True
    return False


def find_section(
    text: str,
    kind: SectionKind,
    keywords: tuple[str, ...] | None = None,
) -> Section | None:
    """Locate a section by its header synonyms.

    The first line containing any synonym opens the section; the section runs
    until the next true header line or the end of the document.
    """
    synonyms = tuple(k.lower() for k in (keywords or SECTION_KEYWORDS[kind]))
    lines = split_lines(text or "")

    start: int | None = None
    for index, line in enumerate(lines):
        lowered = line.strip().lower()
        if any(keyword in lowered for keyword in synonyms):
            start = index + 1
            break

    if start is None:
        return None

    end = len(lines)
    for index in range(start, len(lines)):
        if is_section_header(lines[index]):
            end = index
            break

    return Section(
        name=kind,
        start_line=start,
        end_line=end,
        text="\n".join(lines[start:end]).strip(),
    )


def extract_section(text: str, kind: SectionKind) -> str | None:
    section = find_section(text, kind)
    return section.text if section is not None else None


def segment_resume(text: str, *, logger: logging.Logger | None = None) -> dict[SectionKind, Section | None]:
    log = logger if logger is not None else logging.getLogger(__name__)
    sections: dict[SectionKind, Section | None] = {}
    for kind in SECTION_KEYWORDS:
        sections[kind] = find_section(text, kind)
    found = [kind for kind, section in sections.items() if section is not None]
    log.debug("resume_sections_found sections=%s", ",".join(found) or "none")
    return sections
