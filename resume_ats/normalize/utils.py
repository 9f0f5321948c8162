from __future__ import annotations

import re
from typing import Iterator

BULLET_MARKERS = ("•", "-", "*", "·", "▪", "◦", "●", "–")

_BULLET_PREFIX_RE = re.compile(r"^\s*[•\-*·▪◦●–]+\s*")
_WHITESPACE_RE = re.compile(r"\s+")

_MONTH = (
    r"(?:Jan(?:uary)?|Feb(?:ruary)?|Mar(?:ch)?|Apr(?:il)?|May|June?|July?|Aug(?:ust)?"
    r"|Sep(?:t(?:ember)?)?|Oct(?:ober)?|Nov(?:ember)?|Dec(?:ember)?)"
)
_RANGE_SEP = r"\s*(?:[-–—]|to)\s*"
_OPEN_END = r"(?:Present|Current)"
_OPEN_END_TOKEN = r"(?-i:Present|Current)"

# Longest alternatives first: at a given position the first matching branch wins.
DATE_RANGE_RE = re.compile(
    rf"\b{_MONTH}\.?{_RANGE_SEP}{_MONTH}\.?,?\s*\d{{4}}\b"
    rf"|\b{_MONTH}\.?\s+\d{{4}}{_RANGE_SEP}(?:{_MONTH}\.?\s+\d{{4}}\b|{_OPEN_END}\b)"
    rf"|\b\d{{1,2}}/(?:19|20)\d{{2}}{_RANGE_SEP}(?:\d{{1,2}}/(?:19|20)\d{{2}}\b|{_OPEN_END}\b)"
    rf"|\b(?:19|20)\d{{2}}{_RANGE_SEP}(?:(?:19|20)\d{{2}}\b|{_OPEN_END}\b)"
    rf"|\b{_OPEN_END_TOKEN}\b",
    re.IGNORECASE,
)

YEAR_RE = re.compile(r"\b(?:19|20)\d{2}\b")


def split_lines(text: str) -> list[str]:
    return text.replace("\r\n", "\n").replace("\r", "\n").split("\n")


def iter_content_lines(text: str) -> Iterator[str]:
    """Yield trimmed, non-empty lines."""
    for line in split_lines(text):
        stripped = line.strip()
        if stripped:
            yield stripped


def normalize_line(line: str) -> str:
    return _WHITESPACE_RE.sub(" ", line).strip()


def is_bullet_line(line: str) -> bool:
    return line.lstrip().startswith(BULLET_MARKERS)


def strip_bullet_prefix(line: str) -> str:
    return _BULLET_PREFIX_RE.sub("", line).strip()


def find_date_range(line: str) -> re.Match[str] | None:
    return DATE_RANGE_RE.search(line)
