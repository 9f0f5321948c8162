from __future__ import annotations

import logging
import re

from resume_ats.schemas.resume import Contact

_EMAIL_RE = re.compile(r"[a-zA-Z0-9._-]+@[a-zA-Z0-9._-]+\.[a-zA-Z0-9_-]+")
_PHONE_RE = re.compile(
    r"(?:\+?1[-.\s]?)?\(?[0-9]{3}\)?[-.\s]?[0-9]{3}[-.\s]?[0-9]{4}"
    r"|\+91[-.\s]?[0-9]{10}"
)
_LINKEDIN_RE = re.compile(r"linkedin\.com/in/[a-zA-Z0-9-]+", re.IGNORECASE)
_GITHUB_RE = re.compile(r"github\.com/[a-zA-Z0-9-]+", re.IGNORECASE)

_FIELD_PATTERNS: dict[str, re.Pattern[str]] = {
    "email": _EMAIL_RE,
    "phone": _PHONE_RE,
    "linkedin": _LINKEDIN_RE,
    "github": _GITHUB_RE,
}


def _first_match(pattern: re.Pattern[str], text: str) -> str | None:
    match = pattern.search(text)
    return match.group(0) if match else None


def extract_contact(
    text: str | None,
    *,
    fallback_text: str | None = None,
    logger: logging.Logger | None = None,
) -> Contact:
    """Pull email, phone, LinkedIn and GitHub references out of free text.

    ``text`` is normally the contact section. Any field it does not yield is
    looked up in ``fallback_text`` (the whole document), since contact lines
    usually sit unlabelled at the top of the page.
    """
    log = logger if logger is not None else logging.getLogger(__name__)
    primary = text or ""
    fields: dict[str, str | None] = {}
    for name, pattern in _FIELD_PATTERNS.items():
        value = _first_match(pattern, primary)
        if value is None and fallback_text:
            value = _first_match(pattern, fallback_text)
        fields[name] = value

    missing = [name for name, value in fields.items() if value is None]
    if missing:
        log.debug("contact_fields_missing fields=%s", ",".join(missing))
    return Contact(**fields)
