from __future__ import annotations

import logging

from resume_ats.normalize.utils import iter_content_lines

_MAX_LINES = 3
_MAX_LINE_CHARS = 200
_MAX_SUMMARY_CHARS = 500


def extract_summary(section: str | None, *, logger: logging.Logger | None = None) -> str:
    """First three short lines of the summary/objective section, joined.

    An absent section yields ``""``; the summary never falls back to the full text.
    """
    log = logger if logger is not None else logging.getLogger(__name__)
    if not section:
        log.debug("summary_section_missing")
        return ""
    lines = [line for line in iter_content_lines(section) if len(line) < _MAX_LINE_CHARS]
    return " ".join(lines[:_MAX_LINES])[:_MAX_SUMMARY_CHARS]
