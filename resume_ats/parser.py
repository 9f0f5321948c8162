from __future__ import annotations

import logging

from resume_ats.extractors import (
    extract_achievements,
    extract_contact,
    extract_education,
    extract_experience,
    extract_projects,
    extract_skills,
    extract_summary,
)
from resume_ats.normalize.sections import Section, segment_resume
from resume_ats.parsing.parse import is_placeholder_text
from resume_ats.schemas.resume import ParsedResume


def _text(section: Section | None) -> str | None:
    return section.text if section is not None else None


def parse_resume(text: str, *, logger: logging.Logger | None = None) -> ParsedResume:
    """Recover contact, summary, skills, experience, education, projects and
    achievements from resume plain text.

    Missing sections and unmatched content give empty fields; only a missing
    ``text`` argument raises.
    """
    if text is None:
        raise TypeError("text is required")
    log = logger if logger is not None else logging.getLogger(__name__)
    if is_placeholder_text(text):
        log.info("resume_parse_skipped reason=extraction_failed")
        return ParsedResume(raw_text=text)

    sections = segment_resume(text, logger=log)
    parsed = ParsedResume(
        raw_text=text,
        contact=extract_contact(_text(sections["contact"]), fallback_text=text, logger=log),
        summary=extract_summary(_text(sections["summary"]), logger=log),
        skills=extract_skills(_text(sections["skills"]), logger=log),
        experience=extract_experience(_text(sections["experience"]), logger=log),
        education=extract_education(_text(sections["education"]), logger=log),
        projects=extract_projects(_text(sections["projects"]), logger=log),
        achievements=extract_achievements(_text(sections["achievements"]), logger=log),
    )
    log.info(
        "resume_parse_completed chars=%s skills=%s experience=%s education=%s",
        len(text),
        len(parsed.skills),
        len(parsed.experience),
        len(parsed.education),
    )
    return parsed
