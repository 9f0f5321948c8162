from __future__ import annotations

from typing import Any

from resume_ats.schemas.resume import ParsedResume

from .llm import json_completion_required

SYSTEM_PROMPT = (
    "You are an applicant tracking system. Score resumes for technical roles "
    "and answer with a single JSON object only."
)

USER_PROMPT_TEMPLATE = """Analyze this resume and provide an ATS score (0-100) considering:
1. Keyword relevance for tech jobs
2. Professional experience level
3. Education quality
4. Skills diversity and relevance
5. Overall resume structure and clarity

Resume:
{resume}

Return a JSON object ONLY (no other text):
{{
  "atsScore": number (0-100),
  "reasoning": "brief explanation",
  "strengths": ["list of strengths"],
  "improvements": ["list of improvements"],
  "keywordMatches": ["important keywords found"]
}}"""


def format_resume_for_prompt(parsed: ParsedResume) -> str:
    blocks: list[str] = []

    contact = parsed.contact
    contact_lines = [
        f"{label}: {value}"
        for label, value in (("Email", contact.email), ("Phone", contact.phone), ("LinkedIn", contact.linkedin))
        if value
    ]
    if contact_lines:
        blocks.append("CONTACT:\n" + "\n".join(contact_lines))

    if parsed.summary:
        blocks.append(f"SUMMARY:\n{parsed.summary}")

    if parsed.skills:
        blocks.append("SKILLS:\n" + ", ".join(parsed.skills))

    if parsed.experience:
        lines = ["EXPERIENCE:"]
        for entry in parsed.experience:
            header = f"- {entry.title}"
            if entry.period:
                header += f" ({entry.period})"
            lines.append(header)
            if entry.description:
                lines.append("  " + " ".join(entry.description))
        blocks.append("\n".join(lines))

    if parsed.education:
        blocks.append("EDUCATION:\n" + "\n".join(f"- {item}" for item in parsed.education))

    return "\n\n".join(blocks)


class LLMResumeScorer:
    """External scorer backed by an OpenAI chat model."""

    def __init__(self, *, temperature: float = 0.2, max_output_tokens: int = 700):
        self._temperature = temperature
        self._max_output_tokens = max_output_tokens

    def try_score(self, parsed: ParsedResume) -> dict[str, Any] | None:
        resume_text = format_resume_for_prompt(parsed)
        if not resume_text:
            return None
        return json_completion_required(
            system_prompt=SYSTEM_PROMPT,
            user_prompt=USER_PROMPT_TEMPLATE.format(resume=resume_text),
            temperature=self._temperature,
            max_output_tokens=self._max_output_tokens,
        )
