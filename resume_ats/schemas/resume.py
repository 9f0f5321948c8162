from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

SectionKind = Literal[
    "contact",
    "summary",
    "skills",
    "experience",
    "education",
    "projects",
    "achievements",
]

MAX_SKILLS = 30
MAX_EXPERIENCE = 15
MAX_EDUCATION = 5
MAX_PROJECTS = 5
MAX_ACHIEVEMENTS = 10
MAX_TITLE_CHARS = 150


class Contact(BaseModel):
    model_config = ConfigDict(frozen=True)

    email: str | None = None
    phone: str | None = None
    linkedin: str | None = None
    github: str | None = None


class ExperienceEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str = Field(min_length=1, max_length=MAX_TITLE_CHARS)
    company: str | None = None
    location: str | None = None
    period: str | None = None
    description: list[str] = Field(default_factory=list)


class ProjectEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str
    description: list[str] = Field(default_factory=list)


class ParsedResume(BaseModel):
    model_config = ConfigDict(frozen=True)

    raw_text: str = ""
    contact: Contact = Field(default_factory=Contact)
    summary: str = ""
    skills: list[str] = Field(default_factory=list, max_length=MAX_SKILLS)
    experience: list[ExperienceEntry] = Field(default_factory=list, max_length=MAX_EXPERIENCE)
    education: list[str] = Field(default_factory=list, max_length=MAX_EDUCATION)
    projects: list[ProjectEntry] = Field(default_factory=list, max_length=MAX_PROJECTS)
    achievements: list[str] = Field(default_factory=list, max_length=MAX_ACHIEVEMENTS)

    def to_record(self) -> dict:
        """Shape stored under a candidate's ``extractedData.resume``."""
        return {
            "rawText": self.raw_text,
            "contact": self.contact.model_dump(exclude_none=True),
            "summary": self.summary,
            "skills": list(self.skills),
            "experience": [
                {
                    "title": entry.title,
                    "company": entry.company or "",
                    "location": entry.location or "",
                    "period": entry.period or "",
                    "description": list(entry.description),
                }
                for entry in self.experience
            ],
            "education": list(self.education),
            "projects": [project.model_dump() for project in self.projects],
            "achievements": list(self.achievements),
        }
