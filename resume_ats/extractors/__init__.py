from .achievements import extract_achievements
from .contact import extract_contact
from .education import extract_education
from .experience import extract_experience
from .projects import extract_projects
from .skills import extract_skills
from .summary import extract_summary

__all__ = [
    "extract_achievements",
    "extract_contact",
    "extract_education",
    "extract_experience",
    "extract_projects",
    "extract_skills",
    "extract_summary",
]
