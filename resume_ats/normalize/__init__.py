from .sections import (
    SECTION_KEYWORDS,
    Section,
    extract_section,
    find_section,
    is_section_header,
    segment_resume,
)

__all__ = [
    "SECTION_KEYWORDS",
    "Section",
    "extract_section",
    "find_section",
    "is_section_header",
    "segment_resume",
]
