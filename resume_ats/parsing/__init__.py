from .models import ExtractedText, ExtractionError
from .parse import extract_text, extract_text_from_path, is_placeholder_text

__all__ = ["ExtractedText", "ExtractionError", "extract_text", "extract_text_from_path", "is_placeholder_text"]
