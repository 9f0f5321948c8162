from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

ExtractionErrorCode = Literal["unsupported_format", "corrupt_file", "too_large"]


class ExtractionError(BaseModel):
    model_config = ConfigDict(frozen=True)

    code: ExtractionErrorCode
    message: str


class ExtractedText(BaseModel):
    model_config = ConfigDict(frozen=True)

    text: str
    source_type: str | None = None
    warnings: list[str] = Field(default_factory=list)
    error: ExtractionError | None = None

    @property
    def length(self) -> int:
        return len(self.text)

    @property
    def ok(self) -> bool:
        return self.error is None

    @field_validator("source_type")
    @classmethod
    def _validate_source_type(cls, value: str | None) -> str | None:
        if value is None:
            return None
        normalized = value.strip().lower()
        if normalized not in {"pdf", "docx", "txt"}:
            raise ValueError("source_type must be one of: pdf, docx, txt")
        return normalized
