"""OCR configuration model."""

from pydantic import BaseModel, Field


class OcrConfig(BaseModel, frozen=True):
    language: str = Field(default="spa", min_length=1)
    tesseract_cmd: str | None = None
