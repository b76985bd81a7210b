"""Matching configuration model."""

from pydantic import BaseModel, Field


class MatchingConfig(BaseModel, frozen=True):
    """Similarity algorithm and confidence threshold for answering questions.

    The threshold is always echoed to the user; it only rejects matches when
    ``enforce_threshold`` is set.
    """

    algorithm: str = Field(default="sequence_matcher", min_length=1)
    confidence_threshold: float = Field(default=0.0, ge=0.0, le=1.0)
    enforce_threshold: bool = False
