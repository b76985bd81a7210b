"""QuestionRecord domain value object — the answer stored for one question."""

from pydantic import BaseModel, ConfigDict, Field


class QuestionRecord(BaseModel):
    """Immutable answer record keyed by its question text in a dataset."""

    model_config = ConfigDict(frozen=True)

    answer: bool = Field(strict=True)
    explanation: str | None = None
