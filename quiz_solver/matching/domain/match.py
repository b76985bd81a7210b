"""MatchResult — the dataset entry judged closest to an input question."""

from pydantic import BaseModel, ConfigDict, Field


class MatchResult(BaseModel):
    """Immutable result of scoring one dataset entry against an input text.

    ``confidence`` is the similarity ratio in [0, 1], not a percentage.
    """

    model_config = ConfigDict(frozen=True)

    question_text: str
    confidence: float = Field(ge=0.0, le=1.0)
    answer: bool
    explanation: str | None = None
