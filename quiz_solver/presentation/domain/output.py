"""FormattedOutput — a match rendered as display-ready strings."""

from pydantic import BaseModel, ConfigDict


class FormattedOutput(BaseModel):
    """Immutable set of display strings for one query.

    Every field is either a highlighted value or the shared missing-result
    message; none is ever empty or None, except ``text`` which echoes the
    (possibly empty) input.
    """

    model_config = ConfigDict(frozen=True)

    text: str
    match: str
    confidence: str
    answer: str
    explanation: str
