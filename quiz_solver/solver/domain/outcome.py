"""SolveOutcome — what an image solve produced, from recognized text to display."""

from pydantic import BaseModel, ConfigDict

from quiz_solver.presentation.domain.output import FormattedOutput


class SolveOutcome(BaseModel):
    model_config = ConfigDict(frozen=True)

    recognized_text: str
    output: FormattedOutput
