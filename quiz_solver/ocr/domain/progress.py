"""OCR progress events and their display form."""

import math

from pydantic import BaseModel, ConfigDict, Field

from quiz_solver.ocr.domain.status import (
    RECOGNITION_COMPLETED,
    RECOGNIZING_TEXT,
    translate_status,
)


class OcrProgress(BaseModel):
    """One progress report from a recognition run.

    ``progress`` is the completed fraction of the current ``status`` stage.
    """

    model_config = ConfigDict(frozen=True)

    status: str
    progress: float = Field(ge=0.0, le=1.0)


class ProgressDisplay(BaseModel):
    model_config = ConfigDict(frozen=True)

    status: str
    percent: str


def describe_progress(event: OcrProgress) -> ProgressDisplay:
    """Render a progress event as a translated status and a " (xx.xx%)" suffix.

    The final recognition event is shown as completed, with no percentage.
    """
    if event.status == RECOGNIZING_TEXT and event.progress == 1.0:
        return ProgressDisplay(status=RECOGNITION_COMPLETED, percent="")

    percent = math.floor(event.progress * 10000 + 0.5) / 100
    return ProgressDisplay(
        status=translate_status(event.status),
        percent=f" ({percent:g}%)",
    )
