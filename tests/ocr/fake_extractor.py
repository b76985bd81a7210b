"""FakeTextExtractor — returns canned text and replays canned progress events."""

from pathlib import Path

from quiz_solver.ocr.domain.extractor import ProgressCallback
from quiz_solver.ocr.domain.progress import OcrProgress


class FakeTextExtractor:
    """Satisfies the TextExtractor protocol structurally."""

    def __init__(
        self,
        text: str = "",
        events: list[OcrProgress] | None = None,
        error: Exception | None = None,
    ) -> None:
        self._text = text
        self._events = events if events is not None else []
        self._error = error
        self.calls: list[Path] = []

    def extract(self, image_path: Path, on_progress: ProgressCallback) -> str:
        self.calls.append(image_path)
        for event in self._events:
            on_progress(event)
        if self._error is not None:
            raise self._error
        return self._text
