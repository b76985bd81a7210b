"""Observer port for the OCR domain — defines events in domain language."""

from typing import Protocol


class OcrObserver(Protocol):
    def ocr_started(self, image_path: str) -> None: ...

    def ocr_progress(self, image_path: str, status: str, progress: float) -> None: ...

    def ocr_completed(self, image_path: str, characters: int) -> None: ...

    def ocr_failed(self, image_path: str, reason: str) -> None: ...
