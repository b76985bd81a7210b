"""Structlog implementation of the OcrObserver port."""

import structlog


class StructlogOcrObserver:
    """Delegates OCR domain events to structlog.

    Satisfies the OcrObserver protocol structurally.
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def ocr_started(self, image_path: str) -> None:
        self._log.info("ocr.started", image_path=image_path)

    def ocr_progress(self, image_path: str, status: str, progress: float) -> None:
        self._log.debug(
            "ocr.progress", image_path=image_path, status=status, progress=progress
        )

    def ocr_completed(self, image_path: str, characters: int) -> None:
        self._log.info("ocr.completed", image_path=image_path, characters=characters)

    def ocr_failed(self, image_path: str, reason: str) -> None:
        self._log.error("ocr.failed", image_path=image_path, reason=reason)
