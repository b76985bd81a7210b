"""CompositeOcrObserver — fans out all events to a list of observers."""

from quiz_solver.ocr.domain.observer import OcrObserver


class CompositeOcrObserver:
    """Delegates every observer event to each observer in order.

    Does NOT inherit from OcrObserver (structural typing via Protocol).
    """

    def __init__(self, observers: list[OcrObserver]) -> None:
        self._observers = observers

    def ocr_started(self, image_path: str) -> None:
        for obs in self._observers:
            obs.ocr_started(image_path=image_path)

    def ocr_progress(self, image_path: str, status: str, progress: float) -> None:
        for obs in self._observers:
            obs.ocr_progress(image_path=image_path, status=status, progress=progress)

    def ocr_completed(self, image_path: str, characters: int) -> None:
        for obs in self._observers:
            obs.ocr_completed(image_path=image_path, characters=characters)

    def ocr_failed(self, image_path: str, reason: str) -> None:
        for obs in self._observers:
            obs.ocr_failed(image_path=image_path, reason=reason)
