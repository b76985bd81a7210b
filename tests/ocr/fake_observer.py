"""Fake OcrObserver for use in tests — records events without mocking."""

from dataclasses import dataclass


@dataclass(frozen=True)
class OcrStartedEvent:
    image_path: str


@dataclass(frozen=True)
class OcrProgressEvent:
    image_path: str
    status: str
    progress: float


@dataclass(frozen=True)
class OcrCompletedEvent:
    image_path: str
    characters: int


@dataclass(frozen=True)
class OcrFailedEvent:
    image_path: str
    reason: str


class FakeOcrObserver:
    def __init__(self) -> None:
        self.started: list[OcrStartedEvent] = []
        self.progress: list[OcrProgressEvent] = []
        self.completed: list[OcrCompletedEvent] = []
        self.failed: list[OcrFailedEvent] = []

    def ocr_started(self, image_path: str) -> None:
        self.started.append(OcrStartedEvent(image_path=image_path))

    def ocr_progress(self, image_path: str, status: str, progress: float) -> None:
        self.progress.append(
            OcrProgressEvent(image_path=image_path, status=status, progress=progress)
        )

    def ocr_completed(self, image_path: str, characters: int) -> None:
        self.completed.append(
            OcrCompletedEvent(image_path=image_path, characters=characters)
        )

    def ocr_failed(self, image_path: str, reason: str) -> None:
        self.failed.append(OcrFailedEvent(image_path=image_path, reason=reason))
