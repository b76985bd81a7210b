"""TextExtractor Protocol — structural interface for OCR backends."""

from collections.abc import Callable
from pathlib import Path
from typing import Protocol, TypeAlias

from quiz_solver.ocr.domain.progress import OcrProgress

ProgressCallback: TypeAlias = Callable[[OcrProgress], None]


class TextExtractor(Protocol):
    """Recognizes the text in an image, reporting progress as it goes.

    Implementations block until recognition finishes; progress values never
    decrease within one call.
    """

    def extract(self, image_path: Path, on_progress: ProgressCallback) -> str: ...
