"""TesseractTextExtractor — runs the tesseract CLI on an image file."""

import shutil
import subprocess
from pathlib import Path

from quiz_solver.config.domain.ocr import OcrConfig
from quiz_solver.ocr.domain.extractor import ProgressCallback
from quiz_solver.ocr.domain.progress import OcrProgress
from quiz_solver.ocr.domain.status import RECOGNIZING_TEXT
from quiz_solver.ocr.infrastructure.errors import (
    OcrExtractionError,
    TesseractNotFoundError,
)

_DEFAULT_COMMAND = "tesseract"


class TesseractTextExtractor:
    """Extracts text by invoking ``tesseract <image> stdout -l <language>``.

    The CLI reports no incremental progress, so each stage is emitted once when
    it starts and recognition is reported complete when the process exits.

    Satisfies the TextExtractor protocol structurally.
    """

    def __init__(self, config: OcrConfig) -> None:
        self._config = config

    def extract(self, image_path: Path, on_progress: ProgressCallback) -> str:
        """
        Return the text tesseract recognizes in image_path.

        Raises:
            TesseractNotFoundError: if the tesseract executable cannot be located.
            OcrExtractionError: if the image does not exist, tesseract cannot be
                executed, or it exits with an error.
        """
        on_progress(OcrProgress(status="initializing tesseract", progress=0.0))
        command = self._resolve_command()

        if not image_path.is_file():
            raise OcrExtractionError(reason=f"image not found: {image_path}")

        on_progress(OcrProgress(status=RECOGNIZING_TEXT, progress=0.0))
        try:
            completed = subprocess.run(
                [command, str(image_path), "stdout", "-l", self._config.language],
                capture_output=True,
                text=True,
                encoding="utf-8",
                check=False,
            )
        except FileNotFoundError as exc:
            raise TesseractNotFoundError(command=command) from exc
        except OSError as exc:
            raise OcrExtractionError(reason=f"cannot run '{command}': {exc}") from exc

        if completed.returncode != 0:
            reason = completed.stderr.strip() or f"exit code {completed.returncode}"
            raise OcrExtractionError(reason=reason)

        on_progress(OcrProgress(status=RECOGNIZING_TEXT, progress=1.0))
        return completed.stdout

    def _resolve_command(self) -> str:
        configured = self._config.tesseract_cmd
        if configured is not None:
            return configured
        found = shutil.which(_DEFAULT_COMMAND)
        if found is None:
            raise TesseractNotFoundError(command=_DEFAULT_COMMAND)
        return found
