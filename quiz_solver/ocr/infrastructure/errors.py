"""Error types raised by OCR infrastructure."""

from quiz_solver.core.errors import QuizSolverError


class TesseractNotFoundError(QuizSolverError):
    """Raised when no tesseract executable can be located."""

    def __init__(self, command: str) -> None:
        super().__init__(
            f"Failed to run OCR: tesseract executable not found: '{command}'"
        )


class OcrExtractionError(QuizSolverError):
    """Raised when tesseract cannot read the image or exits with an error."""

    def __init__(self, reason: str, retriable: bool = False) -> None:
        super().__init__(f"Failed to extract text: {reason}", retriable=retriable)
