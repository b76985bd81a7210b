"""SolvePipeline — image in, formatted answer out: extract text, match, format."""

import asyncio
from pathlib import Path

from quiz_solver.ocr.domain.extractor import ProgressCallback, TextExtractor
from quiz_solver.ocr.domain.observer import OcrObserver
from quiz_solver.ocr.domain.progress import OcrProgress
from quiz_solver.presentation.domain.formatter import missing_output
from quiz_solver.solver.application.solver import QuestionSolver
from quiz_solver.solver.domain.outcome import SolveOutcome


class SolvePipeline:
    """Runs OCR on a worker thread, then answers the recognized question.

    Progress events are forwarded to the observer and, when given, to the
    caller's callback. Cancelling or timing out a run is left to the caller.
    """

    def __init__(
        self,
        extractor: TextExtractor,
        solver: QuestionSolver,
        observer: OcrObserver,
    ) -> None:
        self._extractor = extractor
        self._solver = solver
        self._observer = observer

    async def run(
        self, image_path: Path, on_progress: ProgressCallback | None = None
    ) -> SolveOutcome:
        """Recognize the question in image_path and return its formatted answer.

        Blank recognized text skips matching: every display field, including
        the echoed text, carries the missing-result message.

        Raises:
            QuizSolverError: whatever the extractor raised, after ocr_failed is
                emitted. Unexpected exceptions are re-raised the same way.
        """
        path_str = str(image_path)
        self._observer.ocr_started(image_path=path_str)

        def report(event: OcrProgress) -> None:
            self._observer.ocr_progress(
                image_path=path_str, status=event.status, progress=event.progress
            )
            if on_progress is not None:
                on_progress(event)

        try:
            raw_text = await asyncio.to_thread(
                self._extractor.extract, image_path=image_path, on_progress=report
            )
        except Exception as exc:
            # every extractor error ends the run with ocr_failed
            self._observer.ocr_failed(image_path=path_str, reason=str(exc))
            raise

        text = raw_text.strip()
        self._observer.ocr_completed(image_path=path_str, characters=len(text))

        if not text:
            return SolveOutcome(recognized_text="", output=missing_output())
        return SolveOutcome(recognized_text=text, output=self._solver.solve(text))
