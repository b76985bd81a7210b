"""ProgressOcrObserver — renders the current OCR stage as a Rich progress bar on stderr."""

from rich.console import Console
from rich.progress import BarColumn, Progress, TaskID, TextColumn, TimeElapsedColumn

from quiz_solver.ocr.domain.progress import OcrProgress, describe_progress


class ProgressOcrObserver:
    """Shows one bar per recognition run, labelled with the translated stage.

    Only ocr_started, ocr_progress, ocr_completed and ocr_failed drive the bar;
    completion and failure both stop rendering.

    Pass ``disabled=True`` to track state without terminal output (useful in tests).

    Does NOT inherit from OcrObserver (structural typing via Protocol).
    """

    def __init__(self, disabled: bool = False) -> None:
        self._disabled = disabled
        self._progress: Progress | None = None
        self._task_id: TaskID | None = None
        self._running = False
        self.last_display: str = ""

    @property
    def running(self) -> bool:
        """True between ocr_started and the matching ocr_completed or ocr_failed."""
        return self._running

    def ocr_started(self, image_path: str) -> None:
        self.last_display = ""
        self._running = True
        if self._disabled:
            return

        self._progress = Progress(
            TextColumn("{task.description}"),
            BarColumn(bar_width=40),
            TextColumn("{task.fields[percent]}"),
            TimeElapsedColumn(),
            console=Console(stderr=True),
            transient=False,
        )
        self._task_id = self._progress.add_task(
            description=image_path, total=1.0, percent=""
        )
        self._progress.start()

    def ocr_progress(self, image_path: str, status: str, progress: float) -> None:
        display = describe_progress(OcrProgress(status=status, progress=progress))
        self.last_display = f"{display.status}{display.percent}"
        if self._progress is None or self._task_id is None:
            return
        self._progress.update(
            self._task_id,
            description=display.status,
            completed=progress,
            percent=display.percent,
        )

    def ocr_completed(self, image_path: str, characters: int) -> None:
        self._stop()

    def ocr_failed(self, image_path: str, reason: str) -> None:
        self._stop()

    def _stop(self) -> None:
        self._running = False
        if self._progress is not None:
            self._progress.stop()
        self._progress = None
        self._task_id = None
