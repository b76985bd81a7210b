"""Error types raised by dataset infrastructure."""

from quiz_solver.core.errors import QuizSolverError


class DatasetLoadError(QuizSolverError):
    """Raised when a JSON question dataset cannot be loaded or is malformed."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"Failed to load dataset: {reason}")
