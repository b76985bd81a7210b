"""Base exception class for all quiz-solver-specific errors."""


class QuizSolverError(Exception):
    """Base class for all quiz-solver errors."""

    def __init__(self, message: str, retriable: bool = False) -> None:
        super().__init__(message)
        self.retriable = retriable
