"""Error types raised by matching infrastructure."""

from quiz_solver.core.errors import QuizSolverError


class SimilarityNotSupportedError(QuizSolverError):
    """Raised when the configured similarity algorithm is not a known name."""

    def __init__(self, algorithm: str) -> None:
        super().__init__(
            f"Failed to create similarity: unsupported algorithm '{algorithm}'"
        )
