"""Structlog implementation of the SolverObserver port."""

import structlog


class StructlogSolverObserver:
    """Delegates solver domain events to structlog.

    Satisfies the SolverObserver protocol structurally.
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def solve_started(self, input_text: str, dataset_size: int) -> None:
        self._log.debug(
            "solver.started", input_text=input_text, dataset_size=dataset_size
        )

    def solve_matched(
        self, input_text: str, question_text: str, confidence: float
    ) -> None:
        self._log.info(
            "solver.matched",
            input_text=input_text,
            question_text=question_text,
            confidence=confidence,
        )

    def solve_below_threshold(
        self,
        input_text: str,
        question_text: str,
        confidence: float,
        threshold: float,
    ) -> None:
        self._log.info(
            "solver.below_threshold",
            input_text=input_text,
            question_text=question_text,
            confidence=confidence,
            threshold=threshold,
        )

    def solve_no_match(self, input_text: str) -> None:
        self._log.warning("solver.no_match", input_text=input_text)
