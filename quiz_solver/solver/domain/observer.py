"""Observer port for the solver domain — defines events in domain language."""

from typing import Protocol


class SolverObserver(Protocol):
    def solve_started(self, input_text: str, dataset_size: int) -> None: ...

    def solve_matched(
        self, input_text: str, question_text: str, confidence: float
    ) -> None: ...

    def solve_below_threshold(
        self,
        input_text: str,
        question_text: str,
        confidence: float,
        threshold: float,
    ) -> None: ...

    def solve_no_match(self, input_text: str) -> None: ...
