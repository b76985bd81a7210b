"""Fake SolverObserver for use in tests — records events without mocking."""

from dataclasses import dataclass


@dataclass(frozen=True)
class SolveStartedEvent:
    input_text: str
    dataset_size: int


@dataclass(frozen=True)
class SolveMatchedEvent:
    input_text: str
    question_text: str
    confidence: float


@dataclass(frozen=True)
class SolveBelowThresholdEvent:
    input_text: str
    question_text: str
    confidence: float
    threshold: float


@dataclass(frozen=True)
class SolveNoMatchEvent:
    input_text: str


class FakeSolverObserver:
    def __init__(self) -> None:
        self.started: list[SolveStartedEvent] = []
        self.matched: list[SolveMatchedEvent] = []
        self.below_threshold: list[SolveBelowThresholdEvent] = []
        self.no_match: list[SolveNoMatchEvent] = []

    def solve_started(self, input_text: str, dataset_size: int) -> None:
        self.started.append(
            SolveStartedEvent(input_text=input_text, dataset_size=dataset_size)
        )

    def solve_matched(
        self, input_text: str, question_text: str, confidence: float
    ) -> None:
        self.matched.append(
            SolveMatchedEvent(
                input_text=input_text,
                question_text=question_text,
                confidence=confidence,
            )
        )

    def solve_below_threshold(
        self,
        input_text: str,
        question_text: str,
        confidence: float,
        threshold: float,
    ) -> None:
        self.below_threshold.append(
            SolveBelowThresholdEvent(
                input_text=input_text,
                question_text=question_text,
                confidence=confidence,
                threshold=threshold,
            )
        )

    def solve_no_match(self, input_text: str) -> None:
        self.no_match.append(SolveNoMatchEvent(input_text=input_text))
