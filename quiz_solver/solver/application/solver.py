"""QuestionSolver — answers one question against an explicit dataset handle."""

from collections.abc import Mapping

from quiz_solver.dataset.domain.record import QuestionRecord
from quiz_solver.matching.domain.engine import best_match
from quiz_solver.matching.domain.match import MatchResult
from quiz_solver.matching.domain.similarity import Similarity, sequence_matcher_ratio
from quiz_solver.matching.domain.threshold import apply_threshold
from quiz_solver.presentation.domain.formatter import format_result
from quiz_solver.presentation.domain.highlight import Highlight, html_bold
from quiz_solver.presentation.domain.output import FormattedOutput
from quiz_solver.solver.domain.observer import SolverObserver


class QuestionSolver:
    """Matches input text against a dataset and renders the outcome.

    The dataset is never modified, so one solver may serve concurrent callers.
    When ``threshold`` is None every best match is kept regardless of score.
    """

    def __init__(
        self,
        dataset: Mapping[str, QuestionRecord],
        observer: SolverObserver,
        similarity: Similarity = sequence_matcher_ratio,
        threshold: float | None = None,
        highlight: Highlight = html_bold,
    ) -> None:
        self._dataset = dataset
        self._observer = observer
        self._similarity = similarity
        self._threshold = threshold
        self._highlight = highlight

    @property
    def dataset(self) -> Mapping[str, QuestionRecord]:
        return self._dataset

    @property
    def similarity(self) -> Similarity:
        return self._similarity

    def match(self, text: str) -> MatchResult | None:
        """Return the best match for text after the threshold policy, if any."""
        self._observer.solve_started(input_text=text, dataset_size=len(self._dataset))

        match = best_match(
            input_text=text, dataset=self._dataset, similarity=self._similarity
        )
        if match is None:
            self._observer.solve_no_match(input_text=text)
            return None

        if (
            self._threshold is not None
            and apply_threshold(match=match, threshold=self._threshold) is None
        ):
            self._observer.solve_below_threshold(
                input_text=text,
                question_text=match.question_text,
                confidence=match.confidence,
                threshold=self._threshold,
            )
            return None

        self._observer.solve_matched(
            input_text=text,
            question_text=match.question_text,
            confidence=match.confidence,
        )
        return match

    def solve(self, text: str) -> FormattedOutput:
        return format_result(
            input_text=text, match=self.match(text), highlight=self._highlight
        )
