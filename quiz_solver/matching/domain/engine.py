"""Matching engine — scores every dataset entry against an input question.

Both functions are pure: the dataset is read, never modified, so any number
of queries may share one dataset concurrently.
"""

from collections.abc import Mapping

from quiz_solver.dataset.domain.record import QuestionRecord
from quiz_solver.matching.domain.match import MatchResult
from quiz_solver.matching.domain.similarity import Similarity, sequence_matcher_ratio


def rank_matches(
    input_text: str,
    dataset: Mapping[str, QuestionRecord],
    similarity: Similarity = sequence_matcher_ratio,
    limit: int | None = None,
) -> list[MatchResult]:
    """Return every entry scored against input_text, best first.

    The sort is stable, so entries with equal scores keep dataset iteration
    order. ``limit`` truncates the ranking when given.
    """
    ranked = [
        MatchResult(
            question_text=question_text,
            confidence=_clamp(similarity(question_text, input_text)),
            answer=record.answer,
            explanation=record.explanation,
        )
        for question_text, record in dataset.items()
    ]
    ranked.sort(key=lambda match: match.confidence, reverse=True)
    if limit is not None:
        return ranked[:limit]
    return ranked


def best_match(
    input_text: str,
    dataset: Mapping[str, QuestionRecord],
    similarity: Similarity = sequence_matcher_ratio,
) -> MatchResult | None:
    """Return the highest-scoring entry, or None when the dataset is empty."""
    ranked = rank_matches(
        input_text=input_text, dataset=dataset, similarity=similarity, limit=1
    )
    return ranked[0] if ranked else None


def _clamp(score: float) -> float:
    return min(1.0, max(0.0, score))
