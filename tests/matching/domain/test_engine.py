"""Tests for best_match and rank_matches."""

from concurrent.futures import ThreadPoolExecutor
from types import MappingProxyType

import pytest

from quiz_solver.dataset.domain.record import QuestionRecord
from quiz_solver.matching.domain.engine import best_match, rank_matches
from quiz_solver.matching.domain.similarity import sequence_matcher_ratio

_EARTH = "¿Es la Tierra redonda?"


def _earth_dataset() -> dict[str, QuestionRecord]:
    return {
        _EARTH: QuestionRecord(
            answer=True, explanation="Confirmado por observación satelital"
        )
    }


def _solar_dataset() -> dict[str, QuestionRecord]:
    return {
        _EARTH: QuestionRecord(answer=True, explanation="Confirmado por observación satelital"),
        "¿Es el Sol un planeta?": QuestionRecord(answer=False, explanation="El Sol es una estrella"),
        "¿Tiene la Luna atmósfera densa?": QuestionRecord(answer=False),
    }


class TestBestMatch:
    """best_match returns the highest-scoring entry or None."""

    def test_close_query_matches_question(self) -> None:
        match = best_match(input_text="Es la tierra redonda", dataset=_earth_dataset())

        assert match is not None
        assert match.question_text == _EARTH
        assert match.confidence > 0.9
        assert match.answer is True
        assert match.explanation == "Confirmado por observación satelital"

    def test_unrelated_query_still_returns_low_confidence_match(self) -> None:
        match = best_match(
            input_text="xyz completamente distinto", dataset=_earth_dataset()
        )

        assert match is not None
        assert match.question_text == _EARTH
        assert match.confidence < 0.5

    def test_empty_dataset_returns_none(self) -> None:
        assert best_match(input_text="cualquier cosa", dataset={}) is None

    def test_identical_query_scores_one(self) -> None:
        match = best_match(input_text="¿Es el Sol un planeta?", dataset=_solar_dataset())

        assert match is not None
        assert match.question_text == "¿Es el Sol un planeta?"
        assert match.confidence == 1.0

    def test_confidence_is_maximum_over_dataset(self) -> None:
        dataset = _solar_dataset()
        query = "Sol planeta"

        match = best_match(input_text=query, dataset=dataset)

        assert match is not None
        assert match.confidence == max(
            sequence_matcher_ratio(question, query) for question in dataset
        )

    def test_missing_explanation_is_carried_as_none(self) -> None:
        match = best_match(
            input_text="¿Tiene la Luna atmósfera densa?", dataset=_solar_dataset()
        )

        assert match is not None
        assert match.explanation is None

    def test_blank_query_is_an_ordinary_string(self) -> None:
        match = best_match(input_text="", dataset=_solar_dataset())

        assert match is not None
        assert match.confidence == 0.0

    def test_ties_resolve_to_first_entry_in_iteration_order(self) -> None:
        first = {"abc": QuestionRecord(answer=True), "abd": QuestionRecord(answer=False)}
        second = {"abd": QuestionRecord(answer=False), "abc": QuestionRecord(answer=True)}

        match_first = best_match(input_text="abx", dataset=first)
        match_second = best_match(input_text="abx", dataset=second)

        assert match_first is not None and match_first.question_text == "abc"
        assert match_second is not None and match_second.question_text == "abd"

    def test_does_not_modify_dataset(self) -> None:
        dataset = _solar_dataset()
        snapshot = dict(dataset)

        best_match(input_text="Sol", dataset=dataset)

        assert dataset == snapshot


class TestSimilarityInjection:
    """The similarity measure is swappable without touching selection."""

    def test_question_is_first_argument_input_second(self) -> None:
        calls: list[tuple[str, str]] = []

        def recording(a: str, b: str) -> float:
            calls.append((a, b))
            return 0.5

        best_match(input_text="entrada", dataset=_earth_dataset(), similarity=recording)

        assert calls == [(_EARTH, "entrada")]

    def test_custom_similarity_decides_winner(self) -> None:
        def prefers_moon(a: str, b: str) -> float:
            return 1.0 if "Luna" in a else 0.0

        match = best_match(
            input_text="¿Es la Tierra redonda?",
            dataset=_solar_dataset(),
            similarity=prefers_moon,
        )

        assert match is not None
        assert match.question_text == "¿Tiene la Luna atmósfera densa?"

    @pytest.mark.parametrize(("raw", "expected"), [(1.7, 1.0), (-0.3, 0.0)])
    def test_out_of_range_scores_are_clamped(self, raw: float, expected: float) -> None:
        match = best_match(
            input_text="x", dataset=_earth_dataset(), similarity=lambda a, b: raw
        )

        assert match is not None
        assert match.confidence == expected


class TestRankMatches:
    """rank_matches orders every entry by descending confidence."""

    def test_returns_every_entry(self) -> None:
        ranked = rank_matches(input_text="Sol", dataset=_solar_dataset())

        assert len(ranked) == 3

    def test_is_sorted_descending(self) -> None:
        ranked = rank_matches(input_text="¿Es el Sol un planeta?", dataset=_solar_dataset())

        confidences = [match.confidence for match in ranked]
        assert confidences == sorted(confidences, reverse=True)
        assert ranked[0].question_text == "¿Es el Sol un planeta?"

    def test_limit_truncates(self) -> None:
        ranked = rank_matches(input_text="Sol", dataset=_solar_dataset(), limit=2)

        assert len(ranked) == 2

    def test_first_entry_equals_best_match(self) -> None:
        dataset = _solar_dataset()

        ranked = rank_matches(input_text="la Luna", dataset=dataset)

        assert ranked[0] == best_match(input_text="la Luna", dataset=dataset)

    def test_empty_dataset_returns_empty_list(self) -> None:
        assert rank_matches(input_text="Sol", dataset={}) == []

    def test_equal_scores_keep_dataset_order(self) -> None:
        ranked = rank_matches(
            input_text="x", dataset=_solar_dataset(), similarity=lambda a, b: 0.25
        )

        assert [match.question_text for match in ranked] == list(_solar_dataset())


class TestConcurrentUse:
    """best_match is safe to call from several threads over one shared dataset."""

    _QUERIES = [
        "Es la tierra redonda",
        "el sol es un planeta",
        "la luna tiene atmósfera",
        "xyz completamente distinto",
        "",
    ]

    def test_threaded_results_equal_sequential_results(self) -> None:
        dataset = MappingProxyType(_solar_dataset())
        snapshot = dict(dataset)
        queries = self._QUERIES * 40
        expected = [best_match(input_text=q, dataset=dataset) for q in queries]

        with ThreadPoolExecutor(max_workers=8) as pool:
            actual = list(
                pool.map(lambda q: best_match(input_text=q, dataset=dataset), queries)
            )

        assert actual == expected
        assert dict(dataset) == snapshot
