"""Similarity registry — maps MatchingConfig.algorithm to an implementation."""

from quiz_solver.matching.domain.similarity import Similarity, sequence_matcher_ratio
from quiz_solver.matching.infrastructure.errors import SimilarityNotSupportedError
from quiz_solver.matching.infrastructure.rapidfuzz_similarity import rapidfuzz_ratio

_ALGORITHMS: dict[str, Similarity] = {
    "sequence_matcher": sequence_matcher_ratio,
    "rapidfuzz": rapidfuzz_ratio,
}


def supported_algorithms() -> list[str]:
    return sorted(_ALGORITHMS)


def create_similarity(algorithm: str) -> Similarity:
    """Return the Similarity registered under algorithm.

    Raises:
        SimilarityNotSupportedError: if algorithm is not a known name.
    """
    try:
        return _ALGORITHMS[algorithm]
    except KeyError:
        raise SimilarityNotSupportedError(algorithm=algorithm) from None
