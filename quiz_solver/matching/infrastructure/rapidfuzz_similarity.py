"""RapidFuzz-backed Similarity implementation."""

from rapidfuzz.distance import Indel


def rapidfuzz_ratio(a: str, b: str) -> float:
    """Return RapidFuzz's normalized Indel similarity of a and b in [0, 1].

    Same ``2 * M / T`` shape as the sequence-matcher ratio, but M is the true
    longest common subsequence rather than difflib's greedy block matching.
    """
    return Indel.normalized_similarity(a, b)
