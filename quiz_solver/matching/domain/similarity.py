"""Similarity port and the default sequence-matcher implementation."""

from collections.abc import Callable
from difflib import SequenceMatcher
from typing import TypeAlias

# Scores two strings: 1.0 identical, 0.0 nothing in common.
Similarity: TypeAlias = Callable[[str, str], float]


def sequence_matcher_ratio(a: str, b: str) -> float:
    """Return difflib's ``2 * M / T`` ratio over the matching blocks of a and b.

    Two empty strings are identical and score 1.0.
    """
    return SequenceMatcher(None, a, b).ratio()
