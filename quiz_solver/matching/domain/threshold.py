"""Confidence threshold policy, applied after matching when enabled."""

from quiz_solver.matching.domain.match import MatchResult


def apply_threshold(match: MatchResult | None, threshold: float) -> MatchResult | None:
    """Return match unless its confidence is strictly below threshold."""
    if match is None or match.confidence < threshold:
        return None
    return match
