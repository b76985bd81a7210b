"""Presentation formatter — turns a match, or its absence, into display strings."""

import math

from quiz_solver.matching.domain.match import MatchResult
from quiz_solver.presentation.domain.highlight import Highlight, html_bold
from quiz_solver.presentation.domain.messages import (
    FALSE_LABEL,
    MISSING_MESSAGE,
    TRUE_LABEL,
)
from quiz_solver.presentation.domain.output import FormattedOutput


def format_confidence(confidence: float) -> str:
    """Render a [0, 1] ratio as a percentage with at most two decimals.

    Rounds half up and drops trailing zeros: 1.0 -> "100%", 0.904761 -> "90.48%".
    """
    percent = math.floor(confidence * 10000 + 0.5) / 100
    return f"{percent:g}%"


def format_answer(answer: bool, highlight: Highlight = html_bold) -> str:
    return highlight(TRUE_LABEL if answer else FALSE_LABEL)


def format_explanation(explanation: str | None, highlight: Highlight = html_bold) -> str:
    return highlight(explanation) if explanation is not None else MISSING_MESSAGE


def format_result(
    input_text: str,
    match: MatchResult | None,
    highlight: Highlight = html_bold,
) -> FormattedOutput:
    """Render input_text and its match for display.

    Without a match every field but ``text`` carries MISSING_MESSAGE.
    """
    if match is None:
        return FormattedOutput(
            text=highlight(input_text),
            match=MISSING_MESSAGE,
            confidence=MISSING_MESSAGE,
            answer=MISSING_MESSAGE,
            explanation=MISSING_MESSAGE,
        )

    return FormattedOutput(
        text=highlight(input_text),
        match=highlight(match.question_text),
        confidence=highlight(format_confidence(match.confidence)),
        answer=format_answer(match.answer, highlight=highlight),
        explanation=format_explanation(match.explanation, highlight=highlight),
    )


def missing_output() -> FormattedOutput:
    """Return the output shown when OCR recognized no text at all."""
    return FormattedOutput(
        text=MISSING_MESSAGE,
        match=MISSING_MESSAGE,
        confidence=MISSING_MESSAGE,
        answer=MISSING_MESSAGE,
        explanation=MISSING_MESSAGE,
    )
