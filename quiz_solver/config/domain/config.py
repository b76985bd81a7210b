"""Top-level SolverConfig aggregate — the root configuration object."""

from pydantic import BaseModel, Field

from quiz_solver.config.domain.dataset import DatasetConfig
from quiz_solver.config.domain.matching import MatchingConfig
from quiz_solver.config.domain.ocr import OcrConfig


class SolverConfig(BaseModel, frozen=True):
    """Root configuration aggregate for a quiz-solver session."""

    dataset: DatasetConfig
    matching: MatchingConfig = Field(default_factory=MatchingConfig)
    ocr: OcrConfig = Field(default_factory=OcrConfig)
