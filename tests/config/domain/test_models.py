"""Tests for configuration domain models."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from quiz_solver.config.domain.config import SolverConfig
from quiz_solver.config.domain.dataset import DatasetConfig
from quiz_solver.config.domain.matching import MatchingConfig
from quiz_solver.config.domain.ocr import OcrConfig


class TestMatchingConfig:
    def test_defaults(self) -> None:
        config = MatchingConfig()

        assert config.algorithm == "sequence_matcher"
        assert config.confidence_threshold == 0.0
        assert config.enforce_threshold is False

    @pytest.mark.parametrize("threshold", [-0.1, 1.01])
    def test_threshold_outside_unit_interval_is_rejected(self, threshold: float) -> None:
        with pytest.raises(ValidationError):
            MatchingConfig(confidence_threshold=threshold)

    def test_empty_algorithm_is_rejected(self) -> None:
        with pytest.raises(ValidationError):
            MatchingConfig(algorithm="")

    def test_is_frozen(self) -> None:
        config = MatchingConfig()

        with pytest.raises(ValidationError):
            config.algorithm = "rapidfuzz"  # type: ignore[misc]


class TestOcrConfig:
    def test_defaults_to_spanish(self) -> None:
        assert OcrConfig().language == "spa"

    def test_empty_language_is_rejected(self) -> None:
        with pytest.raises(ValidationError):
            OcrConfig(language="")


class TestSolverConfig:
    def test_only_dataset_is_required(self) -> None:
        config = SolverConfig(dataset=DatasetConfig(path=Path("questions.json")))

        assert config.matching == MatchingConfig()
        assert config.ocr == OcrConfig()

    def test_missing_dataset_is_rejected(self) -> None:
        with pytest.raises(ValidationError):
            SolverConfig.model_validate({})
