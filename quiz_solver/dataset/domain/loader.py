"""DatasetLoader Protocol — structural interface for loading question datasets."""

from typing import Protocol

from quiz_solver.config.domain.dataset import DatasetConfig
from quiz_solver.dataset.domain.question_dataset import QuestionDataset


class DatasetLoader(Protocol):
    """Loads the question dataset described by DatasetConfig."""

    def load(self, config: DatasetConfig) -> QuestionDataset: ...
