"""QuestionDataset — a fully loaded question table plus its integrity hash."""

from collections.abc import Mapping
from types import MappingProxyType
from typing import TypeAlias

from pydantic import BaseModel, Field

from quiz_solver.dataset.domain.record import QuestionRecord

QuestionText: TypeAlias = str


class QuestionDataset(BaseModel, frozen=True):
    """Immutable value object returned by a DatasetLoader.

    Carries every question record in file order and the SHA-256 hex digest of
    the raw file bytes, so callers can record which dataset version answered
    a query.
    """

    records: dict[QuestionText, QuestionRecord]
    sha256: str = Field(min_length=1)

    def as_mapping(self) -> Mapping[QuestionText, QuestionRecord]:
        """Return a read-only view of the records for the matching engine."""
        return MappingProxyType(self.records)
