"""JSON dataset loader — reads a question table and returns a QuestionDataset."""

import hashlib
import json
from pathlib import Path
from typing import Any, NoReturn

from pydantic import ValidationError

from quiz_solver.config.domain.dataset import DatasetConfig
from quiz_solver.dataset.domain.observer import DatasetObserver
from quiz_solver.dataset.domain.question_dataset import QuestionDataset
from quiz_solver.dataset.domain.record import QuestionRecord
from quiz_solver.dataset.infrastructure.errors import DatasetLoadError


class JsonDatasetLoader:
    """Loads a JSON object mapping question text to its answer record.

    Expected file shape::

        {"<question>": {"answer": true, "explanation": "<text>" | null}, ...}
    """

    def __init__(self, observer: DatasetObserver) -> None:
        self._observer = observer

    def load(self, config: DatasetConfig) -> QuestionDataset:
        """
        Load every record from the JSON file described by config.

        Collects ALL per-entry errors before raising a single DatasetLoadError
        listing every issue found.

        Raises:
            DatasetLoadError: if the file is missing or unreadable, is not valid
                JSON, is not a JSON object, or any entry is not a valid answer record.
        """
        path_str = str(config.path)
        self._observer.dataset_loading_started(path=path_str)

        try:
            raw = self._read_bytes(path=config.path)
        except FileNotFoundError:
            self._fail(path=path_str, reason=f"file not found: {path_str}")
        except OSError as exc:
            self._fail(path=path_str, reason=f"cannot read file: {exc}")

        try:
            data = json.loads(raw.decode("utf-8"))
        except (UnicodeDecodeError, json.JSONDecodeError) as exc:
            self._fail(path=path_str, reason=f"invalid JSON: {exc}")

        if not isinstance(data, dict):
            self._fail(
                path=path_str,
                reason=f"expected a JSON object at top level, got {type(data).__name__}",
            )

        records, errors = self._parse_entries(data=data)
        if errors:
            self._fail(path=path_str, reason="; ".join(errors))

        sha256 = hashlib.sha256(raw).hexdigest()
        self._observer.dataset_loading_completed(
            path=path_str,
            total_records=len(records),
            sha256=sha256,
        )
        return QuestionDataset(records=records, sha256=sha256)

    def _read_bytes(self, path: Path) -> bytes:
        with open(path, "rb") as fh:
            return fh.read()

    def _parse_entries(
        self, data: dict[str, Any]
    ) -> tuple[dict[str, QuestionRecord], list[str]]:
        """Validate each entry into a QuestionRecord, collecting errors without aborting early."""
        records: dict[str, QuestionRecord] = {}
        errors: list[str] = []

        for question, value in data.items():
            result = self._parse_entry(question=question, value=value)
            if isinstance(result, str):
                errors.append(result)
            else:
                records[question] = result
                self._observer.dataset_record_loaded(question=question)

        return records, errors

    def _parse_entry(self, question: str, value: Any) -> QuestionRecord | str:
        """
        Parse a single entry into a QuestionRecord.

        Returns a QuestionRecord on success, or an error string describing the problem.
        """
        if not isinstance(value, dict):
            return f"question {question!r}: expected an object, got {type(value).__name__}"
        if "answer" not in value:
            return f"question {question!r}: missing key 'answer'"

        try:
            return QuestionRecord.model_validate(
                {"answer": value["answer"], "explanation": value.get("explanation")}
            )
        except ValidationError as exc:
            details = ", ".join(
                f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}"
                for err in exc.errors()
            )
            return f"question {question!r}: {details}"

    def _fail(self, path: str, reason: str) -> NoReturn:
        self._observer.dataset_loading_failed(path=path, reason=reason)
        raise DatasetLoadError(reason=reason)
