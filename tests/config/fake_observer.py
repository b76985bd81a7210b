"""Fake ConfigObserver for use in tests — records events without mocking."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ConfigLoadedEvent:
    path: str
    dataset_path: str


@dataclass(frozen=True)
class ThresholdNotEnforcedWarningEvent:
    threshold: float


class FakeConfigObserver:
    def __init__(self) -> None:
        self.loaded: list[ConfigLoadedEvent] = []
        self.threshold_warnings: list[ThresholdNotEnforcedWarningEvent] = []

    def config_loaded(self, path: str, dataset_path: str) -> None:
        self.loaded.append(ConfigLoadedEvent(path=path, dataset_path=dataset_path))

    def config_threshold_not_enforced_warning(self, threshold: float) -> None:
        self.threshold_warnings.append(
            ThresholdNotEnforcedWarningEvent(threshold=threshold)
        )
