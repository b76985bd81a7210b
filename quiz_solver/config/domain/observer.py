"""Observer port for the config domain — defines events in domain language."""

from typing import Protocol


class ConfigObserver(Protocol):
    def config_loaded(self, path: str, dataset_path: str) -> None: ...

    def config_threshold_not_enforced_warning(self, threshold: float) -> None: ...
