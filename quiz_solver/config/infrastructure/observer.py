"""Structlog implementation of the ConfigObserver port."""

import structlog


class StructlogConfigObserver:
    """Delegates config domain events to structlog.

    Satisfies the ConfigObserver protocol structurally.
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def config_loaded(self, path: str, dataset_path: str) -> None:
        self._log.info("config.loaded", path=path, dataset_path=dataset_path)

    def config_threshold_not_enforced_warning(self, threshold: float) -> None:
        self._log.warning(
            "config.threshold_not_enforced",
            threshold=threshold,
            message="Confidence threshold is only displayed; set enforce_threshold to reject weak matches",
        )
