"""Structlog implementation of the HelpObserver port."""

import structlog


class StructlogHelpObserver:
    """Delegates help lookup events to structlog.

    Satisfies the HelpObserver protocol structurally.
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def help_page_missing(self, page: str) -> None:
        self._log.warning("help.page_missing", page=page)

    def help_field_missing(self, page: str, field: str) -> None:
        self._log.warning("help.field_missing", page=page, field=field)
