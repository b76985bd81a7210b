"""Observer port for help texts — defines events in domain language."""

from typing import Protocol


class HelpObserver(Protocol):
    def help_page_missing(self, page: str) -> None: ...

    def help_field_missing(self, page: str, field: str) -> None: ...
