"""Highlighters — wrap a rendered value so it stands out in its medium."""

import html
from collections.abc import Callable
from typing import TypeAlias

Highlight: TypeAlias = Callable[[str], str]

_ANSI_BOLD = "\033[1m"
_ANSI_RESET = "\033[0m"


def html_bold(text: str) -> str:
    return f"<b>{html.escape(text, quote=False)}</b>"


def ansi_bold(text: str) -> str:
    return f"{_ANSI_BOLD}{text}{_ANSI_RESET}"


def plain(text: str) -> str:
    return text
