"""${ENV_VAR} substitution for raw YAML config trees."""

import os
import re
from collections.abc import Callable
from typing import TypeAlias

_ENV_VAR = re.compile(r"\$\{([A-Za-z_][A-Za-z0-9_]*)\}")

RawValue: TypeAlias = (
    str | int | float | bool | None | list["RawValue"] | dict[str, "RawValue"]
)


def missing_env_vars(data: RawValue) -> list[str]:
    """Return every referenced variable that is unset, in first-seen order."""
    missing: list[str] = []

    def record(name: str) -> str:
        if name not in os.environ and name not in missing:
            missing.append(name)
        return ""

    _walk(data, record)
    return missing


def substitute_env_vars(data: RawValue) -> RawValue:
    """
    Return a copy of data with every ${VAR} replaced by its value.

    Call `missing_env_vars` first: an unset variable raises KeyError here.
    """
    return _walk(data, lambda name: os.environ[name])


def _walk(data: RawValue, resolve: Callable[[str], str]) -> RawValue:
    if isinstance(data, str):
        return _ENV_VAR.sub(lambda m: resolve(m.group(1)), data)
    if isinstance(data, list):
        return [_walk(item, resolve) for item in data]
    if isinstance(data, dict):
        return {key: _walk(value, resolve) for key, value in data.items()}
    return data
