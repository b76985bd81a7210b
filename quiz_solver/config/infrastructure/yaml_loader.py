"""YAML config loader — parses, interpolates env vars, validates, and emits observer events."""

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from quiz_solver.config.domain.config import SolverConfig
from quiz_solver.config.domain.observer import ConfigObserver
from quiz_solver.config.infrastructure.env_interpolation import (
    missing_env_vars,
    substitute_env_vars,
)
from quiz_solver.config.infrastructure.errors import (
    ConfigLoadError,
    ConfigValidationError,
    MissingEnvVarsError,
)


class YamlConfigLoader:
    """Loads, interpolates, validates, and returns a SolverConfig from a YAML file."""

    def __init__(self, observer: ConfigObserver) -> None:
        self._observer = observer

    def load(self, path: Path, dataset_path: Path | None = None) -> SolverConfig:
        """
        Load, interpolate, validate, and return a SolverConfig from a YAML file.

        A relative dataset path is resolved against the config file's directory.
        dataset_path, when given, replaces the file's dataset section before
        validation, so the file may omit it; it is taken relative to the
        working directory.

        Raises:
            ConfigLoadError: if the file does not exist or is not valid YAML.
            MissingEnvVarsError: if any ${ENV_VAR} references are unset (all collected first).
            ConfigValidationError: if the schema is violated.
        """
        raw = _parse_yaml(path=path)
        if dataset_path is not None:
            raw = {**raw, "dataset": {"path": str(dataset_path.absolute())}}
        _check_missing_env_vars(raw=raw)
        cfg = _build_config(resolved=substitute_env_vars(raw))
        cfg = _anchor_dataset_path(cfg=cfg, config_dir=path.parent)
        _emit_warnings(cfg=cfg, observer=self._observer)
        self._observer.config_loaded(
            path=str(path), dataset_path=str(cfg.dataset.path)
        )
        return cfg


def _parse_yaml(path: Path) -> Any:
    try:
        with path.open("r", encoding="utf-8") as fh:
            raw = yaml.safe_load(fh)
    except FileNotFoundError as exc:
        raise ConfigLoadError(path=path) from exc
    except yaml.YAMLError as exc:
        raise ConfigLoadError(path=path, reason=f"invalid YAML ({exc})") from exc

    if not isinstance(raw, dict):
        raise ConfigLoadError(path=path, reason="expected a mapping at top level")
    return raw


def _check_missing_env_vars(raw: Any) -> None:
    """Raise MissingEnvVarsError if any ${ENV_VAR} references in raw are unset."""
    missing = missing_env_vars(raw)
    if missing:
        raise MissingEnvVarsError(missing)


def _build_config(resolved: Any) -> SolverConfig:
    try:
        return SolverConfig.model_validate(resolved)
    except ValidationError as exc:
        raise ConfigValidationError(str(exc)) from exc


def _anchor_dataset_path(cfg: SolverConfig, config_dir: Path) -> SolverConfig:
    if cfg.dataset.path.is_absolute():
        return cfg
    dataset = cfg.dataset.model_copy(update={"path": config_dir / cfg.dataset.path})
    return cfg.model_copy(update={"dataset": dataset})


def _emit_warnings(cfg: SolverConfig, observer: ConfigObserver) -> None:
    matching = cfg.matching
    if matching.confidence_threshold > 0.0 and not matching.enforce_threshold:
        observer.config_threshold_not_enforced_warning(matching.confidence_threshold)
