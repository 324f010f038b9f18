"""YAML config loader — parses, interpolates env vars, validates, and emits observer events."""

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from classical_quiz.config.domain.config import QuizConfig
from classical_quiz.config.domain.observer import ConfigObserver
from classical_quiz.config.infrastructure.env_interpolation import (
    collect_missing_vars,
    interpolate,
)
from classical_quiz.config.infrastructure.errors import (
    ConfigLoadError,
    ConfigValidationError,
    MissingEnvVarsError,
)


class YamlConfigLoader:
    """Loads, interpolates, validates, and returns a QuizConfig from a YAML file."""

    def __init__(self, observer: ConfigObserver) -> None:
        self._observer = observer

    def load(self, path: Path) -> QuizConfig:
        """
        Load, interpolate, validate, and return a QuizConfig from a YAML file.

        Relative catalog and score paths are resolved against the directory of
        the config file.

        Raises:
            ConfigLoadError: if the file is missing or is not valid YAML.
            MissingEnvVarsError: if any ${ENV_VAR} references are unset (all collected first).
            ConfigValidationError: if the schema is violated.
        """
        raw = _parse_yaml(path=path)
        _check_missing_env_vars(raw=raw)
        interpolated = interpolate(raw)
        cfg = _build_config(interpolated=interpolated)
        cfg = _resolve_relative_paths(cfg=cfg, base_dir=path.parent)
        _emit_warnings(cfg=cfg, observer=self._observer)
        self._observer.config_loaded(name=cfg.name, path=str(path))
        return cfg


def _parse_yaml(path: Path) -> Any:
    try:
        with path.open("r", encoding="utf-8") as fh:
            raw = yaml.safe_load(fh)
    except FileNotFoundError as exc:
        raise ConfigLoadError(path=path) from exc
    except yaml.YAMLError as exc:
        raise ConfigLoadError(path=path, reason="invalid YAML") from exc

    if not isinstance(raw, dict):
        raise ConfigValidationError("top-level YAML value must be a mapping")
    return raw


def _check_missing_env_vars(raw: Any) -> None:
    """Raise MissingEnvVarsError if any ${ENV_VAR} references in raw are unset."""
    missing = collect_missing_vars(raw)
    if missing:
        raise MissingEnvVarsError(missing)


def _build_config(interpolated: Any) -> QuizConfig:
    try:
        return QuizConfig.model_validate(interpolated)
    except ValidationError as exc:
        raise ConfigValidationError(str(exc)) from exc


def _resolve_relative_paths(cfg: QuizConfig, base_dir: Path) -> QuizConfig:
    catalog_path = cfg.catalog.path.expanduser()
    scores_path = cfg.scores.path.expanduser()
    if not catalog_path.is_absolute():
        catalog_path = base_dir / catalog_path
    if not scores_path.is_absolute():
        scores_path = base_dir / scores_path
    return cfg.model_copy(
        update={
            "catalog": cfg.catalog.model_copy(update={"path": catalog_path}),
            "scores": cfg.scores.model_copy(update={"path": scores_path}),
        }
    )


def _emit_warnings(cfg: QuizConfig, observer: ConfigObserver) -> None:
    if not cfg.catalog.strict:
        observer.config_catalog_lenient(catalog_path=str(cfg.catalog.path))
