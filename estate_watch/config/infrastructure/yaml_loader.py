"""YAML config loader: parses, interpolates env vars, validates, and reports."""

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from estate_watch.config.domain.reporter import ConfigReporter
from estate_watch.config.domain.scenario import ScenarioConfig
from estate_watch.config.infrastructure.env_interpolation import (
    collect_missing_vars,
    interpolate,
)
from estate_watch.config.infrastructure.errors import (
    ConfigLoadError,
    ConfigValidationError,
    MissingEnvVarsError,
)


class YamlConfigLoader:
    """Loads and validates a ScenarioConfig from a YAML file."""

    def __init__(self, reporter: ConfigReporter) -> None:
        self._reporter = reporter

    def load(self, path: Path) -> ScenarioConfig:
        """
        Load, interpolate, validate, and return a ScenarioConfig.

        An empty file yields the default demo scenario.

        Raises:
            ConfigLoadError: if the file does not exist or cannot be read as UTF-8.
            MissingEnvVarsError: listing every unset ${ENV_VAR} reference.
            ConfigValidationError: if the YAML is malformed or the schema is violated.
        """
        raw = _parse_yaml(path=path)
        missing = collect_missing_vars(raw)
        if missing:
            raise MissingEnvVarsError(missing)
        cfg = _build_config(resolved=interpolate(raw))
        self._reporter.config_loaded(name=cfg.name, observer_count=len(cfg.observers))
        return cfg


def _parse_yaml(path: Path) -> Any:
    if not path.is_file():
        raise ConfigLoadError(path=path)
    try:
        with path.open("r", encoding="utf-8") as fh:
            raw = yaml.safe_load(fh)
    except yaml.YAMLError as exc:
        raise ConfigValidationError(reason=f"invalid YAML: {exc}") from exc
    except UnicodeDecodeError as exc:
        raise ConfigLoadError(path=path, reason="file is not valid UTF-8") from exc
    except OSError as exc:
        raise ConfigLoadError(
            path=path, reason=f"cannot read file ({exc.strerror})"
        ) from exc
    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise ConfigValidationError(reason="top-level YAML value must be a mapping")
    return raw


def _build_config(resolved: Any) -> ScenarioConfig:
    try:
        return ScenarioConfig.model_validate(resolved)
    except ValidationError as exc:
        raise ConfigValidationError(reason=str(exc)) from exc
