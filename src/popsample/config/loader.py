"""Read sampler settings from YAML or JSON files."""

from __future__ import annotations

import json
from collections.abc import Callable
from pathlib import Path
from typing import IO, Any

import yaml

from .schema import SamplerConfig


class ConfigLoadError(ValueError):
    """Raised when a config file cannot be read as a settings mapping."""


_PARSERS: dict[str, Callable[[IO[str]], Any]] = {
    ".json": json.load,
    ".yaml": yaml.safe_load,
    ".yml": yaml.safe_load,
}


def load_config(path: str | Path) -> SamplerConfig:
    """Parse ``path`` by its suffix and validate the result as ``SamplerConfig``.

    An empty document yields the defaults. Pydantic's ``ValidationError``
    is left to the caller.
    """
    config_path = Path(path)
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    parser = _PARSERS.get(config_path.suffix.lower())
    if parser is None:
        supported = ", ".join(sorted(_PARSERS))
        raise ConfigLoadError(
            f"Unsupported config format '{config_path.suffix}'. Use one of: {supported}."
        )

    with config_path.open("r", encoding="utf-8") as handle:
        try:
            settings = parser(handle)
        except (json.JSONDecodeError, yaml.YAMLError) as exc:
            raise ConfigLoadError(f"Could not parse {config_path.name}: {exc}") from exc

    if settings is None:
        settings = {}
    if not isinstance(settings, dict):
        raise ConfigLoadError(
            f"Config root must be a JSON/YAML object, got {type(settings).__name__}."
        )
    return SamplerConfig.model_validate(settings)
