from __future__ import annotations

import logging
import os
import tomllib
from pathlib import Path
from typing import Any, Dict, Mapping

from pydantic import BaseModel, ConfigDict, field_validator

DEFAULT_CONFIG_NAME = "cssforge.toml"
ENV_PREFIX = "CSSFORGE_"


class CodecSettings(BaseModel):
    ensure_ascii: bool = False

    model_config = ConfigDict(extra="ignore")


class LoggingSettings(BaseModel):
    level: str = "WARNING"
    jsonl: bool = False

    model_config = ConfigDict(extra="ignore")

    @field_validator("level")
    @classmethod
    def validate_level(cls, value: str) -> str:
        name = value.strip().upper()
        if not isinstance(logging.getLevelName(name), int):
            raise ValueError(f"unknown log level {value!r}; use DEBUG, INFO, WARNING, ERROR or CRITICAL")
        return name


class CssforgeSettings(BaseModel):
    codec: CodecSettings = CodecSettings()
    logging: LoggingSettings = LoggingSettings()

    model_config = ConfigDict(extra="ignore")


def _deep_update(target: Dict[str, Any], updates: Mapping[str, Any]) -> Dict[str, Any]:
    for key, value in updates.items():
        if isinstance(value, Mapping) and isinstance(target.get(key), dict):
            _deep_update(target[key], value)
        else:
            target[key] = value
    return target


def _load_toml(path: Path | None) -> Dict[str, Any]:
    if path is None or not path.exists():
        return {}
    with path.open("rb") as f:
        return tomllib.load(f)


def _extract_prefixed(
    source: Mapping[str, str], *, prefix: str = ENV_PREFIX, delimiter: str = "__"
) -> Dict[str, Any]:
    data: Dict[str, Any] = {}
    for key, value in source.items():
        if not key.startswith(prefix):
            continue
        path = key.removeprefix(prefix).split(delimiter)
        target = data
        for part in path[:-1]:
            target = target.setdefault(part.lower(), {})
        target[path[-1].lower()] = value
    return data


def load_settings(
    *,
    config_path: Path | None = None,
    overrides: Dict[str, Any] | None = None,
    environ: Mapping[str, str] | None = None,
) -> CssforgeSettings:
    """Merge the TOML config, ``CSSFORGE_*`` variables and explicit overrides.

    Later sources win. Nested keys use ``__`` in variable names, e.g.
    ``CSSFORGE_LOGGING__LEVEL=DEBUG``.
    """

    if config_path is not None and not config_path.exists():
        raise FileNotFoundError(f"Config file not found at {config_path}")
    resolved = config_path or Path.cwd() / DEFAULT_CONFIG_NAME

    merged: Dict[str, Any] = {}
    _deep_update(merged, _load_toml(resolved))
    _deep_update(merged, _extract_prefixed(os.environ if environ is None else environ))
    if overrides:
        _deep_update(merged, overrides)

    return CssforgeSettings(**merged)


__all__ = [
    "CodecSettings",
    "LoggingSettings",
    "CssforgeSettings",
    "load_settings",
]
