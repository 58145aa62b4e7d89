from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

from uslug.config.schema import SlugSettings
from uslug.slug.precision import select_precision
from uslug.util.errors import ConfigError, InvalidParameterError

logger = logging.getLogger(__name__)

_ALLOWED_KEYS = {"length", "count"}
_MAX_COUNT = 10_000


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def parse_settings(raw: Any) -> SlugSettings:
    if raw is None:
        return SlugSettings()
    if not isinstance(raw, dict):
        raise ConfigError("settings root must be a mapping")
    if any(not isinstance(key, str) for key in raw):
        raise ConfigError("settings keys must be strings")
    unknown = set(raw.keys()) - _ALLOWED_KEYS
    if unknown:
        raise ConfigError(f"settings contain unknown fields: {sorted(unknown)}")

    settings = SlugSettings()
    if raw.get("length") is not None:
        try:
            settings.length = int(select_precision(raw["length"]))
        except InvalidParameterError as exc:
            raise ConfigError(f"settings.length is invalid: {exc}") from exc

    count = raw.get("count", settings.count)
    if not _is_int(count) or not 1 <= count <= _MAX_COUNT:
        raise ConfigError(f"settings.count must be int in 1..{_MAX_COUNT}")
    settings.count = count
    return settings


def load_settings(path: Path) -> SlugSettings:
    try:
        content = path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise ConfigError(f"settings file not found: {path}") from exc
    except UnicodeError as exc:
        raise ConfigError(f"failed to decode settings file as utf-8: {path}") from exc
    except OSError as exc:
        raise ConfigError(f"failed to read settings file: {path}") from exc

    try:
        raw = yaml.safe_load(content)
    except yaml.YAMLError as exc:
        raise ConfigError(f"failed to parse yaml: {exc}") from exc

    settings = parse_settings(raw)
    logger.debug("loaded settings from %s: %s", path, settings)
    return settings
