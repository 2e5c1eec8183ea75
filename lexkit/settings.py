#!/usr/bin/env python3
"""
Packaged Settings
=================
Read-only defaults shipped in lexkit/configs/. Runtime overrides from .env
and LEXKIT_* variables are layered on top by lexkit.config.

Usage:
    from lexkit.settings import get_setting, default_language_path

    count = get_setting("generation.count", 10)
    path = default_language_path()
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Any, Mapping

import yaml

from .errors import LexkitError

PACKAGE_DIR = Path(__file__).resolve().parent
PROJECT_ROOT = PACKAGE_DIR.parent
CONFIG_DIR = PACKAGE_DIR / "configs"
APP_CONFIG_PATH = CONFIG_DIR / "app.yaml"
SAMPLE_LANGUAGE_PATH = CONFIG_DIR / "sample_language.yaml"

_MISSING = object()


@lru_cache(maxsize=None)
def read_packaged_yaml(name: str) -> dict:
    """Parse a YAML file from the packaged configs directory."""
    path = CONFIG_DIR / name
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise LexkitError(f"Missing packaged config: {path}") from None
    return yaml.safe_load(text) or {}


def load_app_config() -> dict:
    return read_packaged_yaml(APP_CONFIG_PATH.name)


def get_setting(path: str, default: Any = None, settings: Mapping | None = None) -> Any:
    """
    Look up a nested setting by dotted path, e.g. "language.default_lect".

    `settings` replaces app.yaml as the source; missing keys and paths that
    run into a non-mapping value give `default`.
    """
    current: Any = load_app_config() if settings is None else settings
    for key in path.split('.'):
        if not isinstance(current, Mapping):
            return default
        current = current.get(key, _MISSING)
        if current is _MISSING:
            return default
    return current


def resolve_path(value: str, base: Path | None = None) -> Path:
    """Expand `~` and anchor a relative path at `base` (default: project root)."""
    if not value:
        raise ValueError("path value is required")
    path = Path(str(value)).expanduser()
    if path.is_absolute():
        return path
    return ((base or PROJECT_ROOT) / path).resolve()


def default_language_path() -> Path:
    """Language document used when none is configured; relative to configs/."""
    return resolve_path(get_setting('language.path', SAMPLE_LANGUAGE_PATH.name), base=CONFIG_DIR)


__all__ = [
    "read_packaged_yaml",
    "load_app_config",
    "get_setting",
    "resolve_path",
    "default_language_path",
    "PROJECT_ROOT",
    "CONFIG_DIR",
    "APP_CONFIG_PATH",
    "SAMPLE_LANGUAGE_PATH",
]
