#!/usr/bin/env python3
"""
Configuration Management
========================
Loads runtime overrides from a .env file and the process environment, on
top of the packaged defaults in configs/app.yaml.

Recognized variables:
    LEXKIT_LANGUAGE   - Path of the language document
    LEXKIT_LECT       - Default lect
    LEXKIT_SEED       - Seed for reproducible generation
    LEXKIT_LOG_LEVEL  - Logging level name
"""

import os
from pathlib import Path
from dataclasses import dataclass
from typing import Optional

from .settings import PROJECT_ROOT, default_language_path, get_setting, resolve_path


@dataclass
class Config:
    """Application configuration"""
    language_path: Optional[str] = None
    lect: str = 'General'
    seed: Optional[int] = None
    log_level: str = 'WARNING'

    @property
    def has_seed(self) -> bool:
        return self.seed is not None

    def resolved_language_path(self) -> Path:
        if not self.language_path:
            return default_language_path()
        return resolve_path(self.language_path)


def load_env(env_path: Path = None) -> dict:
    """Load environment variables from .env file."""
    if env_path is None:
        # Look for .env in the project root
        env_path = PROJECT_ROOT / '.env'

    env_vars = {}
    if env_path.exists():
        for line in env_path.read_text().splitlines():
            line = line.strip()
            if '=' in line and not line.startswith('#'):
                key, value = line.split('=', 1)
                env_vars[key.strip()] = value.strip()
                # Also set in os.environ for modules that use it directly
                os.environ.setdefault(key.strip(), value.strip())

    return env_vars


def _parse_seed(value: Optional[str]) -> Optional[int]:
    if value is None or value == '':
        return None
    try:
        return int(value)
    except ValueError:
        raise ValueError(f"LEXKIT_SEED must be an integer, got '{value}'")


def get_config(env_path: Path = None) -> Config:
    """Get configuration from environment."""
    env = load_env(env_path)

    def lookup(key):
        return env.get(key) or os.environ.get(key)

    return Config(
        language_path=lookup('LEXKIT_LANGUAGE') or None,
        lect=lookup('LEXKIT_LECT') or get_setting('language.default_lect', 'General'),
        seed=_parse_seed(lookup('LEXKIT_SEED')),
        log_level=(lookup('LEXKIT_LOG_LEVEL') or get_setting('logging.level', 'WARNING')).upper(),
    )


# Singleton config
_config = None

def config() -> Config:
    """Get the singleton config instance."""
    global _config
    if _config is None:
        _config = get_config()
    return _config
