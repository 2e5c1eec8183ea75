"""
Tests for Configuration
=======================
Tests for .env/environment overrides in lexkit/config.py and packaged
defaults in lexkit/settings.py.
"""

import pytest
import sys
from pathlib import Path

# Ensure repo root is on path
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from lexkit.config import Config, get_config, load_env
from lexkit.errors import LexkitError
from lexkit.settings import (
    PROJECT_ROOT,
    SAMPLE_LANGUAGE_PATH,
    default_language_path,
    get_setting,
    load_app_config,
    read_packaged_yaml,
    resolve_path,
)

ENV_KEYS = ('LEXKIT_LANGUAGE', 'LEXKIT_LECT', 'LEXKIT_SEED', 'LEXKIT_LOG_LEVEL')


@pytest.fixture
def clean_env(monkeypatch):
    """Blank every LEXKIT_* variable for the duration of a test."""
    for key in ENV_KEYS:
        monkeypatch.setenv(key, '')
    return monkeypatch


class TestSettings:
    """Tests for the packaged app.yaml."""

    def test_app_config_loads(self):
        data = load_app_config()
        assert 'language' in data

    def test_dotted_lookup(self):
        assert get_setting('language.default_lect') == 'General'
        assert get_setting('generation.count') == 10

    def test_missing_setting_default(self):
        assert get_setting('language.nothing', 'fallback') == 'fallback'
        assert get_setting('language.default_lect.deeper', 3) == 3

    def test_resolve_relative_path(self):
        assert resolve_path('lexkit') == (PROJECT_ROOT / 'lexkit').resolve()

    def test_resolve_absolute_path(self, tmp_path):
        assert resolve_path(str(tmp_path)) == tmp_path

    def test_resolve_none(self):
        with pytest.raises(ValueError):
            resolve_path(None)

    def test_lookup_in_given_settings(self):
        settings = {'a': {'b': {'c': 0}}}
        assert get_setting('a.b.c', 5, settings=settings) == 0
        assert get_setting('a.x', 5, settings=settings) == 5

    def test_default_language_path(self):
        assert default_language_path() == SAMPLE_LANGUAGE_PATH
        assert default_language_path().exists()

    def test_missing_packaged_yaml(self):
        with pytest.raises(LexkitError):
            read_packaged_yaml('nothing_here.yaml')


class TestConfig:
    """Tests for get_config()."""

    def test_defaults(self, clean_env, tmp_path):
        cfg = get_config(tmp_path / '.env')
        assert cfg.lect == 'General'
        assert cfg.seed is None
        assert cfg.log_level == 'WARNING'
        assert cfg.resolved_language_path().name == 'sample_language.yaml'

    def test_env_file(self, clean_env, tmp_path):
        env_file = tmp_path / '.env'
        env_file.write_text(
            "# comment\n"
            "LEXKIT_LECT=Coastal\n"
            "LEXKIT_SEED=17\n"
            "LEXKIT_LOG_LEVEL=debug\n"
        )
        cfg = get_config(env_file)
        assert cfg.lect == 'Coastal'
        assert cfg.seed == 17
        assert cfg.has_seed
        assert cfg.log_level == 'DEBUG'

    def test_process_environment(self, clean_env, tmp_path):
        clean_env.setenv('LEXKIT_LANGUAGE', str(tmp_path / 'lang.yaml'))
        cfg = get_config(tmp_path / '.env')
        assert cfg.resolved_language_path() == tmp_path / 'lang.yaml'

    def test_invalid_seed(self, clean_env, tmp_path):
        clean_env.setenv('LEXKIT_SEED', 'abc')
        with pytest.raises(ValueError):
            get_config(tmp_path / '.env')

    def test_load_env_missing_file(self, tmp_path):
        assert load_env(tmp_path / '.env') == {}

    def test_config_dataclass(self):
        assert not Config().has_seed

    def test_unset_language_uses_packaged_sample(self):
        assert Config().resolved_language_path() == SAMPLE_LANGUAGE_PATH
