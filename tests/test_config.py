from pathlib import Path

import pytest

from dna4bit.core.config import DEFAULT_CORS_ORIGINS, DEFAULT_DNA_DIR, get_settings


@pytest.fixture(autouse=True)
def _fresh_settings():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def test_defaults(monkeypatch):
    for name in (
        "APP_NAME", "ENV", "DEBUG", "LOG_LEVEL", "API_PREFIX", "DNA_DIR",
        "CHECK_DNA_DIR_ON_STARTUP", "CORS_ORIGINS", "DISABLE_DOCS",
    ):
        monkeypatch.delenv(name, raising=False)
    s = get_settings()
    assert s.app_name == "dna4bit"
    assert s.env == "local" and s.debug is True
    assert s.api_prefix == "/api"
    assert s.dna_dir == Path(DEFAULT_DNA_DIR)
    assert s.check_dna_dir_on_startup is False
    assert s.cors_origins == DEFAULT_CORS_ORIGINS
    assert s.enable_docs is True


def test_cors_origins_comma_separated(monkeypatch):
    monkeypatch.setenv("CORS_ORIGINS", "http://a, http://b,")
    assert get_settings().cors_origins == ("http://a", "http://b")


def test_blank_values_fall_back_to_defaults(monkeypatch):
    monkeypatch.setenv("DNA_DIR", "   ")
    monkeypatch.setenv("API_PREFIX", "")
    s = get_settings()
    assert s.dna_dir == Path(DEFAULT_DNA_DIR)
    assert s.api_prefix == "/api"


def test_non_local_env_disables_debug(monkeypatch):
    monkeypatch.setenv("ENV", "production")
    monkeypatch.delenv("DEBUG", raising=False)
    monkeypatch.setenv("DISABLE_DOCS", "yes")
    s = get_settings()
    assert s.debug is False
    assert s.enable_docs is False
