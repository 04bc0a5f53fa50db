from __future__ import annotations

import json
from typing import Iterable

from cli.config import DEFAULT_BASE_URL, DEFAULT_TIMEOUT, load_config
from datastore.city_table import build_default_table
from settings import get_settings


def _clear_caches(caches: Iterable) -> None:
    for cache in caches:
        cache.cache_clear()


def test_environment_overrides_apply(monkeypatch, tmp_path) -> None:
    seed_path = tmp_path / "cities.json"
    seed_path.write_text(json.dumps([{"city": "Austin", "temp": 35}]))

    monkeypatch.setenv("CITY_STORE_SEED_PATH", str(seed_path))
    monkeypatch.setenv("LOG_LEVEL", " debug ")

    caches = (get_settings, build_default_table)
    _clear_caches(caches)

    try:
        settings = get_settings()
        table = build_default_table()

        assert settings.seed_path == str(seed_path)
        assert settings.log_level == "DEBUG"
        assert table.seed_path == seed_path
        assert len(table) == 1
    finally:
        _clear_caches(caches)


def test_blank_environment_falls_back_to_defaults(monkeypatch) -> None:
    monkeypatch.setenv("CITY_STORE_SEED_PATH", "  ")
    monkeypatch.setenv("LOG_LEVEL", "")
    get_settings.cache_clear()

    try:
        settings = get_settings()
        assert settings.seed_path is None
        assert settings.log_level == "INFO"
    finally:
        get_settings.cache_clear()


def test_cli_config_reads_environment(monkeypatch) -> None:
    monkeypatch.setenv("CITY_STORE_BASE_URL", "http://store.internal:9000/")
    monkeypatch.setenv("CITY_STORE_TIMEOUT", "2.5")

    config = load_config()

    assert config.base_url == "http://store.internal:9000"
    assert config.timeout == 2.5


def test_cli_config_prefers_explicit_values(monkeypatch) -> None:
    monkeypatch.setenv("CITY_STORE_BASE_URL", "http://ignored")
    monkeypatch.setenv("CITY_STORE_TIMEOUT", "abc")

    assert load_config(base_url="http://explicit/", timeout=1.0).base_url == "http://explicit"
    assert load_config().timeout == DEFAULT_TIMEOUT


def test_cli_config_defaults(monkeypatch) -> None:
    monkeypatch.delenv("CITY_STORE_BASE_URL", raising=False)
    monkeypatch.delenv("CITY_STORE_TIMEOUT", raising=False)

    config = load_config()

    assert config.base_url == DEFAULT_BASE_URL
    assert config.timeout == DEFAULT_TIMEOUT
