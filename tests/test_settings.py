import logging

import pytest

from geoprims.config.settings import get_logging_config, get_settings
from geoprims.core.logging import configure_logging
from geoprims.geodesy.geo import Wgs84Point
from geoprims.geodesy.projection import WebMercator


@pytest.fixture
def fresh_settings():
    # get_settings() is cached; clear it around tests that change the environment.
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def test_packaged_defaults(fresh_settings, monkeypatch):
    monkeypatch.delenv("GEOPRIMS_CONFIG_PATH", raising=False)
    monkeypatch.delenv("GEOPRIMS_LOG_LEVEL", raising=False)

    settings = get_settings()

    assert settings.app.name == "geoprims"
    assert settings.app.log_level == "WARNING"
    assert settings.projection.web_mercator_max_latitude == 90.0
    assert WebMercator().max_latitude == 90.0


def test_env_log_level_override(fresh_settings, monkeypatch):
    monkeypatch.setenv("GEOPRIMS_LOG_LEVEL", "debug")
    assert get_settings().app.log_level == "debug"


def test_external_config_file_drives_web_mercator_bound(fresh_settings, monkeypatch, tmp_path):
    path = tmp_path / "geoprims.yaml"
    path.write_text("projection:\n  web_mercator_max_latitude: 85.0511287798\n", encoding="utf-8")
    monkeypatch.setenv("GEOPRIMS_CONFIG_PATH", str(path))

    mercator = WebMercator()

    assert mercator.max_latitude == pytest.approx(85.0511287798)
    assert not mercator.project(Wgs84Point.latlon(86.0, 0.0)).ok
    # An explicit argument still wins over configuration.
    assert WebMercator(max_latitude=90.0).project(Wgs84Point.latlon(86.0, 0.0)).ok


def test_invalid_config_is_rejected(fresh_settings, monkeypatch, tmp_path):
    path = tmp_path / "bad.yaml"
    path.write_text("projection:\n  web_mercator_max_latitude: 120\n", encoding="utf-8")
    monkeypatch.setenv("GEOPRIMS_CONFIG_PATH", str(path))

    with pytest.raises(ValueError):
        get_settings()


def test_non_mapping_yaml_is_rejected(fresh_settings, monkeypatch, tmp_path):
    path = tmp_path / "list.yaml"
    path.write_text("- 1\n- 2\n", encoding="utf-8")
    monkeypatch.setenv("GEOPRIMS_CONFIG_PATH", str(path))

    with pytest.raises(ValueError, match="expected a mapping"):
        get_settings()


def test_configure_logging_applies_settings_level(fresh_settings, monkeypatch):
    monkeypatch.delenv("GEOPRIMS_CONFIG_PATH", raising=False)
    monkeypatch.setenv("GEOPRIMS_LOG_LEVEL", "debug")
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level

    try:
        configure_logging()
        assert root.level == logging.DEBUG
        assert logging.getLogger("geoprims").level == logging.DEBUG
        # The cached packaged config is left untouched.
        assert get_logging_config()["root"]["level"] == "WARNING"
    finally:
        root.handlers[:] = saved_handlers
        root.setLevel(saved_level)
        logging.getLogger("geoprims").setLevel(logging.NOTSET)
