"""Tests for engine configuration."""

from core.config import EngineConfig, PositionOptions, FALLBACK_LATITUDE, FALLBACK_LONGITUDE
from core.models import GeoPoint


def test_position_option_defaults():
    options = PositionOptions()
    assert options.enable_high_accuracy is True
    assert options.timeout_ms == 60000
    assert options.maximum_age_ms == 30000
    assert options.timeout_seconds == 60.0
    assert options.maximum_age_seconds == 30.0

def test_engine_defaults():
    config = EngineConfig()
    assert config.fallback_position == GeoPoint(FALLBACK_LATITUDE, FALLBACK_LONGITUDE)
    assert config.fallback_position == GeoPoint(33.550859, -117.644357)
    assert config.boundary_threshold_meters == 2.0
    assert config.access_token == ""

def test_from_env(monkeypatch):
    monkeypatch.setenv("MAPBOX_ACCESS_TOKEN", "pk.test")
    monkeypatch.setenv("PARCEL_AR_BOUNDARY_THRESHOLD_M", "3.5")
    monkeypatch.setenv("PARCEL_AR_POLL_INTERVAL_S", "0.5")

    config = EngineConfig.from_env()

    assert config.access_token == "pk.test"
    assert config.boundary_threshold_meters == 3.5
    assert config.poll_interval_seconds == 0.5

def test_from_env_without_overrides(monkeypatch):
    monkeypatch.delenv("MAPBOX_ACCESS_TOKEN", raising=False)
    monkeypatch.delenv("PARCEL_AR_BOUNDARY_THRESHOLD_M", raising=False)
    monkeypatch.delenv("PARCEL_AR_POLL_INTERVAL_S", raising=False)

    config = EngineConfig.from_env()

    assert config.access_token == ""
    assert config.boundary_threshold_meters == 2.0
