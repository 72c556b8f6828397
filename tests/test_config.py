# tests/test_config.py
import pytest
from pydantic import ValidationError

from hotelpulse.adapters.config import AppConfig


def test_defaults():
    cfg = AppConfig()
    assert cfg.BUCKET_SECONDS == 5.0
    assert cfg.REFRESH_INTERVAL_MS == 5000
    assert cfg.MAX_REQUEST_DELTA == 3
    assert cfg.MAX_DRIVER_DELTA == 2
    assert cfg.USE_FALLBACK is False


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("HOTELPULSE_BUCKET_SECONDS", "10")
    monkeypatch.setenv("HOTELPULSE_USE_FALLBACK", "true")
    cfg = AppConfig()
    assert cfg.BUCKET_SECONDS == 10.0
    assert cfg.USE_FALLBACK is True


@pytest.mark.parametrize("name,value", [("BUCKET_SECONDS", "0"), ("REFRESH_INTERVAL_MS", "-5"), ("MAX_REQUEST_DELTA", "-1")])
def test_invalid_values_rejected(monkeypatch, name, value):
    monkeypatch.setenv(f"HOTELPULSE_{name}", value)
    with pytest.raises(ValidationError):
        AppConfig()
