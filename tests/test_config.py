import importlib
import logging

from src.providers import config


def test_malformed_timeout_falls_back_to_default(monkeypatch, caplog):
    monkeypatch.setenv("PROVIDER_TIMEOUT", "ten")
    with caplog.at_level(logging.WARNING, logger="flicky.providers.config"):
        importlib.reload(config)
    try:
        assert config.PROVIDER_TIMEOUT == 10
        assert "PROVIDER_TIMEOUT" in caplog.text
    finally:
        monkeypatch.undo()
        importlib.reload(config)


def test_timeout_read_from_environment(monkeypatch):
    monkeypatch.setenv("PROVIDER_TIMEOUT", "25")
    importlib.reload(config)
    try:
        assert config.PROVIDER_TIMEOUT == 25
    finally:
        monkeypatch.undo()
        importlib.reload(config)
