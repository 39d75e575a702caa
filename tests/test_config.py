from __future__ import annotations

import importlib

import config


def test_defaults(monkeypatch):
    for name in ("ARITHMOS_DEFAULT_METHODS", "ARITHMOS_MAX_TEXT_LENGTH", "LOG_LEVEL", "LOG_JSON"):
        monkeypatch.delenv(name, raising=False)
    reloaded = importlib.reload(config)
    assert reloaded.Config.ARITHMOS_DEFAULT_METHODS == config.DEFAULT_METHODS
    assert reloaded.Config.ARITHMOS_MAX_TEXT_LENGTH == 10000
    assert reloaded.Config.LOG_LEVEL == "INFO"
    assert reloaded.Config.LOG_JSON is True


def test_default_methods_from_env(monkeypatch):
    monkeypatch.setenv("ARITHMOS_DEFAULT_METHODS", "Gematria,Primes")
    reloaded = importlib.reload(config)
    assert reloaded.Config.ARITHMOS_DEFAULT_METHODS == "Gematria,Primes"

    monkeypatch.setenv("ARITHMOS_DEFAULT_METHODS", "")
    reloaded = importlib.reload(config)
    assert reloaded.Config.ARITHMOS_DEFAULT_METHODS == config.DEFAULT_METHODS


def test_max_text_length_from_env(monkeypatch):
    monkeypatch.setenv("ARITHMOS_MAX_TEXT_LENGTH", "250")
    reloaded = importlib.reload(config)
    assert reloaded.Config.ARITHMOS_MAX_TEXT_LENGTH == 250

    monkeypatch.setenv("ARITHMOS_MAX_TEXT_LENGTH", "-3")
    reloaded = importlib.reload(config)
    assert reloaded.Config.ARITHMOS_MAX_TEXT_LENGTH == 10000

    monkeypatch.setenv("ARITHMOS_MAX_TEXT_LENGTH", "many")
    reloaded = importlib.reload(config)
    assert reloaded.Config.ARITHMOS_MAX_TEXT_LENGTH == 10000

    monkeypatch.delenv("ARITHMOS_MAX_TEXT_LENGTH", raising=False)
    importlib.reload(config)


def test_log_json_flag(monkeypatch):
    monkeypatch.setenv("LOG_JSON", "off")
    reloaded = importlib.reload(config)
    assert reloaded.Config.LOG_JSON is False

    monkeypatch.delenv("LOG_JSON", raising=False)
    importlib.reload(config)
