import os
from typing import Optional


def _get_bool_env(name: str, default: bool = False) -> bool:
    """Return a boolean configuration value based on an environment variable."""

    value = os.getenv(name)
    if value is None:
        return default

    normalized = value.strip().lower()
    if normalized in {"1", "true", "yes", "on"}:
        return True
    if normalized in {"0", "false", "no", "off"}:
        return False
    return default


def _get_env(name: str, default: Optional[str] = None) -> Optional[str]:
    """Read an environment variable returning ``default`` when unset or empty."""

    value = os.getenv(name)
    if value in (None, ""):
        return default
    return value


def _get_int_env(name: str, default: int) -> int:
    value = _get_env(name)
    if value is None:
        return default
    try:
        parsed = int(value)
    except (TypeError, ValueError):
        return default
    return parsed if parsed > 0 else default


DEFAULT_METHODS = "Gematria,Ordinal,Reduced,Sumerian,Primes,Squared,MisparGadol,MisparShemi"


class Config:
    SECRET_KEY = _get_env("SECRET_KEY", "change-me")
    ARITHMOS_DEFAULT_METHODS = _get_env("ARITHMOS_DEFAULT_METHODS", DEFAULT_METHODS)
    ARITHMOS_MAX_TEXT_LENGTH = _get_int_env("ARITHMOS_MAX_TEXT_LENGTH", 10000)
    LOG_LEVEL = _get_env("LOG_LEVEL", "INFO")
    LOG_JSON = _get_bool_env("LOG_JSON", True)
