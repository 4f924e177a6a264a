"""Runtime configuration helpers for confkit."""
from __future__ import annotations

import logging
import os
from typing import Optional

logger = logging.getLogger(__name__)

DEFAULT_PERCENT_PRECISION = 2

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


def _get_env(name: str, default: Optional[str] = None) -> Optional[str]:
    return os.getenv(name, default)


def _get_bool(name: str, default: bool) -> bool:
    raw = (_get_env(name) or "").strip().lower()
    if raw in _TRUE_VALUES:
        return True
    if raw in _FALSE_VALUES:
        return False
    if raw:
        logger.warning("Ignoring unrecognised boolean %s=%r", name, raw)
    return default


def get_env() -> Optional[str]:
    return _get_env("CONFKIT_ENV") or _get_env("ENV")


def get_percent_precision() -> int:
    """Decimal places kept on layout percentages."""
    raw = _get_env("CONFKIT_PERCENT_PRECISION")
    if not raw:
        return DEFAULT_PERCENT_PRECISION
    try:
        value = int(raw)
    except ValueError:
        logger.warning("Invalid CONFKIT_PERCENT_PRECISION=%r, using %d", raw, DEFAULT_PERCENT_PRECISION)
        return DEFAULT_PERCENT_PRECISION
    if value < 0:
        logger.warning("Negative CONFKIT_PERCENT_PRECISION=%d, using %d", value, DEFAULT_PERCENT_PRECISION)
        return DEFAULT_PERCENT_PRECISION
    return value


def get_default_audio() -> bool:
    return _get_bool("CONFKIT_DEFAULT_AUDIO", True)


def get_default_video() -> bool:
    return _get_bool("CONFKIT_DEFAULT_VIDEO", False)


def config_snapshot() -> dict:
    """Return a snapshot of relevant env-driven config."""
    return {
        "env": get_env(),
        "percent_precision": get_percent_precision(),
        "default_audio": get_default_audio(),
        "default_video": get_default_video(),
    }
