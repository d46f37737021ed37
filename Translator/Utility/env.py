"""Environment helpers (.env loading and translate settings)"""
import os
import logging
from typing import Dict

logger = logging.getLogger(__name__)

DEFAULT_API_ROOT = "https://translate.googleapis.com"
DEFAULT_TIMEOUT = 10.0
DEFAULT_ATTEMPTS = 3
DEFAULT_LOG_LEVEL = "WARNING"


def load_env_file(filepath: str = ".env") -> Dict[str, str]:
    """Export KEY=VALUE lines from `filepath`; variables already set are left alone."""
    loaded: Dict[str, str] = {}
    if not os.path.exists(filepath):
        logger.debug(".env file not found: %s", filepath)
        return loaded
    try:
        with open(filepath, "r", encoding="utf-8") as f:
            lines = f.readlines()
    except OSError as e:
        logger.debug("Ignoring .env read error: %s", e)
        return loaded
    for line in lines:
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        if line.startswith("export "):
            line = line[len("export "):]
        key, sep, val = line.partition("=")
        key = key.strip()
        if not sep or not key:
            continue
        val = val.strip()
        if len(val) >= 2 and val[0] == val[-1] and val[0] in ("'", '"'):
            val = val[1:-1]
        if key not in os.environ:
            os.environ[key] = val
            loaded[key] = val
    return loaded


def get_api_root() -> str:
    return os.environ.get("TRANSLATE_API_ROOT", DEFAULT_API_ROOT).rstrip("/")


def get_timeout() -> float:
    raw = os.environ.get("TRANSLATE_TIMEOUT")
    try:
        return float(raw) if raw else DEFAULT_TIMEOUT
    except ValueError:
        logger.warning("Invalid TRANSLATE_TIMEOUT %r, using %s", raw, DEFAULT_TIMEOUT)
        return DEFAULT_TIMEOUT


def get_attempts() -> int:
    raw = os.environ.get("TRANSLATE_ATTEMPTS")
    try:
        return max(1, int(raw)) if raw else DEFAULT_ATTEMPTS
    except ValueError:
        logger.warning("Invalid TRANSLATE_ATTEMPTS %r, using %s", raw, DEFAULT_ATTEMPTS)
        return DEFAULT_ATTEMPTS


def get_log_level() -> str:
    return os.environ.get("TRANSLATE_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()
