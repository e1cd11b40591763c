"""Environment-driven settings.

Values come from the process environment, with a ``.env`` file in the
working directory loaded first (existing variables win).
"""
import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from dotenv import load_dotenv

from .exceptions import ConfigurationError

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

DEFAULT_GEMINI_MODEL = "gemini-1.5-flash"


@dataclass(frozen=True)
class Settings:
    gemini_api_key: str = ""
    gemini_model: str = DEFAULT_GEMINI_MODEL
    gemini_timeout: float = 30.0
    gemini_max_retries: int = 3
    log_level: str = "INFO"

    @property
    def gemini_enabled(self) -> bool:
        return bool(self.gemini_api_key)


def _number(env: Mapping[str, str], key: str, default, cast, allow_zero=False):
    raw = env.get(key)
    if raw is None or raw == "":
        return default
    try:
        value = cast(raw)
    except ValueError as e:
        raise ConfigurationError(f"{key} must be a number, got {raw!r}") from e
    if value < 0 or (value == 0 and not allow_zero):
        expected = "zero or more" if allow_zero else "positive"
        raise ConfigurationError(f"{key} must be {expected}, got {raw!r}")
    return value


def load_settings(env: Optional[Mapping[str, str]] = None) -> Settings:
    """Build Settings from ``env`` (defaults to os.environ after loading .env)."""
    if env is None:
        load_dotenv()
        env = os.environ
    return Settings(
        gemini_api_key=env.get("GEMINI_API_KEY", "").strip(),
        gemini_model=env.get("GEMINI_MODEL") or DEFAULT_GEMINI_MODEL,
        gemini_timeout=_number(env, "GEMINI_TIMEOUT", 30.0, float),
        gemini_max_retries=_number(env, "GEMINI_MAX_RETRIES", 3, int, allow_zero=True),
        log_level=(env.get("CAREERSYNC_LOG_LEVEL") or "INFO").upper(),
    )


def configure_logging(level="INFO") -> None:
    """Configure root logging once for the CLI and the web app."""
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(level=level, format=LOG_FORMAT)
