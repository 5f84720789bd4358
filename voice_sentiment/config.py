"""
Voice Sentiment - Runtime Configuration.

============================================================
ENVIRONMENT VARIABLES
============================================================
VOICE_SENTIMENT_DEFAULT_LANGUAGE  Fallback language id (en)
VOICE_SENTIMENT_HISTORY_SIZE      Recent results kept (6)
VOICE_SENTIMENT_PROFILES_PATH     Extra JSON profiles (unset)
VOICE_SENTIMENT_SPEAK_RESULTS     Speak results by default (false)
LOG_LEVEL                         Logging level (INFO)
LOG_FORMAT                        json | text (text)

Values are read from the process environment after loading a
.env file if present. Invalid values fall back to defaults.

============================================================
"""

import logging
import os
from dataclasses import dataclass
from typing import Any, Dict, Optional

from dotenv import load_dotenv

from .history import DEFAULT_MAX_ENTRIES
from .profiles import DEFAULT_LANGUAGE


logger = logging.getLogger(__name__)


LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
LOG_FORMATS = ("json", "text")


@dataclass(frozen=True)
class Settings:
    """Immutable runtime settings."""

    default_language: str = DEFAULT_LANGUAGE
    history_size: int = DEFAULT_MAX_ENTRIES
    profiles_path: Optional[str] = None
    speak_results: bool = False
    log_level: str = "INFO"
    log_format: str = "text"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "default_language": self.default_language,
            "history_size": self.history_size,
            "profiles_path": self.profiles_path,
            "speak_results": self.speak_results,
            "log_level": self.log_level,
            "log_format": self.log_format,
        }


def _bool(value: Optional[str], default: bool = False) -> bool:
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "y", "on"}


def _positive_int(name: str, value: Optional[str], default: int) -> int:
    if value is None or not value.strip():
        return default
    try:
        parsed = int(value.strip())
    except ValueError:
        logger.warning(f"{name}={value!r} is not an integer, using {default}")
        return default
    if parsed < 1:
        logger.warning(f"{name}={parsed} must be positive, using {default}")
        return default
    return parsed


def _choice(name: str, value: Optional[str], choices: tuple, default: str) -> str:
    if value is None or not value.strip():
        return default
    normalized = value.strip()
    for choice in choices:
        if normalized.lower() == choice.lower():
            return choice
    logger.warning(f"{name}={value!r} is not one of {choices}, using {default}")
    return default


def load_settings(load_env_file: bool = True) -> Settings:
    """
    Build Settings from the environment.

    Args:
        load_env_file: Load a .env file into the environment first

    Returns:
        Settings instance
    """
    if load_env_file:
        load_dotenv()

    default_language = (
        os.getenv("VOICE_SENTIMENT_DEFAULT_LANGUAGE") or DEFAULT_LANGUAGE
    ).strip().lower()

    return Settings(
        default_language=default_language or DEFAULT_LANGUAGE,
        history_size=_positive_int(
            "VOICE_SENTIMENT_HISTORY_SIZE",
            os.getenv("VOICE_SENTIMENT_HISTORY_SIZE"),
            DEFAULT_MAX_ENTRIES,
        ),
        profiles_path=os.getenv("VOICE_SENTIMENT_PROFILES_PATH") or None,
        speak_results=_bool(os.getenv("VOICE_SENTIMENT_SPEAK_RESULTS"), False),
        log_level=_choice("LOG_LEVEL", os.getenv("LOG_LEVEL"), LOG_LEVELS, "INFO"),
        log_format=_choice("LOG_FORMAT", os.getenv("LOG_FORMAT"), LOG_FORMATS, "text"),
    )
