"""Runtime settings for the oracle parser."""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Optional

logger = logging.getLogger(__name__)

DEFAULT_MAX_TEXT_LENGTH = 20000


@dataclass(frozen=True)
class Settings:
    """Tunables shared by every parsing entry point.

    ``max_text_length`` bounds how much text reaches the regex battery; card
    texts are a few hundred characters, so anything beyond the bound is
    truncated rather than scanned.
    """

    max_text_length: int = DEFAULT_MAX_TEXT_LENGTH
    log_level: str = "INFO"


def load_settings() -> Settings:
    """Build settings from environment variables.

    Reads the following environment variables:
    - MTG_ORACLE_MAX_TEXT_LENGTH (default: 20000)
    - MTG_ORACLE_LOG_LEVEL (default: INFO)
    """
    raw_length = os.getenv("MTG_ORACLE_MAX_TEXT_LENGTH", str(DEFAULT_MAX_TEXT_LENGTH))
    try:
        max_text_length = int(raw_length)
    except ValueError:
        logger.warning(f"[Settings] Ignoring invalid MTG_ORACLE_MAX_TEXT_LENGTH={raw_length!r}")
        max_text_length = DEFAULT_MAX_TEXT_LENGTH
    if max_text_length <= 0:
        max_text_length = DEFAULT_MAX_TEXT_LENGTH

    log_level = os.getenv("MTG_ORACLE_LOG_LEVEL", "INFO").upper()
    return Settings(max_text_length=max_text_length, log_level=log_level)


_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Return the process settings, loading them on first use."""
    global _settings
    if _settings is None:
        _settings = load_settings()
    return _settings


def reset_settings() -> None:
    """Forget cached settings so the next :func:`get_settings` re-reads the env."""
    global _settings
    _settings = None


def bound_text(text: str, settings: Optional[Settings] = None) -> str:
    """Truncate ``text`` to the configured maximum length."""
    limit = (settings or get_settings()).max_text_length
    if len(text) > limit:
        logger.warning(f"[Settings] Oracle text of {len(text)} chars truncated to {limit}")
        return text[:limit]
    return text


__all__ = [
    "DEFAULT_MAX_TEXT_LENGTH",
    "Settings",
    "bound_text",
    "get_settings",
    "load_settings",
    "reset_settings",
]
