"""
Runtime configuration loaded from the environment (and a local .env file).
"""
from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import List, Optional

from dotenv import load_dotenv

from .constants import FEEDS, RSS_DISPLAY_COUNT


def _get_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _get_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def _get_list(name: str, default: List[str]) -> List[str]:
    raw = os.getenv(name)
    if not raw:
        return list(default)
    return [u.strip() for u in raw.split(",") if u.strip()]


@dataclass
class Settings:
    display_count: int = RSS_DISPLAY_COUNT
    feed_urls: List[str] = field(default_factory=lambda: list(FEEDS))
    post_source_urls: List[str] = field(default_factory=list)
    fetch_timeout: int = 30
    log_level: str = "INFO"
    log_json: bool = False


def load_settings(env_file: Optional[str] = None) -> Settings:
    """
    Build Settings from environment variables.

    Variables: RSS_DISPLAY_COUNT, RSS_FEEDS and RSS_POST_SOURCES (comma-separated),
    RSS_FETCH_TIMEOUT, LOG_LEVEL, LOG_JSON. Values already in the environment win over the .env file.
    """
    load_dotenv(env_file)
    return Settings(
        display_count=_get_int("RSS_DISPLAY_COUNT", RSS_DISPLAY_COUNT),
        feed_urls=_get_list("RSS_FEEDS", FEEDS),
        post_source_urls=_get_list("RSS_POST_SOURCES", []),
        fetch_timeout=_get_int("RSS_FETCH_TIMEOUT", 30),
        log_level=os.getenv("LOG_LEVEL", "INFO"),
        log_json=_get_bool("LOG_JSON", False),
    )
