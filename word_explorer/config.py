"""Config module – runtime settings read from the environment."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.datamuse.com"
DEFAULT_TIMEOUT = 10.0
DEFAULT_LOG_LEVEL = "WARNING"


@dataclass(frozen=True)
class Settings:
    """Settings shared by the page, the CLI and the MCP server."""

    base_url: str = DEFAULT_BASE_URL
    timeout: float = DEFAULT_TIMEOUT
    log_level: str = DEFAULT_LOG_LEVEL


def _parse_timeout(raw: str | None) -> float:
    if raw is None or not raw.strip():
        return DEFAULT_TIMEOUT
    try:
        value = float(raw)
    except ValueError:
        logger.warning("Ignoring invalid DATAMUSE_TIMEOUT=%r, using %s", raw, DEFAULT_TIMEOUT)
        return DEFAULT_TIMEOUT
    if value <= 0:
        logger.warning("Ignoring non-positive DATAMUSE_TIMEOUT=%r, using %s", raw, DEFAULT_TIMEOUT)
        return DEFAULT_TIMEOUT
    return value


def _parse_log_level(raw: str | None) -> str:
    level = (raw or "").strip().upper()
    if not level:
        return DEFAULT_LOG_LEVEL
    if not isinstance(logging.getLevelName(level), int):
        logger.warning("Ignoring unknown WORD_EXPLORER_LOG_LEVEL=%r, using %s", raw, DEFAULT_LOG_LEVEL)
        return DEFAULT_LOG_LEVEL
    return level


def load_settings(env_file: str | None = None) -> Settings:
    """Load a ``.env`` file (if any) and build :class:`Settings` from the environment.

    Variables already set in the process environment win over the file.
    """
    load_dotenv(env_file)
    base_url = os.getenv("DATAMUSE_BASE_URL", "").strip() or DEFAULT_BASE_URL
    return Settings(
        base_url=base_url.rstrip("/"),
        timeout=_parse_timeout(os.getenv("DATAMUSE_TIMEOUT")),
        log_level=_parse_log_level(os.getenv("WORD_EXPLORER_LOG_LEVEL")),
    )
