"""Runtime settings read from the environment."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

DEFAULT_TOP = 5
DEFAULT_PER_PAGE = 100  # GitHub caps a page at 100 repositories
DEFAULT_USER_AGENT = "gh-lang-stats"
DEFAULT_API_URL = "https://api.github.com"
LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"


def _env_int(env: Mapping[str, str], name: str, default: int) -> int:
    try:
        return int(env.get(name, default))
    except (TypeError, ValueError):
        return default


@dataclass(frozen=True)
class Settings:
    token: str = ""
    default_top: int = DEFAULT_TOP
    per_page: int = DEFAULT_PER_PAGE
    user_agent: str = DEFAULT_USER_AGENT
    api_url: str = DEFAULT_API_URL
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> "Settings":
        env = os.environ if env is None else env
        default_top = _env_int(env, "TOP_LANGS_DEFAULT_TOP", DEFAULT_TOP)
        per_page = _env_int(env, "TOP_LANGS_PER_PAGE", DEFAULT_PER_PAGE)
        return cls(
            token=env.get("GITHUB_TOKEN") or env.get("GH_KEY") or "",
            default_top=default_top if default_top > 0 else DEFAULT_TOP,
            per_page=max(1, min(DEFAULT_PER_PAGE, per_page)),
            user_agent=env.get("TOP_LANGS_USER_AGENT") or DEFAULT_USER_AGENT,
            api_url=(env.get("GITHUB_API_URL") or DEFAULT_API_URL).rstrip("/"),
            log_level=(env.get("LOG_LEVEL") or "INFO").upper(),
        )


def configure_logging(level: str = "INFO") -> None:
    """Install the root handler once; later calls only adjust the level."""
    numeric = logging.getLevelName(str(level).upper())
    if not isinstance(numeric, int):
        numeric = logging.INFO
    logging.basicConfig(level=numeric, format=LOG_FORMAT)
    logging.getLogger().setLevel(numeric)


__all__ = ["Settings", "configure_logging", "DEFAULT_TOP", "DEFAULT_PER_PAGE"]
