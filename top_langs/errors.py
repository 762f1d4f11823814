"""Exception types raised while building a top languages card."""

from __future__ import annotations

from typing import Optional


class TopLanguagesError(Exception):
    """Base class for every failure the card pipeline raises."""


class UpstreamFetchError(TopLanguagesError):
    """The GitHub repository listing answered with a non-success status."""

    def __init__(self, status: int, reason: Optional[str]):
        self.status = status
        self.reason = reason or ""
        super().__init__(f"GitHub API error: {status} {self.reason}".rstrip())


class DegenerateInputError(TopLanguagesError):
    """No repository carried a primary language, so no share can be computed."""


__all__ = ["TopLanguagesError", "UpstreamFetchError", "DegenerateInputError"]
