"""Data shapes passed between the GitHub client, aggregator and renderer."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional


@dataclass(frozen=True)
class RepositoryRecord:
    id: int
    name: str
    full_name: str
    star_count: int
    primary_language: Optional[str] = None

    @classmethod
    def from_api(cls, payload: dict[str, Any]) -> "RepositoryRecord":
        """Build a record from one item of the GitHub ``/users/{user}/repos`` response."""
        return cls(
            id=payload.get("id", 0),
            name=payload.get("name", ""),
            full_name=payload.get("full_name", ""),
            star_count=payload.get("stargazers_count", 0),
            primary_language=payload.get("language"),
        )


@dataclass(frozen=True)
class LanguageShare:
    name: str
    # Two-decimal display form, e.g. "33.33"
    percentage: str
    # Unrounded percentage, used for ordering and bar widths
    value: float


__all__ = ["RepositoryRecord", "LanguageShare"]
