"""Turn repository records into ranked language percentages."""

from __future__ import annotations

from typing import Iterable, List

from .errors import DegenerateInputError
from .models import LanguageShare, RepositoryRecord


def tally_languages(repos: Iterable[RepositoryRecord]) -> dict[str, int]:
    """
    Count repositories per primary language.

    Records without a language are skipped. Names are kept exactly as GitHub
    returns them, so "TypeScript" and "typescript" are counted separately.
    The returned dict preserves first-seen order.
    """
    tally: dict[str, int] = {}
    for repo in repos:
        lang = repo.primary_language
        if not lang:
            continue
        tally[lang] = tally.get(lang, 0) + 1
    return tally


def shares_from_tally(tally: dict[str, int]) -> List[LanguageShare]:
    """
    Convert counts into percentage shares, highest first.

    Percentages are formatted with ``:.2f``. ``sorted`` is stable, so equal
    shares keep the order in which their language was first seen.

    Raises:
        DegenerateInputError: if the tally has no counts at all
    """
    total = sum(tally.values())
    if total <= 0:
        raise DegenerateInputError("No repositories with a primary language")

    shares = []
    for lang, count in tally.items():
        value = (count / total) * 100
        shares.append(LanguageShare(lang, f"{value:.2f}", value))
    return sorted(shares, key=lambda share: share.value, reverse=True)


def aggregate(repos: Iterable[RepositoryRecord]) -> List[LanguageShare]:
    """Rank the primary languages of ``repos``; an empty list when none has one."""
    tally = tally_languages(repos)
    if not tally:
        return []
    return shares_from_tally(tally)


__all__ = ["tally_languages", "shares_from_tally", "aggregate"]
