"""Lexical relevance ranking of catalog entries against a problem statement.

Scores are additive integer bonuses over a lowercased composite of name,
description, and category. Purely substring matching; no stemming, no
embeddings.
"""

from __future__ import annotations

import logging
from typing import Iterable, Optional

from .models import Entry, HostingPreference, RankingResult

logger = logging.getLogger(__name__)

DEFAULT_MAX_RESULTS = 5

PHRASE_BONUS = 100
WORD_BONUS = 10
CATEGORY_BONUS = 50
LANGUAGE_BONUS = 20
HOSTING_BONUS = 15

MIN_WORD_LENGTH = 3


def score_entry(
    entry: Entry,
    problem: str,
    language: Optional[str] = None,
    hosting: HostingPreference = HostingPreference.ANY,
) -> int:
    """Compute the relevance score of a single entry."""
    hosting = HostingPreference(hosting)
    phrase = problem.lower()
    text = f"{entry.name} {entry.description} {entry.category}".lower()
    score = 0

    if phrase in text:
        score += PHRASE_BONUS

    for word in phrase.split():
        if len(word) >= MIN_WORD_LENGTH and word in text:
            score += WORD_BONUS

    if phrase in entry.category.lower():
        score += CATEGORY_BONUS

    if language and any(language.lower() in lang.lower() for lang in entry.languages):
        score += LANGUAGE_BONUS

    if hosting is not HostingPreference.ANY and hosting.value in {h.value for h in entry.hosting_types}:
        score += HOSTING_BONUS

    return score


def matches_hosting(entry: Entry, hosting: HostingPreference) -> bool:
    """Unspecified hosting passes every filter."""
    if hosting is HostingPreference.ANY or not entry.hosting_types:
        return True
    return hosting.value in {h.value for h in entry.hosting_types}


def rank_entries(
    entries: Iterable[Entry],
    problem: str,
    max_results: int = DEFAULT_MAX_RESULTS,
    language: Optional[str] = None,
    hosting: HostingPreference = HostingPreference.ANY,
) -> RankingResult:
    """Filter by hosting, score, drop zeros, stable-sort, and truncate.

    Ties keep their catalog order; ``sorted`` is stable.
    """
    if max_results < 1:
        raise ValueError(f"max_results must be at least 1, got {max_results}")
    hosting = HostingPreference(hosting)

    candidates = [e for e in entries if matches_hosting(e, hosting)]
    scored = []
    for entry in candidates:
        score = score_entry(entry, problem, language, hosting)
        if score > 0:
            scored.append(entry.with_score(score))

    ranked = sorted(scored, key=lambda e: e.relevance_score, reverse=True)[:max_results]

    logger.info(
        "Ranked %d of %d candidates for %r (hosting=%s, language=%s)",
        len(scored), len(candidates), problem, hosting.value, language,
    )
    return RankingResult(query=problem, matches=ranked, considered=len(candidates))
