"""Merging of the keyword and fallback passes."""

from __future__ import annotations

from collections.abc import Iterable

from prompt_optimizer.matching.fuzzy import FuzzyHit
from prompt_optimizer.matching.models import MatchType, ScoredMatch


def merge_matches(
    keyword_matches: Iterable[ScoredMatch],
    fuzzy_hits: Iterable[FuzzyHit],
    limit: int | None = None,
) -> list[ScoredMatch]:
    """Combine both passes into one ranked, deduplicated list.

    Each id appears at most once. The keyword pass always wins: a fallback
    hit is only added when its id has no keyword match. The sort is stable,
    so equal scores keep discovery order (registry order for the keyword
    pass, then fallback order). ``limit=None`` keeps everything.
    """
    if limit is not None and limit <= 0:
        return []

    best: dict[str, ScoredMatch] = {}
    for match in keyword_matches:
        current = best.get(match.id)
        if current is None or match.score > current.score:
            best[match.id] = match

    results = list(best.values())
    seen = set(best)
    for hit in fuzzy_hits:
        entry_id = hit.entry.id  # type: ignore[attr-defined]
        if entry_id in seen:
            continue
        seen.add(entry_id)
        results.append(
            ScoredMatch(entry=hit.entry, score=hit.score, match_type=MatchType.FUZZY)  # type: ignore[arg-type]
        )

    results.sort(key=lambda m: m.score, reverse=True)
    return results if limit is None else results[:limit]
