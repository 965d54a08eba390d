# prompt_optimizer/matching/scoring.py
"""Shared scoring primitives.

All comparisons are bidirectional substring tests: a query token matches a
word when either contains the other. That tolerates plurals and compounds
in both directions ("stores" vs "store", "api" vs "graphql-api") without
any stemming.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from prompt_optimizer.matching.tokenize import tokenize


def token_hit(word: str, query_tokens: Sequence[str]) -> bool:
    """True if ``word`` and any query token contain one another."""
    return any(token in word or word in token for token in query_tokens)


def keyword_overlap(query_tokens: Sequence[str], keywords: Iterable[str]) -> float:
    """Fraction of ``keywords`` that hit the query tokens.

    Empty keywords are ignored; no keywords (or no query tokens) scores 0.
    """
    words = [kw.lower() for kw in keywords if kw]
    if not words or not query_tokens:
        return 0.0
    hits = sum(1 for word in words if token_hit(word, query_tokens))
    return hits / len(words)


def field_proximity(
    query_tokens: Sequence[str],
    text: str | None,
    max_tokens: int | None = None,
) -> float:
    """Fraction of a field's tokens that hit the query tokens.

    Only the first ``max_tokens`` tokens of the field are considered, so a
    long description cannot dominate through sheer length.
    """
    field_tokens = tokenize(text)
    if max_tokens is not None:
        field_tokens = field_tokens[:max_tokens]
    if not field_tokens or not query_tokens:
        return 0.0
    hits = sum(1 for word in field_tokens if token_hit(word, query_tokens))
    return hits / len(field_tokens)


def mentions(lowered_query: str, *names: str) -> bool:
    """True if any non-empty name appears verbatim in the lowercased query."""
    return any(name and name.lower() in lowered_query for name in names)


def segment_mentions(entry_id: str, lowered_query: str, min_length: int) -> int:
    """Count hyphen-separated id segments of ``min_length``+ chars found in the query."""
    return sum(
        1
        for segment in entry_id.lower().split("-")
        if len(segment) >= min_length and segment in lowered_query
    )
