# prompt_optimizer/matching/fuzzy.py
"""Approximate-match fallback.

The fallback only has to recover near misses the keyword pass did not
score, so any searcher satisfying ``FuzzySearcher`` will do. The default
implementation aligns the query against each configured field with
``difflib.SequenceMatcher``:

- field distance = (1 - best window ratio) + window offset / location_distance
- list fields (e.g. keywords) use their best element
- a field only counts if its distance is within the threshold
- counting fields combine as a weighted product, prod(d ** w), with the
  weights normalised over all configured fields

An entry with no counting field is not returned. The combined distance is
in [0, 1), so ``1 - distance`` is a score in (0, 1].
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from difflib import SequenceMatcher
from typing import Protocol, TypeVar

from prompt_optimizer.config.defaults import (
    DEFAULT_FUZZY_EPSILON,
    DEFAULT_FUZZY_LOCATION_DISTANCE,
    DEFAULT_FUZZY_THRESHOLD,
)
from prompt_optimizer.config.models import FuzzyConfig

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class FuzzyHit:
    """An entry found by the fallback, with its normalised distance."""

    entry: object
    distance: float

    @property
    def score(self) -> float:
        return 1.0 - self.distance


class FuzzySearcher(Protocol):
    """Narrow interface for the approximate-match capability."""

    def search(
        self,
        entries: Sequence[T],
        query: str,
        fields: Mapping[str, float],
    ) -> list[FuzzyHit]:
        """Return hits ordered by ascending distance."""
        ...


def window_distance(
    query: str,
    text: str,
    location_distance: int = DEFAULT_FUZZY_LOCATION_DISTANCE,
) -> float:
    """Best distance of ``query`` against any same-length window of ``text``.

    Candidate windows start where a matching block would align the query
    with the text. Both strings are expected to be lowercased already.
    """
    if not query or not text:
        return 1.0

    if len(text) <= len(query):
        return 1.0 - SequenceMatcher(None, query, text, autojunk=False).ratio()

    best = 1.0
    seen: set[int] = set()
    blocks = SequenceMatcher(None, query, text, autojunk=False).get_matching_blocks()
    for block in blocks:
        if block.size == 0:
            continue
        start = min(max(0, block.b - block.a), len(text) - len(query))
        if start in seen:
            continue
        seen.add(start)

        window = text[start : start + len(query)]
        ratio = SequenceMatcher(None, query, window, autojunk=False).ratio()
        best = min(best, (1.0 - ratio) + start / location_distance)
        if best == 0.0:
            break
    return best


class SequenceFuzzySearcher:
    """Weighted multi-field fuzzy search built on ``difflib``."""

    def __init__(
        self,
        threshold: float = DEFAULT_FUZZY_THRESHOLD,
        location_distance: int = DEFAULT_FUZZY_LOCATION_DISTANCE,
    ) -> None:
        self.threshold = threshold
        self.location_distance = location_distance

    @classmethod
    def from_config(cls, config: FuzzyConfig) -> "SequenceFuzzySearcher":
        return cls(
            threshold=config.threshold,
            location_distance=config.location_distance,
        )

    def field_distance(self, query: str, value: object) -> float:
        """Distance of the query against a string or list-of-strings field."""
        if isinstance(value, str):
            return window_distance(query, value.lower(), self.location_distance)
        if isinstance(value, (list, tuple, set, frozenset)):
            distances = [
                window_distance(query, str(item).lower(), self.location_distance)
                for item in value
                if item
            ]
            return min(distances, default=1.0)
        return 1.0

    def search(
        self,
        entries: Sequence[T],
        query: str,
        fields: Mapping[str, float],
    ) -> list[FuzzyHit]:
        query = (query or "").strip().lower()
        total_weight = sum(fields.values())
        if not query or not entries or total_weight <= 0:
            return []

        hits: list[FuzzyHit] = []
        for entry in entries:
            combined = 1.0
            matched = False
            for field_name, weight in fields.items():
                distance = self.field_distance(query, getattr(entry, field_name, ""))
                if distance > self.threshold:
                    continue
                matched = True
                combined *= max(distance, DEFAULT_FUZZY_EPSILON) ** (
                    weight / total_weight
                )
            # a total distance of 1.0 would score zero
            if matched and combined < 1.0:
                hits.append(FuzzyHit(entry=entry, distance=combined))

        hits.sort(key=lambda h: h.distance)
        logger.debug("Fuzzy search '%s' -> %d hits", query, len(hits))
        return hits
