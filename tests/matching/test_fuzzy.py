# tests/matching/test_fuzzy.py
"""Tests for the approximate-match fallback."""

from __future__ import annotations

import pytest

from prompt_optimizer.config.models import FuzzyConfig
from prompt_optimizer.matching.fuzzy import FuzzyHit, SequenceFuzzySearcher, window_distance
from prompt_optimizer.registry.models import SkillEntry


class TestWindowDistance:
    """Tests for window alignment."""

    def test_identical(self) -> None:
        """Identical strings are zero apart."""
        assert window_distance("abc", "abc") == 0.0

    def test_offset_penalty(self) -> None:
        """A match two characters in costs 2 / location_distance."""
        assert window_distance("abc", "xxabcxx") == pytest.approx(0.02)

    def test_location_distance_scales_penalty(self) -> None:
        assert window_distance("abc", "xxabcxx", location_distance=10) == pytest.approx(0.2)

    def test_empty(self) -> None:
        """Either side empty is the maximum distance."""
        assert window_distance("", "abc") == 1.0
        assert window_distance("abc", "") == 1.0

    def test_typo(self) -> None:
        """One dropped letter costs a sixth of the window."""
        assert window_distance("shopfy", "shopify integration") == pytest.approx(1 / 6)

    def test_unrelated(self) -> None:
        assert window_distance("docker", "kubernetes") > 0.4


class TestFieldDistance:
    """Tests for per-field distance."""

    def test_list_uses_best_element(self) -> None:
        """A list field is as close as its closest element."""
        searcher = SequenceFuzzySearcher()
        assert searcher.field_distance("shopify", ["xyz", "shopify"]) == 0.0

    def test_empty_list(self) -> None:
        assert SequenceFuzzySearcher().field_distance("shopify", []) == 1.0

    def test_unsupported_value(self) -> None:
        """Non-text values never match."""
        assert SequenceFuzzySearcher().field_distance("shopify", 42) == 1.0

    def test_case_insensitive_field(self) -> None:
        assert SequenceFuzzySearcher().field_distance("docker", "DOCKER") == 0.0


class TestSequenceFuzzySearcher:
    """Tests for weighted multi-field search."""

    @pytest.fixture
    def entries(self) -> list[SkillEntry]:
        return [
            SkillEntry(id="k8s", name="kubernetes"),
            SkillEntry(id="dock-worker", name="dock worker"),
            SkillEntry(id="docker", name="docker"),
        ]

    def test_orders_by_distance(self, entries: list[SkillEntry]) -> None:
        """Closer entries come first."""
        hits = SequenceFuzzySearcher().search(entries, "docker", {"name": 1.0})
        assert [h.entry.id for h in hits] == ["docker", "dock-worker"]
        assert hits[0].distance < hits[1].distance

    def test_threshold(self, entries: list[SkillEntry]) -> None:
        """Fields farther than the threshold do not count."""
        hits = SequenceFuzzySearcher(threshold=0.2).search(entries, "docker", {"name": 1.0})
        assert [h.entry.id for h in hits] == ["docker"]

    def test_exact_match_uses_epsilon(self, entries: list[SkillEntry]) -> None:
        """A perfect field still leaves a tiny distance, never zero."""
        hits = SequenceFuzzySearcher().search(entries, "docker", {"name": 1.0})
        assert hits[0].distance == pytest.approx(0.001)

    def test_query_is_lowercased(self, entries: list[SkillEntry]) -> None:
        """The query is trimmed and lowercased before comparison."""
        hits = SequenceFuzzySearcher().search(entries, "  DOCKER ", {"name": 1.0})
        assert hits[0].entry.id == "docker"

    def test_scores_in_unit_interval(self, shopify_skill: SkillEntry) -> None:
        """A near miss scores above zero and at most one."""
        hits = SequenceFuzzySearcher().search(
            [shopify_skill],
            "shopfy",
            {"name": 0.4, "description": 0.4, "keywords": 0.2},
        )
        assert len(hits) == 1
        assert 0.0 < hits[0].score <= 1.0
        assert hits[0].score > 0.6

    def test_completely_distant_entry_is_dropped(self) -> None:
        """With a threshold of 1.0 a field at distance 1.0 counts but scores zero, so it is skipped."""
        searcher = SequenceFuzzySearcher(threshold=1.0)
        hits = searcher.search([SkillEntry(id="a", name="abc")], "xyz", {"name": 1.0})
        assert hits == []

    def test_loose_threshold_never_scores_zero(self, entries: list[SkillEntry]) -> None:
        """Every hit from a maximally loose search still has a positive score."""
        hits = SequenceFuzzySearcher(threshold=1.0).search(entries, "docker", {"name": 1.0})
        assert hits
        assert all(0.0 < h.score <= 1.0 for h in hits)

    def test_empty_query(self, entries: list[SkillEntry]) -> None:
        assert SequenceFuzzySearcher().search(entries, "", {"name": 1.0}) == []

    def test_no_entries(self) -> None:
        assert SequenceFuzzySearcher().search([], "docker", {"name": 1.0}) == []

    def test_no_fields(self, entries: list[SkillEntry]) -> None:
        """No weighted fields means nothing can match."""
        assert SequenceFuzzySearcher().search(entries, "docker", {}) == []

    def test_missing_attribute_never_counts(self, entries: list[SkillEntry]) -> None:
        """Fields an entry does not have are treated as distance 1.0."""
        assert SequenceFuzzySearcher().search(entries, "docker", {"nope": 1.0}) == []

    def test_from_config(self) -> None:
        """from_config copies threshold and location distance."""
        searcher = SequenceFuzzySearcher.from_config(
            FuzzyConfig(threshold=0.25, location_distance=50)
        )
        assert searcher.threshold == 0.25
        assert searcher.location_distance == 50


class TestFuzzyHit:
    """Tests for FuzzyHit."""

    def test_score(self) -> None:
        """Score is one minus distance."""
        hit = FuzzyHit(entry=SkillEntry(id="x"), distance=0.25)
        assert hit.score == 0.75
