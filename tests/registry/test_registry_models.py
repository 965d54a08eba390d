# tests/registry/test_registry_models.py
"""Tests for registry models."""

from __future__ import annotations

import pytest
from pydantic import TypeAdapter, ValidationError

from prompt_optimizer.matching.models import ScoredMatch
from prompt_optimizer.registry.models import (
    AgentEntry,
    CommandEntry,
    Entry,
    Registry,
    RegistryMetadata,
    RuleEntry,
    SkillEntry,
)


class TestEntries:
    """Tests for entry models."""

    def test_defaults(self) -> None:
        skill = SkillEntry(id="x")
        assert skill.name == ""
        assert skill.keywords == []
        assert skill.kind == "skill"

    def test_camel_case_aliases(self) -> None:
        """Registry files written with camelCase keys load unchanged."""
        command = CommandEntry.model_validate(
            {"id": "tdd", "relatedSkills": ["testing"], "contentSummary": "Run TDD"}
        )
        assert command.related_skills == ["testing"]
        assert command.content_summary == "Run TDD"

    def test_snake_case_accepted(self) -> None:
        command = CommandEntry(id="tdd", related_skills=["testing"])
        assert command.related_skills == ["testing"]

    def test_nulls_become_defaults(self) -> None:
        """Null strings and lists degrade to their empty defaults."""
        agent = AgentEntry.model_validate({"id": "a", "description": None, "tools": None})
        assert agent.description == ""
        assert agent.tools == []

    def test_unknown_fields_ignored(self) -> None:
        rule = RuleEntry.model_validate({"id": "r", "severity": "high"})
        assert rule.id == "r"

    def test_frozen(self) -> None:
        skill = SkillEntry(id="x")
        with pytest.raises(ValidationError):
            skill.name = "changed"

    def test_to_dict_uses_aliases(self) -> None:
        data = SkillEntry(id="x", content_summary="s").to_dict()
        assert data["contentSummary"] == "s"
        assert "content_summary" not in data


class TestEntryUnion:
    """Tests for the Entry union."""

    def test_discriminated_union(self) -> None:
        """The kind field selects the concrete entry class."""
        adapter = TypeAdapter(Entry)
        entry = adapter.validate_python({"kind": "agent", "id": "planner", "model": "opus"})
        assert isinstance(entry, AgentEntry)
        assert entry.model == "opus"

    def test_unknown_kind_rejected(self) -> None:
        with pytest.raises(ValidationError):
            TypeAdapter(Entry).validate_python({"kind": "plugin", "id": "x"})

    def test_match_entry_round_trips_through_union(self) -> None:
        """A matched entry's dump validates back to the same entry type."""
        match = ScoredMatch(CommandEntry(id="tdd", related_skills=["testing"]), 0.5)
        entry = TypeAdapter(Entry).validate_python(match.entry.model_dump())
        assert isinstance(entry, CommandEntry)
        assert entry == match.entry


class TestRegistry:
    """Tests for the registry container."""

    def test_create_counts(self, sample_registry: Registry) -> None:
        """create fills the metadata counts."""
        meta = sample_registry.metadata
        assert meta.skill_count == 3
        assert meta.agent_count == 2
        assert meta.command_count == 2
        assert meta.rule_count == 3
        assert meta.total == 10

    def test_empty(self) -> None:
        assert Registry().is_empty
        assert Registry.create().metadata.total == 0

    def test_not_empty(self, sample_registry: Registry) -> None:
        assert not sample_registry.is_empty

    def test_from_dict_camel_case(self) -> None:
        """Metadata keys are read in camelCase."""
        registry = Registry.from_dict(
            {
                "skills": [{"id": "s", "keywords": ["a"]}],
                "metadata": {"generatedAt": "2024-01-01T00:00:00", "skillCount": 1},
            }
        )
        assert registry.skills[0].keywords == ["a"]
        assert registry.metadata.generated_at == "2024-01-01T00:00:00"
        assert registry.metadata.skill_count == 1

    def test_missing_sections_default(self) -> None:
        """Null or missing categories become empty lists."""
        registry = Registry.from_dict({"skills": None})
        assert registry.skills == []
        assert registry.hooks == []

    def test_metadata_timestamp(self) -> None:
        assert RegistryMetadata().generated_at
