# tests/config/test_matcher_config.py
"""Tests for matcher configuration models."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from prompt_optimizer.config.models import (
    FuzzyConfig,
    MatcherConfig,
    SkillMatchConfig,
    load_matcher_config,
)
from prompt_optimizer.config.signals import DEFAULT_AGENT_TASK_SIGNALS, DEFAULT_RULE_SIGNALS


class TestDefaults:
    """The default configuration reproduces the built-in constants."""

    def test_skill_defaults(self) -> None:
        """Skill weights, boost and limit match the built-in constants."""
        skills = MatcherConfig().skills
        assert (skills.keyword_weight, skills.name_weight, skills.description_weight) == (
            0.5,
            0.3,
            0.2,
        )
        assert skills.mention_boost == 0.6
        assert skills.limit == 10

    def test_limits(self) -> None:
        """Rules are unbounded, the other categories capped."""
        config = MatcherConfig()
        assert config.agents.limit == 3
        assert config.commands.limit == 5
        assert config.rules.limit is None

    def test_thresholds(self) -> None:
        """Each category keeps its own minimum score."""
        config = MatcherConfig()
        assert config.skills.min_score == 0.05
        assert config.agents.min_score == 0.05
        assert config.commands.min_score == 0.15
        assert config.rules.min_score == 0.0

    def test_rule_fallback_disabled(self) -> None:
        """Rules only match through their curated table by default."""
        config = MatcherConfig()
        assert config.skills.fuzzy.enabled
        assert not config.rules.fuzzy.enabled

    def test_signal_tables(self) -> None:
        """The built-in tables cover 18 agents and 8 rules."""
        config = MatcherConfig()
        assert len(config.agent_task_signals) == 18
        assert len(config.rule_signals) == 8
        assert config.rule_signals["testing"] == DEFAULT_RULE_SIGNALS["testing"]

    def test_tables_are_copies(self) -> None:
        """Mutating a config table leaves the built-in table untouched."""
        config = MatcherConfig()
        config.agent_task_signals["planner"].append("extra")
        assert "extra" not in DEFAULT_AGENT_TASK_SIGNALS["planner"]


class TestValidation:
    """Tests for config validation."""

    def test_frozen(self) -> None:
        """Config models are immutable."""
        with pytest.raises(ValidationError):
            MatcherConfig().skills.limit = 2

    def test_fuzzy_weights_must_be_positive(self) -> None:
        with pytest.raises(ValidationError):
            FuzzyConfig(fields={"name": 0})

    def test_fuzzy_threshold_range(self) -> None:
        """Thresholds outside [0, 1) are rejected."""
        with pytest.raises(ValidationError):
            FuzzyConfig(threshold=1.5)
        with pytest.raises(ValidationError):
            FuzzyConfig(threshold=-0.1)

    def test_fuzzy_threshold_of_one_rejected(self) -> None:
        """A threshold of 1.0 would let fully distant fields match."""
        with pytest.raises(ValidationError):
            FuzzyConfig(threshold=1.0)
        assert FuzzyConfig(threshold=0.99).threshold == 0.99

    def test_negative_limit_rejected(self) -> None:
        with pytest.raises(ValidationError):
            SkillMatchConfig(limit=-1)


class TestFromDict:
    """Tests for MatcherConfig.from_dict."""

    def test_partial_section(self) -> None:
        """Keys missing from a section keep their defaults."""
        config = MatcherConfig.from_dict({"skills": {"limit": 4}})
        assert config.skills.limit == 4
        assert config.skills.keyword_weight == 0.5

    def test_signal_tables_merge_per_id(self) -> None:
        """File tables add new ids and replace existing ones."""
        config = MatcherConfig.from_dict(
            {"agent_task_signals": {"my-agent": ["foo"], "planner": ["roadmap"]}}
        )
        assert len(config.agent_task_signals) == 19
        assert config.agent_task_signals["my-agent"] == ["foo"]
        assert config.agent_task_signals["planner"] == ["roadmap"]
        assert config.agent_task_signals["architect"] == DEFAULT_AGENT_TASK_SIGNALS["architect"]

    def test_round_trip(self) -> None:
        config = MatcherConfig.from_dict({"commands": {"related_skill_boost": 0.5}})
        assert MatcherConfig.from_dict(config.to_dict()) == config


class TestLoadMatcherConfig:
    """Tests for load_matcher_config."""

    def test_none_returns_defaults(self) -> None:
        """No path means the default configuration."""
        assert load_matcher_config() == MatcherConfig()

    def test_load_file(self, tmp_path: Path) -> None:
        """A signals file is merged over the defaults."""
        path = tmp_path / "signals.json"
        path.write_text(json.dumps({"rule_signals": {"docs": ["readme"]}}), encoding="utf-8")
        config = load_matcher_config(path)
        assert config.rule_signals["docs"] == ["readme"]
        assert "testing" in config.rule_signals

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError, match="Signals file not found"):
            load_matcher_config(tmp_path / "missing.json")

    def test_invalid_values(self, tmp_path: Path) -> None:
        """Wrongly typed values raise a ValidationError."""
        path = tmp_path / "signals.json"
        path.write_text('{"skills": {"limit": "many"}}', encoding="utf-8")
        with pytest.raises(ValidationError):
            load_matcher_config(path)
