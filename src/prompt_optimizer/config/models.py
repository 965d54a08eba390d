"""Pydantic configuration models for the matching engine.

``MatcherConfig`` is passed into every matcher; nothing in the matching
package reads module-level tuning constants directly.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, field_validator

from prompt_optimizer.config.defaults import (
    DEFAULT_AGENT_DESCRIPTION_TOKENS,
    DEFAULT_AGENT_LIMIT,
    DEFAULT_AGENT_MIN_SCORE,
    DEFAULT_AGENT_SEGMENT_BOOST,
    DEFAULT_AGENT_SEGMENT_MIN_LENGTH,
    DEFAULT_COMMAND_DESCRIPTION_TOKENS,
    DEFAULT_COMMAND_LIMIT,
    DEFAULT_COMMAND_MIN_SCORE,
    DEFAULT_COMMAND_RELATED_SKILL_BOOST,
    DEFAULT_COMMAND_SUMMARY_TOKENS,
    DEFAULT_COMMAND_SUMMARY_WEIGHT,
    DEFAULT_FUZZY_LOCATION_DISTANCE,
    DEFAULT_FUZZY_THRESHOLD,
    DEFAULT_RULE_LIMIT,
    DEFAULT_RULE_MIN_SCORE,
    DEFAULT_SKILL_DESCRIPTION_TOKENS,
    DEFAULT_SKILL_DESCRIPTION_WEIGHT,
    DEFAULT_SKILL_KEYWORD_WEIGHT,
    DEFAULT_SKILL_LIMIT,
    DEFAULT_SKILL_MENTION_BOOST,
    DEFAULT_SKILL_MIN_SCORE,
    DEFAULT_SKILL_NAME_WEIGHT,
    DEFAULT_SKILL_SEGMENT_BOOST,
    DEFAULT_SKILL_SEGMENT_MIN_LENGTH,
)
from prompt_optimizer.config.signals import (
    DEFAULT_AGENT_TASK_SIGNALS,
    DEFAULT_RULE_SIGNALS,
)

logger = logging.getLogger(__name__)


def _copy_table(table: dict[str, list[str]]) -> dict[str, list[str]]:
    return {key: list(words) for key, words in table.items()}


class FuzzyConfig(BaseModel):
    """Approximate-match fallback settings for one category."""

    enabled: bool = Field(default=True, description="Run the fallback pass")
    threshold: float = Field(
        default=DEFAULT_FUZZY_THRESHOLD,
        ge=0,
        lt=1,
        description="Maximum field distance that still counts as a match",
    )
    location_distance: int = Field(
        default=DEFAULT_FUZZY_LOCATION_DISTANCE,
        gt=0,
        description="Offset (in characters) that adds 1.0 to a field distance",
    )
    fields: dict[str, float] = Field(
        default_factory=dict,
        description="Entry attribute -> relative weight",
    )

    model_config = {"frozen": True}

    @field_validator("fields")
    @classmethod
    def validate_weights(cls, v: dict[str, float]) -> dict[str, float]:
        """Field weights must be positive."""
        for name, weight in v.items():
            if weight <= 0:
                raise ValueError(f"Fuzzy weight for '{name}' must be positive")
        return v


class SkillMatchConfig(BaseModel):
    """Weights, boosts and limits for skill matching."""

    keyword_weight: float = Field(default=DEFAULT_SKILL_KEYWORD_WEIGHT, ge=0)
    name_weight: float = Field(default=DEFAULT_SKILL_NAME_WEIGHT, ge=0)
    description_weight: float = Field(default=DEFAULT_SKILL_DESCRIPTION_WEIGHT, ge=0)
    description_tokens: int = Field(default=DEFAULT_SKILL_DESCRIPTION_TOKENS, ge=0)
    mention_boost: float = Field(default=DEFAULT_SKILL_MENTION_BOOST, ge=0)
    segment_boost: float = Field(default=DEFAULT_SKILL_SEGMENT_BOOST, ge=0)
    segment_min_length: int = Field(default=DEFAULT_SKILL_SEGMENT_MIN_LENGTH, ge=1)
    min_score: float = Field(default=DEFAULT_SKILL_MIN_SCORE, ge=0)
    limit: int | None = Field(default=DEFAULT_SKILL_LIMIT, ge=0)
    fuzzy: FuzzyConfig = Field(
        default_factory=lambda: FuzzyConfig(
            fields={"name": 0.4, "description": 0.4, "keywords": 0.2}
        )
    )

    model_config = {"frozen": True}


class AgentMatchConfig(BaseModel):
    """Weights, boosts and limits for agent matching."""

    description_tokens: int = Field(default=DEFAULT_AGENT_DESCRIPTION_TOKENS, ge=0)
    segment_boost: float = Field(default=DEFAULT_AGENT_SEGMENT_BOOST, ge=0)
    segment_min_length: int = Field(default=DEFAULT_AGENT_SEGMENT_MIN_LENGTH, ge=1)
    min_score: float = Field(default=DEFAULT_AGENT_MIN_SCORE, ge=0)
    limit: int | None = Field(default=DEFAULT_AGENT_LIMIT, ge=0)
    fuzzy: FuzzyConfig = Field(
        default_factory=lambda: FuzzyConfig(
            fields={"name": 0.3, "description": 0.5, "role": 0.2}
        )
    )

    model_config = {"frozen": True}


class CommandMatchConfig(BaseModel):
    """Weights, boosts and limits for command matching."""

    description_tokens: int = Field(default=DEFAULT_COMMAND_DESCRIPTION_TOKENS, ge=0)
    summary_tokens: int = Field(default=DEFAULT_COMMAND_SUMMARY_TOKENS, ge=0)
    summary_weight: float = Field(default=DEFAULT_COMMAND_SUMMARY_WEIGHT, ge=0)
    related_skill_boost: float = Field(
        default=DEFAULT_COMMAND_RELATED_SKILL_BOOST, ge=0
    )
    min_score: float = Field(default=DEFAULT_COMMAND_MIN_SCORE, ge=0)
    limit: int | None = Field(default=DEFAULT_COMMAND_LIMIT, ge=0)
    fuzzy: FuzzyConfig = Field(
        default_factory=lambda: FuzzyConfig(
            fields={"name": 0.4, "description": 0.4, "content_summary": 0.2}
        )
    )

    model_config = {"frozen": True}


class RuleMatchConfig(BaseModel):
    """Threshold and limit for rule matching.

    Rules rely on curated signal tables, so the fallback pass is off unless
    a configuration turns it on.
    """

    min_score: float = Field(default=DEFAULT_RULE_MIN_SCORE, ge=0)
    limit: int | None = Field(default=DEFAULT_RULE_LIMIT, ge=0)
    fuzzy: FuzzyConfig = Field(
        default_factory=lambda: FuzzyConfig(
            enabled=False, fields={"name": 0.5, "description": 0.5}
        )
    )

    model_config = {"frozen": True}


class MatcherConfig(BaseModel):
    """Complete matching configuration, including the signal tables.

    This is the single value injected into the matchers. Defaults reproduce
    the built-in constants and tables.
    """

    skills: SkillMatchConfig = Field(default_factory=SkillMatchConfig)
    agents: AgentMatchConfig = Field(default_factory=AgentMatchConfig)
    commands: CommandMatchConfig = Field(default_factory=CommandMatchConfig)
    rules: RuleMatchConfig = Field(default_factory=RuleMatchConfig)
    agent_task_signals: dict[str, list[str]] = Field(
        default_factory=lambda: _copy_table(DEFAULT_AGENT_TASK_SIGNALS),
        description="Agent id -> task-signal words",
    )
    rule_signals: dict[str, list[str]] = Field(
        default_factory=lambda: _copy_table(DEFAULT_RULE_SIGNALS),
        description="Rule id -> relevance-signal words",
    )

    model_config = {"frozen": True}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "MatcherConfig":
        """Create from a (partial) dictionary.

        Category sections override individual defaults. Signal tables are
        merged per id over the built-in tables, so a file only needs to list
        the ids it adds or changes.
        """
        data = dict(data)
        for key, defaults in (
            ("agent_task_signals", DEFAULT_AGENT_TASK_SIGNALS),
            ("rule_signals", DEFAULT_RULE_SIGNALS),
        ):
            if key in data:
                merged = _copy_table(defaults)
                merged.update(data[key] or {})
                data[key] = merged
        return cls.model_validate(data)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return self.model_dump(mode="json")


def load_matcher_config(path: str | Path | None = None) -> MatcherConfig:
    """Load matcher configuration from a JSON file.

    Args:
        path: JSON file to read. None returns the defaults.

    Raises:
        FileNotFoundError: If ``path`` does not exist
        pydantic.ValidationError: If the file contains invalid values
    """
    if path is None:
        return MatcherConfig()

    config_path = Path(path).expanduser()
    if not config_path.exists():
        raise FileNotFoundError(f"Signals file not found: {config_path}")

    with open(config_path, encoding="utf-8") as f:
        raw = json.load(f)

    logger.debug("Loaded matcher configuration from %s", config_path)
    return MatcherConfig.from_dict(raw)
