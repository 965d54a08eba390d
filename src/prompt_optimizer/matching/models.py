"""Match result models."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from prompt_optimizer.registry.models import (
    AgentEntry,
    CommandEntry,
    Entry,
    RuleEntry,
    SkillEntry,
)


class MatchType(str, Enum):
    """Which pass produced a match."""

    KEYWORD = "keyword"
    FUZZY = "fuzzy"


@dataclass(frozen=True)
class ScoredMatch:
    """One ranked entry.

    Keyword-pass scores are unbounded above (boosts can push them past 1.0);
    fuzzy-pass scores are always in (0, 1].
    """

    entry: Entry
    score: float
    match_type: MatchType = MatchType.KEYWORD

    @property
    def id(self) -> str:
        return self.entry.id

    @property
    def name(self) -> str:
        return self.entry.name

    def to_dict(self) -> dict[str, object]:
        """Convert to a JSON-friendly dictionary."""
        return {
            "id": self.entry.id,
            "name": self.entry.name,
            "score": round(self.score, 4),
            "matchType": self.match_type.value,
        }


@dataclass
class MatchSet:
    """The four ranked lists produced for one query."""

    skills: list[ScoredMatch] = field(default_factory=list)
    agents: list[ScoredMatch] = field(default_factory=list)
    commands: list[ScoredMatch] = field(default_factory=list)
    rules: list[ScoredMatch] = field(default_factory=list)

    @property
    def skill_ids(self) -> list[str]:
        return [m.id for m in self.skills]

    @property
    def total(self) -> int:
        return len(self.skills) + len(self.agents) + len(self.commands) + len(self.rules)

    def skill_entries(self) -> list[SkillEntry]:
        return [m.entry for m in self.skills]  # type: ignore[misc]

    def agent_entries(self) -> list[AgentEntry]:
        return [m.entry for m in self.agents]  # type: ignore[misc]

    def command_entries(self) -> list[CommandEntry]:
        return [m.entry for m in self.commands]  # type: ignore[misc]

    def rule_entries(self) -> list[RuleEntry]:
        return [m.entry for m in self.rules]  # type: ignore[misc]

    def to_dict(self) -> dict[str, list[dict[str, object]]]:
        """Convert to a JSON-friendly dictionary."""
        return {
            "skills": [m.to_dict() for m in self.skills],
            "agents": [m.to_dict() for m in self.agents],
            "commands": [m.to_dict() for m in self.commands],
            "rules": [m.to_dict() for m in self.rules],
        }
