# prompt_optimizer/registry/models.py
"""Typed registry entries.

The four knowledge-base categories share ``id``, ``name``, ``description``
and ``content_summary``; each adds its own signal payload. Field aliases
are camelCase so registry files produced by other tools load unchanged.
"""

from __future__ import annotations

from datetime import datetime, timezone
from enum import Enum
from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel


class EntryKind(str, Enum):
    """Knowledge-base categories."""

    SKILL = "skill"
    AGENT = "agent"
    COMMAND = "command"
    RULE = "rule"


class _RegistryModel(BaseModel):
    """Common model settings: frozen, camelCase aliases, nulls become defaults."""

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    @model_validator(mode="before")
    @classmethod
    def _drop_nulls(cls, data: Any) -> Any:
        # A missing or null field degrades to its empty default
        if isinstance(data, dict):
            return {k: v for k, v in data.items() if v is not None}
        return data

    def to_dict(self) -> dict[str, Any]:
        """Convert to a camelCase dictionary."""
        return self.model_dump(mode="json", by_alias=True)


class BaseEntry(_RegistryModel):
    """Fields every entry exposes to the matcher."""

    id: str = ""
    name: str = ""
    description: str = ""
    path: str = ""
    content_summary: str = ""


class SkillEntry(BaseEntry):
    """A skill: matched through its declared keywords."""

    kind: Literal["skill"] = "skill"
    keywords: list[str] = Field(default_factory=list)
    category: str = ""  # informational only


class AgentEntry(BaseEntry):
    """An agent: matched through the external task-signal table."""

    kind: Literal["agent"] = "agent"
    role: str = ""
    tools: list[str] = Field(default_factory=list)
    model: str = ""


class CommandEntry(BaseEntry):
    """A slash command: related to the skills it references."""

    kind: Literal["command"] = "command"
    usage: str = ""
    related_skills: list[str] = Field(default_factory=list)


class RuleEntry(BaseEntry):
    """A rule: matched through the external relevance-signal table."""

    kind: Literal["rule"] = "rule"


Entry = Annotated[
    Union[SkillEntry, AgentEntry, CommandEntry, RuleEntry],
    Field(discriminator="kind"),
]


class HookEntry(_RegistryModel):
    """A hook declared in the knowledge base's settings file."""

    id: str = ""
    type: str = ""
    matcher: str = ""
    description: str = ""


class RegistryMetadata(_RegistryModel):
    """Build information and per-category counts."""

    generated_at: str = Field(
        default_factory=lambda: datetime.now(timezone.utc).isoformat()
    )
    skill_count: int = 0
    agent_count: int = 0
    command_count: int = 0
    rule_count: int = 0
    hook_count: int = 0

    @property
    def total(self) -> int:
        return (
            self.skill_count
            + self.agent_count
            + self.command_count
            + self.rule_count
            + self.hook_count
        )


class Registry(_RegistryModel):
    """The complete, immutable collection of entries for one session."""

    skills: list[SkillEntry] = Field(default_factory=list)
    agents: list[AgentEntry] = Field(default_factory=list)
    commands: list[CommandEntry] = Field(default_factory=list)
    rules: list[RuleEntry] = Field(default_factory=list)
    hooks: list[HookEntry] = Field(default_factory=list)
    metadata: RegistryMetadata = Field(default_factory=RegistryMetadata)

    @classmethod
    def create(
        cls,
        skills: list[SkillEntry] | None = None,
        agents: list[AgentEntry] | None = None,
        commands: list[CommandEntry] | None = None,
        rules: list[RuleEntry] | None = None,
        hooks: list[HookEntry] | None = None,
    ) -> "Registry":
        """Create a registry with metadata counts filled in."""
        skills = skills or []
        agents = agents or []
        commands = commands or []
        rules = rules or []
        hooks = hooks or []
        return cls(
            skills=skills,
            agents=agents,
            commands=commands,
            rules=rules,
            hooks=hooks,
            metadata=RegistryMetadata(
                skill_count=len(skills),
                agent_count=len(agents),
                command_count=len(commands),
                rule_count=len(rules),
                hook_count=len(hooks),
            ),
        )

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Registry":
        """Create from dictionary (camelCase or snake_case keys)."""
        return cls.model_validate(data)

    @property
    def is_empty(self) -> bool:
        return not (self.skills or self.agents or self.commands or self.rules)
