# prompt_optimizer/prompt/assembler.py
"""Prompt enrichment: matches a request and assembles the optimized text."""

from __future__ import annotations

import logging
from typing import Any

from pydantic import BaseModel, Field

from prompt_optimizer.config.defaults import DEFAULT_PRIMARY_SKILLS, DEFAULT_TEXT_COMMANDS
from prompt_optimizer.config.models import MatcherConfig
from prompt_optimizer.matching.fuzzy import FuzzySearcher
from prompt_optimizer.matching.matcher import match_all
from prompt_optimizer.prompt.analysis import detect_task_type, detect_technologies
from prompt_optimizer.registry.models import (
    AgentEntry,
    CommandEntry,
    Registry,
    RuleEntry,
    SkillEntry,
)

logger = logging.getLogger(__name__)


class OptimizedPrompt(BaseModel):
    """A request together with everything matched for it."""

    original_prompt: str
    task_type: str = "general"
    technologies: list[str] = Field(default_factory=list)
    skills: list[SkillEntry] = Field(default_factory=list)
    agents: list[AgentEntry] = Field(default_factory=list)
    commands: list[CommandEntry] = Field(default_factory=list)
    rules: list[RuleEntry] = Field(default_factory=list)
    optimized_text: str = ""

    model_config = {"frozen": True}

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return self.model_dump(mode="json")


def build_optimized_text(
    prompt: str,
    task_type: str,
    technologies: list[str],
    skills: list[SkillEntry],
    agents: list[AgentEntry],
    commands: list[CommandEntry],
    rules: list[RuleEntry],
) -> str:
    """Assemble the enriched request handed to the coding assistant."""
    parts: list[str] = [prompt, ""]

    if technologies:
        parts.append(f"Erkannte Technologien: {', '.join(technologies)}")
        parts.append("")

    parts.append(f"Aufgabentyp: {task_type}")
    parts.append("")

    if skills:
        parts.append("Nutze folgende Skills als Referenz:")
        for skill in skills[:DEFAULT_PRIMARY_SKILLS]:
            parts.append(f"- {skill.name} ({skill.path})")
        parts.append("")

    if agents:
        parts.append(f"Verwende den **{agents[0].name}** Agent fuer diese Aufgabe.")
        parts.append("")

    if commands:
        parts.append("Empfohlene Commands:")
        for command in commands[:DEFAULT_TEXT_COMMANDS]:
            parts.append(f"- /{command.name}")
        parts.append("")

    if rules:
        parts.append("Beachte diese Regeln:")
        for rule in rules:
            parts.append(f"- {rule.name} ({rule.path})")

    return "\n".join(parts)


def optimize_prompt(
    prompt: str,
    registry: Registry,
    config: MatcherConfig | None = None,
    searcher: FuzzySearcher | None = None,
) -> OptimizedPrompt:
    """Match a request against the registry and build its optimized form."""
    matches = match_all(prompt, registry, config=config, searcher=searcher)
    task_type = detect_task_type(prompt)
    technologies = detect_technologies(prompt)

    logger.info(
        "Matched: %d skills, %d agents, %d commands, %d rules",
        len(matches.skills),
        len(matches.agents),
        len(matches.commands),
        len(matches.rules),
    )

    skills = matches.skill_entries()
    agents = matches.agent_entries()
    commands = matches.command_entries()
    rules = matches.rule_entries()

    return OptimizedPrompt(
        original_prompt=prompt,
        task_type=task_type,
        technologies=technologies,
        skills=skills,
        agents=agents,
        commands=commands,
        rules=rules,
        optimized_text=build_optimized_text(
            prompt, task_type, technologies, skills, agents, commands, rules
        ),
    )
