"""Markdown rendering of an optimized prompt."""

from __future__ import annotations

from prompt_optimizer.config.defaults import (
    DEFAULT_AGENT_DESCRIPTION_CHARS,
    DEFAULT_COMMAND_SUMMARY_CHARS,
    DEFAULT_PRIMARY_SKILLS,
    DEFAULT_SKILL_DESCRIPTION_CHARS,
)
from prompt_optimizer.prompt.assembler import OptimizedPrompt


def truncate(text: str, max_chars: int) -> str:
    """Cut ``text`` to ``max_chars`` and mark the cut with ``...``."""
    return text[:max_chars] + ("..." if len(text) > max_chars else "")


def format_output(result: OptimizedPrompt) -> str:
    """Render the full report: context, matched entries and optimized text."""
    lines: list[str] = ["# Optimierter Prompt", "", "## Kontext", result.original_prompt, ""]

    if result.skills:
        lines.append("## Relevante Skills (automatisch erkannt)")
        lines.append("")
        lines.append("### Primaer")
        for skill in result.skills[:DEFAULT_PRIMARY_SKILLS]:
            lines.append(
                f"- **{skill.name}**: "
                f"{truncate(skill.description, DEFAULT_SKILL_DESCRIPTION_CHARS)}"
            )
            lines.append(f"  Nutze: `{skill.path}`")

        secondary = result.skills[DEFAULT_PRIMARY_SKILLS:]
        if secondary:
            lines.append("")
            lines.append("### Sekundaer")
            for skill in secondary:
                lines.append(f"- **{skill.name}**: {skill.content_summary}")
        lines.append("")

    if result.agents:
        lines.append("## Empfohlene Agents")
        lines.append("")
        for agent in result.agents:
            lines.append(
                f"- **{agent.name}** ({agent.model}): "
                f"{truncate(agent.description, DEFAULT_AGENT_DESCRIPTION_CHARS)}"
            )
            lines.append(f"  Pfad: `{agent.path}`")
        lines.append("")

    if result.commands:
        lines.append("## Empfohlene Commands")
        lines.append("")
        for command in result.commands:
            description = command.description or command.content_summary[
                :DEFAULT_COMMAND_SUMMARY_CHARS
            ]
            lines.append(f"- `/{command.name}` - {description}")
        lines.append("")

    if result.rules:
        lines.append("## Anwendbare Regeln")
        lines.append("")
        for rule in result.rules:
            lines.append(f"- **{rule.name}**: {rule.description}")
        lines.append("")

    lines.append("## Optimierter Prompt")
    lines.append("---")
    lines.append(result.optimized_text)
    lines.append("---")

    return "\n".join(lines)
