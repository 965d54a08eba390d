# tests/conftest.py
"""Common test fixtures for prompt-optimizer tests."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path

import pytest

from prompt_optimizer.registry.models import (
    AgentEntry,
    CommandEntry,
    Registry,
    RuleEntry,
    SkillEntry,
)


@pytest.fixture
def shopify_skill() -> SkillEntry:
    return SkillEntry(
        id="shopify-integration",
        name="Shopify Integration",
        description="Build Shopify stores with Liquid themes and checkout extensions",
        keywords=["shopify", "checkout", "liquid"],
        category="e-commerce",
        path="skills/shopify-integration/SKILL.md",
        content_summary="Shopify store development guide.",
    )


@pytest.fixture
def sample_registry(shopify_skill: SkillEntry) -> Registry:
    """A small registry covering all four categories."""
    skills = [
        shopify_skill,
        SkillEntry(
            id="react-patterns",
            name="React Patterns",
            description="Component composition and hooks for React apps",
            keywords=["react", "hooks", "component"],
            category="frontend",
            path="skills/react-patterns/SKILL.md",
            content_summary="Patterns for React.",
        ),
        SkillEntry(
            id="postgres-tuning",
            name="Postgres Tuning",
            description="Indexes, query plans and vacuum settings for PostgreSQL",
            keywords=["postgres", "postgresql", "sql", "index"],
            category="database",
            path="skills/postgres-tuning/SKILL.md",
            content_summary="Make Postgres fast.",
        ),
    ]
    agents = [
        AgentEntry(
            id="frontend-developer",
            name="Frontend Developer",
            description="Builds React components and responsive UI",
            role="You are a frontend developer.",
            model="sonnet",
            path="agents/frontend-developer.md",
        ),
        AgentEntry(
            id="database-architect",
            name="Database Architect",
            description="Designs schemas, migrations and SQL queries",
            role="You are a database architect.",
            model="opus",
            path="agents/database-architect.md",
        ),
    ]
    commands = [
        CommandEntry(
            id="frontend-dev",
            name="frontend-dev",
            description="Scaffold a frontend feature",
            related_skills=["shopify-integration"],
            path="commands/frontend-dev.md",
            content_summary="Runs the frontend scaffolding workflow.",
        ),
        CommandEntry(
            id="db-migrate",
            name="db-migrate",
            description="Create and apply database migrations",
            related_skills=["postgres-tuning"],
            path="commands/db-migrate.md",
            content_summary="Migration helper.",
        ),
    ]
    rules = [
        RuleEntry(
            id="testing",
            name="Testing",
            description="Testing Requirements",
            path="rules/testing.md",
        ),
        RuleEntry(
            id="git-workflow",
            name="Git Workflow",
            description="Git Workflow",
            path="rules/git-workflow.md",
        ),
        RuleEntry(
            id="custom-rule",
            name="Custom Rule",
            description="Custom Rule",
            path="rules/custom-rule.md",
        ),
    ]
    return Registry.create(skills=skills, agents=agents, commands=commands, rules=rules)


@pytest.fixture
def knowledge_base(tmp_path: Path) -> Path:
    """A knowledge-base directory tree on disk."""
    skill_dir = tmp_path / "skills" / "shopify-integration"
    skill_dir.mkdir(parents=True)
    (skill_dir / "SKILL.md").write_text(
        "---\n"
        "name: Shopify Integration\n"
        'description: "Build Shopify stores with checkout"\n'
        "---\n"
        "# Shopify Integration\n"
        "\n"
        "Use Liquid themes and the Storefront API.\n",
        encoding="utf-8",
    )
    (tmp_path / "skills" / "no-skill-file").mkdir()

    agents_dir = tmp_path / "agents"
    agents_dir.mkdir()
    (agents_dir / "planner.md").write_text(
        "---\n"
        "name: planner\n"
        "description: Plans features step by step\n"
        'tools: ["Read", "Grep"]\n'
        "model: opus\n"
        "---\n"
        "You are an expert planner.\n"
        "Break work into phases.\n",
        encoding="utf-8",
    )
    (agents_dir / "helper.md").write_text(
        "---\ndescription: General helper\ntools: Read, Write\n---\nHelps out.\n",
        encoding="utf-8",
    )

    commands_dir = tmp_path / "commands"
    commands_dir.mkdir()
    (commands_dir / "frontend-dev.md").write_text(
        "---\n"
        "description: Scaffold a frontend feature\n"
        "---\n"
        "# Frontend Dev\n"
        "\n"
        "Start a new storefront feature.\n"
        "\n"
        "## Usage\n"
        "/frontend-dev <feature>\n"
        "\n"
        "## References\n"
        "See skills/shopify-integration and skills/react-patterns.\n",
        encoding="utf-8",
    )

    rules_dir = tmp_path / "rules"
    rules_dir.mkdir()
    (rules_dir / "git-workflow.md").write_text(
        "# Git Workflow Rules\n\nUse conventional commits.\n",
        encoding="utf-8",
    )

    (tmp_path / "settings.json").write_text(
        '{"hooks": {"PreToolUse": [{"matcher": "Bash", "description": "Check"}],'
        ' "Stop": [{"hooks": []}]}}',
        encoding="utf-8",
    )
    return tmp_path


@pytest.fixture(autouse=True)
def restore_root_logger() -> Iterator[None]:
    """Put the root logger back the way it was after each test."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    for handler in root.handlers[:]:
        root.removeHandler(handler)
        if handler not in handlers:
            handler.close()
    for handler in handlers:
        root.addHandler(handler)
    root.setLevel(level)
