# prompt_optimizer/registry/builder.py
"""Registry builder - scans a knowledge-base directory into a ``Registry``.

Expected layout under the root::

    skills/<id>/SKILL.md
    agents/<id>.md
    commands/<id>.md
    rules/<id>.md
    settings.json          (optional, "hooks" section)

Missing directories simply contribute no entries. Files are visited in
sorted order, which fixes registry order and therefore the tie-break order
of equally scored matches.
"""

from __future__ import annotations

import json
import logging
import re
from pathlib import Path

from prompt_optimizer.config.defaults import (
    DEFAULT_AGENT_MODEL,
    DEFAULT_KEYWORD_SCAN_CHARS,
    DEFAULT_USAGE_MAX_LENGTH,
)
from prompt_optimizer.registry.frontmatter import parse_frontmatter, summarize
from prompt_optimizer.registry.models import (
    AgentEntry,
    CommandEntry,
    HookEntry,
    Registry,
    RuleEntry,
    SkillEntry,
)

logger = logging.getLogger(__name__)


# ============================================================================
# Keyword and Category Tables
# ============================================================================

# Technology / topic words detected by substring in a skill's text
TECH_PATTERNS: list[str] = [
    # Frameworks and runtimes
    "react", "next.js", "nextjs", "vue", "nuxt", "angular", "svelte", "solid",
    "astro", "remix", "gatsby", "node", "nodejs", "deno", "bun", "express",
    "fastapi", "django", "flask", "rails", "laravel", "spring", "nest", "hono",
    "elysia",
    # Languages
    "typescript", "javascript", "python", "rust", "go", "golang", "java",
    "kotlin", "swift", "c#", "csharp", "dotnet", ".net", "ruby", "php",
    "elixir", "scala", "haskell", "julia", "dart", "flutter", "c++", "cpp",
    # Data stores
    "postgres", "postgresql", "mysql", "mongodb", "redis", "sqlite",
    "supabase", "firebase", "prisma", "drizzle", "d1", "neon", "planetscale",
    # Commerce
    "shopify", "stripe", "paypal", "woocommerce", "magento",
    # Cloud and delivery
    "aws", "azure", "gcp", "cloudflare", "vercel", "netlify", "docker",
    "kubernetes", "k8s", "terraform", "helm", "github", "gitlab", "ci/cd",
    "cicd",
    # Protocols and security
    "graphql", "rest", "grpc", "websocket", "sse", "oauth", "jwt", "auth",
    "authentication", "authorization", "rbac", "security",
    # Testing
    "testing", "jest", "vitest", "playwright", "cypress", "selenium", "tdd",
    "bdd",
    # Quality
    "seo", "accessibility", "a11y", "wcag", "performance", "optimization",
    "caching", "cdn",
    # AI
    "rag", "llm", "ai", "ml", "embedding", "vector", "langchain", "openai",
    "anthropic", "claude",
    # UI
    "tailwind", "css", "sass", "styled", "design-system", "ui", "ux",
    "responsive", "mobile", "ios", "android", "react-native", "pwa",
    # Architecture and tooling
    "api", "microservices", "monorepo", "turborepo", "nx", "webpack", "vite",
    "esbuild", "rollup", "bundler",
    # Web3
    "blockchain", "web3", "solidity", "nft", "defi",
    # Automation and edge
    "automation", "workflow", "temporal", "durable-objects", "workers", "edge",
    "serverless", "lambda", "mcp", "prompt", "agent",
    # Engineering activities
    "debugging", "refactoring", "migration", "deployment", "monitoring",
    "observability", "logging", "tracing", "incident", "devops", "sre",
    # Data
    "data-pipeline", "etl", "spark", "airflow", "dbt", "analytics",
    "dashboard", "report",
    # Product domains
    "e-commerce", "checkout", "payment", "billing", "subscription", "content",
    "cms", "markdown", "documentation", "openapi", "swagger", "schema",
    "validation", "zod", "pydantic", "form", "upload", "image", "media",
    "video", "threejs", "3d", "animation", "motion", "canvas", "game",
    "unity", "godot",
    # Embedded
    "firmware", "embedded", "iot", "arm", "cortex",
]

# Category -> substrings of a skill directory name; first match wins
CATEGORY_PATTERNS: dict[str, list[str]] = {
    "e-commerce": [
        "shopify", "woocommerce", "stripe", "paypal", "payment", "billing",
        "checkout",
    ],
    "frontend": [
        "react", "vue", "angular", "svelte", "nextjs", "nuxt", "frontend",
        "css", "tailwind", "ui", "design", "responsive", "accessibility",
        "motion", "canvas", "threejs",
    ],
    "backend": [
        "express", "fastapi", "django", "flask", "nest", "hono", "rails",
        "spring", "backend", "api", "rest", "graphql", "grpc", "websocket",
    ],
    "database": [
        "postgres", "mysql", "mongo", "redis", "sqlite", "supabase", "prisma",
        "drizzle", "database", "sql", "migration", "schema",
    ],
    "devops": [
        "docker", "kubernetes", "k8s", "terraform", "helm", "ci", "cd",
        "github-actions", "gitlab", "deploy", "monitor", "observability",
        "logging",
    ],
    "security": [
        "security", "auth", "oauth", "jwt", "rbac", "csrf", "xss", "sast",
        "vulnerability", "secrets", "compliance",
    ],
    "testing": [
        "test", "jest", "vitest", "playwright", "cypress", "tdd", "bdd", "e2e",
        "coverage", "mutation",
    ],
    "ai": [
        "ai", "ml", "llm", "rag", "embedding", "vector", "langchain", "prompt",
        "agent", "model",
    ],
    "cloud": [
        "aws", "azure", "gcp", "cloudflare", "workers", "serverless", "lambda",
        "edge", "durable",
    ],
    "mobile": [
        "mobile", "ios", "android", "react-native", "flutter", "swift",
        "kotlin", "pwa", "app-store",
    ],
    "data": [
        "data", "pipeline", "etl", "spark", "airflow", "dbt", "analytics",
        "dashboard",
    ],
    "content": ["seo", "content", "cms", "markdown", "documentation", "doc"],
    "architecture": [
        "architecture", "pattern", "microservices", "monorepo", "event",
        "cqrs", "saga", "ddd",
    ],
    "language": [
        "typescript", "javascript", "python", "rust", "go", "golang", "java",
        "ruby", "php", "elixir", "scala", "haskell", "julia", "cpp", "csharp",
        "swift", "dart", "bash",
    ],
    "blockchain": ["blockchain", "web3", "solidity", "nft", "defi", "smart-contract"],
    "automation": ["automation", "workflow", "temporal", "hook", "script", "shell"],
    "gaming": ["game", "unity", "godot", "3d", "ecs"],
    "embedded": ["firmware", "embedded", "iot", "arm", "cortex"],
}

_NAME_SEGMENT_RE = re.compile(r"[-_./\\]")
_SKILL_REF_RE = re.compile(r"skills/([a-z0-9-]+)", re.IGNORECASE)
_USAGE_RE = re.compile(r"## Usage\n(.*?)(?=\n##|\n$)", re.DOTALL)
_HEADING_RE = re.compile(r"^#\s+(.+)$", re.MULTILINE)


# ============================================================================
# Derivation Helpers
# ============================================================================


def extract_keywords(name: str, description: str, body: str) -> list[str]:
    """Derive a skill's keywords from its name, description and body start.

    Every technology pattern found as a substring is kept, followed by the
    name's segments longer than two characters. Order is stable and
    duplicates are removed.
    """
    text = f"{name} {description} {body[:DEFAULT_KEYWORD_SCAN_CHARS]}".lower()

    found: dict[str, None] = {}
    for pattern in TECH_PATTERNS:
        if pattern in text:
            found[pattern] = None

    for segment in _NAME_SEGMENT_RE.split(name):
        if len(segment) > 2:
            found[segment.lower()] = None

    return list(found)


def derive_category(dir_name: str) -> str:
    """Classify a skill by its directory name; ``general`` if nothing fits."""
    lowered = dir_name.lower()
    for category, patterns in CATEGORY_PATTERNS.items():
        if any(pattern in lowered for pattern in patterns):
            return category
    return "general"


def parse_tools(raw: str) -> list[str]:
    """Parse an agent's ``tools`` header: a JSON array or a comma list."""
    if not raw:
        return []
    try:
        parsed = json.loads(raw)
    except json.JSONDecodeError:
        parsed = None
    if isinstance(parsed, list):
        return [str(tool) for tool in parsed]
    return [tool.strip() for tool in raw.split(",") if tool.strip()]


def title_from_id(entry_id: str) -> str:
    """``git-workflow`` -> ``Git Workflow``."""
    return " ".join(word[:1].upper() + word[1:] for word in entry_id.split("-"))


# ============================================================================
# Builder
# ============================================================================


class RegistryBuilder:
    """Scans a knowledge-base root and produces a ``Registry``."""

    SKILLS_DIR = "skills"
    AGENTS_DIR = "agents"
    COMMANDS_DIR = "commands"
    RULES_DIR = "rules"
    SKILL_FILE = "SKILL.md"
    SETTINGS_FILE = "settings.json"

    def __init__(self, root: str | Path) -> None:
        self.root = Path(root).expanduser()

    def build(self) -> Registry:
        """Scan every category and return the assembled registry."""
        skills = self.scan_skills()
        agents = self.scan_agents()
        commands = self.scan_commands()
        rules = self.scan_rules()
        hooks = self.scan_hooks()

        registry = Registry.create(
            skills=skills,
            agents=agents,
            commands=commands,
            rules=rules,
            hooks=hooks,
        )
        logger.info(
            "Built registry from %s: %d skills, %d agents, %d commands, "
            "%d rules, %d hooks",
            self.root,
            len(skills),
            len(agents),
            len(commands),
            len(rules),
            len(hooks),
        )
        return registry

    # ------------------------------------------------------------------
    # Scanners
    # ------------------------------------------------------------------

    def scan_skills(self) -> list[SkillEntry]:
        """One skill per ``skills/<id>/SKILL.md``."""
        skills_dir = self.root / self.SKILLS_DIR
        if not skills_dir.is_dir():
            return []

        skills: list[SkillEntry] = []
        for skill_dir in sorted(p for p in skills_dir.iterdir() if p.is_dir()):
            skill_file = skill_dir / self.SKILL_FILE
            if not skill_file.is_file():
                logger.debug("Skipping %s: no %s", skill_dir, self.SKILL_FILE)
                continue

            frontmatter, body = parse_frontmatter(self._read(skill_file))
            skill_id = skill_dir.name
            name = frontmatter.get("name") or skill_id
            description = frontmatter.get("description", "")

            skills.append(
                SkillEntry(
                    id=skill_id,
                    name=name,
                    description=description,
                    keywords=extract_keywords(name, description, body),
                    category=derive_category(skill_dir.name),
                    path=f"{self.SKILLS_DIR}/{skill_id}/{self.SKILL_FILE}",
                    content_summary=summarize(body),
                )
            )
        return skills

    def scan_agents(self) -> list[AgentEntry]:
        """One agent per ``agents/*.md``."""
        agents: list[AgentEntry] = []
        for path in self._markdown_files(self.AGENTS_DIR):
            frontmatter, body = parse_frontmatter(self._read(path))
            agent_id = path.stem
            role = next(
                (line.strip() for line in body.split("\n") if line.startswith("You are")),
                "",
            )

            agents.append(
                AgentEntry(
                    id=agent_id,
                    name=frontmatter.get("name") or agent_id,
                    description=frontmatter.get("description", ""),
                    role=role,
                    tools=parse_tools(frontmatter.get("tools", "")),
                    model=frontmatter.get("model") or DEFAULT_AGENT_MODEL,
                    path=f"{self.AGENTS_DIR}/{path.name}",
                    content_summary=summarize(body),
                )
            )
        return agents

    def scan_commands(self) -> list[CommandEntry]:
        """One command per ``commands/*.md``; related skills come from body links."""
        commands: list[CommandEntry] = []
        for path in self._markdown_files(self.COMMANDS_DIR):
            frontmatter, body = parse_frontmatter(self._read(path))
            command_id = path.stem

            usage_match = _USAGE_RE.search(body)
            usage = (
                usage_match.group(1).strip()[:DEFAULT_USAGE_MAX_LENGTH]
                if usage_match
                else ""
            )

            commands.append(
                CommandEntry(
                    id=command_id,
                    name=command_id,
                    description=frontmatter.get("description", ""),
                    usage=usage,
                    related_skills=_SKILL_REF_RE.findall(body),
                    path=f"{self.COMMANDS_DIR}/{path.name}",
                    content_summary=summarize(body),
                )
            )
        return commands

    def scan_rules(self) -> list[RuleEntry]:
        """One rule per ``rules/*.md``; described by its first heading."""
        rules: list[RuleEntry] = []
        for path in self._markdown_files(self.RULES_DIR):
            _, body = parse_frontmatter(self._read(path))
            rule_id = path.stem
            name = title_from_id(rule_id)
            heading = _HEADING_RE.search(body)

            rules.append(
                RuleEntry(
                    id=rule_id,
                    name=name,
                    description=heading.group(1) if heading else name,
                    path=f"{self.RULES_DIR}/{path.name}",
                    content_summary=summarize(body),
                )
            )
        return rules

    def scan_hooks(self) -> list[HookEntry]:
        """One hook per definition in ``settings.json``'s ``hooks`` section."""
        settings_file = self.root / self.SETTINGS_FILE
        if not settings_file.is_file():
            return []

        settings = json.loads(self._read(settings_file))
        hooks_config = settings.get("hooks") if isinstance(settings, dict) else None
        if not isinstance(hooks_config, dict):
            return []

        hooks: list[HookEntry] = []
        for hook_type, hook_list in hooks_config.items():
            if not isinstance(hook_list, list):
                continue
            for definition in hook_list:
                definition = definition if isinstance(definition, dict) else {}
                hooks.append(
                    HookEntry(
                        id=f"hook-{len(hooks)}",
                        type=hook_type,
                        matcher=definition.get("matcher") or "",
                        description=definition.get("description") or "",
                    )
                )
        return hooks

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _markdown_files(self, subdir: str) -> list[Path]:
        directory = self.root / subdir
        if not directory.is_dir():
            return []
        return sorted(p for p in directory.iterdir() if p.is_file() and p.suffix == ".md")

    @staticmethod
    def _read(path: Path) -> str:
        return path.read_text(encoding="utf-8")


def build_registry(root: str | Path) -> Registry:
    """Convenience wrapper around ``RegistryBuilder(root).build()``."""
    return RegistryBuilder(root).build()
