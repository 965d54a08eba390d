"""Built-in signal tables for agents and rules.

Agents and rules carry no keywords of their own; they are matched against
these curated word lists keyed by entry id. The tables are only defaults:
``MatcherConfig`` owns the tables actually used, and a signals file can
replace or extend them.
"""

from __future__ import annotations

# Agent id -> words that indicate a task this agent handles
DEFAULT_AGENT_TASK_SIGNALS: dict[str, list[str]] = {
    "planner": ["plan", "feature", "implement", "build", "create", "develop", "design"],
    "architect": [
        "architecture",
        "design",
        "system",
        "scalability",
        "microservice",
        "pattern",
    ],
    "tdd-guide": ["test", "tdd", "testing", "coverage", "unit", "integration"],
    "code-reviewer": ["review", "quality", "refactor", "code review"],
    "security-reviewer": [
        "security",
        "vulnerability",
        "auth",
        "csrf",
        "xss",
        "injection",
    ],
    "build-error-resolver": ["build", "error", "compile", "fix", "broken"],
    "e2e-runner": ["e2e", "end-to-end", "playwright", "cypress", "browser test"],
    "refactor-cleaner": ["refactor", "cleanup", "dead code", "unused", "consolidate"],
    "doc-updater": ["documentation", "docs", "readme", "update docs"],
    "frontend-developer": [
        "react",
        "vue",
        "frontend",
        "component",
        "ui",
        "css",
        "tailwind",
        "responsive",
    ],
    "backend-architect": ["api", "backend", "server", "endpoint", "rest", "graphql"],
    "database-architect": [
        "database",
        "schema",
        "migration",
        "sql",
        "postgres",
        "supabase",
    ],
    "ai-engineer": [
        "ai",
        "llm",
        "rag",
        "embedding",
        "vector",
        "langchain",
        "chatbot",
        "agent",
    ],
    "cloud-architect": ["aws", "azure", "gcp", "cloud", "infrastructure", "terraform"],
    "mobile-developer": ["mobile", "ios", "android", "react native", "flutter"],
    "devops-troubleshooter": ["devops", "ci/cd", "deploy", "docker", "kubernetes"],
    "performance-engineer": ["performance", "optimization", "slow", "latency", "cache"],
    "data-engineer": ["pipeline", "etl", "data", "spark", "airflow", "dbt"],
}

# Rule id -> words that make the rule relevant to a request
DEFAULT_RULE_SIGNALS: dict[str, list[str]] = {
    "coding-style": ["code", "style", "format", "implement", "build", "create", "develop"],
    "git-workflow": ["git", "commit", "pr", "push", "branch", "merge"],
    "testing": ["test", "tdd", "coverage", "unit", "integration", "e2e"],
    "security": ["security", "auth", "secret", "vulnerability", "injection"],
    "performance": ["performance", "optimize", "fast", "slow", "cache", "bundle"],
    "patterns": ["pattern", "architecture", "design", "repository", "api"],
    "hooks": ["hook", "automation", "pre-commit", "post-commit", "format"],
    "agents": ["agent", "parallel", "orchestrate", "multi-agent", "delegate"],
}
