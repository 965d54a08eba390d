"""Default configuration values for matching, registry building and output.

The matcher reads these through ``MatcherConfig``; a signals file can
override any of the matching values.
"""

from __future__ import annotations


# ================================================================
# Skill Matching Defaults
# ================================================================

DEFAULT_SKILL_KEYWORD_WEIGHT = 0.5
"""Weight of the keyword overlap score in the skill blend."""

DEFAULT_SKILL_NAME_WEIGHT = 0.3
"""Weight of the name proximity score in the skill blend."""

DEFAULT_SKILL_DESCRIPTION_WEIGHT = 0.2
"""Weight of the description proximity score in the skill blend."""

DEFAULT_SKILL_DESCRIPTION_TOKENS = 20
"""Number of leading description tokens considered for skills."""

DEFAULT_SKILL_MENTION_BOOST = 0.6
"""Bonus when a skill's full name or id appears verbatim in the query."""

DEFAULT_SKILL_SEGMENT_BOOST = 0.1
"""Bonus per long id segment that appears verbatim in the query."""

DEFAULT_SKILL_SEGMENT_MIN_LENGTH = 5
"""Minimum id segment length for the per-segment bonus."""

DEFAULT_SKILL_MIN_SCORE = 0.05
"""Skills must score strictly above this to be kept."""

DEFAULT_SKILL_LIMIT = 10
"""Maximum number of skills returned."""


# ================================================================
# Agent Matching Defaults
# ================================================================

DEFAULT_AGENT_DESCRIPTION_TOKENS = 30
"""Number of leading description tokens considered for agents."""

DEFAULT_AGENT_SEGMENT_BOOST = 0.15
"""One-off bonus when any long id segment appears verbatim in the query."""

DEFAULT_AGENT_SEGMENT_MIN_LENGTH = 4
"""Minimum id segment length for the agent bonus (i.e. longer than 3)."""

DEFAULT_AGENT_MIN_SCORE = 0.05
"""Agents must score strictly above this to be kept."""

DEFAULT_AGENT_LIMIT = 3
"""Maximum number of agents returned."""


# ================================================================
# Command Matching Defaults
# ================================================================

DEFAULT_COMMAND_DESCRIPTION_TOKENS = 20
"""Number of leading description tokens considered for commands."""

DEFAULT_COMMAND_SUMMARY_TOKENS = 20
"""Number of leading content summary tokens considered for commands."""

DEFAULT_COMMAND_SUMMARY_WEIGHT = 0.7
"""Discount applied to the summary proximity score."""

DEFAULT_COMMAND_RELATED_SKILL_BOOST = 0.3
"""Bonus when a command supports a skill already matched for the query."""

DEFAULT_COMMAND_MIN_SCORE = 0.15
"""Commands must score strictly above this to be kept."""

DEFAULT_COMMAND_LIMIT = 5
"""Maximum number of commands returned."""


# ================================================================
# Rule Matching Defaults
# ================================================================

DEFAULT_RULE_MIN_SCORE = 0.0
"""Rules must score strictly above this to be kept."""

DEFAULT_RULE_LIMIT: int | None = None
"""Rules are not truncated by count."""


# ================================================================
# Fuzzy Fallback Defaults
# ================================================================

DEFAULT_FUZZY_THRESHOLD = 0.4
"""Maximum normalised distance for a field to count as a fuzzy match."""

DEFAULT_FUZZY_LOCATION_DISTANCE = 100
"""Characters of offset that add a full 1.0 to a field's distance."""

DEFAULT_FUZZY_EPSILON = 0.001
"""Floor for a perfect field distance when combining weighted fields."""


# ================================================================
# Registry Defaults
# ================================================================

DEFAULT_REGISTRY_FILENAME = "registry.json"
"""Default registry filename, relative to the knowledge-base root."""

DEFAULT_SUMMARY_MAX_LENGTH = 200
"""Maximum length of a derived content summary."""

DEFAULT_USAGE_MAX_LENGTH = 200
"""Maximum length of a command's usage section."""

DEFAULT_KEYWORD_SCAN_CHARS = 2000
"""Number of body characters scanned for technology keywords."""

DEFAULT_AGENT_MODEL = "sonnet"
"""Model assumed for agents that do not declare one."""

NO_SUMMARY = "No summary available"
"""Summary used when a document has no prose line."""


# ================================================================
# Output Defaults
# ================================================================

DEFAULT_PRIMARY_SKILLS = 5
"""Skills listed as primary references; the rest are secondary."""

DEFAULT_TEXT_COMMANDS = 3
"""Commands named in the optimized prompt text."""

DEFAULT_SKILL_DESCRIPTION_CHARS = 120
"""Skill description truncation in the rendered output."""

DEFAULT_AGENT_DESCRIPTION_CHARS = 150
"""Agent description truncation in the rendered output."""

DEFAULT_COMMAND_SUMMARY_CHARS = 100
"""Command summary truncation when a command has no description."""


# ================================================================
# Logging Defaults
# ================================================================

DEFAULT_LOG_LEVEL = "WARNING"
"""Default log level for the CLI."""

DEFAULT_LOG_MAX_BYTES = 10 * 1024 * 1024
"""Rotate the log file at 10 MB."""

DEFAULT_LOG_BACKUP_COUNT = 3
"""Number of rotated log files to keep."""

