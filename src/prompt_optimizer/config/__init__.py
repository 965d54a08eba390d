"""
Configuration for prompt-optimizer.

Pydantic models for the matching engine, built-in signal tables, environment
variables and logging setup.
"""

from prompt_optimizer.config.env_vars import EnvVar
from prompt_optimizer.config.logging import setup_logging
from prompt_optimizer.config.models import (
    AgentMatchConfig,
    CommandMatchConfig,
    FuzzyConfig,
    MatcherConfig,
    RuleMatchConfig,
    SkillMatchConfig,
    load_matcher_config,
)
from prompt_optimizer.config.signals import (
    DEFAULT_AGENT_TASK_SIGNALS,
    DEFAULT_RULE_SIGNALS,
)

__all__ = [
    # Models
    "MatcherConfig",
    "SkillMatchConfig",
    "AgentMatchConfig",
    "CommandMatchConfig",
    "RuleMatchConfig",
    "FuzzyConfig",
    "load_matcher_config",
    # Signal tables
    "DEFAULT_AGENT_TASK_SIGNALS",
    "DEFAULT_RULE_SIGNALS",
    # Environment
    "EnvVar",
    # Logging
    "setup_logging",
]
