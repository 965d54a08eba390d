"""prompt-optimizer: recommend knowledge-base entries for a free-form request."""

from prompt_optimizer.config.models import MatcherConfig, load_matcher_config
from prompt_optimizer.matching import (
    MatchSet,
    MatchType,
    ScoredMatch,
    match_agents,
    match_all,
    match_commands,
    match_rules,
    match_skills,
)
from prompt_optimizer.prompt import OptimizedPrompt, format_output, optimize_prompt
from prompt_optimizer.registry import Registry, build_registry, load_registry, save_registry

__version__ = "0.1.0"

__all__ = [
    "MatcherConfig",
    "load_matcher_config",
    "Registry",
    "build_registry",
    "load_registry",
    "save_registry",
    "match_skills",
    "match_agents",
    "match_commands",
    "match_rules",
    "match_all",
    "ScoredMatch",
    "MatchType",
    "MatchSet",
    "OptimizedPrompt",
    "optimize_prompt",
    "format_output",
]
