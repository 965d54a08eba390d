"""Matching engine: ranks registry entries against a free-form request."""

from prompt_optimizer.matching.fuzzy import (
    FuzzyHit,
    FuzzySearcher,
    SequenceFuzzySearcher,
    window_distance,
)
from prompt_optimizer.matching.matcher import (
    match_agents,
    match_all,
    match_commands,
    match_rules,
    match_skills,
    score_agent,
    score_command,
    score_rule,
    score_skill,
)
from prompt_optimizer.matching.merge import merge_matches
from prompt_optimizer.matching.models import MatchSet, MatchType, ScoredMatch
from prompt_optimizer.matching.scoring import (
    field_proximity,
    keyword_overlap,
    mentions,
    segment_mentions,
)
from prompt_optimizer.matching.tokenize import tokenize

__all__ = [
    # Matchers
    "match_skills",
    "match_agents",
    "match_commands",
    "match_rules",
    "match_all",
    "score_skill",
    "score_agent",
    "score_command",
    "score_rule",
    # Results
    "ScoredMatch",
    "MatchType",
    "MatchSet",
    "merge_matches",
    # Primitives
    "tokenize",
    "keyword_overlap",
    "field_proximity",
    "mentions",
    "segment_mentions",
    # Fallback
    "FuzzySearcher",
    "FuzzyHit",
    "SequenceFuzzySearcher",
    "window_distance",
]
