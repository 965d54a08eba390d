# prompt_optimizer/matching/matcher.py
"""Category matchers.

Each matcher runs a precise keyword pass with its own weighting, boosts and
threshold, then an approximate-match fallback over the same category, and
merges the two. All functions are pure: the registry and configuration are
only read, and every call returns freshly built lists.

The command matcher is the one cross-category step: it takes the skill ids
already selected for the same query, so skills must be matched first.
``match_all`` enforces that order.
"""

from __future__ import annotations

import logging
from collections.abc import Collection, Iterable, Sequence

from prompt_optimizer.config.models import (
    AgentMatchConfig,
    CommandMatchConfig,
    FuzzyConfig,
    MatcherConfig,
    SkillMatchConfig,
)
from prompt_optimizer.matching.fuzzy import FuzzyHit, FuzzySearcher, SequenceFuzzySearcher
from prompt_optimizer.matching.merge import merge_matches
from prompt_optimizer.matching.models import MatchSet, ScoredMatch
from prompt_optimizer.matching.scoring import (
    field_proximity,
    keyword_overlap,
    mentions,
    segment_mentions,
)
from prompt_optimizer.matching.tokenize import tokenize
from prompt_optimizer.registry.models import (
    AgentEntry,
    CommandEntry,
    Registry,
    SkillEntry,
)

logger = logging.getLogger(__name__)


# ============================================================================
# Per-entry Scores
# ============================================================================


def score_skill(
    skill: SkillEntry,
    query_tokens: Sequence[str],
    lowered_query: str,
    config: SkillMatchConfig,
) -> float:
    """Keyword/name/description blend plus direct-mention boosts."""
    score = (
        config.keyword_weight * keyword_overlap(query_tokens, skill.keywords)
        + config.name_weight * field_proximity(query_tokens, skill.name)
        + config.description_weight
        * field_proximity(query_tokens, skill.description, config.description_tokens)
    )

    if mentions(lowered_query, skill.name, skill.id):
        score += config.mention_boost

    score += config.segment_boost * segment_mentions(
        skill.id, lowered_query, config.segment_min_length
    )
    return score


def score_agent(
    agent: AgentEntry,
    query_tokens: Sequence[str],
    lowered_query: str,
    task_signals: Sequence[str] | None,
    config: AgentMatchConfig,
) -> float:
    """Best of task-signal overlap and description proximity, plus id boost."""
    signal_score = keyword_overlap(query_tokens, task_signals) if task_signals else 0.0
    score = max(
        signal_score,
        field_proximity(query_tokens, agent.description, config.description_tokens),
    )

    if segment_mentions(agent.id, lowered_query, config.segment_min_length):
        score += config.segment_boost
    return score


def score_command(
    command: CommandEntry,
    query_tokens: Sequence[str],
    matched_skill_ids: Collection[str],
    config: CommandMatchConfig,
) -> float:
    """Best of name, description and discounted summary proximity.

    Commands that support an already matched skill get a fixed bonus on top.
    """
    score = max(
        field_proximity(query_tokens, command.name),
        field_proximity(query_tokens, command.description, config.description_tokens),
        config.summary_weight
        * field_proximity(query_tokens, command.content_summary, config.summary_tokens),
    )

    if any(skill_id in matched_skill_ids for skill_id in command.related_skills):
        score += config.related_skill_boost
    return score


def score_rule(query_tokens: Sequence[str], relevance_signals: Sequence[str] | None) -> float:
    """Overlap with the rule's relevance signals; 0 without a table entry."""
    if not relevance_signals:
        return 0.0
    return keyword_overlap(query_tokens, relevance_signals)


# ============================================================================
# Fallback Helper
# ============================================================================


def _fallback(
    query: str,
    entries: Sequence[object],
    fuzzy: FuzzyConfig,
    searcher: FuzzySearcher | None,
) -> list[FuzzyHit]:
    if not fuzzy.enabled or not entries or not fuzzy.fields:
        return []
    engine = searcher if searcher is not None else SequenceFuzzySearcher.from_config(fuzzy)
    return engine.search(entries, query, fuzzy.fields)


def _resolve_limit(limit: int | None, default: int | None) -> int | None:
    return default if limit is None else limit


def _keyword_pass(
    entries: Iterable[object],
    scores: Iterable[float],
    min_score: float,
) -> list[ScoredMatch]:
    return [
        ScoredMatch(entry=entry, score=score)  # type: ignore[arg-type]
        for entry, score in zip(entries, scores)
        if score > min_score
    ]


# ============================================================================
# Category Matchers
# ============================================================================


def match_skills(
    query: str,
    registry: Registry,
    limit: int | None = None,
    *,
    config: MatcherConfig | None = None,
    searcher: FuzzySearcher | None = None,
) -> list[ScoredMatch]:
    """Rank skills for a query (default limit 10)."""
    cfg = (config or MatcherConfig()).skills
    tokens = tokenize(query)
    lowered = query.lower()

    keyword = _keyword_pass(
        registry.skills,
        (score_skill(s, tokens, lowered, cfg) for s in registry.skills),
        cfg.min_score,
    )
    fuzzy = _fallback(query, registry.skills, cfg.fuzzy, searcher)
    results = merge_matches(keyword, fuzzy, _resolve_limit(limit, cfg.limit))

    logger.debug(
        "Skills: %d keyword, %d fuzzy -> %d returned",
        len(keyword),
        len(fuzzy),
        len(results),
    )
    return results


def match_agents(
    query: str,
    registry: Registry,
    limit: int | None = None,
    *,
    config: MatcherConfig | None = None,
    searcher: FuzzySearcher | None = None,
) -> list[ScoredMatch]:
    """Rank agents for a query (default limit 3)."""
    config = config or MatcherConfig()
    cfg = config.agents
    tokens = tokenize(query)
    lowered = query.lower()

    keyword = _keyword_pass(
        registry.agents,
        (
            score_agent(a, tokens, lowered, config.agent_task_signals.get(a.id), cfg)
            for a in registry.agents
        ),
        cfg.min_score,
    )
    fuzzy = _fallback(query, registry.agents, cfg.fuzzy, searcher)
    results = merge_matches(keyword, fuzzy, _resolve_limit(limit, cfg.limit))

    logger.debug(
        "Agents: %d keyword, %d fuzzy -> %d returned",
        len(keyword),
        len(fuzzy),
        len(results),
    )
    return results


def match_commands(
    query: str,
    registry: Registry,
    matched_skill_ids: Iterable[str] = (),
    limit: int | None = None,
    *,
    config: MatcherConfig | None = None,
    searcher: FuzzySearcher | None = None,
) -> list[ScoredMatch]:
    """Rank commands for a query (default limit 5).

    ``matched_skill_ids`` are the ids the skill matcher selected for the same
    query; commands supporting one of them get the related-skill bonus.
    """
    cfg = (config or MatcherConfig()).commands
    tokens = tokenize(query)
    skill_ids = frozenset(matched_skill_ids)

    keyword = _keyword_pass(
        registry.commands,
        (score_command(c, tokens, skill_ids, cfg) for c in registry.commands),
        cfg.min_score,
    )
    fuzzy = _fallback(query, registry.commands, cfg.fuzzy, searcher)
    results = merge_matches(keyword, fuzzy, _resolve_limit(limit, cfg.limit))

    logger.debug(
        "Commands: %d keyword, %d fuzzy -> %d returned (%d related skills)",
        len(keyword),
        len(fuzzy),
        len(results),
        len(skill_ids),
    )
    return results


def match_rules(
    query: str,
    registry: Registry,
    limit: int | None = None,
    *,
    config: MatcherConfig | None = None,
    searcher: FuzzySearcher | None = None,
) -> list[ScoredMatch]:
    """Rank rules for a query (unbounded by default)."""
    config = config or MatcherConfig()
    cfg = config.rules
    tokens = tokenize(query)

    keyword = _keyword_pass(
        registry.rules,
        (score_rule(tokens, config.rule_signals.get(r.id)) for r in registry.rules),
        cfg.min_score,
    )
    fuzzy = _fallback(query, registry.rules, cfg.fuzzy, searcher)
    results = merge_matches(keyword, fuzzy, _resolve_limit(limit, cfg.limit))

    logger.debug("Rules: %d keyword, %d fuzzy -> %d returned", len(keyword), len(fuzzy), len(results))
    return results


def match_all(
    query: str,
    registry: Registry,
    *,
    config: MatcherConfig | None = None,
    searcher: FuzzySearcher | None = None,
) -> MatchSet:
    """Match every category for one query, skills before commands."""
    config = config or MatcherConfig()
    skills = match_skills(query, registry, config=config, searcher=searcher)
    agents = match_agents(query, registry, config=config, searcher=searcher)
    commands = match_commands(
        query,
        registry,
        [m.id for m in skills],
        config=config,
        searcher=searcher,
    )
    rules = match_rules(query, registry, config=config, searcher=searcher)
    return MatchSet(skills=skills, agents=agents, commands=commands, rules=rules)
