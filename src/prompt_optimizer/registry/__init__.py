"""Registry package: typed knowledge-base entries, builder and persistence."""

from prompt_optimizer.registry.builder import RegistryBuilder, build_registry
from prompt_optimizer.registry.models import (
    AgentEntry,
    BaseEntry,
    CommandEntry,
    Entry,
    EntryKind,
    HookEntry,
    Registry,
    RegistryMetadata,
    RuleEntry,
    SkillEntry,
)
from prompt_optimizer.registry.store import load_registry, save_registry

__all__ = [
    # Models
    "Entry",
    "EntryKind",
    "BaseEntry",
    "SkillEntry",
    "AgentEntry",
    "CommandEntry",
    "RuleEntry",
    "HookEntry",
    "Registry",
    "RegistryMetadata",
    # Building and persistence
    "RegistryBuilder",
    "build_registry",
    "load_registry",
    "save_registry",
]
