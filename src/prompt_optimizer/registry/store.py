"""JSON persistence for the registry."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from prompt_optimizer.registry.models import Registry

logger = logging.getLogger(__name__)


def load_registry(path: str | Path) -> Registry:
    """Load a registry file.

    Raises:
        FileNotFoundError: If the file does not exist
        pydantic.ValidationError: If the file does not describe a registry
    """
    registry_path = Path(path).expanduser()
    if not registry_path.exists():
        raise FileNotFoundError(f"Registry not found: {registry_path}")

    with open(registry_path, encoding="utf-8") as f:
        raw = json.load(f)

    registry = Registry.from_dict(raw)
    logger.debug(
        "Loaded registry %s (%d skills, %d agents, %d commands, %d rules)",
        registry_path,
        len(registry.skills),
        len(registry.agents),
        len(registry.commands),
        len(registry.rules),
    )
    return registry


def save_registry(registry: Registry, path: str | Path) -> Path:
    """Write a registry as camelCase JSON and return the resolved path."""
    registry_path = Path(path).expanduser()
    registry_path.parent.mkdir(parents=True, exist_ok=True)

    with open(registry_path, "w", encoding="utf-8") as f:
        json.dump(registry.to_dict(), f, indent=2, ensure_ascii=False)

    logger.info("Registry written to %s", registry_path)
    return registry_path
