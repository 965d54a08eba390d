"""Environment variables read by prompt-optimizer.

The CLI binds these to its global options, so every option can also be set
from the shell or a ``.env`` file.
"""

from __future__ import annotations

from enum import Enum


class EnvVar(str, Enum):
    """Names of the variables prompt-optimizer understands."""

    # Knowledge base and configuration files
    ROOT = "PROMPT_OPTIMIZER_ROOT"
    REGISTRY = "PROMPT_OPTIMIZER_REGISTRY"
    SIGNALS = "PROMPT_OPTIMIZER_SIGNALS"

    # Logging
    LOG_LEVEL = "PROMPT_OPTIMIZER_LOG_LEVEL"
    LOG_FILE = "PROMPT_OPTIMIZER_LOG_FILE"
