"""Prompt enrichment: request analysis, assembly and rendering."""

from prompt_optimizer.prompt.analysis import detect_task_type, detect_technologies
from prompt_optimizer.prompt.assembler import (
    OptimizedPrompt,
    build_optimized_text,
    optimize_prompt,
)
from prompt_optimizer.prompt.formatting import format_output

__all__ = [
    "OptimizedPrompt",
    "optimize_prompt",
    "build_optimized_text",
    "format_output",
    "detect_task_type",
    "detect_technologies",
]
