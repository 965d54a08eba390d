# src/prompt_optimizer/main.py
"""Entry-point for the prompt-optimizer CLI.

Usage:
    prompt-optimizer optimize "Build a Shopify store with Next.js"
    echo "Debug React performance issues" | prompt-optimizer optimize
    prompt-optimizer build
    prompt-optimizer stats
    prompt-optimizer match "Add OAuth login"
"""

from __future__ import annotations

import json
import logging
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import typer
from chuk_term.ui import format_table, output
from dotenv import load_dotenv
from pydantic import ValidationError
from rich.markdown import Markdown

from prompt_optimizer.config.defaults import DEFAULT_LOG_LEVEL, DEFAULT_REGISTRY_FILENAME
from prompt_optimizer.config.env_vars import EnvVar
from prompt_optimizer.config.logging import setup_logging
from prompt_optimizer.config.models import MatcherConfig, load_matcher_config
from prompt_optimizer.matching.matcher import match_all
from prompt_optimizer.prompt.analysis import detect_task_type, detect_technologies
from prompt_optimizer.prompt.assembler import optimize_prompt
from prompt_optimizer.prompt.formatting import format_output
from prompt_optimizer.registry.builder import build_registry
from prompt_optimizer.registry.models import EntryKind, Registry
from prompt_optimizer.registry.store import load_registry, save_registry

logger = logging.getLogger(__name__)

app = typer.Typer(
    add_completion=False,
    help="Optimize prompts using your skills, agents, commands and rules.",
)


@dataclass
class CLISettings:
    """Paths resolved from options, environment and defaults."""

    root: Path
    registry_path: Path
    signals_path: Path | None = None


# --------------------------------------------------------------------------- #
# Helpers                                                                     #
# --------------------------------------------------------------------------- #


def _settings(ctx: typer.Context) -> CLISettings:
    settings: CLISettings = ctx.obj
    return settings


def _read_prompt(words: list[str] | None) -> str:
    """Join prompt arguments, falling back to piped stdin."""
    text = " ".join(words or []).strip()
    if not text and not sys.stdin.isatty():
        text = sys.stdin.read().strip()
    return text


def _load_config(settings: CLISettings) -> MatcherConfig:
    try:
        return load_matcher_config(settings.signals_path)
    except (FileNotFoundError, ValueError, ValidationError) as exc:
        output.error(f"Invalid signals file: {exc}")
        raise typer.Exit(1)


def _load_registry(settings: CLISettings, build_missing: bool = False) -> Registry:
    """Load the registry, optionally building it first if the file is missing."""
    if not settings.registry_path.exists() and build_missing:
        typer.echo("registry.json not found. Building registry first...", err=True)
        save_registry(build_registry(settings.root), settings.registry_path)

    try:
        return load_registry(settings.registry_path)
    except FileNotFoundError:
        output.error(
            f"{settings.registry_path} not found. Run: prompt-optimizer build"
        )
        raise typer.Exit(1)
    except (ValueError, ValidationError) as exc:
        output.error(f"Could not read registry {settings.registry_path}: {exc}")
        raise typer.Exit(1)


# --------------------------------------------------------------------------- #
# Global options                                                              #
# --------------------------------------------------------------------------- #


@app.callback()
def main_callback(
    ctx: typer.Context,
    root: Optional[Path] = typer.Option(
        None,
        "--root",
        envvar=EnvVar.ROOT.value,
        help="Knowledge-base root (skills/, agents/, commands/, rules/)",
    ),
    registry: Optional[Path] = typer.Option(
        None,
        "--registry",
        envvar=EnvVar.REGISTRY.value,
        help="Registry file (default: <root>/registry.json)",
    ),
    signals: Optional[Path] = typer.Option(
        None,
        "--signals",
        envvar=EnvVar.SIGNALS.value,
        help="JSON file overriding matcher weights and signal tables",
    ),
    quiet: bool = typer.Option(False, "-q", "--quiet", help="Suppress most log output"),
    verbose: bool = typer.Option(False, "-v", "--verbose", help="Enable verbose logging"),
    log_level: str = typer.Option(
        DEFAULT_LOG_LEVEL,
        "--log-level",
        envvar=EnvVar.LOG_LEVEL.value,
        help="Set log level",
    ),
    log_file: Optional[str] = typer.Option(
        None,
        "--log-file",
        envvar=EnvVar.LOG_FILE.value,
        help="Also write a rotating JSON log to this file",
    ),
) -> None:
    """prompt-optimizer - enrich a request with matching knowledge-base references."""
    try:
        setup_logging(level=log_level, quiet=quiet, verbose=verbose, log_file=log_file)
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="--log-level")

    resolved_root = (root or Path.cwd()).expanduser()
    ctx.obj = CLISettings(
        root=resolved_root,
        registry_path=(registry or resolved_root / DEFAULT_REGISTRY_FILENAME).expanduser(),
        signals_path=signals,
    )
    logger.debug("Settings: %s", ctx.obj)


# --------------------------------------------------------------------------- #
# Commands                                                                    #
# --------------------------------------------------------------------------- #


@app.command("optimize")
def optimize_command(
    ctx: typer.Context,
    prompt: Optional[list[str]] = typer.Argument(
        None, help="The request to optimize (read from stdin if omitted)"
    ),
    as_json: bool = typer.Option(False, "--json", help="Emit the result as JSON"),
    pretty: bool = typer.Option(
        False, "--pretty", help="Render the markdown in the terminal"
    ),
) -> None:
    """Optimize a prompt."""
    settings = _settings(ctx)
    text = _read_prompt(prompt)
    if not text:
        output.error("No prompt given.")
        output.hint('Usage: prompt-optimizer optimize "<prompt>"')
        output.hint('   or: echo "<prompt>" | prompt-optimizer optimize')
        raise typer.Exit(1)

    registry = _load_registry(settings, build_missing=True)
    config = _load_config(settings)

    technologies = detect_technologies(text)
    typer.echo(f'Analyzing prompt: "{text[:80]}..."', err=True)
    typer.echo(f"Task type: {detect_task_type(text)}", err=True)
    typer.echo(f"Technologies: {', '.join(technologies) or 'none detected'}", err=True)
    typer.echo("", err=True)

    result = optimize_prompt(text, registry, config)

    typer.echo(
        f"Matched: {len(result.skills)} skills, {len(result.agents)} agents, "
        f"{len(result.commands)} commands, {len(result.rules)} rules",
        err=True,
    )
    typer.echo("", err=True)

    if as_json:
        typer.echo(json.dumps(result.to_dict(), indent=2, ensure_ascii=False))
    elif pretty:
        output.print(Markdown(format_output(result)))
    else:
        typer.echo(format_output(result))


@app.command("build")
def build_command(ctx: typer.Context) -> None:
    """Build or rebuild the registry from the knowledge-base root."""
    settings = _settings(ctx)
    output.info(f"Building registry from {settings.root}...")

    registry = build_registry(settings.root)
    path = save_registry(registry, settings.registry_path)

    meta = registry.metadata
    output.success(f"Registry written to {path}")
    output.info(
        f"Total: {meta.skill_count} skills, {meta.agent_count} agents, "
        f"{meta.command_count} commands, {meta.rule_count} rules, "
        f"{meta.hook_count} hooks"
    )


@app.command("stats")
def stats_command(ctx: typer.Context) -> None:
    """Show registry statistics."""
    registry = _load_registry(_settings(ctx))
    meta = registry.metadata

    rows = [
        {"Category": "Skills", "Count": str(meta.skill_count)},
        {"Category": "Agents", "Count": str(meta.agent_count)},
        {"Category": "Commands", "Count": str(meta.command_count)},
        {"Category": "Rules", "Count": str(meta.rule_count)},
        {"Category": "Hooks", "Count": str(meta.hook_count)},
        {"Category": "Total", "Count": str(meta.total)},
    ]
    table = format_table(
        rows,
        title=f"Prompt Optimizer Registry (generated {meta.generated_at})",
        columns=["Category", "Count"],
    )
    output.print_table(table)


@app.command("match")
def match_command(
    ctx: typer.Context,
    prompt: Optional[list[str]] = typer.Argument(
        None, help="The request to match (read from stdin if omitted)"
    ),
    as_json: bool = typer.Option(False, "--json", help="Emit the scores as JSON"),
) -> None:
    """Show ranked matches and scores for every category."""
    settings = _settings(ctx)
    text = _read_prompt(prompt)
    if not text:
        output.error("No prompt given.")
        raise typer.Exit(1)

    registry = _load_registry(settings)
    matches = match_all(text, registry, config=_load_config(settings))

    if as_json:
        typer.echo(json.dumps(matches.to_dict(), indent=2, ensure_ascii=False))
        return

    if not matches.total:
        output.warning("Nothing matched.")
        return

    rows = []
    for category, results in (
        (EntryKind.SKILL, matches.skills),
        (EntryKind.AGENT, matches.agents),
        (EntryKind.COMMAND, matches.commands),
        (EntryKind.RULE, matches.rules),
    ):
        for rank, match in enumerate(results, start=1):
            rows.append(
                {
                    "Category": category.value,
                    "#": str(rank),
                    "Id": match.id,
                    "Score": f"{match.score:.3f}",
                    "Type": match.match_type.value,
                }
            )

    table = format_table(
        rows,
        title="Matches",
        columns=["Category", "#", "Id", "Score", "Type"],
    )
    output.print_table(table)


def main() -> None:
    """Console-script entry point."""
    load_dotenv()
    app()


if __name__ == "__main__":
    main()
