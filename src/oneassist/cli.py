"""Typer-based CLI for inspecting OneAssist routing and prompts."""

import json
import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from .agents.registry import build_default_registry
from .config import AssistConfig
from .models.agent import AccountMode, AgentContext
from .prompts.composer import compose_prompt
from .routing.router import AgentRouter
from .routing.scoring import matched_keywords

app = typer.Typer(
    name="oneassist",
    help="OneAssist - marketing analytics agent routing and prompt inspection",
    add_completion=False,
)

console = Console()


@app.callback()
def _configure(
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Log routing scores and context assembly to stderr",
    ),
):
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


def _load_context(query: str, mode: Optional[AccountMode], context_file: Optional[str]) -> AgentContext:
    """Build an AgentContext from an optional JSON file plus command-line overrides.

    Raises:
        FileNotFoundError: If the context file does not exist
        json.JSONDecodeError: If the context file is not valid JSON
        ValueError: If the document is not a JSON object or fails validation
    """
    data: dict = {}
    if context_file:
        data = json.loads(Path(context_file).read_text(encoding="utf-8"))
        if not isinstance(data, dict):
            raise ValueError("Context file must contain a JSON object")

    data["query"] = query
    if mode is not None:
        data["mode"] = mode.value
        data.pop("accountType", None)
    return AgentContext.model_validate(data)


def _build_router() -> AgentRouter:
    config = AssistConfig.from_env()
    return AgentRouter(build_default_registry(config.context), config.routing)


@app.command()
def agents():
    """List the agent catalog."""
    registry = build_default_registry()

    table = Table(title=f"Registered Agents ({len(registry)})")
    table.add_column("ID", style="cyan", no_wrap=True)
    table.add_column("Name", style="magenta")
    table.add_column("Emoji")
    table.add_column("Capabilities", style="dim")
    table.add_column("Keywords", style="yellow", justify="right")

    for agent in registry:
        table.add_row(
            agent.id,
            agent.display_name,
            agent.emoji,
            ", ".join(sorted(agent.capabilities)),
            str(len(agent.keywords)),
        )

    console.print(table)
    console.print(
        f"[dim]Tutoring modes use {registry.tutor.display_name} ({registry.tutor.id}); "
        f"unmatched business queries use {registry.fallback.display_name} ({registry.fallback.id}).[/dim]"
    )


@app.command()
def route(
    query: str = typer.Argument(..., help="User question to route"),
    mode: Optional[AccountMode] = typer.Option(
        None,
        "--mode",
        "-m",
        help="Account mode (default: from context file, else business)",
    ),
    context_file: Optional[str] = typer.Option(
        None,
        "--context",
        "-c",
        help="JSON file shaped like an AgentContext (camelCase keys accepted)",
    ),
):
    """Show which agent a query routes to, with per-agent scores."""
    try:
        context = _load_context(query, mode, context_file)
        router = _build_router()
        decision = router.route(query, context)
    except FileNotFoundError as e:
        console.print(f"[red]Error: Context file not found: {e.filename}[/red]")
        raise typer.Exit(code=1)
    except json.JSONDecodeError as e:
        console.print(f"[red]Error: Context file is not valid JSON: {e}[/red]")
        raise typer.Exit(code=1)
    except ValueError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(code=1)

    agent = decision.primary_agent
    console.print(f"[bold green]Primary agent:[/bold green] {agent.emoji} {agent.display_name} ({agent.id})")
    console.print(f"[bold]Confidence:[/bold] {decision.confidence:.2f}")
    console.print(f"[bold]Reasoning:[/bold] {decision.reasoning}")
    console.print()

    query_lower = query.lower()
    table = Table(title="Keyword Scores")
    table.add_column("Agent", style="cyan")
    table.add_column("Confidence", style="yellow", justify="right")
    table.add_column("Matched Keywords", style="dim")
    for scored_agent, confidence in router.scores(query):
        matches = matched_keywords(query_lower, scored_agent.keywords)
        table.add_row(scored_agent.id, f"{confidence:.3f}", ", ".join(matches) or "-")
    console.print(table)


@app.command()
def prompt(
    query: str = typer.Argument(..., help="User question to route and compose for"),
    mode: Optional[AccountMode] = typer.Option(
        None,
        "--mode",
        "-m",
        help="Account mode (default: from context file, else business)",
    ),
    context_file: Optional[str] = typer.Option(
        None,
        "--context",
        "-c",
        help="JSON file shaped like an AgentContext (camelCase keys accepted)",
    ),
    output: Optional[str] = typer.Option(
        None,
        "--output",
        "-o",
        help="Write the prompt to this file instead of stdout",
    ),
):
    """Route a query and print the composed instruction text."""
    try:
        context = _load_context(query, mode, context_file)
        decision = _build_router().route(query, context)
        text = compose_prompt(decision.primary_agent, context)
    except FileNotFoundError as e:
        console.print(f"[red]Error: Context file not found: {e.filename}[/red]")
        raise typer.Exit(code=1)
    except json.JSONDecodeError as e:
        console.print(f"[red]Error: Context file is not valid JSON: {e}[/red]")
        raise typer.Exit(code=1)
    except ValueError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(code=1)

    if output:
        Path(output).write_text(text, encoding="utf-8")
        console.print(
            f"[green]Wrote {len(text)} chars for {decision.primary_agent.id} to {output}[/green]"
        )
    else:
        typer.echo(text)


@app.command()
def version():
    """Show OneAssist version."""
    from . import __version__
    console.print(f"OneAssist v{__version__}")


def main():
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
