"""CLI entry point for the Investor Valuation Explorer.

Usage:
    valuation-explorer ask winner
    valuation-explorer overlap --source data/valuations.yaml
    valuation-explorer show "Harbour Pension Fund"
    valuation-explorer table
    valuation-explorer summary --save results/summary.json
    valuation-explorer interactive
"""

import json
import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.prompt import Prompt

from .core.config import get_config
from .core.exceptions import ConfigurationError, RecordLoadError
from .core.types import QuestionKind
from .explorer import ValuationExplorer
from .output.formatters import TableFormatter

# Initialize app
app = typer.Typer(
    name="valuation-explorer",
    help="Explore investor valuation ranges for a single asset",
    add_completion=False,
)

console = Console()

SOURCE_HELP = "Records file (.json/.yaml) or URL; defaults to VALUATION_SOURCE"


def setup_logging(verbose: bool = False) -> None:
    """Configure logging."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_time=False, show_path=False)],
        force=True,
    )


def _open_session(source: Optional[str]) -> ValuationExplorer:
    """Load the record set or stop with a static error state."""
    try:
        return ValuationExplorer.load(source, config=get_config())
    except RecordLoadError as e:
        console.print(f"[red]Could not load valuations: {escape(e.message)}[/]")
        raise typer.Exit(1)
    except ConfigurationError as e:
        console.print(f"[red]{escape(e.message)}[/]")
        raise typer.Exit(1)


def _print_text(text: str) -> None:
    console.print(text, markup=False, highlight=False, soft_wrap=True)


@app.command()
def ask(
    question: str = typer.Argument(..., help="Question: overlap, highest, lowest, winner"),
    source: Optional[str] = typer.Option(None, "--source", "-s", help=SOURCE_HELP),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose logging"),
) -> None:
    """
    Answer one of the fixed questions about the valuation set.

    Examples:
        valuation-explorer ask overlap
        valuation-explorer ask winner --source https://example.com/valuations.json
    """
    setup_logging(verbose)
    explorer = _open_session(source)

    answer = explorer.ask(question.lower())
    if not answer:
        console.print(f"[yellow]Unknown question: {escape(question)}[/]")
        console.print("Valid questions: " + ", ".join(k.value for k in QuestionKind))
        raise typer.Exit(2)
    _print_text(answer)


@app.command()
def overlap(
    source: Optional[str] = typer.Option(None, "--source", "-s", help=SOURCE_HELP),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose logging"),
) -> None:
    """Show the overlap band of all valuation ranges."""
    setup_logging(verbose)
    explorer = _open_session(source)
    _print_text(explorer.overlap_label())


@app.command()
def show(
    investor: str = typer.Argument(..., help="Investor name (case-insensitive)"),
    source: Optional[str] = typer.Option(None, "--source", "-s", help=SOURCE_HELP),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose logging"),
) -> None:
    """Show the detail view of one investor."""
    setup_logging(verbose)
    explorer = _open_session(source)

    try:
        explorer.selection.select_investor(investor)
    except KeyError:
        console.print(f"[red]Investor not found: {escape(investor)}[/]")
        raise typer.Exit(1)
    _print_text(explorer.detail())


@app.command()
def table(
    source: Optional[str] = typer.Option(None, "--source", "-s", help=SOURCE_HELP),
    plain: bool = typer.Option(False, "--plain", help="Plain text without colors"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose logging"),
) -> None:
    """List every investor's range, base value and assumptions."""
    setup_logging(verbose)
    explorer = _open_session(source)

    formatter = TableFormatter(use_rich=not plain, display=explorer.config.display)
    formatted = formatter.format(explorer.records, explorer.selection.current())
    if plain:
        print(formatted)
    else:
        console.print(formatted, end="")


@app.command()
def summary(
    source: Optional[str] = typer.Option(None, "--source", "-s", help=SOURCE_HELP),
    save: Optional[Path] = typer.Option(None, "--save", help="Save JSON summary to file"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose logging"),
) -> None:
    """Print the record set, overlap band and heuristic winner as JSON."""
    setup_logging(verbose)
    explorer = _open_session(source)

    formatted = json.dumps(explorer.summary(), indent=2, ensure_ascii=False)
    print(formatted)

    if save:
        save.parent.mkdir(parents=True, exist_ok=True)
        save_path = save.with_suffix(".json")
        save_path.write_text(formatted, encoding="utf-8")
        console.print(f"[green]Saved to {save_path}[/]")


@app.command()
def interactive(
    source: Optional[str] = typer.Option(None, "--source", "-s", help=SOURCE_HELP),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose logging"),
) -> None:
    """
    Explore the valuation set interactively.

    Enter an investor number to select it, a question name to get an
    answer, or q to quit.
    """
    setup_logging(verbose)
    explorer = _open_session(source)

    explorer.selection.subscribe(lambda _record: _print_text(explorer.detail()))

    _print_text(explorer.overlap_label())
    for i, record in enumerate(explorer.records, 1):
        console.print(f"  [cyan]{i}[/]. {escape(record.investor)}")
    for kind in QuestionKind:
        console.print(f"  [bold]{kind.value}[/]: {kind.display_name}")
    _print_text(explorer.detail())

    while True:
        command = Prompt.ask("[bold]>[/]", console=console, default="q").strip()
        if command.lower() in ("q", "quit", "exit"):
            break

        if command.isdigit():
            index = int(command) - 1
            if not 0 <= index < len(explorer.records):
                console.print(f"[red]No investor #{command}[/]")
                continue
            explorer.selection.select_index(index)
            continue

        answer = explorer.ask(command.lower())
        if answer:
            _print_text(answer)
        else:
            console.print(f"[yellow]Unknown command: {escape(command)}[/]")


@app.command()
def version() -> None:
    """Show version information."""
    from . import __version__
    console.print(f"Valuation Explorer v{__version__}")


def main() -> None:
    """Main entry point."""
    app()


if __name__ == "__main__":
    main()
