"""Word Explorer – CLI entry point."""

from __future__ import annotations

import typer
from rich.console import Console
from rich.table import Table

from word_explorer.config import load_settings
from word_explorer.controller import NO_RESULTS, PageController, ResultView
from word_explorer.datamuse import DatamuseClient
from word_explorer.logs import configure_logging

app = typer.Typer(
    name="word-explorer",
    help="Look up rhymes and similar words via Datamuse, and keep a list of saved words.",
    add_completion=False,
)
console = Console()

EXPLORE_HELP = (
    "[dim]Type a word for rhymes, or use "
    ":r WORD (rhymes), :s WORD (similar), :save WORD, :saved, :q (quit).[/dim]"
)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging."),
) -> None:
    """Configure logging before any command runs."""
    settings = load_settings()
    configure_logging("DEBUG" if verbose else settings.log_level)


def _controller() -> PageController:
    return PageController(DatamuseClient.from_settings(load_settings()))


def _print_view(description: str, view: ResultView | None) -> None:
    """Render a lookup the way the page does: description, then groups or a placeholder."""
    console.print(f"[bold]{description}[/bold]\n")
    if view is None:
        return
    if view.is_empty:
        console.print(f"[yellow]{NO_RESULTS}[/yellow]")
        return

    for group in view.groups:
        table = Table(title=group.heading, show_header=False)
        table.add_column("Word", style="cyan")
        for word in group.words:
            table.add_row(word)
        console.print(table)


@app.command()
def rhymes(
    word: str = typer.Argument(..., help="Word to rhyme with."),
) -> None:
    """Show words that rhyme with WORD, grouped by syllable count."""
    controller = _controller()
    view = controller.show_rhymes(word)
    _print_view(controller.description, view)


@app.command()
def similar(
    word: str = typer.Argument(..., help="Word to find similar meanings for."),
) -> None:
    """Show words with a meaning similar to WORD."""
    controller = _controller()
    view = controller.show_similar(word)
    _print_view(controller.description, view)


@app.command()
def explore() -> None:
    """Interactive session with a running list of saved words."""
    controller = _controller()
    console.print(EXPLORE_HELP)

    while True:
        line = typer.prompt("word", default="", show_default=False).strip()
        if not line:
            continue

        command, _, arg = line.partition(" ")
        arg = arg.strip()

        if command == ":q":
            break
        if command == ":saved":
            console.print(f"Saved: {controller.saved_words_display}")
        elif command == ":save":
            if not arg:
                console.print("[yellow]Usage: :save WORD[/yellow]")
                continue
            console.print(f"Saved: {controller.save_word(arg)}")
        elif command == ":s":
            _print_view(controller.description, controller.show_similar(arg))
        elif command == ":r":
            _print_view(controller.description, controller.show_rhymes(arg))
        elif command.startswith(":"):
            console.print(EXPLORE_HELP)
        else:
            _print_view(controller.description, controller.show_rhymes(line))

    if controller.saved_words:
        console.print(f"[green]Saved words: {controller.saved_words_display}[/green]")


if __name__ == "__main__":
    app()
