"""Typer-based CLI for ContextMap."""

from __future__ import annotations

import logging
import sys
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape

from . import __version__, config
from .config_manager import load_defaults
from .errors import ContextMapError, NothingToDoError
from .models import RunOptions
from .orchestrator import ContextMapper
from .selector import prompt_selection, select_all

logger = logging.getLogger(__name__)

app = typer.Typer(
    help="🗺️  ContextMap: extract the files around a keyword along the import graph.",
    rich_markup_mode="rich",
    add_completion=False,
)


def setup_logging(verbose: bool) -> None:
    """Send log records to stderr so stdout only carries the document."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s  %(name)-28s  %(levelname)-7s  %(message)s",
        stream=sys.stderr,
        force=True,
    )


def version_callback(value: bool):
    """Print version and exit."""
    if value:
        typer.echo(f"ContextMap CLI v{__version__}")
        raise typer.Exit()


@app.command()
def main(
    keyword: str = typer.Argument(..., help="Identifier or string literal to search for."),
    literal: bool = typer.Option(False, "--literal", "-l", help="Match the keyword as a whole string literal."),
    output: Optional[str] = typer.Option(None, "--output", "-o", help="Output format: markdown or json."),
    max_lines: Optional[int] = typer.Option(None, "--max-lines", "-m", min=0, help="Show at most N lines per file (0 = all)."),
    root: Optional[str] = typer.Option(None, "--root", "-r", help="Directory to scan."),
    depth: Optional[int] = typer.Option(None, "--depth", "-d", help="Maximum import depth (0 = unbounded)."),
    upstream: bool = typer.Option(False, "--upstream", "-u", help="Also include files that import the selected ones."),
    select_every: bool = typer.Option(False, "--all", "-a", help="Select every matching file without prompting."),
    syntax: bool = typer.Option(False, "--syntax", help="Use the Tree-sitter matcher instead of regex."),
    jobs: Optional[int] = typer.Option(None, "--jobs", "-j", min=1, help="Number of files read in parallel."),
    verbose: bool = typer.Option(False, "--verbose", help="Log scan and traversal details to stderr."),
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        "-v",
        help="Show version and exit.",
        callback=version_callback,
        is_eager=True,
    ),
):
    """Find files referencing KEYWORD and print them with their import closure.

    [bold]Examples:[/bold]
      ctxmap fetchData -a
      ctxmap fetchData -r src -d 1 -o json
      ctxmap "api/users" --literal --upstream
    """
    setup_logging(verbose)
    err_console = Console(stderr=True)

    try:
        defaults = load_defaults()
        options = RunOptions(
            keyword=keyword,
            literal=literal,
            output=(output if output is not None else defaults["output"]).lower(),
            root=root if root is not None else defaults["root"],
            max_lines=max_lines if max_lines is not None else defaults["max_lines"],
            depth=depth if depth is not None else defaults["depth"],
            upstream=upstream,
            select_all=select_every,
            syntax=syntax,
            jobs=jobs if jobs is not None else defaults["jobs"],
            extensions=defaults["extensions"],
        )
        mapper = ContextMapper(options)
        if options.select_all:
            selector = select_all
        else:
            def selector(matches):
                return prompt_selection(matches, console=err_console)
        document = mapper.run(selector)
    except NothingToDoError as exc:
        err_console.print(f"[yellow]{escape(str(exc))}[/yellow]")
        raise typer.Exit(code=config.EXIT_NOTHING_TO_DO)
    except ContextMapError as exc:
        err_console.print(f"[red]Error:[/red] {escape(str(exc))}")
        logger.debug("Run failed", exc_info=True)
        raise typer.Exit(code=config.EXIT_INPUT_ERROR)

    typer.echo(document)


if __name__ == "__main__":
    app()
