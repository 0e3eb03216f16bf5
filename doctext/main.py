"""
doctext CLI Application.

Provides a command-line interface for extracting plain text from
documents, the same way the upload endpoint does.
"""

import logging
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from doctext.config import get_settings
from doctext.extractors.factory import get_format_tags
from doctext.models import ParseResponse
from doctext.service import parse_upload

# Create Typer app
app = typer.Typer(
    name="doctext",
    help="Extract normalized plain text from documents",
    add_completion=False,
)

console = Console()


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )


@app.command()
def parse(
    file: Annotated[Path, typer.Argument(help="Path to the document to parse")],
    json_output: Annotated[
        bool,
        typer.Option("--json", help="Print the full parse response as JSON"),
    ] = False,
    output: Annotated[
        Optional[Path],
        typer.Option("--output", "-o", help="Write the result to this file instead of stdout"),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Show progress logging"),
    ] = False,
) -> None:
    """
    Extract the text of a document.

    Prints a short summary followed by the text, or the JSON response
    with --json. Exits with status 1 if the document cannot be parsed.
    """
    settings = get_settings()
    _configure_logging("INFO" if verbose else settings.log_level)

    if not file.is_file():
        console.print(f"[red]Error:[/red] File not found: {escape(str(file))}")
        raise typer.Exit(1)

    response = parse_upload(file.read_bytes(), file.name, settings)

    if json_output:
        payload = response.model_dump_json(indent=2)
        if output:
            output.write_text(payload, encoding="utf-8")
            console.print(f"[green]Response saved to:[/green] {escape(str(output))}")
        else:
            typer.echo(payload)
        if not response.success:
            raise typer.Exit(1)
        return

    if not response.success:
        console.print(f"[red]Parse Error:[/red] {escape(response.error or '')}")
        raise typer.Exit(1)

    _display_summary(response)

    if output:
        output.write_text(response.text or "", encoding="utf-8")
        console.print(f"\n[green]Text saved to:[/green] {escape(str(output))}")
    else:
        console.print(response.text or "", markup=False, highlight=False)


@app.command()
def formats() -> None:
    """
    List the supported file extensions.

    Shows the format tag each extension is reported as.
    """
    table = Table(title="Supported Formats")
    table.add_column("Extension", style="cyan")
    table.add_column("Format Tag")

    for extension, tag in sorted(get_format_tags().items()):
        table.add_row(f".{extension}", tag)

    console.print(table)


def _display_summary(response: ParseResponse) -> None:
    """Display the parse result metadata in a panel."""
    console.print(
        Panel(
            f"[bold]{escape(response.filename)}[/bold]\n"
            f"Format: {response.file_type}\n"
            f"Pages: {response.pages}\n"
            f"Characters: {response.char_count}",
            title="Parsed Document",
        )
    )


if __name__ == "__main__":
    app()
