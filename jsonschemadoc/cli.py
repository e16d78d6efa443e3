"""
jsonschemadoc CLI - Render a JSON Schema as an annotated JSON document.

Reads a JSON Schema file and prints (or writes) the document describing its
properties, with descriptions as `//` comments, group banners and example
values.
"""

import logging
from pathlib import Path
from typing import Optional

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from jsonschemadoc import __version__
from jsonschemadoc.config import GeneratorSettings
from jsonschemadoc.errors import SchemaDocError
from jsonschemadoc.generator import SchemaDocGenerator
from jsonschemadoc.loader import load_schema_file

app = typer.Typer(
    name="jsonschemadoc",
    help="Annotated JSON documents from JSON Schemas",
    add_completion=False,
)

console = Console()
err_console = Console(stderr=True)


def _configure_logging(verbose: bool):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=err_console, show_path=False)],
    )


@app.command()
def generate(
    schema_path: Path = typer.Argument(
        ...,
        exists=True,
        dir_okay=False,
        readable=True,
        help="Path to the JSON Schema file",
    ),
    output: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        help="Write the document to this file instead of stdout",
    ),
    strict: bool = typer.Option(
        False,
        "--strict",
        help="Fail on malformed hide/group extension fields instead of ignoring them",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
):
    """
    Generate the annotated JSON document for a schema.

    Settings can be overridden with JSONSCHEMADOC_* environment variables
    (e.g. JSONSCHEMADOC_LONG_EXAMPLE_THRESHOLD=40).

    Example:
        jsonschemadoc generate schema/settings.schema.json -o docs/settings.jsonc
    """
    _configure_logging(verbose)

    try:
        settings = GeneratorSettings.from_env()
    except ValidationError as e:
        err_console.print(f"[red]❌ Invalid settings: {escape(str(e))}[/red]")
        raise typer.Exit(1)

    if strict:
        settings = settings.model_copy(update={"strict_extensions": True})

    try:
        schema = load_schema_file(schema_path)
        document = SchemaDocGenerator(settings).generate(schema)
    except SchemaDocError as e:
        err_console.print(f"[red]❌ Error: {escape(str(e))}[/red]")
        raise typer.Exit(1)

    if output is None:
        typer.echo(document)
        return

    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(document + "\n", encoding="utf-8")
    err_console.print(f"[bold green]✅ Document written to:[/bold green] [cyan]{output}[/cyan]")


@app.command()
def version():
    """Show the version of jsonschemadoc."""
    console.print(f"[bold cyan]jsonschemadoc[/bold cyan] v{__version__}")


def main():
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
