import asyncio
import json
import logging

from pathlib import Path
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table
from typing import Optional

import typer

from docspot import __version__
from docspot.config import load_locator_config
from docspot.docstring_updater import splice_documentation
from docspot.languages import C_FAMILY, EXTENSION_LANGUAGES, INDENT_FAMILY, JS_FAMILY
from docspot.locate import locate_function_in_file

app = typer.Typer(
    help="docspot - locate the function under the cursor and its documentation",
    no_args_is_help=True,
)

console = Console()


def _editor_line(line: int) -> int:
    """Convert a one-based editor line number to a 0-indexed line."""
    if line < 1:
        raise typer.BadParameter("Line numbers start at 1", param_hint="LINE")
    return line - 1


@app.command()
def locate(
    file: Path = typer.Argument(..., help="Source file to scan"),
    line: int = typer.Argument(..., help="Cursor line (1-based)"),
    language: Optional[str] = typer.Option(
        None, "--language", "-l", help="Language tag (inferred from the extension if omitted)"
    ),
):
    """Locate the function around a line and print it as JSON.

    Examples:
        docspot locate src/math.js 12
        docspot locate tool.inc 30 --language cpp
    """
    cursor_line = _editor_line(line)

    try:
        config = load_locator_config()
        record = locate_function_in_file(file, cursor_line, language, config)
    except (FileNotFoundError, ValueError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)
    except Exception as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=2)

    if record is None:
        typer.echo(f"Error: No function found at {file}:{line}", err=True)
        raise typer.Exit(code=1)

    typer.echo(json.dumps(record.to_dict(), indent=2))


@app.command()
def insert(
    file: Path = typer.Argument(..., help="Source file to update"),
    line: int = typer.Argument(..., help="Cursor line (1-based)"),
    doc_file: Path = typer.Option(
        ..., "--doc-file", "-d", help="File holding the documentation block to insert"
    ),
    language: Optional[str] = typer.Option(
        None, "--language", "-l", help="Language tag (inferred from the extension if omitted)"
    ),
    in_place: bool = typer.Option(
        False, "--in-place", "-i", help="Write the result back to FILE instead of stdout"
    ),
):
    """Insert or replace the documentation block of the function around a line.

    The block is inserted as written in DOC_FILE, only its indentation is
    adjusted. An existing block is replaced.
    """
    cursor_line = _editor_line(line)

    try:
        config = load_locator_config()
        record = locate_function_in_file(file, cursor_line, language, config)
        if record is None:
            typer.echo(f"Error: No function found at {file}:{line}", err=True)
            raise typer.Exit(code=1)

        doc_text = doc_file.read_text()
        with open(file, newline="") as f:
            source_code = f.read()
        updated = splice_documentation(source_code, record, doc_text)
    except typer.Exit:
        raise
    except (FileNotFoundError, ValueError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)
    except Exception as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=2)

    if in_place:
        with open(file, "w", newline="") as f:
            f.write(updated)
        typer.echo(f"✓ Updated documentation of '{record.name}' in {file}")
    else:
        typer.echo(updated, nl=False)


@app.command()
def languages():
    """Show the language tags and the matcher each one is routed to."""
    families = [
        ("JavaScript/TypeScript", sorted(JS_FAMILY)),
        ("Python", sorted(INDENT_FAMILY)),
        ("C-style", sorted(C_FAMILY)),
    ]
    extensions = {}
    for suffix, tag in EXTENSION_LANGUAGES.items():
        extensions.setdefault(tag, []).append(suffix)

    table = Table(title="Language dispatch")
    table.add_column("Language")
    table.add_column("Matcher")
    table.add_column("Extensions")
    for family, tags in families:
        for tag in tags:
            table.add_row(tag, family, " ".join(extensions.get(tag, [])))
    table.add_row("(any other)", "generic", "")

    console.print(table)


@app.command()
def mcp_server():
    """Start the MCP server exposing the function locator.

    The server speaks the Model Context Protocol over stdio so LLM clients
    can fetch a function's source and documentation by file and line.
    """
    from docspot.mcp_server import main

    asyncio.run(main())


def _version_callback(value: bool):
    """Show version and exit."""
    if value:
        console.print(f"docspot version {__version__}")
        raise typer.Exit()


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        "-v",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
    verbose: bool = typer.Option(False, "--verbose", help="Log locator diagnostics"),
):
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(name)s: %(message)s",
            handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        )
