"""Typer CLI application."""

import json
import logging
from pathlib import Path
from typing import Annotated

try:
    import typer
    from rich.console import Console
    from rich.table import Table
    HAS_TYPER = True
except ImportError:
    HAS_TYPER = False


def create_app() -> "typer.Typer":
    """Create and configure the CLI application."""
    if not HAS_TYPER:
        raise ImportError("typer and rich are required for CLI. Install with: uv pip install ansi-canvas[cli]")

    app = typer.Typer(
        name="ansi-canvas",
        help="Import ANSI art, text and libcaca dumps into character canvases.",
        no_args_is_help=True,
        rich_markup_mode="rich",
    )
    console = Console()

    @app.callback()
    def main(
        verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable debug logging")] = False,
    ) -> None:
        """Import ANSI art, text and libcaca dumps into character canvases."""
        if verbose:
            logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    @app.command()
    def formats() -> None:
        """List the supported import formats."""
        from ansi_canvas import get_import_list

        table = Table("Format", "Description")
        for name, description in get_import_list():
            table.add_row(name or "(empty)", description)
        console.print(table)

    @app.command()
    def info(
        path: Annotated[Path, typer.Argument(help="File to import")],
        format: Annotated[str, typer.Option("--format", "-f", help="Import format (autodetected when empty)")] = "",
        json_output: Annotated[bool, typer.Option("--json", "-j", help="Output as JSON")] = False,
        text: Annotated[bool, typer.Option("--text", "-t", help="Print the canvas characters")] = False,
    ) -> None:
        """Import a file and describe the resulting canvas."""
        from ansi_canvas import CanvasImportError, detect_format, import_canvas

        try:
            data = path.read_bytes()
            canvas = import_canvas(data, format)
        except OSError as e:
            console.print(f"[red]Cannot read {path}: {e.strerror}[/]")
            raise typer.Exit(1)
        except CanvasImportError as e:
            console.print(f"[red]{path.name}: {e}[/]")
            raise typer.Exit(1)

        resolved = format.lower() or detect_format(data)
        glyphs = sum(1 for _, _, cell in canvas.cells() if cell.text != " ")
        rows = [canvas.row_text(y).rstrip() for y in range(canvas.height)]

        if json_output:
            summary = {
                "format": resolved,
                "width": canvas.width,
                "height": canvas.height,
                "glyphs": glyphs,
            }
            if text:
                summary["text"] = rows
            print(json.dumps(summary, indent=2))
            return

        console.print(f"[bold cyan]{path.name}[/]")
        console.print(f"  [bold]Format:[/] {resolved}")
        console.print(f"  [bold]Size:[/]   {canvas.width}x{canvas.height}")
        console.print(f"  [bold]Glyphs:[/] {glyphs}")
        if text:
            console.print()
            for row in rows:
                console.print(row, markup=False, highlight=False)

    return app
