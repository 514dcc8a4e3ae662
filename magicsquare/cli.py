"""Command line interface for generating and checking magic squares."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import NoReturn, Optional

import typer
from rich.console import Console
from rich.table import Table

from magicsquare.config import OUTPUT_FORMATS, MagicConfig, load_config
from magicsquare.engine import default_engine
from magicsquare.errors import InvalidInputError, MagicSquareError
from magicsquare.families import Grid
from magicsquare.gridio import read_grid, write_csv, write_json
from magicsquare.render import render_csv, render_html, render_json, render_text, sum_line

logger = logging.getLogger(__name__)

app = typer.Typer(help="Generate, validate and render magic squares.")
console = Console()
err_console = Console(stderr=True)


def _fail(exc: Exception) -> NoReturn:
    err_console.print(f"Error: {exc}", style="bold red", markup=False, highlight=False, soft_wrap=True)
    raise typer.Exit(code=1)


def _settings(ctx: typer.Context) -> MagicConfig:
    return ctx.obj if isinstance(ctx.obj, MagicConfig) else MagicConfig()


def _print_table(square: Grid) -> None:
    table = Table(show_header=False, show_lines=True)
    for _ in square[0] if square else []:
        table.add_column(justify="right")
    for row in square:
        table.add_row(*(str(value) for value in row))
    console.print(table)


@app.callback()
def main(
    ctx: typer.Context,
    config: Optional[Path] = typer.Option(None, "--config", "-c", help="YAML file with default settings"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """Magic square toolkit."""
    try:
        settings = load_config(config)
    except (OSError, MagicSquareError) as exc:
        _fail(exc)
    logging.basicConfig(
        level=logging.DEBUG if verbose else settings.logging_level,
        format="[%(levelname)s] %(message)s",
    )
    ctx.obj = settings


@app.command()
def generate(
    ctx: typer.Context,
    n: Optional[int] = typer.Argument(None, help="Order of the square (defaults to configured order)"),
    output_format: Optional[str] = typer.Option(
        None, "--format", "-f", help=f"Output format ({'|'.join(OUTPUT_FORMATS)})"
    ),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Write the square to a file"),
    default_style: Optional[bool] = typer.Option(
        None, "--default-style/--no-default-style", help="Apply inline CSS to HTML output"
    ),
    table_class: Optional[str] = typer.Option(None, "--table-class", help="CSS class for the HTML table"),
) -> None:
    """Generate an n x n magic square and print it with its magic constant."""
    settings = _settings(ctx)
    order = settings.order if n is None else n
    fmt = (output_format or settings.output_format).lower()
    use_default_style = settings.use_default_style if default_style is None else default_style
    css_class = settings.table_class if table_class is None else table_class

    engine = default_engine()
    try:
        if fmt not in OUTPUT_FORMATS:
            raise InvalidInputError(f"Unknown format {fmt!r}")
        if fmt == "table" and output is not None:
            raise InvalidInputError("The table format can only be printed to the terminal")
        square = engine.generate(order)
        total = engine.compute_sum(order)
    except MagicSquareError as exc:
        _fail(exc)

    if output is not None:
        if fmt == "csv":
            write_csv(square, output)
        elif fmt == "json":
            write_json(square, output)
        elif fmt == "html":
            output.parent.mkdir(parents=True, exist_ok=True)
            output.write_text(render_html(square, use_default_style, css_class), encoding="utf-8")
        else:
            output.parent.mkdir(parents=True, exist_ok=True)
            output.write_text(render_text(square) + "\n", encoding="utf-8")
        logger.info(f"Wrote {order} x {order} square to {output}")
        typer.echo(f"wrote {output}")
        typer.echo(sum_line(order, total))
        return

    if fmt == "table":
        _print_table(square)
    elif fmt == "html":
        typer.echo(render_html(square, use_default_style, css_class))
    elif fmt == "json":
        typer.echo(render_json(square))
    elif fmt == "csv":
        typer.echo(render_csv(square), nl=False)
    else:
        typer.echo(render_text(square))

    if fmt not in ("json", "csv"):
        typer.echo(sum_line(order, total))


@app.command()
def width(cells: int = typer.Argument(..., help="Number of cells the square must hold")) -> None:
    """Print the smallest supported order with at least CELLS cells."""
    try:
        result = default_engine().compute_width(cells)
    except MagicSquareError as exc:
        _fail(exc)
    typer.echo(str(result))


@app.command(name="sum")
def sum_(n: int = typer.Argument(..., help="Order of the square")) -> None:
    """Print the magic constant for an n x n square."""
    try:
        total = default_engine().compute_sum(n)
    except MagicSquareError as exc:
        _fail(exc)
    typer.echo(str(total))


@app.command()
def validate(
    path: Path = typer.Argument(..., help="Grid stored as .csv or .json"),
    as_json: bool = typer.Option(False, "--json", help="Print full line-sum statistics as JSON"),
) -> None:
    """Check whether a stored grid is a magic square."""
    engine = default_engine()
    try:
        square = read_grid(path)
        valid = engine.is_valid(square)
        summary = engine.summarise(square) if as_json and square else None
    except (OSError, MagicSquareError) as exc:
        _fail(exc)

    if summary is not None:
        typer.echo(summary.to_json())
    else:
        typer.echo(f"{path}: {'magic' if valid else 'not magic'}")
    if not valid:
        raise typer.Exit(code=1)


if __name__ == "__main__":  # pragma: no cover - CLI entry point
    app()
