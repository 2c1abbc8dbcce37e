"""Main CLI application for mite."""

import logging
import sys
from typing import Any

import typer
from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from mite.domain.value_objects.point import Point
from mite.presentation.schemas import PointModel
from mite.shared.config.settings import get_settings
from mite.shared.logging import setup_logging

# Fix Windows console encoding
if sys.platform == "win32":
    sys.stdout.reconfigure(encoding="utf-8", errors="replace")
    sys.stderr.reconfigure(encoding="utf-8", errors="replace")

logger = logging.getLogger("mite.cli")

app = typer.Typer(
    name="mite",
    help="Flat 2D point calculations",
    add_completion=False,
)
console = Console()

ELEMENT_TYPES: dict[str, type] = {"int": int, "float": float}


def parse_point(value: str) -> Point[Any]:
    """Typer parser turning ``"x,y"`` into a Point."""
    try:
        return Point.parse(value)
    except ValueError as e:
        raise typer.BadParameter(str(e)) from e


def parse_number(value: str) -> int | float:
    """Typer parser for scalars, keeping integers as ``int``."""
    try:
        return int(value)
    except ValueError:
        pass
    try:
        return float(value)
    except ValueError:
        raise typer.BadParameter(f"Invalid number: {value!r}") from None


def _print_point(point: Point[Any], as_json: bool) -> None:
    if as_json:
        console.print_json(PointModel.from_point(point).model_dump_json())
    else:
        console.print(str(point))


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose output"),
):
    """Flat 2D point calculations."""
    setup_logging(get_settings(), level="DEBUG" if verbose else None)


@app.command()
def version():
    """Show version information."""
    settings = get_settings()
    console.print(Panel(
        Text(f"{settings.app_name} v{settings.app_version}\nFlat 2D geometry primitives", justify="center"),
        title="Version Info",
        border_style="blue"
    ))


@app.command()
def distance(
    a: Point = typer.Argument(..., parser=parse_point, help="First point as x,y"),
    b: Point = typer.Argument(..., parser=parse_point, help="Second point as x,y"),
):
    """Print the Euclidean distance between two points."""
    logger.debug("distance %s -> %s", a, b)
    console.print(a.distance_from(b))


@app.command()
def delta(
    a: Point = typer.Argument(..., parser=parse_point, help="First point as x,y"),
    b: Point = typer.Argument(..., parser=parse_point, help="Second point as x,y"),
):
    """Print the absolute per-axis deltas between two points."""
    logger.debug("delta %s -> %s", a, b)
    console.print(f"dx={a.x_from(b)} dy={a.y_from(b)}")


@app.command()
def scale(
    point: Point = typer.Argument(..., parser=parse_point, help="Point as x,y"),
    factor: float = typer.Argument(..., parser=parse_number, help="Scalar factor"),
    as_json: bool = typer.Option(False, "--json", help="Print as JSON"),
):
    """Multiply both coordinates by a scalar."""
    _print_point(point * factor, as_json)


@app.command()
def divide(
    point: Point = typer.Argument(..., parser=parse_point, help="Point as x,y"),
    divisor: float = typer.Argument(..., parser=parse_number, help="Scalar divisor"),
    as_json: bool = typer.Option(False, "--json", help="Print as JSON"),
):
    """Divide both coordinates by a scalar."""
    try:
        result = point / divisor
    except ZeroDivisionError:
        logger.debug("integer division by zero for %s", point)
        console.print("[red]Error:[/red] integer division by zero")
        raise typer.Exit(code=1)
    _print_point(result, as_json)


@app.command()
def cast(
    point: Point = typer.Argument(..., parser=parse_point, help="Point as x,y"),
    to: str = typer.Option("int", "--to", "-t", help="Target element type (int or float)"),
    as_json: bool = typer.Option(False, "--json", help="Print as JSON"),
):
    """Convert both coordinates to another element type."""
    element_type = ELEMENT_TYPES.get(to)
    if element_type is None:
        raise typer.BadParameter(f"Unsupported element type: {to!r}", param_hint="--to")
    _print_point(point.cast(element_type), as_json)


@app.command()
def translate(
    point: Point = typer.Argument(..., parser=parse_point, help="Point as x,y"),
    offset: Point = typer.Argument(..., parser=parse_point, help="Offset as x,y"),
    subtract: bool = typer.Option(False, "--subtract", "-s", help="Subtract the offset instead"),
    as_json: bool = typer.Option(False, "--json", help="Print as JSON"),
):
    """Move a point by an offset."""
    if subtract:
        point -= offset
    else:
        point += offset
    _print_point(point, as_json)


if __name__ == "__main__":
    app()
