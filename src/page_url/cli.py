"""Typer CLI for inspecting how page-url decomposes URLs."""

from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from .base_path import prepend as prepend_base
from .base_path import validate_base_path
from .exceptions import PageUrlError, UsageError
from .logging_config import get_logger, setup_logging
from .parser import decompose
from .utils.url_utils import is_parsable

app = typer.Typer(
    name="page-url",
    help="page-url - URL decomposition and base path resolution",
    add_completion=False,
)
console = Console()
logger = get_logger(__name__)


def _default_base(base: Optional[str]) -> str:
    if base is not None:
        return base
    from .config import settings

    return settings.BASE_SERVER


@app.callback()
def main(
    debug: bool = typer.Option(False, "--debug", help="Enable debug logging"),
):
    """Configure logging before running a command."""
    from .config import settings

    setup_logging(level=settings.LOG_LEVEL, debug=debug or settings.DEBUG)


@app.command()
def parse(
    url: str = typer.Argument(..., help="URL to decompose"),
    base: Optional[str] = typer.Option(
        None, "--base", "-b", help="Base path (defaults to BASE_SERVER)"
    ),
    as_json: bool = typer.Option(False, "--json", help="Print camelCase JSON"),
):
    """Decompose a URL and show how the base path applies."""
    if not is_parsable(url):
        console.print(
            f"[red]Error:[/red] Can't parse `{url}`; URLs should start with "
            "`/`, `http`, `.`, `?` or `#`"
        )
        raise typer.Exit(1)

    base_server = _default_base(base)
    try:
        validate_base_path(base_server)
        parsed = decompose(url, base_server)
    except PageUrlError as e:
        console.print(f"[red]Error:[/red] {e.message}")
        raise typer.Exit(1)

    if as_json:
        typer.echo(parsed.model_dump_json(by_alias=True, indent=2))
        return

    table = Table(title=f"{url}  (base {base_server})")
    table.add_column("Field", style="cyan")
    table.add_column("Value")
    for name, value in parsed.model_dump(by_alias=True).items():
        table.add_row(name, repr(value))
    console.print(table)


@app.command()
def prepend(
    url: str = typer.Argument(..., help="Root-relative URL, e.g. /about"),
    base: Optional[str] = typer.Option(
        None, "--base", "-b", help="Base path or asset origin (defaults to BASE_SERVER)"
    ),
):
    """Mount a root-relative URL under a base path or asset origin."""
    if not url.startswith("/"):
        console.print(f"[red]Error:[/red] `{url}` should start with `/`")
        raise typer.Exit(1)

    try:
        result = prepend_base(url, _default_base(base))
    except PageUrlError as e:
        console.print(f"[red]Error:[/red] {e.message}")
        raise typer.Exit(1)
    typer.echo(result)


@app.command("check-base")
def check_base(
    base: str = typer.Argument(..., help="Base path to validate, e.g. /app/"),
):
    """Validate a base path."""
    try:
        validate_base_path(base)
    except UsageError as e:
        console.print(f"[red]Error:[/red] {e.message}")
        raise typer.Exit(1)
    logger.debug(f"Base path {base!r} is valid")
    console.print(f"[green]✓[/green] `{base}` is a valid base path")


if __name__ == "__main__":
    app()
