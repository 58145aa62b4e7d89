from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from uslug.config.loader import load_settings
from uslug.config.schema import SlugSettings
from uslug.slug.decode import decode_slug
from uslug.slug.encode import generate_slugs
from uslug.slug.precision import Precision, select_precision
from uslug.util.errors import (
    ClockUnavailableError,
    ConfigError,
    InvalidParameterError,
    RandomSourceUnavailableError,
    SlugDecodeError,
)

app = typer.Typer(help="Timestamp-derived unique slug generator")
console = Console()
err_console = Console(stderr=True)
logger = logging.getLogger(__name__)


def _configure_logging(verbose: bool) -> None:
    if not verbose:
        return
    pkg_logger = logging.getLogger("uslug")
    pkg_logger.setLevel(logging.DEBUG)
    for handler in list(pkg_logger.handlers):
        handler.close()
    pkg_logger.handlers.clear()
    pkg_logger.propagate = False
    pkg_logger.addHandler(RichHandler(console=err_console, show_path=False))


def _resolve_settings_or_exit(
    config: Path | None, length: int | None, count: int | None
) -> SlugSettings:
    try:
        settings = load_settings(config) if config is not None else SlugSettings()
    except ConfigError as exc:
        err_console.print(f"[red]Invalid settings:[/red] {exc}")
        raise typer.Exit(2) from exc
    if length is not None:
        try:
            settings.length = int(select_precision(length))
        except InvalidParameterError as exc:
            err_console.print(f"[red]Invalid length:[/red] {exc}")
            raise typer.Exit(2) from exc
    if count is not None:
        settings.count = count
    return settings


@app.command()
def gen(
    length: Annotated[int | None, typer.Option("--length", "-l")] = None,
    count: Annotated[int | None, typer.Option("--count", "-n", min=1)] = None,
    config: Annotated[Path | None, typer.Option("--config")] = None,
    as_json: Annotated[bool, typer.Option("--json")] = False,
    verbose: Annotated[bool, typer.Option("--verbose", "-v")] = False,
) -> None:
    """Generate slugs from the current time."""
    _configure_logging(verbose)
    settings = _resolve_settings_or_exit(config, length, count)
    logger.debug("generating %d slug(s) of length %d", settings.count, settings.length)
    try:
        slugs = generate_slugs(settings.count, settings.length)
    except InvalidParameterError as exc:
        err_console.print(f"[red]Invalid parameter:[/red] {exc}")
        raise typer.Exit(2) from exc
    except (ClockUnavailableError, RandomSourceUnavailableError) as exc:
        err_console.print(f"[red]Slug generation failed:[/red] {exc}")
        raise typer.Exit(3) from exc

    if as_json:
        typer.echo(json.dumps(slugs))
        return
    for slug in slugs:
        typer.echo(slug)


@app.command()
def decode(
    slug: Annotated[str, typer.Argument()],
    as_json: Annotated[bool, typer.Option("--json")] = False,
) -> None:
    """Recover the timestamp encoded in a slug."""
    try:
        decoded = decode_slug(slug)
    except SlugDecodeError as exc:
        err_console.print(f"[red]Invalid slug:[/red] {exc}")
        raise typer.Exit(2) from exc

    if as_json:
        typer.echo(json.dumps(decoded.to_dict()))
        return
    console.print(f"digits: [bold]{decoded.digits}[/bold]")
    console.print(f"precision: {decoded.precision.unit} ({int(decoded.precision)})")
    console.print(f"timestamp: {decoded.timestamp().isoformat()}")


@app.command()
def precisions() -> None:
    """List supported slug lengths."""
    table = Table(title="Supported precisions")
    table.add_column("length")
    table.add_column("unit")
    table.add_column("slug chars")
    for precision in Precision:
        table.add_row(str(int(precision)), precision.unit, str(int(precision) + 1))
    console.print(table)


if __name__ == "__main__":
    app()
