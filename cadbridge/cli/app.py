"""
Defines the command-line interface for the application using Typer.
"""

import asyncio
import logging
from pathlib import Path

import typer
from rich.console import Console
from rich.logging import RichHandler

from cadbridge import __version__
from cadbridge.api import CadBridge
from cadbridge.exceptions import ConfigurationError
from cadbridge.utils.path import drawing_filename, infer_extension_from_url
from cadbridge.web.auth import split_token

from .formatters import (
    format_error_with_suggestions,
    print_detection_table,
    print_download_outcome,
    print_launch_outcome,
    print_system_info,
)

console = Console()

logging.basicConfig(
    level="WARNING",
    format="%(message)s",
    datefmt="[%X]",
    handlers=[
        RichHandler(
            console=console,
            rich_tracebacks=True,
            show_path=False,
            show_level=False,
            markup=True,
        )
    ],
)
log = logging.getLogger("cadbridge")

app = typer.Typer(
    name="cadbridge",
    help=(
        "Detect installed CAD software and open drawings in it. Use 'cadbridge"
        " <command> --help' for more info."
    ),
    rich_markup_mode="rich",
    pretty_exceptions_show_locals=False,
    add_completion=False,
)


def _build_bridge(ctx: typer.Context) -> CadBridge:
    """Creates the bridge from the environment and the global CLI options."""
    try:
        return CadBridge.from_environment(ctx.obj or {})
    except ConfigurationError as e:
        console.print(format_error_with_suggestions(e))
        raise typer.Exit(code=1) from e


@app.callback(invoke_without_command=True)
def main_callback(
    ctx: typer.Context,
    verbose: int = typer.Option(
        0,
        "--verbose",
        "-v",
        count=True,
        help="Increase logging verbosity (-vv for debug).",
    ),
    version: bool = typer.Option(
        False, "--version", help="Show version and exit.", is_eager=True
    ),
    download_dir: str | None = typer.Option(
        None, "--download-dir", help="Directory for downloaded drawings (default: temp)."
    ),
    timeout: float | None = typer.Option(
        None, "--timeout", help="HTTP timeout in seconds (default: none)."
    ),
    launch_delay: float | None = typer.Option(
        None,
        "--launch-delay",
        help="Seconds to wait for AutoCAD on macOS before sending the open command.",
    ),
):
    """CAD file bridge CLI"""
    if version:
        console.print(f"[bold]cadbridge[/bold] version [cyan]{__version__}[/cyan]")
        raise typer.Exit()

    log_level = "WARNING"
    if verbose >= 2:
        log_level = "DEBUG"
    elif verbose == 1:
        log_level = "INFO"
    logging.getLogger("cadbridge").setLevel(log_level)

    ctx.obj = {
        "download_dir": download_dir,
        "request_timeout": timeout,
        "launch_delay": launch_delay,
    }

    if ctx.invoked_subcommand is None:
        console.print(ctx.get_help())


@app.command()
def detect(ctx: typer.Context):
    """List the CAD software installed on this machine."""
    bridge = _build_bridge(ctx)
    print_detection_table(bridge.detect_cad_software(), console)


@app.command()
def apps(
    ctx: typer.Context,
    first: bool = typer.Option(
        False, "--first", help="Print only the path of the first detected application."
    ),
):
    """Print detected applications as 'name (path)' lines."""
    bridge = _build_bridge(ctx)
    if first:
        path = bridge.detect_cad_applications()
        if not path:
            console.print("[yellow]No CAD software detected.[/yellow]")
            raise typer.Exit(code=1)
        console.print(path, highlight=False)
        return

    for entry in bridge.get_available_cad_applications():
        console.print(entry, highlight=False)


@app.command(name="open")
def open_command(
    ctx: typer.Context,
    target: str = typer.Argument(..., help="Local drawing path or http(s) URL."),
    drawing_id: int | None = typer.Option(
        None, "--drawing-id", "-d", help="Name the downloaded file after this id."
    ),
    cad_path: str | None = typer.Option(
        None,
        "--with",
        "-w",
        help="Open with this application path instead of the detected one.",
    ),
):
    """Open a drawing in CAD software, downloading it first if needed."""
    bridge = _build_bridge(ctx)

    async def _open_async():
        if cad_path:
            return await bridge.open_cad_file_with_path(target, cad_path)
        return await bridge.open_cad_file(target, drawing_id)

    outcome = asyncio.run(_open_async())
    print_launch_outcome(outcome, console)
    if not outcome.success:
        raise typer.Exit(code=1)


@app.command()
def download(
    ctx: typer.Context,
    url: str = typer.Argument(..., help="Drawing URL."),
    filename: str | None = typer.Option(
        None, "--filename", "-f", help="File name inside the download directory."
    ),
    drawing_id: int | None = typer.Option(
        None, "--drawing-id", "-d", help="Name the file drawing_<id>.<ext>."
    ),
    token: str | None = typer.Option(
        None, "--token", "-t", help="Bearer token (overrides a token in the URL)."
    ),
):
    """Download a drawing into the download directory."""
    bridge = _build_bridge(ctx)
    if not filename:
        filename = drawing_filename(drawing_id, infer_extension_from_url(split_token(url)[0]))

    outcome = asyncio.run(bridge.download_and_save_drawing(url, filename, token))
    size = Path(outcome.path).stat().st_size if outcome.path else 0
    print_download_outcome(outcome, size, console)
    if not outcome.success:
        raise typer.Exit(code=1)


@app.command()
def info(ctx: typer.Context):
    """Show the OS, architecture, family and user seen by cadbridge."""
    bridge = _build_bridge(ctx)
    print_system_info(bridge.get_system_info(), console)
