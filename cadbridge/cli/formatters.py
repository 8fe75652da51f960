"""
Functions for formatting and displaying data in the console using Rich.
"""

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from cadbridge.exceptions import DownloadError, DownloadFailure
from cadbridge.models.software import DetectionReport, DownloadOutcome, LaunchOutcome
from cadbridge.utils.formatting import format_extensions, format_size


def format_error_with_suggestions(
    error: Exception, context: dict | None = None
) -> Panel:
    """Formats an error with actionable suggestions into a Rich Panel."""
    error_type = type(error).__name__
    error_msg = str(error)

    suggestions_map = {
        "DownloadError": [
            "• Check that the drawing URL is reachable from this machine.",
            "• The access token in the link may have expired. Reopen it from the web app.",
        ],
        "LaunchError": [
            "• Verify that the CAD application is still installed at that path.",
            "• Run `cadbridge detect` to list the applications found on this machine.",
        ],
        "ConfigurationError": [
            "• Check the CADBRIDGE_* environment variables.",
            "• Run `cadbridge --help` for the accepted option values.",
        ],
    }

    suggestions = suggestions_map.get(
        error_type, ["• Run the command with -vv for detailed logs."]
    )
    if isinstance(error, DownloadError) and error.kind is DownloadFailure.HTTP_STATUS:
        if error.status in (401, 403):
            suggestions = ["• The server rejected the credentials. Pass a fresh --token."]
        elif error.status == 404:
            suggestions = ["• The drawing no longer exists on the server."]

    error_text = Text()
    error_text.append(f"{error_type}: ", style="bold red")
    error_text.append(error_msg)

    suggestion_text = Text("\n".join(suggestions))

    content = Table.grid(padding=(1, 0))
    content.add_row(error_text)
    content.add_row()
    content.add_row(Text("Suggestions", style="bold yellow"))
    content.add_row(suggestion_text)

    if context:
        content.add_row()
        content.add_row(Text(f"Context: {context}", style="dim"))

    return Panel(
        content,
        title="[bold red]An Error Occurred[/bold red]",
        border_style="red",
        expand=False,
    )


def print_detection_table(report: DetectionReport, console: Console | None = None):
    """Displays the detected CAD applications."""
    console = console or Console()
    if not report.software:
        console.print("[yellow]No CAD software detected on this machine.[/yellow]")
        return

    table = Table(title="Detected CAD Software", box=box.ROUNDED)
    table.add_column("#", style="dim", justify="right")
    table.add_column("Name", style="cyan")
    table.add_column("Path")
    table.add_column("Extensions", style="green")
    table.add_column("Method", style="dim")
    for i, software in enumerate(report.software, 1):
        table.add_row(
            str(i),
            software.name,
            software.exec_path,
            format_extensions(software.extensions),
            software.method,
        )
    console.print(table)
    console.print(
        "[bold]Supported extensions:[/bold] "
        f"[green]{format_extensions(report.supported_extensions)}[/green]"
    )


def print_launch_outcome(outcome: LaunchOutcome, console: Console | None = None):
    """Displays the result of an open request."""
    console = console or Console()
    if outcome.success:
        console.print(f"[green]✓ {outcome.message}[/green]")
        return

    console.print(f"[red]✗ {outcome.message}[/red]")
    if outcome.error and outcome.error not in outcome.message:
        console.print(f"  [dim]{outcome.error}[/dim]")


def print_download_outcome(
    outcome: DownloadOutcome, size_bytes: int = 0, console: Console | None = None
):
    """Displays the result of a download request."""
    console = console or Console()
    if outcome.success:
        console.print(
            f"[green]✓ {outcome.message}:[/green] {outcome.path} "
            f"[dim]({format_size(size_bytes)})[/dim]"
        )
    else:
        console.print(f"[red]✗ {outcome.message}:[/red] {outcome.error}")


def print_system_info(info: dict[str, str], console: Console | None = None):
    """Displays the platform info map."""
    console = console or Console()
    table = Table(show_header=False, box=None, padding=(0, 2))
    table.add_column(style="bold cyan")
    table.add_column()
    for key, value in info.items():
        table.add_row(f"{key}:", value)
    console.print(Panel(table, title="System Info", border_style="cyan", expand=False))
