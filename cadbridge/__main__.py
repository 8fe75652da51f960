"""
Entry point for `cadbridge` and `python -m cadbridge`.
"""

import logging
import sys

from rich.console import Console

from cadbridge.cli.app import app
from cadbridge.cli.formatters import format_error_with_suggestions
from cadbridge.exceptions import CadBridgeError

log = logging.getLogger("cadbridge")


def main() -> None:
    """Runs the CLI and turns escaped errors into a panel and exit code 1."""
    console = Console()
    try:
        app()
    except KeyboardInterrupt:
        console.print("\n[yellow]Cancelled.[/yellow]")
        sys.exit(130)
    except CadBridgeError as e:
        console.print(format_error_with_suggestions(e))
        sys.exit(1)
    except Exception as e:
        console.print(format_error_with_suggestions(e, {"type": "Unexpected"}))
        log.debug("Full traceback:", exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
