"""CLI output helpers.

Human mode uses Rich formatting; JSON mode prints a single JSON document to
stdout for scripting.
"""

import json
from typing import Any

from rich.console import Console
from rich.markup import escape

from typetags.cli.state import CLIState

console = Console()
error_console = Console(stderr=True)


def print_json(data: Any) -> None:
    """Print ``data`` as JSON on stdout."""
    print(json.dumps(data))


def print_error(message: str, state: CLIState, error: Exception | None = None) -> None:
    """Print error message (human) or JSON response with optional error code.

    Args:
        message: The error message to display.
        state: CLI state with json_mode flag.
        error: Optional exception object with additional context.
    """
    if state.json_mode:
        output = {"status": "error", "message": message}
        error_code = getattr(error, "error_code", None)
        if error_code:
            output["error_code"] = error_code
        print_json(output)
    else:
        error_console.print(f"[red]Error: {escape(message)}[/red]")
