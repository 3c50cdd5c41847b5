"""CLI state management.

Populated by the root Typer callback and stored in ``ctx.obj`` so commands
read global flags from one place.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class CLIState:
    """Immutable state object for CLI-wide configuration.

    Attributes:
        json_mode: If True, output JSON for scripting. If False, human-readable output.
        verbose: If True, show debug logging.
    """

    json_mode: bool = False
    verbose: bool = False
