"""CLI app entry point.

Commands for looking at the type-tag table the running interpreter
produces:

    typetags tags         show every category with its constructor and tag
    typetags check        report tag collisions (exit code 1 if any)
    typetags tag-of 5     tag a Python literal
"""

import ast
import logging
from typing import Any

import typer
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from typetags.cli.output import console, print_error, print_json
from typetags.cli.state import CLIState
from typetags.core import (
    CATEGORY_CONSTRUCTORS,
    PREDICATES,
    TYPE_TAGS,
    TYPE_TAGS_REPORT,
    UNDEFINED,
    tag_of,
)
from typetags.logging import configure_logging, get_logger, set_debug_mode

logger = get_logger(__name__)

app = typer.Typer(
    name="typetags",
    help="typetags - canonical runtime type tags.",
    add_completion=False,
    no_args_is_help=True,
)


@app.callback()
def main(
    ctx: typer.Context,
    json_output: bool = typer.Option(
        False,
        "--json",
        help="Output in JSON format for scripting",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Show debug output",
    ),
) -> None:
    """typetags CLI - inspect canonical type tags."""
    if verbose:
        set_debug_mode(True)
        configure_logging(console_level=logging.DEBUG)
    ctx.obj = CLIState(json_mode=json_output, verbose=verbose)


def _constructor_name(constructor: Any) -> str:
    if constructor is None or constructor is UNDEFINED:
        return repr(constructor)
    return f"{constructor.__module__}.{constructor.__qualname__}"


@app.command("tags")
def show_tags(ctx: typer.Context) -> None:
    """Show the type-tag table."""
    state: CLIState = ctx.obj

    if state.json_mode:
        print_json(
            [
                {
                    "name": name,
                    "constructor": _constructor_name(CATEGORY_CONSTRUCTORS[name]),
                    "tag": tag,
                }
                for name, tag in TYPE_TAGS.items()
            ]
        )
        return

    table = Table(title="Type tags")
    table.add_column("Name", style="cyan")
    table.add_column("Constructor")
    table.add_column("Tag", style="green")
    for name, tag in TYPE_TAGS.items():
        table.add_row(
            name, Text(_constructor_name(CATEGORY_CONSTRUCTORS[name])), Text(tag)
        )
    console.print(table)


@app.command("check")
def check(ctx: typer.Context) -> None:
    """Report whether every category has a distinct tag."""
    state: CLIState = ctx.obj
    report = TYPE_TAGS_REPORT

    if state.json_mode:
        print_json(
            {
                "accuracy": report.accuracy,
                "total": report.total,
                "unique": report.unique,
                "questionable": [list(pair) for pair in report.questionable],
            }
        )
    elif report.is_exact:
        console.print(
            f"[green]All {report.total} type tags are distinct (accuracy 1.00)[/green]"
        )
    else:
        console.print(
            f"[yellow]{report.unique}/{report.total} type tags are distinct "
            f"(accuracy {report.accuracy:.2f})[/yellow]"
        )
        for key_a, key_b in report.questionable:
            console.print(f"  {key_a} and {key_b} share {escape(TYPE_TAGS[key_a])}")

    if not report.is_exact:
        raise typer.Exit(code=1)


@app.command("tag-of")
def show_tag_of(
    ctx: typer.Context,
    literal: str = typer.Argument(
        ..., help="Python literal to tag; unparsable text is tagged as a string"
    ),
) -> None:
    """Tag a Python literal, e.g. 5, [1, 2], None or 'text'."""
    state: CLIState = ctx.obj

    try:
        value = ast.literal_eval(literal)
    except (ValueError, SyntaxError) as e:
        logger.debug(f"Treating {literal!r} as a plain string: {e}")
        value = literal
    except RecursionError as e:
        print_error("Literal is nested too deeply to evaluate", state, e)
        raise typer.Exit(code=2) from e

    tag = tag_of(value)
    category = next(
        (name for name, predicate in PREDICATES.items() if predicate(value)), None
    )

    if state.json_mode:
        print_json({"value": repr(value), "tag": tag, "category": category})
    else:
        console.print(f"{escape(tag)} [cyan]{category or '(no category)'}[/cyan]")
