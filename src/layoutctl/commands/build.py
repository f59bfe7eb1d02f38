"""build — apply drops and cell edits in one go, then export."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from layoutctl.commands._base import LayoutCommand

if TYPE_CHECKING:
    from layoutctl.commands._context import AppContext
    from layoutctl.services.result import ServiceResult


def _split_assignment(value: str, option: str) -> tuple[str, str]:
    """Split ``PATH=VALUE`` at the first ``=``."""
    path, sep, rest = value.partition("=")
    if not sep or not path.strip():
        raise click.BadParameter(f"expected PATH=VALUE, got '{value}'", param_hint=option)
    return path.strip(), rest


def _apply(app: AppContext, result: ServiceResult) -> None:
    """Stop on the first failed step; surface warnings from the rest."""
    if not result.ok:
        app.emit(result)
    for warning in result.warnings:
        click.echo(f"WARNING: {warning}", err=True)


@click.command(
    cls=LayoutCommand,
    examples="""\
  # Header / body / footer page with a two-column body
  layoutctl build --drop root=header-content-footer --drop 1=1x2 \\
      --text 0=Header --text 2=Footer

  # Full HTML page written to a file
  layoutctl build --drop root=2x2 --document --output layout.html

  # Inspect the tree instead of exporting
  layoutctl build --drop root=2x1 --drop 0=1x3 --tree""",
)
@click.option(
    "--drop",
    "drops",
    multiple=True,
    metavar="PATH=MODULE",
    help="Drop MODULE on the cell at PATH (repeatable, applied in order).",
)
@click.option(
    "--text",
    "texts",
    multiple=True,
    metavar="PATH=TEXT",
    help="Set the text of the leaf at PATH (repeatable, applied after drops).",
)
@click.option("--document", is_flag=True, help="Wrap the markup in a full HTML page.")
@click.option(
    "--output",
    default=None,
    type=click.Path(dir_okay=False),
    help="Write the markup to a file instead of stdout.",
)
@click.option("--tree", is_flag=True, help="Show the resulting tree instead of markup.")
@click.pass_obj
def build(
    app: AppContext,
    drops: tuple[str, ...],
    texts: tuple[str, ...],
    document: bool,
    output: str | None,
    tree: bool,
) -> None:
    """Build a layout from drop and text steps, then export it."""
    from layoutctl.services.export import ExportService

    session = app.session
    for value in drops:
        path, module_key = _split_assignment(value, "--drop")
        _apply(app, session.drop(path, module_key))
    for value in texts:
        path, text = _split_assignment(value, "--text")
        _apply(app, session.edit(path, text))

    if tree:
        app.emit(session.describe())
        return
    app.emit(
        ExportService(session).export(
            document=document,
            output=Path(output) if output else None,
        )
    )
