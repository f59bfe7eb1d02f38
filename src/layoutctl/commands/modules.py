"""modules — list the module catalog."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from layoutctl.commands._base import LayoutCommand

if TYPE_CHECKING:
    from layoutctl.commands._context import AppContext


@click.command(
    cls=LayoutCommand,
    examples="""\
  layoutctl modules
  layoutctl -q modules
  layoutctl --json modules""",
)
@click.pass_obj
def modules(app: AppContext) -> None:
    """List the module templates that can be dropped on a cell."""
    from layoutctl.services.catalog import CatalogService

    app.emit(CatalogService(app.session).list_modules())
