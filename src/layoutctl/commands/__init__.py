"""Subcommand modules for layoutctl.

Provides register_commands() which uses deferred imports to keep
``layoutctl --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from layoutctl.commands.build import build
    from layoutctl.commands.modules import modules
    from layoutctl.commands.serve import serve
    from layoutctl.commands.shell import shell

    cli.add_command(modules)
    cli.add_command(build)
    cli.add_command(shell)
    cli.add_command(serve)
