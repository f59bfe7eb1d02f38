"""shell — interactive layout editor holding one session.

Reads one command per line until ``quit`` or end of input, so a layout
script can also be piped in. Blank lines and ``#`` comments are skipped.
A failed command is reported on stderr and the session carries on.
"""

from __future__ import annotations

import shlex
import sys
from collections.abc import Callable
from pathlib import Path
from typing import TYPE_CHECKING

import click

from layoutctl.commands._base import LayoutCommand

if TYPE_CHECKING:
    from layoutctl.commands._context import AppContext

PROMPT = "layout> "

SHELL_HELP = """\
  modules                     list module templates
  show                        show the layout tree
  drop PATH MODULE            drop MODULE on the leaf at PATH
  text PATH TEXT...           set the text of the leaf at PATH
  reset                       start over from one empty cell
  export [--document] [FILE]  print (or write) the markup
  help                        show this help
  quit                        leave the shell"""


class ShellInterpreter:
    """Executes shell lines against the app's session."""

    def __init__(self, app: AppContext) -> None:
        self._app = app
        self._commands: dict[str, Callable[[list[str]], None]] = {
            "modules": self._modules,
            "show": self._show,
            "drop": self._drop,
            "text": self._text,
            "reset": self._reset,
            "export": self._export,
            "help": self._help,
        }

    def execute(self, line: str) -> bool:
        """Run one line. Returns False when the shell should stop."""
        line = line.strip()
        if not line or line.startswith("#"):
            return True
        try:
            words = shlex.split(line)
        except ValueError as exc:
            click.echo(f"ERROR: {exc}", err=True)
            return True

        name, args = words[0].lower(), words[1:]
        if name in ("quit", "exit"):
            return False
        handler = self._commands.get(name)
        if handler is None:
            click.echo(f"ERROR: unknown command '{name}' (try 'help')", err=True)
            return True
        handler(args)
        return True

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def _usage(self, text: str) -> None:
        click.echo(f"usage: {text}", err=True)

    def _modules(self, args: list[str]) -> None:
        from layoutctl.services.catalog import CatalogService

        self._app.emit(CatalogService(self._app.session).list_modules(), fatal=False)

    def _show(self, args: list[str]) -> None:
        self._app.emit(self._app.session.describe(), fatal=False)

    def _drop(self, args: list[str]) -> None:
        if len(args) != 2:
            self._usage("drop PATH MODULE")
            return
        self._app.emit(self._app.session.drop(args[0], args[1]), fatal=False)

    def _text(self, args: list[str]) -> None:
        if not args:
            self._usage("text PATH TEXT...")
            return
        self._app.emit(self._app.session.edit(args[0], " ".join(args[1:])), fatal=False)

    def _reset(self, args: list[str]) -> None:
        self._app.emit(self._app.session.reset(), fatal=False)

    def _export(self, args: list[str]) -> None:
        from layoutctl.services.export import ExportService

        document = "--document" in args
        rest = [a for a in args if a != "--document"]
        if len(rest) > 1:
            self._usage("export [--document] [FILE]")
            return
        output = Path(rest[0]) if rest else None
        self._app.emit(
            ExportService(self._app.session).export(document=document, output=output),
            fatal=False,
        )

    def _help(self, args: list[str]) -> None:
        click.echo(SHELL_HELP)


@click.command(
    cls=LayoutCommand,
    examples="""\
  # Interactive editing
  layoutctl shell

  # Replay a layout script
  printf 'drop root 2x2\\ntext 0 Logo\\nexport\\n' | layoutctl shell""",
)
@click.pass_obj
def shell(app: AppContext) -> None:
    """Edit a layout interactively, one command per line."""
    interactive = not app.settings.no_interact and sys.stdin.isatty()
    interpreter = ShellInterpreter(app)
    stream = click.get_text_stream("stdin")

    if interactive:
        click.echo("layoutctl shell — type 'help' for commands, 'quit' to leave.")
    while True:
        if interactive:
            click.echo(PROMPT, nl=False)
        line = stream.readline()
        if not line:
            break
        if not interpreter.execute(line):
            break
