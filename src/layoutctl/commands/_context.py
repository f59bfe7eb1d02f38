"""AppContext — shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``.  Provides lazy session creation and centralized
result emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from layoutctl.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from layoutctl.config.settings import LayoutSettings
    from layoutctl.services.result import ServiceResult
    from layoutctl.services.session import EditorSession


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    The editing session is created on first use so ``--help`` and
    ``--version`` never load plugins.
    """

    def __init__(self, settings: LayoutSettings) -> None:
        self.settings = settings
        self._session: EditorSession | None = None

        from layoutctl.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def session(self) -> EditorSession:
        """The editing session (created lazily on first access)."""
        if self._session is None:
            from layoutctl.services.session import EditorSession

            self._session = EditorSession.from_settings(self.settings)
        return self._session

    @property
    def output_settings(self) -> OutputSettings:
        return OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )

    def emit(self, result: ServiceResult, *, fatal: bool = True) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
          Warnings are emitted to stderr so they don't pollute piped output.
        * Failure: writes to stderr, then exits with code 1 when *fatal*.
          The shell passes ``fatal=False`` so a declined drop never ends the
          session.
        """
        settings = self.output_settings
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            # In JSON mode, warnings are already in the serialized payload.
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
            return
        click.echo(output, err=True)
        if fatal:
            raise SystemExit(1)
