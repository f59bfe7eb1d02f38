"""Tests for the serve command."""

from __future__ import annotations

from unittest.mock import MagicMock, patch

import pytest
from click.testing import CliRunner

from layoutctl.cli import cli


class TestServeCommand:
    def test_help_shows_transports(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["serve", "--help"])
        assert "stdio" in result.output
        assert "streamable-http" in result.output
        assert "--host" in result.output

    @pytest.mark.usefixtures("_isolated_project")
    def test_invokes_create_server(self, cli_runner: CliRunner) -> None:
        server = MagicMock()
        with (
            patch("layoutctl.mcp.server.mcp_available", True),
            patch("layoutctl.mcp.server.create_server", return_value=server) as create,
        ):
            result = cli_runner.invoke(
                cli, ["serve", "--transport", "sse", "--host", "0.0.0.0", "--port", "9001"]
            )

        assert result.exit_code == 0
        _, kwargs = create.call_args
        assert kwargs["host"] == "0.0.0.0"
        assert kwargs["port"] == 9001
        server.run.assert_called_once_with(transport="sse")

    @pytest.mark.usefixtures("_isolated_project")
    def test_transport_from_config(self, cli_runner: CliRunner, tmp_path) -> None:
        (tmp_path / "layoutctl.toml").write_text('[mcp]\ntransport = "streamable-http"\n')
        server = MagicMock()
        with (
            patch("layoutctl.mcp.server.mcp_available", True),
            patch("layoutctl.mcp.server.create_server", return_value=server),
        ):
            result = cli_runner.invoke(cli, ["serve"])
        assert result.exit_code == 0
        server.run.assert_called_once_with(transport="streamable-http")

    @pytest.mark.usefixtures("_isolated_project")
    def test_missing_extra(self, cli_runner: CliRunner) -> None:
        with patch("layoutctl.mcp.server.mcp_available", False):
            result = cli_runner.invoke(cli, ["serve"])
        assert result.exit_code == 1
        assert "pip install layoutctl[mcp]" in result.stderr
