"""Integration tests for config commands."""

from __future__ import annotations

import httpx
import respx
from typer.testing import CliRunner

from unifi_cloud.app import app

runner = CliRunner()


class TestConfigCommands:
    def test_list_empty(self, cli_manager):
        result = runner.invoke(app, ["config", "list"])
        assert result.exit_code == 0
        assert "No profiles configured" in result.output

    def test_add_and_list(self, cli_manager):
        result = runner.invoke(app, ["config", "add", "home", "--api-key", "abcdefghijkl"])
        assert result.exit_code == 0
        assert "added" in result.output

        result = runner.invoke(app, ["config", "list"])
        assert result.exit_code == 0
        assert "home" in result.output
        assert cli_manager.config.default_profile == "home"

    def test_list_json_masks_key(self, cli_manager):
        runner.invoke(app, ["config", "add", "home", "--api-key", "abcdefghijkl"])
        result = runner.invoke(app, ["config", "list", "-f", "json"])
        assert result.exit_code == 0
        assert "abcdefghijkl" not in result.output
        assert "abcd..." in result.output

    def test_show_masks_key(self, cli_manager):
        runner.invoke(app, ["config", "add", "home", "--api-key", "abcdefghijkl", "--timeout", "20"])
        result = runner.invoke(app, ["config", "show", "home"])
        assert result.exit_code == 0
        assert "abcdefghijkl" not in result.output
        assert "20" in result.output

    def test_show_missing(self, cli_manager):
        result = runner.invoke(app, ["config", "show", "nope"])
        assert result.exit_code == 1

    def test_set_default(self, cli_manager):
        runner.invoke(app, ["config", "add", "a", "--api-key", "k1"])
        runner.invoke(app, ["config", "add", "b", "--api-key", "k2"])
        result = runner.invoke(app, ["config", "set-default", "b"])
        assert result.exit_code == 0
        assert cli_manager.config.default_profile == "b"

    def test_add_invalid_url(self, cli_manager):
        result = runner.invoke(app, ["config", "add", "x", "--api-key", "k", "--base-url", "api.ui.com"])
        assert result.exit_code == 1
        assert "http" in result.output

    def test_remove_force(self, cli_manager):
        runner.invoke(app, ["config", "add", "home", "--api-key", "k"])
        result = runner.invoke(app, ["config", "remove", "home", "--force"])
        assert result.exit_code == 0
        assert cli_manager.get_profile("home") is None

    def test_remove_cancelled(self, cli_manager):
        runner.invoke(app, ["config", "add", "home", "--api-key", "k"])
        result = runner.invoke(app, ["config", "remove", "home"], input="n\n")
        assert result.exit_code == 0
        assert "Cancelled" in result.output
        assert cli_manager.get_profile("home") is not None

    @respx.mock
    def test_test_command(self, cli_manager, mock_hosts):
        respx.get("https://api.ui.com/ea/hosts").mock(
            return_value=httpx.Response(200, json=mock_hosts)
        )
        runner.invoke(app, ["config", "add", "home", "--api-key", "k"])
        result = runner.invoke(app, ["config", "test"])
        assert result.exit_code == 0
        assert "2 host(s)" in result.output
