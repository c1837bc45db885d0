"""
Tests for the envflags CLI.

The configuration classes are imported from sample_configs, which pytest
puts on sys.path alongside this module.
"""

import pytest
from rich.console import Console
from typer.testing import CliRunner

from envflags import cli
from envflags.cli import app

runner = CliRunner()

SERVICE_ENV = ("LISTEN_PORT", "SERVICE_NAME", "VERBOSE_LOGGING", "REQUEST_TIMEOUT")


@pytest.fixture(autouse=True)
def wide_console(monkeypatch):
    """Keep table rows on one line."""
    monkeypatch.setattr(cli, "console", Console(width=200))


@pytest.fixture
def clean_env(monkeypatch):
    for name in SERVICE_ENV:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


class TestNames:
    """Tests for the names command."""

    def test_converts_identifiers(self):
        result = runner.invoke(app, ["names", "FieldAPIKey", "web_server_addr"])
        assert result.exit_code == 0
        assert "field-api-key" in result.output
        assert "FIELD_API_KEY" in result.output
        assert "WEB_SERVER_ADDR" in result.output


class TestInspect:
    """Tests for the inspect command."""

    def test_lists_flags(self, clean_env):
        result = runner.invoke(app, ["inspect", "sample_configs:ServiceConfig"])
        assert result.exit_code == 0
        assert "-listen-port" in result.output
        assert "LISTEN_PORT" in result.output
        assert "port to listen on" in result.output
        assert "30s" in result.output

    def test_flag_values(self, clean_env):
        result = runner.invoke(
            app, ["inspect", "sample_configs:ServiceConfig", "--", "-listen-port", "9090", "serve"]
        )
        assert result.exit_code == 0
        assert "9090" in result.output
        assert "flag" in result.output
        assert "Positional arguments: serve" in result.output

    def test_environment_source(self, clean_env):
        clean_env.setenv("SERVICE_NAME", "from-env")
        result = runner.invoke(app, ["inspect", "sample_configs:ServiceConfig"])
        assert result.exit_code == 0
        assert "from-env" in result.output

    def test_env_file(self, clean_env, tmp_path):
        env_file = tmp_path / ".env"
        env_file.write_text("LISTEN_PORT=7777\n")
        result = runner.invoke(
            app, ["inspect", "sample_configs:ServiceConfig", "--env-file", str(env_file)]
        )
        assert result.exit_code == 0
        assert "7777" in result.output

    def test_binding_error(self, clean_env):
        result = runner.invoke(app, ["inspect", "sample_configs:BrokenConfig"])
        assert result.exit_code == 1
        assert "unsupported field type" in result.output

    def test_bad_flag(self, clean_env):
        result = runner.invoke(
            app, ["inspect", "sample_configs:ServiceConfig", "--", "-listen-port", "http"]
        )
        assert result.exit_code == 1
        assert "Error" in result.output

    @pytest.mark.parametrize(
        "target",
        ["no_such_module_xyz:Config", "sample_configs:Missing", "sample_configs"],
    )
    def test_bad_target(self, target):
        result = runner.invoke(app, ["inspect", target])
        assert result.exit_code == 2
