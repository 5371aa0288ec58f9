"""Tests for the task-manager command line."""

import json
import logging
from unittest.mock import patch

import pytest
from typer.testing import CliRunner

from task_manager import __version__
from task_manager.cli import app

runner = CliRunner()


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    """Isolate tests from TASK_MANAGER_* variables, any .env file and logging setup."""
    for key in ("HOST", "PORT", "LOG_LEVEL", "MCP_PATH", "ENVIRONMENT"):
        monkeypatch.delenv(f"TASK_MANAGER_{key}", raising=False)
    monkeypatch.chdir(tmp_path)

    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


def test_version_flag():
    """Test --version prints the package version."""
    result = runner.invoke(app, ["--version"])

    assert result.exit_code == 0
    assert __version__ in result.output


def test_operations_json():
    """Test the operation catalog in machine-output mode."""
    result = runner.invoke(app, ["operations", "--json"])

    assert result.exit_code == 0
    data = json.loads(result.output)
    assert data[0]["name"] == "add_task"
    assert set(data[0]["parameters"]) == {"title", "description"}


def test_operations_table():
    """Test the human-readable catalog mentions every parameter."""
    result = runner.invoke(app, ["operations"])

    assert result.exit_code == 0
    assert "add_task" in result.output
    assert "title" in result.output
    assert "description" in result.output


def test_serve_http_uses_cli_options():
    """Test serve starts uvicorn with the bind address from the flags."""
    with patch("uvicorn.run") as mock_run:
        result = runner.invoke(
            app, ["serve", "--host", "0.0.0.0", "--port", "9001", "--log-level", "warning"]
        )

    assert result.exit_code == 0
    mock_run.assert_called_once()
    kwargs = mock_run.call_args.kwargs
    assert kwargs["host"] == "0.0.0.0"
    assert kwargs["port"] == 9001
    assert kwargs["log_level"] == "warning"

    served_app = mock_run.call_args.args[0]
    assert served_app.state.context.config.port == 9001


def test_serve_reads_config_file(tmp_path):
    """Test serve applies settings from --config."""
    path = tmp_path / "config.toml"
    path.write_text("port = 9002\n")

    with patch("uvicorn.run") as mock_run:
        result = runner.invoke(app, ["serve", "--config", str(path)])

    assert result.exit_code == 0
    assert mock_run.call_args.kwargs["port"] == 9002


def test_serve_stdio_transport():
    """Test serve runs the MCP server over stdio when requested."""
    with patch("mcp.server.fastmcp.FastMCP.run") as mock_run:
        result = runner.invoke(app, ["serve", "--transport", "stdio"])

    assert result.exit_code == 0
    mock_run.assert_called_once_with(transport="stdio")


def test_serve_rejects_missing_config_file():
    """Test an unreadable config file exits with status 1."""
    result = runner.invoke(app, ["serve", "--config", "/nonexistent/config.json"])

    assert result.exit_code == 1


def test_serve_rejects_invalid_log_level():
    """Test an unknown log level exits with status 1."""
    result = runner.invoke(app, ["serve", "--log-level", "chatty"])

    assert result.exit_code == 1
