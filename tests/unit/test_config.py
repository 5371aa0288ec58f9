"""Tests for configuration loading."""

import json

import pytest
from pydantic import ValidationError

from task_manager.config import Config, Environment, load_config
from task_manager.errors import ConfigError


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    """Isolate tests from TASK_MANAGER_* variables and any .env file."""
    for key in ("HOST", "PORT", "LOG_LEVEL", "MCP_PATH", "ENVIRONMENT"):
        monkeypatch.delenv(f"TASK_MANAGER_{key}", raising=False)
    monkeypatch.chdir(tmp_path)


def test_defaults():
    """Test default bind address and logging settings."""
    config = Config()

    assert config.host == "127.0.0.1"
    assert config.port == 8001
    assert config.log_level == "INFO"
    assert config.mcp_path == "/mcp"
    assert config.environment == Environment.DEVELOPMENT


def test_environment_variables(monkeypatch):
    """Test TASK_MANAGER_* variables are picked up."""
    monkeypatch.setenv("TASK_MANAGER_PORT", "9100")
    monkeypatch.setenv("TASK_MANAGER_LOG_LEVEL", "debug")
    monkeypatch.setenv("TASK_MANAGER_ENVIRONMENT", "production")

    config = Config.from_env()

    assert config.port == 9100
    assert config.log_level == "DEBUG"
    assert config.environment == Environment.PRODUCTION


def test_invalid_log_level_rejected():
    """Test unknown log levels fail validation."""
    with pytest.raises(ValidationError, match="Unknown log level"):
        Config(log_level="chatty")


def test_invalid_port_rejected():
    """Test ports outside the TCP range fail validation."""
    with pytest.raises(ValidationError):
        Config(port=70000)


def test_mcp_path_normalized():
    """Test a relative MCP path gets a leading slash."""
    assert Config(mcp_path="tasks").mcp_path == "/tasks"


def test_load_config_json_file(tmp_path):
    """Test values from a JSON file override defaults."""
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"port": 9200, "host": "0.0.0.0"}))

    config = load_config(str(path))

    assert config.port == 9200
    assert config.host == "0.0.0.0"
    assert config.log_level == "INFO"


def test_load_config_toml_file(tmp_path):
    """Test values from a TOML file override defaults."""
    path = tmp_path / "config.toml"
    path.write_text('port = 9300\nlog_level = "warning"\n')

    config = load_config(str(path))

    assert config.port == 9300
    assert config.log_level == "WARNING"


def test_load_config_file_without_suffix(tmp_path):
    """Test files without a known suffix are tried as JSON then TOML."""
    path = tmp_path / "taskmanager.conf"
    path.write_text('mcp_path = "/tasks"\n')

    assert load_config(str(path)).mcp_path == "/tasks"


def test_environment_overrides_file(tmp_path, monkeypatch):
    """Test environment variables take precedence over the config file."""
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"port": 9200, "host": "0.0.0.0"}))
    monkeypatch.setenv("TASK_MANAGER_PORT", "9400")

    config = load_config(str(path))

    assert config.port == 9400
    assert config.host == "0.0.0.0"


def test_explicit_overrides_win(tmp_path, monkeypatch):
    """Test explicit overrides beat both the environment and the file."""
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"port": 9200}))
    monkeypatch.setenv("TASK_MANAGER_PORT", "9400")

    config = load_config(str(path), port=9500, host=None)

    assert config.port == 9500
    assert config.host == "127.0.0.1"


def test_missing_config_file():
    """Test a missing file raises ConfigError."""
    with pytest.raises(ConfigError, match="not found"):
        load_config("/nonexistent/task-manager.json")


def test_invalid_json_file(tmp_path):
    """Test malformed JSON raises ConfigError."""
    path = tmp_path / "config.json"
    path.write_text("{not json")

    with pytest.raises(ConfigError, match="Invalid JSON"):
        load_config(str(path))


def test_invalid_toml_file(tmp_path):
    """Test malformed TOML raises ConfigError."""
    path = tmp_path / "config.toml"
    path.write_text("port = = 1")

    with pytest.raises(ConfigError, match="Invalid TOML"):
        load_config(str(path))


def test_json_file_must_be_object(tmp_path):
    """Test a JSON list at the top level is rejected."""
    path = tmp_path / "config.json"
    path.write_text("[1, 2, 3]")

    with pytest.raises(ConfigError, match="object"):
        load_config(str(path))
