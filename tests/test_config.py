"""Tests for configuration and the command line."""

import argparse

import pytest
from pydantic import ValidationError

from sentinel_ui.cli import build_parser, load_config
from sentinel_ui.config import Config


def test_defaults(monkeypatch):
    for name in (
        "SENTINEL_IPC_SOCKET_PATH",
        "SENTINEL_RECONNECT_DELAY_SECONDS",
        "SENTINEL_CLAUDE_BINARY",
        "SENTINEL_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)

    config = Config()
    assert config.ipc_socket_path == "/tmp/system-sentinel.soc"
    assert config.reconnect_delay_seconds == 5.0
    assert config.claude_binary == "claude"
    assert config.log_level == "INFO"


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("SENTINEL_IPC_SOCKET_PATH", "/run/sentinel.soc")
    monkeypatch.setenv("SENTINEL_LOG_LEVEL", "debug")

    config = Config()
    assert config.ipc_socket_path == "/run/sentinel.soc"
    assert config.log_level == "DEBUG"


def test_reconnect_delay_must_be_positive():
    with pytest.raises(ValidationError):
        Config(reconnect_delay_seconds=0)


def test_invalid_log_level():
    with pytest.raises(ValidationError):
        Config(log_level="chatty")


def test_unknown_field_forbidden():
    with pytest.raises(ValidationError):
        Config(websocket_url="ws://localhost:6009")


def test_cli_flags_override(monkeypatch):
    monkeypatch.delenv("SENTINEL_CLAUDE_BINARY", raising=False)
    args = build_parser().parse_args(
        ["--socket", "/tmp/other.soc", "--reconnect-delay", "2", "--log-level", "warning"]
    )
    config = load_config(args)

    assert config.ipc_socket_path == "/tmp/other.soc"
    assert config.reconnect_delay_seconds == 2.0
    assert config.log_level == "WARNING"
    assert config.claude_binary == "claude"


def test_cli_rejects_unknown_log_level():
    with pytest.raises(SystemExit):
        build_parser().parse_args(["--log-level", "chatty"])


def test_load_config_ignores_unset_flags():
    config = load_config(argparse.Namespace(ipc_socket_path=None, claude_binary="claude-dev"))
    assert config.claude_binary == "claude-dev"
