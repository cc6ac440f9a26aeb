#!/usr/bin/env python3
"""
Command-line interface for the System Sentinel dashboard
"""

import argparse

from pydantic import ValidationError

from .config import LOG_LEVELS, Config
from .container import Container
from .ui import dashboard


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='Live memory dashboard and assistant for the System Sentinel daemon'
    )
    parser.add_argument('--socket', '-s', dest='ipc_socket_path', type=str,
                        help='Path to the sentinel daemon socket (default: /tmp/system-sentinel.soc)')
    parser.add_argument('--claude-bin', '-c', dest='claude_binary', type=str,
                        help='Claude CLI executable (default: claude)')
    parser.add_argument('--reconnect-delay', '-r', dest='reconnect_delay_seconds', type=float,
                        help='Seconds to wait before reconnecting to the daemon (default: 5)')
    parser.add_argument('--log-level', '-l', dest='log_level', type=str.upper, choices=LOG_LEVELS,
                        help='Log level for the log pane (default: INFO)')
    return parser


def load_config(args: argparse.Namespace) -> Config:
    """Environment (SENTINEL_*) settings, overridden by any flags given"""
    overrides = {key: value for key, value in vars(args).items() if value is not None}
    return Config(**overrides)


def run():
    """Entry point for the CLI"""
    parser = build_parser()
    args = parser.parse_args()

    try:
        config = load_config(args)
    except ValidationError as e:
        parser.error(str(e))

    container = Container()
    container.config.override(config)
    container.wire(modules=[dashboard])

    # Run the dashboard
    app = dashboard.SentinelDashboard()
    app.run()


if __name__ == '__main__':
    run()
