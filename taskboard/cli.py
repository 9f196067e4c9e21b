"""
Taskboard CLI
==============

Usage:
    # Serve the task API on the default port (3000) under /api
    python -m taskboard.cli serve

    # Custom host/port/prefix
    python -m taskboard.cli serve --host 127.0.0.1 --port 8080 --prefix /v1

    # Print the effective configuration
    python -m taskboard.cli config
"""

from __future__ import annotations

import argparse
import sys

from taskboard.config import ServerConfig


def build_config(args) -> ServerConfig:
    """Environment config with CLI flags layered on top."""
    return ServerConfig.from_env().with_overrides(
        host=getattr(args, "host", None),
        port=getattr(args, "port", None),
        api_prefix=getattr(args, "prefix", None),
        log_level=getattr(args, "log_level", None),
    )


def cmd_serve(args):
    """Launch the HTTP server."""
    from taskboard.server import run_server

    run_server(build_config(args))


def cmd_config(args):
    """Show the effective configuration."""
    config = build_config(args)
    print("\n─── Taskboard Config ───")
    print(f"  host:       {config.host}")
    print(f"  port:       {config.port}")
    print(f"  api_prefix: {config.api_prefix or '/'}")
    print(f"  log_level:  {config.log_level}")
    print(f"  url:        {config.base_url}{config.api_prefix}/tasks")


def _add_server_flags(p: argparse.ArgumentParser):
    p.add_argument("--host", default=None, help="Bind address (default: 0.0.0.0)")
    p.add_argument("--port", default=None, type=int, help="Port number (default: 3000)")
    p.add_argument("--prefix", default=None, help="API prefix (default: /api)")
    p.add_argument("--log-level", default=None, help="Log level (default: INFO)")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="taskboard",
        description="Taskboard — in-memory task tracking API",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  taskboard serve\n"
            "  taskboard serve --port 8080 --prefix /v1\n"
            "  taskboard config\n"
        ),
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    p_serve = subparsers.add_parser("serve", help="Run the task API server")
    _add_server_flags(p_serve)

    p_config = subparsers.add_parser("config", help="Show the effective configuration")
    _add_server_flags(p_config)

    return parser


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    commands = {
        "serve": cmd_serve,
        "config": cmd_config,
    }

    if args.command not in commands:
        parser.print_help()
        return 0

    try:
        commands[args.command](args)
    except ValueError as e:
        print(f"\n✘ {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
