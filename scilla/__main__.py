#!/usr/bin/env python3
"""Scilla CLI

Manage the Solana RPC settings Scilla reads from scilla.toml.
"""

import argparse
import sys

from scilla.commands.config import ConfigCommand
from scilla.commands.menu import run_config_menu
from scilla.core.context import ScillaContext
from scilla.core.errors import ScillaError
from scilla.core.logging_config import default_log_level, setup_logging

_ACTIONS = {
    "show": ConfigCommand.SHOW,
    "generate": ConfigCommand.GENERATE,
    "edit": ConfigCommand.EDIT,
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="scilla",
        description="Scilla - Solana RPC configuration manager",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  scilla                    Open the interactive config menu
  scilla config show        Show current configuration
  scilla config generate    Generate a new configuration
  scilla config edit        Edit configuration in $EDITOR
        """,
    )
    parser.add_argument(
        "--log-level",
        default=default_log_level(),
        help="Log level (DEBUG, INFO, WARNING, ERROR); defaults to $SCILLA_LOG_LEVEL or WARNING",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    config_parser = subparsers.add_parser("config", help="Manage configuration")
    config_parser.add_argument(
        "config_command",
        nargs="?",
        choices=list(_ACTIONS),
        help="Config subcommand; omit to open the menu",
    )

    return parser


def run(argv=None) -> int:
    """Parse ``argv`` and run the selected command. Returns the exit status."""
    args = build_parser().parse_args(argv)

    ctx = ScillaContext(log_level=args.log_level)

    try:
        ctx.log_path = setup_logging(args.log_level)
        action = getattr(args, "config_command", None)
        if action:
            _ACTIONS[action].process_command(ctx)
        else:
            run_config_menu(ctx)
    except KeyboardInterrupt:
        print("\n\n👋 Goodbye!")
        return 0
    except ScillaError as e:
        print(f"\n❌ Error: {e}", file=sys.stderr)
        if ctx.log_path:
            print(f"   Log: {ctx.log_path}", file=sys.stderr)
        return 1

    return 0


def main():
    sys.exit(run())


if __name__ == "__main__":
    main()
