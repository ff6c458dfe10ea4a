"""
Auto-discovery CLI dispatcher for landingkit.

Scans ``cli/commands`` and registers every module found there.
Adding a new command = just add a .py file to ``cli/commands``.
"""

from __future__ import annotations

import argparse
import importlib
import logging
import sys
from collections.abc import Callable
from functools import lru_cache
from pathlib import Path
from typing import Any

from landingkit.core.exceptions import LandingkitError

from ._output import OutputFormatter

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def discover_commands() -> dict[str, dict[str, Any]]:
    """Discover top-level commands under cli/commands.

    Returns:
        Dict mapping command name to command info dict
    """
    commands_dir = Path(__file__).parent / "commands"
    commands: dict[str, dict[str, Any]] = {}

    if not commands_dir.exists():
        return commands

    for item in sorted(commands_dir.glob("*.py")):
        if item.name.startswith("_"):
            continue

        cmd_name = item.stem
        try:
            module = importlib.import_module(f"landingkit.cli.commands.{cmd_name}")
        except ImportError as e:
            print(f"Warning: Could not import command {cmd_name}: {e}", file=sys.stderr)
            continue
        commands[cmd_name] = {
            "module": module,
            "summary": getattr(module, "SUMMARY", cmd_name),
            "register_args": getattr(module, "register_args", None),
            "main": getattr(module, "main", None),
        }

    return commands


def build_parser() -> argparse.ArgumentParser:
    """
    Build the argument parser with auto-discovered commands.

    Returns:
        Configured ArgumentParser
    """
    parser = argparse.ArgumentParser(
        prog="landingkit",
        description="landingkit - multilingual landing page build pipeline",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {_get_version()}",
    )

    subparsers = parser.add_subparsers(
        dest="command",
        title="commands",
        description="Available commands",
        metavar="<command>",
    )

    for cmd_name, cmd_info in sorted(discover_commands().items()):
        primary_name = cmd_name.replace("_", "-")
        aliases = [cmd_name] if primary_name != cmd_name else []
        cmd_parser = subparsers.add_parser(
            primary_name,
            aliases=aliases,
            help=cmd_info["summary"],
            description=cmd_info["summary"],
        )
        if cmd_info["register_args"]:
            cmd_info["register_args"](cmd_parser)
        if cmd_info["main"]:
            cmd_parser.set_defaults(_func=cmd_info["main"])

    return parser


def _get_version() -> str:
    from landingkit import __version__

    return __version__


def main(argv: list[str] | None = None) -> int:
    """
    Main entry point for the landingkit CLI.

    Args:
        argv: Command line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    if argv is None:
        argv = sys.argv[1:]

    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 0

    func: Callable[[argparse.Namespace], int] | None = getattr(args, "_func", None)
    if func is None:
        parser.print_help()
        return 1

    formatter = OutputFormatter(json_mode=bool(getattr(args, "json", False)))
    try:
        return func(args)
    except KeyboardInterrupt:
        print("\nInterrupted.", file=sys.stderr)
        return 130
    except LandingkitError as e:
        logger.debug("Command %s failed", args.command, exc_info=True)
        payload = e.to_json_error()
        formatter.error(e, error_code=payload["code"], context=payload["context"])
        return 1
    except Exception as e:
        logger.debug("Command %s crashed", args.command, exc_info=True)
        formatter.error(e, error_code="unexpected_error")
        return 1


if __name__ == "__main__":
    sys.exit(main())
