"""Common CLI argument registration helpers."""
from __future__ import annotations

import argparse


def add_json_flag(parser: argparse.ArgumentParser) -> None:
    """Add --json flag for JSON output mode."""
    parser.add_argument("--json", action="store_true", help="Output as JSON")


def add_repo_root_flag(parser: argparse.ArgumentParser) -> None:
    """Add --repo-root flag for project root override."""
    parser.add_argument("--repo-root", type=str, help="Override project root path")


def add_verbose_flag(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")


def add_strict_flag(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--strict",
        action="store_true",
        default=None,
        help="Fail when rendering produces any diagnostic",
    )


def add_standard_flags(parser: argparse.ArgumentParser) -> None:
    """Add --json, --repo-root and --verbose."""
    add_json_flag(parser)
    add_repo_root_flag(parser)
    add_verbose_flag(parser)


__all__ = [
    "add_json_flag",
    "add_repo_root_flag",
    "add_standard_flags",
    "add_strict_flag",
    "add_verbose_flag",
]
