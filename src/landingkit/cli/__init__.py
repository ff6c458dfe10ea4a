"""
landingkit CLI package.

Commands are auto-discovered from ``cli/commands/*.py``. Each module exposes
``SUMMARY``, ``register_args(parser)`` and ``main(args) -> int``.

Framework utilities for building CLI commands:
- _output: Output formatting (JSON/text modes)
- _args: Common argument registration helpers
- _utils: Shared CLI utilities
"""
from ._output import OutputFormatter, format_json, print_error, print_success
from ._args import add_json_flag, add_repo_root_flag, add_standard_flags, add_strict_flag, add_verbose_flag
from ._utils import get_repo_root, load_site_config

__all__ = [
    "OutputFormatter",
    "format_json",
    "print_success",
    "print_error",
    "add_json_flag",
    "add_repo_root_flag",
    "add_standard_flags",
    "add_strict_flag",
    "add_verbose_flag",
    "get_repo_root",
    "load_site_config",
]
