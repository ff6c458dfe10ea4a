"""Shared CLI utilities."""
from __future__ import annotations

import argparse
from pathlib import Path

from landingkit.core.config import SiteConfig
from landingkit.core.stdlib_logging import configure_logging
from landingkit.core.utils.paths import resolve_project_root


def get_repo_root(args: argparse.Namespace) -> Path:
    """Project root from ``--repo-root`` or auto-detection."""
    if getattr(args, "repo_root", None):
        return Path(args.repo_root).resolve()
    return resolve_project_root()


def load_site_config(args: argparse.Namespace) -> SiteConfig:
    """Load the project config and configure logging from it."""
    config = SiteConfig(get_repo_root(args))
    configure_logging(
        level="DEBUG" if getattr(args, "verbose", False) else config.log_level,
        log_path=config.log_file,
        json_mode=bool(getattr(args, "json", False)),
    )
    return config


__all__ = ["get_repo_root", "load_site_config"]
