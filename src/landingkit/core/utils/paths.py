"""Project root resolution."""
from __future__ import annotations

import os
from pathlib import Path
from typing import Optional

PROJECT_CONFIG_DIR = ".landingkit"
PROJECT_ROOT_ENV = "LANDINGKIT_PROJECT_ROOT"


def resolve_project_root(start: Optional[Path] = None) -> Path:
    """Resolve the landing-page project root.

    Resolution priority:
    1. ``LANDINGKIT_PROJECT_ROOT`` environment variable
    2. Nearest ancestor of ``start`` (default: CWD) holding ``.landingkit/``
    3. Nearest ancestor holding ``.git``
    4. ``start`` itself

    Raises:
        FileNotFoundError: If the environment variable points at a missing path
    """
    env_root = os.environ.get(PROJECT_ROOT_ENV)
    if env_root:
        env_path = Path(env_root).expanduser().resolve()
        if not env_path.exists():
            raise FileNotFoundError(f"{PROJECT_ROOT_ENV} points at missing path: {env_path}")
        return env_path

    here = (start or Path.cwd()).resolve()
    candidates = [here, *here.parents]
    for marker in (PROJECT_CONFIG_DIR, ".git"):
        for candidate in candidates:
            if (candidate / marker).exists():
                return candidate
    return here


def get_project_config_dir(repo_root: Path) -> Path:
    """Return ``<repo_root>/.landingkit``."""
    return Path(repo_root) / PROJECT_CONFIG_DIR


__all__ = ["PROJECT_CONFIG_DIR", "PROJECT_ROOT_ENV", "resolve_project_root", "get_project_config_dir"]
