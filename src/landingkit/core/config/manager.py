"""
landingkit configuration management (YAML layers + environment overrides).
"""
from __future__ import annotations

import json
import logging
import os
import re
from pathlib import Path
from typing import Any, Dict, Iterator, List, Optional, Tuple

import jsonschema
import yaml

from landingkit.core.exceptions import ConfigError
from landingkit.core.utils.io import iter_yaml_files, read_yaml
from landingkit.core.utils.merge import deep_merge
from landingkit.core.utils.paths import get_project_config_dir, resolve_project_root
from landingkit.data import get_data_path

logger = logging.getLogger(__name__)

ENV_PREFIX = "LANDINGKIT_"
SCHEMA_FILE = "config.schema.yaml"


class ConfigManager:
    """Load, merge, and validate landingkit configuration.

    Configuration sources (highest to lowest priority):
    1. Environment variables: LANDINGKIT_<SECTION>__<KEY>
    2. Project config: <repo>/.landingkit/config/*.yaml (alphabetical order)
    3. Bundled defaults: landingkit.data/config/*.yaml (alphabetical order)
    """

    def __init__(self, repo_root: Optional[Path] = None) -> None:
        self.repo_root = Path(repo_root) if repo_root else resolve_project_root()
        self.core_config_dir = get_data_path("config")
        self.project_config_dir = get_project_config_dir(self.repo_root) / "config"
        self.schemas_dir = get_data_path("schemas")

    def load_yaml(self, path: Path) -> Dict[str, Any]:
        try:
            data = read_yaml(path, default={}, raise_on_error=True)
        except yaml.YAMLError as exc:
            raise ConfigError(f"Invalid YAML in {path}: {exc}", context={"path": str(path)}) from exc
        if not isinstance(data, dict):
            raise ConfigError(
                f"Config file must contain a mapping: {path}",
                context={"path": str(path)},
            )
        return data

    def _load_directory(self, directory: Path, cfg: Dict[str, Any]) -> Dict[str, Any]:
        for path in iter_yaml_files(directory):
            logger.debug("Merging config layer %s", path)
            cfg = deep_merge(cfg, self.load_yaml(path))
        return cfg

    # ---- environment overrides -------------------------------------------

    def _coerce_type(self, value: str) -> Any:
        s = value.strip()
        low = s.lower()
        if low in {"true", "false"}:
            return low == "true"
        if low in {"null", "none"}:
            return None
        if re.fullmatch(r"[-+]?\d+", s):
            return int(s)
        if re.fullmatch(r"[-+]?\d*\.\d+", s) or re.fullmatch(r"[-+]?\d+\.\d*", s):
            return float(s)
        if (s.startswith("{") and s.endswith("}")) or (s.startswith("[") and s.endswith("]")):
            try:
                return json.loads(s)
            except json.JSONDecodeError:
                return s
        return s

    def _iter_env_overrides(self) -> Iterator[Tuple[List[str], Any]]:
        for key in sorted(os.environ):
            if not key.startswith(ENV_PREFIX) or key == "LANDINGKIT_PROJECT_ROOT":
                continue
            raw = key[len(ENV_PREFIX):]
            segs = [seg.lower() for seg in raw.split("__")]
            if not raw or any(seg == "" for seg in segs):
                raise ConfigError(f"Malformed {ENV_PREFIX}* key: {key}", context={"key": key})
            yield segs, self._coerce_type(os.environ[key])

    def apply_env_overrides(self, cfg: Dict[str, Any]) -> None:
        for path, value in self._iter_env_overrides():
            cur: Dict[str, Any] = cfg
            for part in path[:-1]:
                nxt = cur.get(part)
                if not isinstance(nxt, dict):
                    nxt = {}
                    cur[part] = nxt
                cur = nxt
            cur[path[-1]] = value

    # ---- validation ------------------------------------------------------

    def validate_schema(self, cfg: Dict[str, Any]) -> None:
        schema = read_yaml(self.schemas_dir / SCHEMA_FILE, default={}, raise_on_error=True)
        validator = jsonschema.Draft202012Validator(schema)
        errors = sorted(validator.iter_errors(cfg), key=lambda e: list(e.path))
        if errors:
            messages = [
                f"{'.'.join(str(p) for p in err.path) or '<root>'}: {err.message}"
                for err in errors
            ]
            raise ConfigError(
                "Invalid configuration: " + "; ".join(messages),
                context={"errors": messages},
            )

        site = cfg["site"]
        if site["default_language"] not in site["languages"]:
            raise ConfigError(
                f"site.default_language '{site['default_language']}' is not listed in site.languages",
                context={"languages": list(site["languages"])},
            )

    def load_config(self, *, validate: bool = True) -> Dict[str, Any]:
        """Return the merged configuration dictionary."""
        cfg: Dict[str, Any] = {}
        cfg = self._load_directory(self.core_config_dir, cfg)
        cfg = self._load_directory(self.project_config_dir, cfg)
        self.apply_env_overrides(cfg)
        if validate:
            self.validate_schema(cfg)
        return cfg


__all__ = ["ConfigManager", "ENV_PREFIX"]
