"""File I/O helpers.

Pages and support files are written atomically (temp file + fsync + rename)
so an interrupted build never leaves a half-written ``index.html`` behind.
"""
from __future__ import annotations

import json
import os
import tempfile
from pathlib import Path
from typing import Any, Callable, Optional, TextIO, Union

import yaml

PathLike = Union[str, Path]


def ensure_directory(path: PathLike) -> Path:
    """Create ``path`` (and parents) if missing and return it.

    Raises:
        NotADirectoryError: If path exists but is not a directory
    """
    path = Path(path)
    if path.exists():
        if not path.is_dir():
            raise NotADirectoryError(f"Path exists but is not a directory: {path}")
        return path
    path.mkdir(parents=True, exist_ok=True)
    return path


def atomic_write(
    path: PathLike,
    write_fn: Callable[[TextIO], None],
    *,
    encoding: str = "utf-8",
) -> None:
    """Write to ``path`` atomically using a temp file + fsync + rename.

    Args:
        path: Target file path
        write_fn: Callable that writes content to the file object
        encoding: Text encoding (default: utf-8)
    """
    path = Path(path)
    ensure_directory(path.parent)

    tmp_path: Optional[Path] = None
    try:
        with tempfile.NamedTemporaryFile(
            "w",
            encoding=encoding,
            dir=str(path.parent),
            delete=False,
            newline="",
        ) as f:
            tmp_path = Path(f.name)
            write_fn(f)
            f.flush()
            os.fsync(f.fileno())
        os.replace(str(tmp_path), str(path))
    finally:
        if tmp_path is not None and tmp_path.exists():
            tmp_path.unlink()


def read_text(path: PathLike) -> str:
    """Read a UTF-8 text file.

    Raises:
        FileNotFoundError: If the file does not exist
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Text file not found: {path}")
    return path.read_text(encoding="utf-8")


def write_text(path: PathLike, content: str) -> None:
    """Atomically write UTF-8 text to ``path``."""
    atomic_write(Path(path), lambda f: f.write(content))


def read_json(path: PathLike) -> Any:
    """Read and parse a JSON file.

    Raises:
        FileNotFoundError: If the file does not exist
        json.JSONDecodeError: If the content is not valid JSON
    """
    return json.loads(read_text(path))


def read_yaml(path: PathLike, default: Any = None, raise_on_error: bool = False) -> Any:
    """Read YAML, returning ``default`` for missing/empty files.

    Invalid YAML propagates only when ``raise_on_error`` is True.
    """
    path = Path(path)
    if not path.exists():
        if raise_on_error:
            raise FileNotFoundError(f"File not found: {path}")
        return default

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError:
        if raise_on_error:
            raise
        return default
    return data if data is not None else default


def iter_yaml_files(dir_path: PathLike) -> list[Path]:
    """Return ``*.yaml``/``*.yml`` files in ``dir_path`` sorted by stem.

    When both ``<name>.yaml`` and ``<name>.yml`` exist only ``.yaml`` is returned.
    """
    d = Path(dir_path)
    if not d.is_dir():
        return []
    yml_files = {p.stem: p for p in d.glob("*.yml")}
    yaml_files = {p.stem: p for p in d.glob("*.yaml")}
    return [yaml_files.get(stem) or yml_files[stem] for stem in sorted(set(yml_files) | set(yaml_files))]


__all__ = [
    "atomic_write",
    "ensure_directory",
    "iter_yaml_files",
    "read_json",
    "read_text",
    "read_yaml",
    "write_text",
]
