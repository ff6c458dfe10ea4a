"""JSON-LD structured data validator.

For every built page:
- every ``<script type="application/ld+json">`` block must parse as a JSON object
- no object may repeat a property name
- no ``@type`` may appear in more than one block
- every expected ``@type`` must be present
"""
from __future__ import annotations

import json
import logging
import re
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence, Tuple

from landingkit.core.config import SiteConfig

from .pages import BuiltPage, iter_built_pages
from .results import ValidatorResult

logger = logging.getLogger(__name__)

JSONLD_BLOCK_PATTERN = re.compile(
    r"<script\s+type=\"application/ld\+json\">(.*?)</script>",
    re.DOTALL,
)
EXCERPT_RADIUS = 160


class _JsonObject(dict):
    """dict that remembers keys repeated in its source text."""

    duplicate_keys: List[str]


def _object_pairs_hook(pairs: List[Tuple[str, Any]]) -> _JsonObject:
    obj = _JsonObject()
    obj.duplicate_keys = []
    for key, value in pairs:
        if key in obj:
            obj.duplicate_keys.append(key)
        obj[key] = value
    return obj


def extract_jsonld_blocks(html: str) -> List[str]:
    """Return the stripped contents of every JSON-LD script block."""
    return [m.group(1).strip() for m in JSONLD_BLOCK_PATTERN.finditer(html)]


def excerpt_around(text: str, pos: int, radius: int = EXCERPT_RADIUS) -> str:
    return text[max(0, pos - radius):min(len(text), pos + radius)]


def normalize_types(value: Any) -> List[str]:
    """``@type`` as a list of names (string, list, or absent)."""
    if isinstance(value, list):
        return [str(v) for v in value if v]
    if isinstance(value, str):
        return [value]
    if value is None:
        return []
    return [str(value)]


def find_duplicate_properties(obj: Any, path: str = "") -> List[Tuple[str, str]]:
    """Return ``(path, key)`` for every repeated property under ``obj``."""
    found: List[Tuple[str, str]] = []
    if isinstance(obj, dict):
        for key in getattr(obj, "duplicate_keys", []):
            found.append((path or "root", key))
        for key, value in obj.items():
            found.extend(find_duplicate_properties(value, f"{path}.{key}" if path else key))
    elif isinstance(obj, list):
        for index, value in enumerate(obj):
            found.extend(find_duplicate_properties(value, f"{path}.{index}" if path else str(index)))
    return found


def _json_type_name(value: Any) -> str:
    if isinstance(value, list):
        return "array"
    if isinstance(value, str):
        return "string"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if value is None:
        return "null"
    return type(value).__name__


def _display(path: Path, root: Path) -> str:
    try:
        return str(path.relative_to(root))
    except ValueError:
        return str(path)


def validate_page_jsonld(
    page: BuiltPage,
    result: ValidatorResult,
    *,
    expected_types: Sequence[str],
    display_path: Optional[str] = None,
) -> None:
    """Validate one page, appending issues to ``result``."""
    file = display_path or str(page.path)
    if page.html is None:
        result.add_issue(f"Missing built HTML file: {file}", file=file, lang=page.lang)
        return

    blocks = extract_jsonld_blocks(page.html)
    if not blocks:
        result.add_issue(f"No JSON-LD blocks found in {file}", file=file, lang=page.lang)
        return

    found_types: Dict[str, List[int]] = {}
    for index, block in enumerate(blocks, start=1):
        where = {"file": file, "lang": page.lang, "block": index}
        try:
            obj = json.loads(block, object_pairs_hook=_object_pairs_hook)
        except json.JSONDecodeError as exc:
            result.add_issue(
                f"{exc.msg} at line {exc.lineno} column {exc.colno}",
                position=exc.pos,
                excerpt=excerpt_around(block, exc.pos),
                **where,
            )
            continue

        if not isinstance(obj, dict):
            result.add_issue(f"JSON-LD block is not an object (got {_json_type_name(obj)})", **where)
            continue

        types = normalize_types(obj.get("@type"))
        for type_name in types:
            found_types.setdefault(type_name, []).append(index)
        result.notes.append(
            f"{page.lang}: {file} block #{index} @type={', '.join(types) or '(missing @type)'}"
        )

        for path, key in find_duplicate_properties(obj):
            result.add_issue(
                f'Duplicate property in JSON-LD block #{index}: "{key}" found at path "{path}"',
                **where,
            )

    for type_name, indices in found_types.items():
        if len(indices) > 1:
            listed = ", ".join(f"#{i}" for i in indices)
            result.add_issue(
                f'Duplicate JSON-LD @type "{type_name}" found in {len(indices)} blocks: {listed}',
                file=file,
                lang=page.lang,
            )

    missing = [t for t in expected_types if t not in found_types]
    if missing:
        result.add_issue(
            f"Missing expected JSON-LD @type(s): {', '.join(missing)}",
            file=file,
            lang=page.lang,
        )


def validate_jsonld(config: SiteConfig) -> ValidatorResult:
    """Validate JSON-LD on every configured language page."""
    result = ValidatorResult(name="JSON-LD")
    pages = list(iter_built_pages(config))
    for page in pages:
        validate_page_jsonld(
            page,
            result,
            expected_types=config.expected_jsonld_types,
            display_path=_display(page.path, config.repo_root),
        )

    if result.ok:
        result.notes.append(f"JSON-LD validation OK: all blocks parse correctly in {len(pages)} page(s)")
    else:
        logger.info("JSON-LD validation found %d issue(s)", len(result.issues))
    return result


__all__ = [
    "extract_jsonld_blocks",
    "find_duplicate_properties",
    "normalize_types",
    "validate_jsonld",
    "validate_page_jsonld",
]
