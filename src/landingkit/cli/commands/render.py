"""landingkit render command.

SUMMARY: Render one template against a JSON context file.

The context is used as-is (no build-time enrichment), which makes this the
quickest way to try a template change or debug a missing variable.
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from landingkit.cli import OutputFormatter, add_json_flag, add_strict_flag, add_verbose_flag
from landingkit.core.exceptions import BuildError, StrictRenderError
from landingkit.core.stdlib_logging import configure_logging
from landingkit.core.templating import TemplateEngine
from landingkit.core.utils.io import read_json, read_text, write_text

SUMMARY = "Render a template against a JSON context file"


def register_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("template", help="Template file")
    parser.add_argument("context", help="JSON file holding the render context")
    parser.add_argument("-o", "--output", help="Write the result here instead of stdout")
    add_strict_flag(parser)
    add_json_flag(parser)
    add_verbose_flag(parser)


def _load_context(path: Path) -> dict:
    try:
        data = read_json(path)
    except (OSError, json.JSONDecodeError) as exc:
        raise BuildError(f"Cannot load context {path}: {exc}", context={"path": str(path)}) from exc
    if not isinstance(data, dict):
        raise BuildError(f"Context must be a JSON object: {path}", context={"path": str(path)})
    return data


def main(args: argparse.Namespace) -> int:
    json_mode = bool(getattr(args, "json", False))
    formatter = OutputFormatter(json_mode=json_mode)
    configure_logging(level="DEBUG" if getattr(args, "verbose", False) else "ERROR", json_mode=json_mode)

    template_path = Path(args.template)
    try:
        template = read_text(template_path)
    except OSError as exc:
        raise BuildError(f"Cannot read template {template_path}: {exc}", context={"path": str(template_path)}) from exc
    context = _load_context(Path(args.context))

    text, report = TemplateEngine().render(template, context, name=template_path.name, template_path=template_path)

    if getattr(args, "strict", None) and report.has_issues:
        raise StrictRenderError(
            f"Rendering {template_path} produced {len(report.diagnostics)} diagnostic(s)",
            diagnostics=report.warnings,
        )

    if args.output:
        write_text(Path(args.output), text)

    if json_mode:
        payload = {"status": "success", "report": report.to_dict()}
        if args.output:
            payload["output"] = str(args.output)
        else:
            payload["text"] = text
        formatter.json_output(payload)
        return 0

    if not args.output:
        sys.stdout.write(text)
    for warning in report.warnings:
        formatter.text_err(f"warning: {warning}")
    return 0
