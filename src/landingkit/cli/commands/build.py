"""landingkit build command.

SUMMARY: Write urls.txt and render one index.html per language.
"""

from __future__ import annotations

import argparse

from landingkit.cli import OutputFormatter, add_standard_flags, add_strict_flag, load_site_config
from landingkit.core.site import BuildResult, SiteBuilder

SUMMARY = "Write urls.txt and render one index.html per language"


def register_args(parser: argparse.ArgumentParser) -> None:
    add_strict_flag(parser)
    add_standard_flags(parser)


def report_build(formatter: OutputFormatter, result: BuildResult) -> None:
    """Print per-page output (diagnostics themselves go through logging)."""
    if result.urls_path:
        formatter.text(f"Wrote {result.urls_path}")
    for page in result.pages:
        issues = len(page.report.warnings)
        suffix = f" ({issues} warning(s))" if issues else ""
        formatter.text(f"Built {page.lang}: {page.path}{suffix}")


def main(args: argparse.Namespace) -> int:
    formatter = OutputFormatter(json_mode=getattr(args, "json", False))
    config = load_site_config(args)

    result = SiteBuilder(config, strict=getattr(args, "strict", None)).build()

    if formatter.json_mode:
        formatter.json_output({"status": "success", **result.to_dict()})
    else:
        report_build(formatter, result)
        formatter.text(f"Build complete: {len(result.pages)} page(s)")
    return 0
