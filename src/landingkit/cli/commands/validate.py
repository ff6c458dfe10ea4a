"""landingkit validate command.

SUMMARY: Check built pages for valid JSON-LD and complete Open Graph tags.
"""

from __future__ import annotations

import argparse

from landingkit.cli import OutputFormatter, add_standard_flags, load_site_config
from landingkit.core.validation import ValidationSummary, run_validators

SUMMARY = "Validate JSON-LD and Open Graph tags in built pages"


def register_args(parser: argparse.ArgumentParser) -> None:
    add_standard_flags(parser)


def report_validation(formatter: OutputFormatter, summary: ValidationSummary) -> None:
    for result in summary.results:
        formatter.text(f"{'PASS' if result.ok else 'FAIL'} {result.name}")
        for note in result.notes:
            formatter.text(f"  {note}")
        for warning in result.warnings:
            formatter.text(f"  warning: {warning}")
        for issue in result.issues:
            formatter.text_err(f"  error: {issue}")
            if issue.excerpt:
                formatter.text_err(f"    ...{issue.excerpt}...")
    formatter.text(f"{summary.passed}/{len(summary.results)} validator(s) passed")


def main(args: argparse.Namespace) -> int:
    formatter = OutputFormatter(json_mode=getattr(args, "json", False))
    config = load_site_config(args)

    summary = run_validators(config)

    if formatter.json_mode:
        formatter.json_output({"status": "success" if summary.ok else "failed", **summary.to_dict()})
    else:
        report_validation(formatter, summary)
    return 0 if summary.ok else 1
