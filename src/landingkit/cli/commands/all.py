"""landingkit all command.

SUMMARY: Build pages, write sitemap/robots, then validate the result.
"""

from __future__ import annotations

import argparse

from landingkit.cli import OutputFormatter, add_standard_flags, add_strict_flag, load_site_config
from landingkit.core.site import SiteBuilder, write_sitemap_files
from landingkit.core.validation import run_validators

from .build import report_build
from .validate import report_validation

SUMMARY = "Build, write sitemap and robots, then validate"


def register_args(parser: argparse.ArgumentParser) -> None:
    add_strict_flag(parser)
    add_standard_flags(parser)


def main(args: argparse.Namespace) -> int:
    formatter = OutputFormatter(json_mode=getattr(args, "json", False))
    config = load_site_config(args)

    builder = SiteBuilder(config, strict=getattr(args, "strict", None))
    build = builder.build()
    written = write_sitemap_files(config.output_dir, builder.urls, config.site_url, config.default_language)
    summary = run_validators(config)

    if formatter.json_mode:
        formatter.json_output({
            "status": "success" if summary.ok else "failed",
            "build": build.to_dict(),
            "files": {name: str(path) for name, path in written.items()},
            "validation": summary.to_dict(),
        })
    else:
        report_build(formatter, build)
        for path in written.values():
            formatter.text(f"Wrote {path}")
        report_validation(formatter, summary)
    return 0 if summary.ok else 1
