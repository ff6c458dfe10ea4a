"""landingkit sitemap command.

SUMMARY: Write sitemap.xml (with hreflang alternates) and robots.txt.
"""

from __future__ import annotations

import argparse

from landingkit.cli import OutputFormatter, add_standard_flags, load_site_config
from landingkit.core.site import build_site_urls, write_sitemap_files

SUMMARY = "Write sitemap.xml and robots.txt"


def register_args(parser: argparse.ArgumentParser) -> None:
    add_standard_flags(parser)


def main(args: argparse.Namespace) -> int:
    formatter = OutputFormatter(json_mode=getattr(args, "json", False))
    config = load_site_config(args)

    urls = build_site_urls(config.site_url, config.languages, config.default_language)
    written = write_sitemap_files(config.output_dir, urls, config.site_url, config.default_language)

    formatter.success(
        {"files": {name: str(path) for name, path in written.items()}},
        "\n".join(f"Wrote {path}" for path in written.values()),
    )
    return 0
