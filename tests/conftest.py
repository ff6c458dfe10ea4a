from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Dict

import pytest
import yaml

from landingkit.core.config import SiteConfig
from landingkit.core.stdlib_logging import reset_logging_for_tests

TEMPLATE = """<!DOCTYPE html>
<html lang="{{meta.lang}}">
<head>
<title>{{meta.title}}</title>
<meta property="og:title" content="{{meta.title}}">
<meta property="og:description" content="{{meta.description}}">
<meta property="og:image" content="https://example.com/og.png">
<meta property="og:url" content="{{meta.canonical}}">
{{#each meta.alternate_languages as |alt|}}<link rel="alternate" hreflang="{{alt.lang}}" href="{{alt.url}}">
{{/each}}<script type="application/ld+json">{{seo.structured_data.website | json}}</script>
<script type="application/ld+json">{{seo.structured_data.breadcrumb_list | json}}</script>
</head>
<body>
<ul>{{#each features as |feature|}}<li>{{feature.title}}</li>{{/each}}</ul>
<p>{{footer.copyright}}</p>
</body>
</html>
"""


def make_translation(lang: str, canonical: str, title: str) -> Dict[str, Any]:
    return {
        "meta": {
            "lang": lang,
            "title": title,
            "description": f"{title} turns up the volume on every phone call you make.",
            "canonical": canonical,
        },
        "seo": {
            "breadcrumb_home": "Home",
            "structured_data": {
                "website": {"@context": "https://schema.org", "@type": "WebSite", "name": title},
            },
        },
        "features": [{"title": "Fast"}, {"title": "Free"}],
        "footer": {"copyright": "© {year} Louder"},
    }


SITE_CONFIG: Dict[str, Any] = {
    "site": {
        "url": "https://example.com/",
        "default_language": "en",
        "languages": ["en", "de"],
    },
    "validation": {
        "expected_jsonld_types": ["WebSite", "BreadcrumbList"],
        "opengraph": {
            "required_tags": ["og:title", "og:description", "og:image", "og:url"],
            "description_min_length": 10,
            "description_max_length": 160,
        },
    },
}


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch: pytest.MonkeyPatch):
    """Drop LANDINGKIT_* variables and installed log handlers around each test."""
    for key in list(os.environ):
        if key.startswith("LANDINGKIT_"):
            monkeypatch.delenv(key, raising=False)
    yield
    reset_logging_for_tests()


@pytest.fixture
def project(tmp_path: Path) -> Path:
    """Minimal two-language landing page project."""
    root = tmp_path / "site"
    config_dir = root / ".landingkit" / "config"
    config_dir.mkdir(parents=True)
    (config_dir / "site.yaml").write_text(yaml.safe_dump(SITE_CONFIG), encoding="utf-8")

    build_dir = root / "build"
    build_dir.mkdir()
    (build_dir / "template.html").write_text(TEMPLATE, encoding="utf-8")
    for lang, canonical, title in (
        ("en", "https://example.com/", "Louder"),
        ("de", "https://example.com/de/", "Lauter"),
    ):
        data = make_translation(lang, canonical, title)
        (build_dir / f"{lang}.json").write_text(json.dumps(data, ensure_ascii=False), encoding="utf-8")

    (root / "og.png").write_bytes(b"\x89PNG" + b"\0" * 1024)
    return root


@pytest.fixture
def site_config(project: Path) -> SiteConfig:
    return SiteConfig(project)
