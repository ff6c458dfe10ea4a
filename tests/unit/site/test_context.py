"""Tests for URL mapping and translation enrichment."""
from __future__ import annotations

import copy
from datetime import datetime, timezone
from pathlib import Path

import pytest

from landingkit.core.site.context import build_howto_steps, enrich_context
from landingkit.core.site.urls import SiteUrl, build_site_urls, page_path

NOW = datetime(2024, 5, 1, tzinfo=timezone.utc)
SITE = "https://example.com/"


@pytest.fixture
def urls() -> list[SiteUrl]:
    return build_site_urls(SITE, ["en", "de", "fr"], "en")


class TestUrls:
    def test_default_language_at_root(self, urls: list[SiteUrl]) -> None:
        assert [u.url for u in urls] == [
            "https://example.com/",
            "https://example.com/de/",
            "https://example.com/fr/",
        ]

    def test_page_path(self, tmp_path: Path) -> None:
        assert page_path(tmp_path, "en", "en") == tmp_path / "index.html"
        assert page_path(tmp_path, "de", "en") == tmp_path / "de" / "index.html"


class TestEnrichContext:
    def test_meta_fields(self, urls: list[SiteUrl]) -> None:
        out = enrich_context({"meta": {"title": "Louder"}}, site_url=SITE, urls=urls, now=NOW)
        meta = out["meta"]
        assert meta["title"] == "Louder"
        assert meta["version"] == 1714521600000
        assert meta["alternate_default"] == SITE
        assert meta["alternate_languages"][1] == {"lang": "de", "url": "https://example.com/de/"}

    def test_copyright_year(self, urls: list[SiteUrl]) -> None:
        data = {"footer": {"copyright": "© {year} Louder"}}
        out = enrich_context(data, site_url=SITE, urls=urls, now=NOW)
        assert out["footer"]["copyright"] == "© 2024 Louder"

    def test_input_not_mutated(self, urls: list[SiteUrl]) -> None:
        data = {"meta": {}, "footer": {"copyright": "{year}"}, "seo": {"faq": []}}
        before = copy.deepcopy(data)
        enrich_context(data, site_url=SITE, urls=urls, now=NOW)
        assert data == before

    def test_structured_data_urls(self, urls: list[SiteUrl]) -> None:
        data = {
            "meta": {"canonical": "https://example.com/de/"},
            "header": {"download_url": "https://apps.example.com/louder"},
            "seo": {
                "breadcrumb_home": "Start",
                "structured_data": {
                    "software_application": {"@type": "MobileApplication", "url": "stale"},
                    "website": {"@type": "WebSite"},
                },
            },
        }
        structured = enrich_context(data, site_url=SITE, urls=urls, now=NOW)["seo"]["structured_data"]
        assert structured["software_application"]["url"] == "https://example.com/de/"
        assert structured["software_application"]["downloadUrl"] == "https://apps.example.com/louder"
        assert structured["website"]["url"] == "https://example.com/de/"
        assert structured["breadcrumb_list"] == {
            "@context": "https://schema.org",
            "@type": "BreadcrumbList",
            "itemListElement": [
                {"@type": "ListItem", "position": 1, "name": "Start", "item": "https://example.com/de/"}
            ],
        }

    def test_howto_and_faq(self, urls: list[SiteUrl]) -> None:
        data = {
            "how_it_works": {"steps": [{"title": "<b>Open</b> the app", "description": "Tap\n  <i>Boost</i>"}]},
            "seo": {
                "faq": [{"question": "Is it <em>free</em>?", "answer": "Yes."}],
                "structured_data": {"howto": {"@type": "HowTo"}},
            },
        }
        structured = enrich_context(data, site_url=SITE, urls=urls, now=NOW)["seo"]["structured_data"]
        assert structured["howto"]["step"] == [{"@type": "HowToStep", "name": "Open the app", "text": "Tap Boost"}]
        assert structured["faqpage"]["@type"] == "FAQPage"
        assert structured["faqpage"]["mainEntity"] == [
            {
                "@type": "Question",
                "name": "Is it free ?",
                "acceptedAnswer": {"@type": "Answer", "text": "Yes."},
            }
        ]

    def test_missing_sections_are_created(self, urls: list[SiteUrl]) -> None:
        out = enrich_context({}, site_url=SITE, urls=urls, now=NOW)
        assert out["seo"]["structured_data"]["breadcrumb_list"]["itemListElement"] == [
            {"@type": "ListItem", "position": 1}
        ]
        assert "howto" not in out["seo"]["structured_data"]


def test_howto_steps_skip_absent_fields() -> None:
    assert build_howto_steps([{"title": "Only title"}]) == [{"@type": "HowToStep", "name": "Only title"}]
    assert build_howto_steps(None) == []
