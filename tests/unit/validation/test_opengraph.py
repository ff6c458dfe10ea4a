"""Tests for the Open Graph validator."""
from __future__ import annotations

from pathlib import Path

import pytest

from landingkit.core.config import SiteConfig
from landingkit.core.site import SiteBuilder
from landingkit.core.validation.opengraph import (
    DEFAULT_RULES,
    check_image_size,
    check_tags,
    extract_meta_tags,
    image_path_for,
    validate_opengraph,
)

DESCRIPTION = "x" * 120


def _html(tags: dict) -> str:
    return "".join(f'<meta property="{k}" content="{v}">' for k, v in tags.items())


@pytest.fixture
def complete() -> dict:
    return {
        "og:title": "Louder",
        "og:description": DESCRIPTION,
        "og:image": "https://example.com/og.png",
        "og:type": "website",
        "og:url": "https://example.com/",
        "og:site_name": "Louder",
        "og:locale": "en_US",
        "og:logo": "https://example.com/logo.png",
    }


class TestCheckTags:
    def test_complete_page(self, complete: dict) -> None:
        checked = check_tags(_html(complete), DEFAULT_RULES)
        assert checked["errors"] == []
        assert checked["warnings"] == []
        assert checked["found"]["og:image"] == "https://example.com/og.png"

    def test_missing_tag(self, complete: dict) -> None:
        del complete["og:logo"]
        checked = check_tags(_html(complete), DEFAULT_RULES)
        assert checked["errors"] == ["Missing required Open Graph tag: og:logo"]

    @pytest.mark.parametrize(
        "length, word",
        [(50, "short"), (200, "long")],
    )
    def test_description_length(self, complete: dict, length: int, word: str) -> None:
        complete["og:description"] = "d" * length
        errors = check_tags(_html(complete), DEFAULT_RULES)["errors"]
        assert len(errors) == 1 and f"too {word}: {length} characters" in errors[0]

    def test_relative_url(self, complete: dict) -> None:
        complete["og:image"] = "/og.png"
        errors = check_tags(_html(complete), DEFAULT_RULES)["errors"]
        assert errors == ["og:image must be an absolute URL (found: /og.png)"]

    def test_uncommon_type_and_locale_warn(self, complete: dict) -> None:
        complete["og:type"] = "app"
        complete["og:locale"] = "en"
        checked = check_tags(_html(complete), DEFAULT_RULES)
        assert checked["errors"] == []
        assert len(checked["warnings"]) == 2

    def test_name_attribute_accepted(self) -> None:
        assert extract_meta_tags('<meta name="og:title" content="T">') == {"og:title": "T"}


class TestImage:
    def test_image_path_for(self, tmp_path: Path) -> None:
        assert image_path_for("https://example.com/img/og.png", "https://example.com/", tmp_path) == (
            tmp_path / "img" / "og.png"
        )

    def test_missing_image(self, tmp_path: Path) -> None:
        assert "not found" in check_image_size(tmp_path / "og.png", 600)

    def test_image_too_large(self, tmp_path: Path) -> None:
        image = tmp_path / "og.png"
        image.write_bytes(b"\0" * 2048)
        assert check_image_size(image, 1) == "og:image file size 2.00 KB exceeds maximum of 1 KB"
        assert check_image_size(image, 3) is None


def test_built_project_passes(site_config: SiteConfig) -> None:
    SiteBuilder(site_config).build()
    result = validate_opengraph(site_config)
    assert result.ok, [str(i) for i in result.issues]


def test_oversized_image_fails(site_config: SiteConfig, project: Path) -> None:
    SiteBuilder(site_config).build()
    (project / "og.png").write_bytes(b"\0" * (700 * 1024))
    result = validate_opengraph(site_config)
    assert not result.ok
    assert "exceeds maximum of 600 KB" in result.issues[0].message
