"""Tests for the JSON-LD validator."""
from __future__ import annotations

import json
from pathlib import Path

import pytest

from landingkit.core.config import SiteConfig
from landingkit.core.site import SiteBuilder
from landingkit.core.validation.jsonld import (
    extract_jsonld_blocks,
    find_duplicate_properties,
    normalize_types,
    validate_jsonld,
    validate_page_jsonld,
)
from landingkit.core.validation.pages import BuiltPage
from landingkit.core.validation.results import ValidatorResult


def _page(*blocks: str) -> BuiltPage:
    scripts = "".join(f'<script type="application/ld+json">{b}</script>\n' for b in blocks)
    return BuiltPage(lang="en", path=Path("index.html"), html=f"<html><head>{scripts}</head></html>")


def _validate(page: BuiltPage, expected=("WebSite",)) -> ValidatorResult:
    result = ValidatorResult(name="JSON-LD")
    validate_page_jsonld(page, result, expected_types=list(expected))
    return result


class TestHelpers:
    def test_extract_blocks(self) -> None:
        html = '<script type="application/ld+json">\n {"a": 1}\n</script><script>x</script>'
        assert extract_jsonld_blocks(html) == ['{"a": 1}']

    @pytest.mark.parametrize(
        "value, expected",
        [("WebSite", ["WebSite"]), (["A", "B"], ["A", "B"]), (None, [])],
    )
    def test_normalize_types(self, value, expected) -> None:
        assert normalize_types(value) == expected


class TestPage:
    def test_valid_page(self) -> None:
        result = _validate(_page(json.dumps({"@type": "WebSite", "name": "x"})))
        assert result.ok
        assert any("@type=WebSite" in note for note in result.notes)

    def test_parse_error_has_position_and_excerpt(self) -> None:
        result = _validate(_page('{"@type": "WebSite",}'))
        assert not result.ok
        issue = result.issues[0]
        assert issue.block == 1
        assert issue.position is not None
        assert issue.excerpt and "WebSite" in issue.excerpt

    def test_not_an_object(self) -> None:
        result = _validate(_page("[1, 2]"))
        assert "not an object (got array)" in result.issues[0].message

    def test_duplicate_property(self) -> None:
        result = _validate(_page('{"@type": "WebSite", "name": "a", "offers": {"price": 0, "price": 1}}'))
        assert [i.message for i in result.issues] == [
            'Duplicate property in JSON-LD block #1: "price" found at path "offers"'
        ]

    def test_duplicate_type_across_blocks(self) -> None:
        block = json.dumps({"@type": "WebSite"})
        result = _validate(_page(block, block))
        assert result.issues[0].message == 'Duplicate JSON-LD @type "WebSite" found in 2 blocks: #1, #2'

    def test_missing_expected_type(self) -> None:
        result = _validate(_page(json.dumps({"@type": "WebSite"})), expected=("WebSite", "FAQPage"))
        assert result.issues[0].message == "Missing expected JSON-LD @type(s): FAQPage"

    def test_no_blocks(self) -> None:
        result = _validate(BuiltPage(lang="en", path=Path("index.html"), html="<html></html>"))
        assert "No JSON-LD blocks found" in result.issues[0].message

    def test_missing_page(self) -> None:
        result = _validate(BuiltPage(lang="de", path=Path("de/index.html"), html=None))
        assert result.issues[0].message.startswith("Missing built HTML file")
        assert result.issues[0].lang == "de"


def test_find_duplicates_inside_arrays() -> None:
    from landingkit.core.validation.jsonld import _object_pairs_hook

    obj = json.loads('{"step": [{"name": "a", "name": "b"}]}', object_pairs_hook=_object_pairs_hook)
    assert find_duplicate_properties(obj) == [("step.0", "name")]


def test_built_project_passes(site_config: SiteConfig) -> None:
    SiteBuilder(site_config).build()
    result = validate_jsonld(site_config)
    assert result.ok, [str(i) for i in result.issues]
    assert result.notes[-1] == "JSON-LD validation OK: all blocks parse correctly in 2 page(s)"


def test_unbuilt_project_fails(site_config: SiteConfig) -> None:
    result = validate_jsonld(site_config)
    assert len(result.issues) == 2
