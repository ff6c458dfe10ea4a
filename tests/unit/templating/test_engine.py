"""End-to-end tests for TemplateEngine (blocks, markers, cleanup)."""
from __future__ import annotations

import copy
from pathlib import Path

import pytest

from landingkit.core.templating import DiagnosticKind, TemplateEngine, render
from landingkit.core.templating.cleanup import strip_trailing_separators


@pytest.fixture
def engine() -> TemplateEngine:
    return TemplateEngine()


class TestRender:
    def test_template_without_tags_is_unchanged(self, engine: TemplateEngine) -> None:
        text, report = engine.render("<p>Plain text, [a, b]</p>", {"x": 1})
        assert text == "<p>Plain text, [a, b]</p>"
        assert not report.has_issues

    def test_cleanup_applies_to_literal_text(self) -> None:
        assert render("<p>[a, b,]</p>", {}) == "<p>[a, b]</p>"

    def test_scalar_and_json_markers(self, engine: TemplateEngine) -> None:
        text, _ = engine.render("{{ a }} {{ a | json }}", {"a": "x"})
        assert text == 'x "x"'

    def test_sequence_separated_by_commas(self, engine: TemplateEngine) -> None:
        text, _ = engine.render("{{#each xs as |x|}}{{x}},{{/each}}", {"xs": ["a", "b"]})
        assert text == "a,b,"

    def test_list_before_cleanup(self, engine: TemplateEngine) -> None:
        template = '"step": [{{#each steps as |s|}}{"n": "{{s}}"},{{/each}}]'
        text, _ = engine.render(template, {"steps": ["a", "b"]})
        assert text == '"step": [{"n": "a"},{"n": "b"}]'

    def test_cleanup_keeps_whitespace(self, engine: TemplateEngine) -> None:
        template = "[\n  {{#each xs as |x|}}{{x}},\n  {{/each}}]"
        text, _ = engine.render(template, {"xs": ["a", "b"]})
        assert text == "[\n  a,\n  b\n  ]"

    def test_empty_sequence_renders_empty_list(self, engine: TemplateEngine) -> None:
        text, report = engine.render("[{{#each xs as |x|}}{{x}},{{/each}}]", {"xs": []})
        assert text == "[]"
        assert not report.has_issues

    def test_nested_blocks(self, engine: TemplateEngine) -> None:
        data = {"sections": [{"items": ["x", "y"]}, {"items": ["z"]}]}
        template = "{{#each sections as |section|}}{{#each section.items as |item|}}{{item}}{{/each}}{{/each}}"
        text, report = engine.render(template, data)
        assert text == "xyz"
        assert report.blocks_expanded == 3
        assert report.items_rendered == 5

    def test_shadowed_key_restored_after_block(self, engine: TemplateEngine) -> None:
        data = {"item": "outer", "items": ["a"]}
        text, _ = engine.render("{{#each items as |item|}}{{item}}{{/each}}{{item}}", data)
        assert text == "aouter"

    def test_unknown_path_reports_once(self, engine: TemplateEngine) -> None:
        text, report = engine.render("<p>{{missing}}</p>", {})
        assert text == "<p>{{missing}}</p>"
        assert len(report.diagnostics) == 1
        assert report.diagnostics[0].kind is DiagnosticKind.UNRESOLVED_VARIABLE
        assert report.variables_missing == {"missing"}

    def test_unknown_filter(self, engine: TemplateEngine) -> None:
        text, report = engine.render("{{ t | shout }}", {"t": "hi"})
        assert text == "hi"
        assert [d.kind for d in report.by_kind(DiagnosticKind.UNKNOWN_FILTER)] == [DiagnosticKind.UNKNOWN_FILTER]

    def test_block_syntax_from_data_is_literal(self, engine: TemplateEngine) -> None:
        data = {"items": ["{{#each items as |i|}}x{{/each}}"]}
        text, _ = engine.render("{{#each items as |item|}}{{item}}{{/each}}", data)
        assert text == "{{#each items as |i|}}x{{/each}}"

    def test_context_not_mutated(self, engine: TemplateEngine) -> None:
        data = {"xs": [{"a": 1}], "t": "v"}
        before = copy.deepcopy(data)
        engine.render("{{#each xs as |x|}}{{x.a}}{{/each}}{{t | json}}", data)
        assert data == before

    def test_idempotent_on_resolved_output(self, engine: TemplateEngine) -> None:
        data = {"title": "Louder", "steps": [{"name": "Open"}, {"name": "Boost"}]}
        template = '<h1>{{title}}</h1>[{{#each steps as |s|}}"{{s.name}}",{{/each}}]'
        first, _ = engine.render(template, data)
        second, _ = engine.render(first, data)
        assert first == '<h1>Louder</h1>["Open","Boost"]'
        assert second == first

    def test_literal_brace_before_block(self, engine: TemplateEngine) -> None:
        text, report = engine.render("{{{#each xs as |x|}}{{x}}{{/each}}", {"xs": ["a"]})
        assert text == "{a"
        assert not report.has_issues

    def test_literal_brace_before_closer(self, engine: TemplateEngine) -> None:
        text, _ = engine.render("{{#each xs as |x|}}{{x}}{{{/each}}", {"xs": ["a", "b"]})
        assert text == "a{b{"

    def test_quiet_variables_override(self) -> None:
        engine = TemplateEngine(quiet_variables=[], quiet_prefixes=[])
        _, report = engine.render("{{item}}", {})
        assert len(report.diagnostics) == 1


class TestReport:
    def test_warnings_are_deduplicated(self, engine: TemplateEngine) -> None:
        _, report = engine.render("{{a.b}} {{a.b}}", {})
        assert len(report.diagnostics) == 1
        assert report.warnings == ["Variable a.b not found in data"]

    def test_miss_inside_block_reported_once(self, engine: TemplateEngine) -> None:
        text, report = engine.render("{{#each steps as |step|}}{{step.nope}}{{/each}}", {"steps": [{}]})
        assert text == "{{step.nope}}"
        assert [d.path for d in report.by_kind(DiagnosticKind.UNRESOLVED_VARIABLE)] == ["step.nope"]
        assert len(report.diagnostics) == 1

    def test_to_dict(self, engine: TemplateEngine) -> None:
        _, report = engine.render(
            "{{#each nope as |n|}}{{/each}}{{x}}",
            {"x": 1},
            name="en",
            template_path=Path("build/template.html"),
        )
        data = report.to_dict()
        assert data["name"] == "en"
        assert data["template_path"] == str(Path("build/template.html"))
        assert data["variables_substituted"] == ["x"]
        assert data["diagnostics"] == [
            {"kind": "block-path-missing", "message": "nope is not an array or not found", "path": "nope"}
        ]

    def test_diagnostics_are_logged(self, engine: TemplateEngine, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level("WARNING", logger="landingkit.core.templating"):
            engine.render("{{gone}}", {})
        assert "Variable gone not found in data" in caplog.text


@pytest.mark.parametrize(
    "text, expected",
    [
        ("[a,b,]", "[a,b]"),
        ("[a, ]", "[a]"),
        ("[a,  \t]", "[a]"),
        ("{a,b,}", "{a,b,}"),
        ("a, b", "a, b"),
        (",\n\t]", "\n\t]"),
        (", \r\n  ]", " \r\n  ]"),
    ],
)
def test_strip_trailing_separators(text: str, expected: str) -> None:
    assert strip_trailing_separators(text) == expected


def test_pipeline_order(engine: TemplateEngine) -> None:
    assert [t.get_name() for t in engine.pipeline.transformers] == [
        "LoopExpander",
        "VariableTransformer",
        "TrailingSeparatorCleaner",
    ]
