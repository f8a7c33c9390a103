"""Tests for rule generation and stylesheet assembly."""

import logging

import pytest

from system_css import generate_css, generate_defaults_for, generate_stylesheet
from system_css.errors import UnknownStyleFunctionError
from system_css.generator import build_declarations, generate_rules, resolve_scale
from system_css.model.breakpoint import build_breakpoints
from system_css.model.diagnostic import Severity
from system_css.model.theme import normalize_theme
from system_css.styles import STYLE_FUNCTIONS, StylePropDef
from system_css.stylesheet import MediaBlock, Rule


SPACE_ONLY = (StylePropDef(name="space"),)


def _selectors(rules):
    return [r.selector for r in rules]


def _values(stylesheet):
    return [d.value for r in stylesheet.all_rules() for d in r.declarations]


# ---------------------------------------------------------------------------
# Scale resolution
# ---------------------------------------------------------------------------


class TestResolveScale:
    def _meta(self, name, prop):
        return STYLE_FUNCTIONS[name].meta(prop)

    def test_override_wins(self):
        theme = normalize_theme({"space": [0, 4]})
        prop_def = StylePropDef(name="space", scale=[1, 2, 3])
        scale = resolve_scale(prop_def, self._meta("space", "m"), theme)
        assert len(scale) == 3

    def test_theme_scale(self):
        theme = normalize_theme({"space": [0, 4]})
        scale = resolve_scale(StylePropDef(name="space"), self._meta("space", "m"), theme)
        assert len(scale) == 2

    def test_css_default(self):
        theme = normalize_theme({})
        scale = resolve_scale(StylePropDef(name="fontSize"), self._meta("fontSize", "fontSize"), theme)
        assert len(scale) == 9

    def test_empty_candidates_are_skipped(self):
        theme = normalize_theme({"fontSizes": []})
        prop_def = StylePropDef(name="fontSize", scale=[])
        scale = resolve_scale(prop_def, self._meta("fontSize", "fontSize"), theme)
        assert len(scale) == 9

    def test_nothing_found(self):
        theme = normalize_theme({})
        scale = resolve_scale(StylePropDef(name="color"), self._meta("color", "color"), theme)
        assert len(scale) == 0


# ---------------------------------------------------------------------------
# Rule generation
# ---------------------------------------------------------------------------


class TestBuildDeclarations:
    def test_px_and_hyphenation(self):
        decls = build_declarations({"marginLeft": 4, "marginRight": 0})
        assert [(d.property, d.value, d.important) for d in decls] == [
            ("margin-left", "4px", True),
            ("margin-right", "0", True),
        ]

    def test_none_values_are_skipped(self):
        assert build_declarations({"color": None}) == ()


class TestGenerateRules:
    def test_responsive_rules_go_into_blocks(self, small_theme):
        theme = normalize_theme(small_theme)
        breakpoints = build_breakpoints(theme)
        prop_def = StylePropDef(name="fontSize", prefix="f", scale=[12, 16])
        base = generate_rules(prop_def, STYLE_FUNCTIONS["fontSize"], theme, breakpoints)
        assert _selectors(base) == [".f-0", ".f-1"]
        assert _selectors(breakpoints[1].block.rules) == [".f-sm-0", ".f-sm-1"]

    def test_non_responsive_only_base(self, small_theme):
        theme = normalize_theme({**small_theme, "colors": ["red"]})
        breakpoints = build_breakpoints(theme)
        prop_def = StylePropDef(name="color", responsive=False)
        base = generate_rules(prop_def, STYLE_FUNCTIONS["color"], theme, breakpoints)
        assert _selectors(base) == [".color-0", ".bg-0"]
        assert breakpoints[1].block.rules == []

    def test_prefix_defaults_to_prop(self, small_theme):
        theme = normalize_theme(small_theme)
        base = generate_rules(StylePropDef(name="space"), STYLE_FUNCTIONS["space"], theme, [None])
        assert _selectors(base)[:4] == [".m-0", ".m-1", ".m-2", ".mt-0"]

    def test_empty_scale(self):
        theme = normalize_theme({})
        base = generate_rules(StylePropDef(name="color"), STYLE_FUNCTIONS["color"], theme, [None])
        assert base == []


# ---------------------------------------------------------------------------
# Assembly
# ---------------------------------------------------------------------------


class TestGenerateStylesheet:
    def test_space_example(self, small_theme):
        sheet = generate_stylesheet(small_theme, SPACE_ONLY).stylesheet
        metas = len(STYLE_FUNCTIONS["space"].metas)
        assert len(sheet.rules) == 3 * metas
        assert len(sheet.media_blocks) == 1
        block = sheet.media_blocks[0]
        assert block.params == "screen and (min-width: 40em)"
        assert len(block.rules) == 3 * metas
        assert _selectors(sheet.rules)[:3] == [".m-0", ".m-1", ".m-2"]
        assert _selectors(block.rules)[:3] == [".m-sm-0", ".m-sm-1", ".m-sm-2"]

    def test_px_values(self, small_theme):
        sheet = generate_stylesheet(small_theme, SPACE_ONLY).stylesheet
        m_rules = [r for r in sheet.rules if r.selector.startswith(".m-")]
        assert [r.declarations[0].value for r in m_rules] == ["0", "4px", "8px"]

    def test_numeric_nonzero_values_end_in_px(self):
        sheet = generate_stylesheet({}).stylesheet
        for value in _values(sheet):
            assert value == "0" or value.endswith("px")

    def test_base_rules_before_media_blocks(self, color_theme):
        sheet = generate_stylesheet(color_theme).stylesheet
        kinds = [isinstance(n, MediaBlock) for n in sheet.nodes]
        first_block = kinds.index(True)
        assert all(kinds[first_block:])
        assert all(isinstance(n, Rule) for n in sheet.nodes[:first_block])

    def test_block_order_follows_theme(self):
        theme = {"breakpoints": ["64em", "40em"], "breakpointNames": ["lg", "sm"]}
        sheet = generate_stylesheet(theme).stylesheet
        assert [b.params for b in sheet.media_blocks] == [
            "screen and (min-width: 64em)",
            "screen and (min-width: 40em)",
        ]

    def test_registry_order_within_blocks(self, small_theme):
        registry = (StylePropDef(name="fontSize", prefix="f", scale=[12]), StylePropDef(name="space"))
        block = generate_stylesheet(small_theme, registry).stylesheet.media_blocks[0]
        assert _selectors(block.rules)[:2] == [".f-sm-0", ".m-sm-0"]

    def test_nested_colors(self, color_theme):
        sheet = generate_stylesheet(color_theme).stylesheet
        selectors = _selectors(sheet.rules)
        assert ".bg-blue-500" in selectors
        assert ".color-blue-100" in selectors
        assert ".bg-blue" not in selectors
        rule = next(r for r in sheet.rules if r.selector == ".bg-blue-500")
        assert [(d.property, d.value) for d in rule.declarations] == [("background-color", "#07c")]

    def test_colors_are_not_responsive(self, color_theme):
        sheet = generate_stylesheet(color_theme).stylesheet
        for block in sheet.media_blocks:
            assert not any(r.selector.startswith((".color-", ".bg-")) for r in block.rules)

    def test_default_theme_counts(self):
        sheet = generate_stylesheet(None).stylesheet
        space_rules = len(STYLE_FUNCTIONS["space"].metas) * 9
        assert len(sheet.rules) == space_rules + 9
        assert len(sheet.media_blocks) == 3
        for block in sheet.media_blocks:
            assert len(block.rules) == space_rules + 9

    def test_fresh_blocks_between_calls(self, small_theme):
        first = generate_stylesheet(small_theme, SPACE_ONLY).stylesheet
        second = generate_stylesheet(small_theme, SPACE_ONLY).stylesheet
        assert first.media_blocks[0] is not second.media_blocks[0]
        assert len(first.media_blocks[0].rules) == len(second.media_blocks[0].rules)


class TestEmptyScaleWarning:
    def test_warning_and_other_props_continue(self, caplog):
        with caplog.at_level(logging.WARNING, logger="system_css"):
            result = generate_stylesheet({})
        assert "no rules for prop: color" in caplog.text
        assert [d.prop for d in result.warnings] == ["color"]
        assert result.warnings[0].severity is Severity.WARNING
        selectors = _selectors(result.stylesheet.all_rules())
        assert not any(s.startswith((".color-", ".bg-")) for s in selectors)
        assert ".m-0" in selectors
        assert ".f-0" in selectors

    def test_no_warning_when_colors_present(self, color_theme):
        assert generate_stylesheet(color_theme).warnings == []


class TestDiagnostics:
    def test_info_per_generated_prop(self, color_theme):
        result = generate_stylesheet(color_theme)
        infos = [d for d in result.diagnostics if d.severity is Severity.INFO]
        assert [d.prop for d in infos] == ["space", "fontSize", "color"]
        assert infos[1].message == "generated 9 base rules"
        assert not infos[1].is_warning

    def test_warning_and_info_in_registry_order(self):
        result = generate_stylesheet({})
        assert [(d.severity, d.prop) for d in result.diagnostics] == [
            (Severity.INFO, "space"),
            (Severity.INFO, "fontSize"),
            (Severity.WARNING, "color"),
        ]

    def test_str(self):
        warning = generate_stylesheet({}).warnings[0]
        assert str(warning) == "WARNING [prop=color]: no rules generated; the resolved scale is empty"


class TestUnknownStyleFunction:
    def test_fails_before_generating(self):
        registry = (StylePropDef(name="space"), StylePropDef(name="missing"))
        with pytest.raises(UnknownStyleFunctionError, match="missing"):
            generate_stylesheet({}, registry)


# ---------------------------------------------------------------------------
# Text output
# ---------------------------------------------------------------------------


class TestGenerateCss:
    def test_exact_output(self, small_theme):
        registry = (StylePropDef(name="fontSize", prefix="f", scale=[0, 12]),)
        assert generate_css(small_theme, registry=registry) == (
            ".f-0 {\n"
            "  font-size: 0 !important;\n"
            "}\n"
            ".f-1 {\n"
            "  font-size: 12px !important;\n"
            "}\n"
            "@media screen and (min-width: 40em) {\n"
            "  .f-sm-0 {\n"
            "    font-size: 0 !important;\n"
            "  }\n"
            "  .f-sm-1 {\n"
            "    font-size: 12px !important;\n"
            "  }\n"
            "}\n"
        )

    def test_deterministic(self, color_theme):
        theme = generate_defaults_for(color_theme)
        assert generate_css(theme) == generate_css(theme)

    def test_options_do_not_change_output(self, small_theme):
        assert generate_css(small_theme, {"minify": "true"}) == generate_css(small_theme)

    def test_options_reach_the_result(self, small_theme):
        result = generate_stylesheet(small_theme, options={"minify": "true"})
        assert result.options == {"minify": "true"}
        assert generate_stylesheet(small_theme).options == {}

    def test_media_query_text(self, small_theme):
        css = generate_css(small_theme)
        assert css.count("@media screen and (min-width: 40em) {") == 1
        assert ".f-sm-3 {" in css


# ---------------------------------------------------------------------------
# Keys containing dots
# ---------------------------------------------------------------------------


class TestDottedKeys:
    def test_nested_key_with_dot_keeps_its_value(self):
        theme = {"space": {"half": {"0.5": 2}}, "breakpoints": []}
        sheet = generate_stylesheet(theme, SPACE_ONLY).stylesheet
        rule = next(r for r in sheet.rules if r.selector == ".m-half-0-5")
        assert [(d.property, d.value) for d in rule.declarations] == [("margin", "2px")]

    def test_top_level_key_with_dot(self):
        theme = {"space": {"0.5": 2, "1": 4}, "breakpoints": []}
        sheet = generate_stylesheet(theme, SPACE_ONLY).stylesheet
        m_rules = [r for r in sheet.rules if r.selector.startswith(".m-")]
        assert [(r.selector, r.declarations[0].value) for r in m_rules] == [
            (".m-0-5", "2px"),
            (".m-1", "4px"),
        ]


class TestBreakpointNames:
    def test_null_name_falls_back_to_default(self):
        theme = {"space": [0], "breakpoints": ["40em", "52em"], "breakpointNames": ["sm", None]}
        block = generate_stylesheet(theme, SPACE_ONLY).stylesheet.media_blocks[1]
        assert _selectors(block.rules)[0] == ".m-md-0"
