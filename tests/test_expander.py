"""Tests for template parsing and expansion."""

from __future__ import annotations

import pytest

from mdhelp.expander import TemplateError, TemplateExpander, parse_template


class TestScalars:
    @pytest.mark.parametrize(
        "template, expected",
        [
            ("${x}", "D"),
            ("before ${x} after", "before D after"),
            ("`${x}`|${x}|", "`D`|D|"),
            ("line\n${x}\n", "line\nD\n"),
        ],
    )
    def test_unbound_name_resolves_to_default(self, template: str, expected: str) -> None:
        expander = TemplateExpander().set_default("D")
        assert expander.expand(template) == expected

    def test_default_is_empty_string(self) -> None:
        assert TemplateExpander().expand("[${missing}]") == "[]"

    def test_last_write_wins(self) -> None:
        expander = TemplateExpander()
        expander.set("name", "first").set("name", "second")
        assert expander.expand("${name}") == "second"

    def test_values_are_inserted_verbatim(self) -> None:
        expander = TemplateExpander().set("v", "**bold** `code` ${not-a-placeholder}")
        assert expander.expand("${v}") == "**bold** `code` ${not-a-placeholder}"

    def test_non_string_values_are_converted(self) -> None:
        expander = TemplateExpander().set("n", 3)
        assert expander.expand("n=${n}") == "n=3"

    def test_set_md_folds_onto_one_line(self) -> None:
        expander = TemplateExpander().set_md("help", "  first line\n    second *line*\n")
        assert expander.expand("|${help}|") == "|first line second *line*|"

    def test_text_without_placeholders_is_untouched(self) -> None:
        template = "# Title\n\nCost: $5 {braces} stay }\n"
        assert TemplateExpander().expand(template) == template


class TestBlocks:
    def test_rows_are_emitted_in_binding_order(self) -> None:
        expander = TemplateExpander()
        for value in ("a", "b", "c"):
            expander.sub("rows").set("v", value)
        assert expander.expand("${rows\n- ${v}\n}\nend") == "- a\n- b\n- c\nend"

    def test_row_bindings_shadow_top_level_for_that_row_only(self) -> None:
        expander = TemplateExpander().set("v", "top")
        expander.sub("rows").set("v", "row")
        expander.sub("rows")
        assert expander.expand("${rows\n${v}\n}\n${v}") == "row\ntop\ntop"

    def test_row_falls_back_to_default(self) -> None:
        expander = TemplateExpander().set_default("?")
        expander.sub("rows").set("a", "1")
        assert expander.expand("${rows\n${a}${b}\n}\n") == "1?\n"

    def test_block_without_rows_emits_nothing(self) -> None:
        expander = TemplateExpander()
        assert expander.expand("head\n${rows\n- ${v}\n}\ntail") == "head\ntail"

    def test_begin_block_is_sub(self) -> None:
        expander = TemplateExpander()
        expander.begin_block("rows").set("v", "x")
        assert [row.get("v") for row in expander.rows("rows")] == ["x"]

    def test_multiline_row_template(self) -> None:
        expander = TemplateExpander()
        expander.sub("examples").set("n", 1).set("cmd", "run")
        expander.sub("examples").set("n", 2).set("cmd", "stop")
        template = "${examples\n**${n})** `${cmd}`\n\n}\n"
        assert expander.expand(template) == "**1)** `run`\n\n**2)** `stop`\n\n"

    def test_closing_marker_may_be_indented(self) -> None:
        expander = TemplateExpander()
        expander.sub("rows").set("v", "x")
        assert expander.expand("${rows\n${v}\n  }\n") == "x\n"

    @pytest.mark.parametrize("blanks", [" ", "  \t", "\t"])
    def test_blanks_after_block_name(self, blanks: str) -> None:
        expander = TemplateExpander()
        expander.sub("rows").set("x", "1")
        expander.sub("rows").set("x", "2")
        assert expander.expand(f"${{rows{blanks}\n[${{x}}]\n}}\n") == "[1]\n[2]\n"
        assert expander.expand(f"${{rows{blanks}\r\n[${{x}}]\r\n}}\r\n") == "[1]\r\n[2]\r\n"

    def test_scalar_reference_to_block_name_uses_default(self) -> None:
        expander = TemplateExpander().set_default("-")
        expander.sub("rows").set("v", "x")
        assert expander.expand("${rows}") == "-"

    def test_crlf_templates(self) -> None:
        expander = TemplateExpander()
        expander.sub("rows").set("v", "x")
        assert expander.expand("${rows\r\n${v}\r\n}\r\n") == "x\r\n"


def test_expansion_is_repeatable() -> None:
    expander = TemplateExpander().set("name", "area")
    expander.sub("option-lines").set("long", "--height")
    expander.sub("option-lines").set("long", "--width")
    template = "# ${name}\n${option-lines\n|${long}|${value}|\n}\n"
    first = expander.expand(template)
    assert expander.expand(template) == first
    assert first == "# area\n|--height||\n|--width||\n"


class TestMalformedTemplates:
    @pytest.mark.parametrize(
        "template, reason",
        [
            ("${rows\n- ${v}\n", "never closed"),
            ("${outer\n${inner\nx\n}\n}\n", "cannot be nested"),
            ("text ${} more", "missing or invalid placeholder name"),
            ("${na me}", "unexpected ' '"),
            ("trailing ${name", "unterminated placeholder"),
            ("${*}", "missing or invalid placeholder name"),
        ],
    )
    def test_raises_template_error(self, template: str, reason: str) -> None:
        with pytest.raises(TemplateError, match=reason):
            TemplateExpander().expand(template)

    def test_error_reports_line_and_column(self) -> None:
        with pytest.raises(TemplateError) as excinfo:
            parse_template("ok\n  ${broken")
        assert excinfo.value.line == 2
        assert excinfo.value.column == 3
        assert "line 2, column 3" in str(excinfo.value)

    def test_template_error_is_a_value_error(self) -> None:
        assert issubclass(TemplateError, ValueError)
