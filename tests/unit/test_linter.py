"""
Tests for the linter service running the padded-blocks rule on JavaScript.
"""

import logging
from pathlib import Path

import pytest

from padcheck.models import Location, RuleSettings, Severity
from padcheck.rules import ALWAYS_MESSAGE, NEVER_MESSAGE
from padcheck.services.linter import Linter, UnsupportedFileError
from plugins.javascript import JavaScriptPlugin
from plugins.manager import PluginManager


@pytest.fixture(scope="module")
def plugin_manager():
    """Create a plugin manager with the JavaScript plugin."""
    manager = PluginManager()
    manager.register_plugin(JavaScriptPlugin())
    return manager


def make_linter(plugin_manager, option=None, severity=Severity.ERROR):
    return Linter(
        plugin_manager,
        {"padded-blocks": RuleSettings(severity=severity, option=option)},
    )


async def lint(plugin_manager, source, option=None):
    result = await make_linter(plugin_manager, option).lint_source(source, "test.js")
    return result.diagnostics


class TestScenarios:
    """End-to-end padding scenarios."""

    @pytest.mark.asyncio
    async def test_unpadded_block_under_always(self, plugin_manager):
        diagnostics = await lint(plugin_manager, "{\n    foo();\n}")

        assert [d.message for d in diagnostics] == [ALWAYS_MESSAGE, ALWAYS_MESSAGE]
        assert diagnostics[0].location == Location(line=1, column=0)
        assert diagnostics[1].location == Location(line=3, column=0)

    @pytest.mark.asyncio
    async def test_padded_block_under_always(self, plugin_manager):
        diagnostics = await lint(plugin_manager, "{\n\n    foo();\n\n}")

        assert diagnostics == []

    @pytest.mark.asyncio
    async def test_padded_block_under_never(self, plugin_manager):
        diagnostics = await lint(plugin_manager, "{\n\n    foo();\n\n}", option="never")

        assert [d.message for d in diagnostics] == [NEVER_MESSAGE, NEVER_MESSAGE]
        assert diagnostics[0].location == Location(line=1, column=0)
        assert diagnostics[1].location == Location(line=5, column=0)

    @pytest.mark.asyncio
    async def test_padded_switch_under_always(self, plugin_manager):
        diagnostics = await lint(plugin_manager, "switch (x) {\n\n    case 1: break;\n\n}")

        assert diagnostics == []

    @pytest.mark.asyncio
    async def test_comment_below_brace_blocks_top_padding(self, plugin_manager):
        diagnostics = await lint(plugin_manager, "{\n    // comment\n    foo();\n}")

        top = [d for d in diagnostics if d.location == Location(line=1, column=0)]
        assert len(top) == 1
        assert top[0].message == ALWAYS_MESSAGE


class TestBlocks:
    """Block kinds and comment handling on real JavaScript."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("option", ["always", "never"])
    @pytest.mark.parametrize("source", [
        "{}",
        "{\n}",
        "{\n\n}",
        "{\n    // only a comment\n}",
        "switch (x) {}",
        "switch (x) {\n}",
        "function f() {}",
    ])
    async def test_empty_nodes_never_report(self, plugin_manager, source, option):
        assert await lint(plugin_manager, source, option=option) == []

    @pytest.mark.asyncio
    async def test_function_body_is_checked(self, plugin_manager):
        diagnostics = await lint(plugin_manager, "function f() {\n    return 1;\n}\n")

        assert len(diagnostics) == 2
        assert diagnostics[0].node_type == "statement_block"
        assert diagnostics[0].location == Location(line=1, column=13)
        assert diagnostics[1].location == Location(line=3, column=0)

    @pytest.mark.asyncio
    async def test_unpadded_switch_reports_at_switch_keyword_and_closing_brace(self, plugin_manager):
        source = "switch (x) {\n    case 1:\n        break;\n}\n"

        diagnostics = await lint(plugin_manager, source)

        assert len(diagnostics) == 2
        assert all(d.node_type == "switch_statement" for d in diagnostics)
        assert diagnostics[0].location == Location(line=1, column=0)
        assert diagnostics[1].location == Location(line=4, column=0)

    @pytest.mark.asyncio
    async def test_switch_with_comment_before_first_case(self, plugin_manager):
        source = "switch (x) { // note\n\n    case 1:\n        break;\n\n}\n"

        assert await lint(plugin_manager, source) == []

    @pytest.mark.asyncio
    async def test_same_line_comments_are_transparent(self, plugin_manager):
        source = "{ // opening\n\n    foo();\n\n/* closing */ }"

        assert await lint(plugin_manager, source) == []

    @pytest.mark.asyncio
    async def test_trailing_comment_line_blocks_bottom_padding(self, plugin_manager):
        source = "{\n\n    foo();\n    // trailing\n}"

        diagnostics = await lint(plugin_manager, source)

        assert len(diagnostics) == 1
        assert diagnostics[0].location == Location(line=5, column=0)

    @pytest.mark.asyncio
    async def test_nested_blocks_are_reported_outer_first(self, plugin_manager):
        source = "if (a) {\n    if (b) {\n        c();\n    }\n}\n"

        diagnostics = await lint(plugin_manager, source)

        assert [(d.location.line, d.location.column) for d in diagnostics] == [
            (1, 7), (5, 0), (2, 11), (4, 4),
        ]

    @pytest.mark.asyncio
    async def test_columns_count_characters_not_bytes(self, plugin_manager):
        source = "/* é */ {\n    foo();\n}"

        diagnostics = await lint(plugin_manager, source)

        assert diagnostics[0].location == Location(line=1, column=8)

    @pytest.mark.asyncio
    async def test_never_accepts_unpadded_code(self, plugin_manager):
        source = "function f(a) {\n    if (a) {\n        return 1;\n    }\n    return 2;\n}\n"

        assert await lint(plugin_manager, source, option="never") == []

    @pytest.mark.asyncio
    @pytest.mark.parametrize("separator", ["\r", "\u2028", "\u2029", "\r\n"])
    async def test_padding_with_any_line_terminator(self, plugin_manager, separator):
        source = separator.join(["{", "", "    foo();", "", "}"])

        assert await lint(plugin_manager, source) == []

        diagnostics = await lint(plugin_manager, source, option="never")
        assert [d.location for d in diagnostics] == [
            Location(line=1, column=0),
            Location(line=5, column=0),
        ]


class TestLinterConfiguration:
    """Rule settings and file handling."""

    @pytest.mark.asyncio
    async def test_rule_can_be_turned_off(self, plugin_manager):
        linter = make_linter(plugin_manager, severity=Severity.OFF)

        result = await linter.lint_source("{\n    foo();\n}", "test.js")

        assert result.diagnostics == []

    @pytest.mark.asyncio
    async def test_warning_severity_is_counted(self, plugin_manager):
        linter = make_linter(plugin_manager, severity=Severity.WARNING)

        result = await linter.lint_source("{\n    foo();\n}", "test.js")

        assert result.warning_count == 2
        assert result.error_count == 0
        assert result.language == "javascript"

    @pytest.mark.asyncio
    async def test_defaults_apply_without_settings(self, plugin_manager):
        result = await Linter(plugin_manager).lint_source("{\n    foo();\n}", "test.js")

        assert result.error_count == 2

    @pytest.mark.asyncio
    async def test_unsupported_extension_raises(self, plugin_manager):
        with pytest.raises(UnsupportedFileError, match=r"supported: .*\.js"):
            await make_linter(plugin_manager).lint_source("x = 1", "test.py")

    @pytest.mark.asyncio
    async def test_rule_logs_carry_rule_name(self, plugin_manager, caplog):
        linter = make_linter(plugin_manager, severity=Severity.OFF)

        with caplog.at_level(logging.DEBUG, logger="padcheck.services.linter"):
            await linter.lint_source("{\n    foo();\n}", "test.js")

        rule_records = [r for r in caplog.records if getattr(r, "rule", None) == "padded-blocks"]
        assert rule_records
        assert rule_records[0].file_path == "test.js"
        assert "is off" in rule_records[0].getMessage()

    @pytest.mark.asyncio
    async def test_lint_file_labels_diagnostics_with_path(self, plugin_manager, tmp_path: Path):
        path = tmp_path / "sample.js"
        path.write_text("if (ok) {\n    run();\n}\n", encoding="utf-8")

        result = await make_linter(plugin_manager).lint_file(path)

        assert result.file_path == str(path)
        assert all(d.file_path == str(path) for d in result.diagnostics)
        assert result.error_count == 2
