"""
Linter service.

This module provides the Linter class that parses a file with the matching
language plugin, walks its syntax tree and dispatches every block-like node
to the callbacks of the enabled rules.
"""

from pathlib import Path
from typing import Dict, List, Optional

from padcheck.analyzers.navigator import SourceTokenNavigator
from padcheck.models import ASTNode, LintResult, ParsedSource, RuleSettings
from padcheck.rules import RULES, DiagnosticCollector, Rule, RuleContext
from padcheck.rules.base import Visitor
from padcheck.utils.logging import get_logger, log_lint_result
from plugins.base import LanguagePlugin
from plugins.manager import PluginManager

logger = get_logger(__name__)


class UnsupportedFileError(Exception):
    """Raised when no language plugin handles a file."""
    pass


class Linter:
    """Runs the configured rules over source files."""

    def __init__(
        self,
        plugin_manager: PluginManager,
        rule_settings: Optional[Dict[str, RuleSettings]] = None,
    ):
        """
        Initialize the linter.

        Args:
            plugin_manager: Manager used to select a plugin per file
            rule_settings: Settings per rule name. Rules missing from the
                mapping run with their defaults.
        """
        self.plugin_manager = plugin_manager
        self.rule_settings = rule_settings or {}

    async def lint_source(self, content: str, file_path: str) -> LintResult:
        """
        Lint source text.

        Args:
            content: Source text
            file_path: Path used to pick the language plugin and to label diagnostics

        Returns:
            LintResult with the diagnostics in traversal order

        Raises:
            UnsupportedFileError: If no plugin supports the file extension
            ParseError: If the plugin cannot parse the file
        """
        plugin = self.plugin_manager.get_plugin_for_file(file_path)
        if plugin is None:
            supported = ", ".join(self.plugin_manager.list_supported_extensions())
            raise UnsupportedFileError(
                f"No language plugin for file: {file_path} (supported: {supported})"
            )

        file_logger = logger.with_context(file_path=file_path, language=plugin.language_name)
        parsed = await plugin.parse_file(file_path, content)

        collector = DiagnosticCollector()
        navigator = SourceTokenNavigator(parsed.tokens)
        visitors = self._build_visitors(navigator, collector, file_path)
        file_logger.debug(f"Running {len(visitors)} visitor kind(s)")

        self._walk(parsed, plugin, visitors)

        result = LintResult(
            file_path=file_path,
            language=plugin.language_name,
            diagnostics=collector.diagnostics,
        )
        log_lint_result(
            file_logger,
            file_path=file_path,
            language=plugin.language_name,
            error_count=result.error_count,
            warning_count=result.warning_count,
        )
        return result

    async def lint_file(self, path: Path) -> LintResult:
        """
        Read and lint a file.

        Args:
            path: Path of the file

        Returns:
            LintResult for the file
        """
        content = path.read_text(encoding="utf-8")
        return await self.lint_source(content, str(path))

    def _build_visitors(
        self,
        navigator: SourceTokenNavigator,
        collector: DiagnosticCollector,
        file_path: str,
    ) -> Dict[str, List[Visitor]]:
        """Instantiate every enabled rule and group its callbacks by node kind."""
        visitors: Dict[str, List[Visitor]] = {}

        for rule_name, rule_cls in RULES.items():
            settings = self.rule_settings.get(rule_name, RuleSettings())
            rule_logger = logger.with_context(file_path=file_path, rule=rule_name)
            if not settings.enabled:
                rule_logger.debug(f"Rule '{rule_name}' is off")
                continue

            rule_logger.debug(
                f"Rule '{rule_name}' enabled with severity {settings.severity.value}"
                f" and option {settings.option!r}"
            )

            rule_context = RuleContext(
                navigator=navigator,
                collector=collector,
                severity=settings.severity,
                file_path=file_path,
            )
            rule: Rule = rule_cls(rule_context, settings.option)

            for kind, visitor in rule.visitors().items():
                visitors.setdefault(kind, []).append(visitor)

        return visitors

    def _walk(
        self,
        parsed: ParsedSource,
        plugin: LanguagePlugin,
        visitors: Dict[str, List[Visitor]],
    ) -> None:
        """Visit the tree in pre-order, calling the visitors of each block-like node."""
        stack: List[ASTNode] = [parsed.root]

        while stack:
            node = stack.pop()

            block = plugin.block_like(node)
            if block is not None:
                for visitor in visitors.get(block.kind, []):
                    visitor(block)

            # Push in reverse so children are visited in source order
            stack.extend(reversed(node.children))
