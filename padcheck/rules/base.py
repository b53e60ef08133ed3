"""
Base interface for lint rules.

This module defines the abstract base class every rule implements, the
context a rule reports through, and the collector that receives the
reported diagnostics.
"""

from abc import ABC, abstractmethod
from typing import Callable, Dict, List, Optional

from padcheck.analyzers.navigator import SourceTokenNavigator
from padcheck.models import BlockLikeNode, Diagnostic, Location, Severity

Visitor = Callable[[BlockLikeNode], None]


class DiagnosticCollector:
    """Append-only sink for the diagnostics of one file."""

    def __init__(self):
        """Initialize an empty collector."""
        self._diagnostics: List[Diagnostic] = []

    def report(self, diagnostic: Diagnostic) -> None:
        """
        Record a diagnostic.

        Args:
            diagnostic: Diagnostic to append
        """
        self._diagnostics.append(diagnostic)

    @property
    def diagnostics(self) -> List[Diagnostic]:
        """Return the recorded diagnostics in report order."""
        return list(self._diagnostics)

    def __len__(self) -> int:
        return len(self._diagnostics)


class RuleContext:
    """Everything a rule needs while checking one file."""

    def __init__(
        self,
        navigator: SourceTokenNavigator,
        collector: DiagnosticCollector,
        severity: Severity = Severity.ERROR,
        file_path: Optional[str] = None,
    ):
        """
        Initialize the rule context.

        Args:
            navigator: Navigator over the file's token stream
            collector: Sink receiving reported diagnostics
            severity: Severity attached to every diagnostic
            file_path: Path of the file being checked
        """
        self.navigator = navigator
        self.collector = collector
        self.severity = severity
        self.file_path = file_path

    def report(
        self,
        rule_name: str,
        node: BlockLikeNode,
        message: str,
        location: Optional[Location] = None,
    ) -> None:
        """
        Report a violation on a node.

        Args:
            rule_name: Name of the reporting rule
            node: Node the violation belongs to
            message: Diagnostic message
            location: Where to point; defaults to the start of the node
        """
        if location is None:
            location = Location(line=node.start_line, column=node.start_column)

        self.collector.report(
            Diagnostic(
                rule_name=rule_name,
                message=message,
                severity=self.severity,
                location=location,
                node_type=node.node_type,
                node_span=node.span(),
                file_path=self.file_path,
            )
        )


class Rule(ABC):
    """
    Base interface for lint rules.

    Subclasses set ``name`` to their unique identifier and ``schema`` to the
    option values they accept (an empty schema accepts no option).
    """

    name: str = ""
    description: str = ""
    schema: List[str] = []

    def __init__(self, context: RuleContext, option: Optional[str] = None):
        """
        Initialize the rule.

        Args:
            context: Context of the file being checked
            option: Configured option value, validated against ``schema``
        """
        self.context = context
        self.option = option

    @abstractmethod
    def visitors(self) -> Dict[str, Visitor]:
        """
        Return the callbacks of this rule keyed by block node kind.

        The traversal driver invokes the callback registered for a node's
        ``kind`` once per node it encounters.

        Returns:
            Mapping of node kind (e.g. 'statement_block') to callback
        """
        pass
