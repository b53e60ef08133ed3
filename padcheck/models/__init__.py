"""Data models for the padcheck block padding linter."""

from .ast_node import ASTNode
from .block import BlockLikeNode, StatementBlock, SwitchConstruct
from .diagnostic import Diagnostic, Location, Severity
from .lint import LanguagesResponse, LintRequest, LintResponse, LintResult
from .rule import Policy, RuleSettings
from .source import ParsedSource
from .span import SourceSpan
from .token import Token, TokenKind

__all__ = [
    # Source models
    "SourceSpan",
    "Token",
    "TokenKind",
    # AST models
    "ASTNode",
    "ParsedSource",
    "BlockLikeNode",
    "StatementBlock",
    "SwitchConstruct",
    # Rule models
    "Policy",
    "RuleSettings",
    # Diagnostic models
    "Severity",
    "Location",
    "Diagnostic",
    # Lint models
    "LintResult",
    "LanguagesResponse",
    "LintRequest",
    "LintResponse",
]
