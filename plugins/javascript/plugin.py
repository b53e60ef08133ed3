"""
JavaScript Language Plugin.

This plugin parses JavaScript with tree-sitter-javascript and exposes the
token stream (comments included) and the block-like nodes the padding rules
check.
"""

import logging
import re
from bisect import bisect_right
from pathlib import Path
from typing import List, Optional, Tuple

import tree_sitter
import tree_sitter_javascript
import yaml

from plugins.base import LanguagePlugin, ParseError
from padcheck.models import (
    ASTNode,
    BlockLikeNode,
    ParsedSource,
    StatementBlock,
    SwitchConstruct,
    Token,
    TokenKind,
)

logger = logging.getLogger(__name__)

COMMENT_NODE_TYPES = {"comment", "html_comment"}
CASE_NODE_TYPES = {"switch_case", "switch_default"}


# JavaScript line terminators; tree-sitter rows only break at LF
LINE_TERMINATOR = re.compile(r"\r\n|[\r\n\u2028\u2029]")


class _LineIndex:
    """Maps byte offsets of the parsed source to 1-based lines and character columns."""

    def __init__(self, content: str, source: bytes):
        self._source = source
        self._line_starts: List[int] = [0]

        char_offset = byte_offset = 0
        for match in LINE_TERMINATOR.finditer(content):
            byte_offset += len(content[char_offset:match.end()].encode("utf-8"))
            char_offset = match.end()
            self._line_starts.append(byte_offset)

    def position(self, byte_offset: int) -> Tuple[int, int]:
        row = bisect_right(self._line_starts, byte_offset) - 1
        line_start = self._line_starts[row]
        column = len(self._source[line_start:byte_offset].decode("utf-8", errors="replace"))
        return row + 1, column


class JavaScriptPlugin(LanguagePlugin):
    """JavaScript language plugin using tree-sitter."""

    def __init__(self, config_path: Optional[Path] = None):
        """
        Initialize the JavaScript plugin.

        Args:
            config_path: Path to config.yaml file. If None, uses default location.
        """
        # Load configuration
        if config_path is None:
            config_path = Path(__file__).parent / "config.yaml"

        with open(config_path, 'r') as f:
            self._config = yaml.safe_load(f)

        # Initialize tree-sitter parser
        javascript_language = tree_sitter.Language(tree_sitter_javascript.language())
        self._parser = tree_sitter.Parser(javascript_language)

        logger.info("JavaScript plugin initialized successfully")

    @property
    def language_name(self) -> str:
        """Return the language name."""
        return "javascript"

    @property
    def file_extensions(self) -> List[str]:
        """Return supported file extensions."""
        return self._config.get('file_extensions', ['.js'])

    async def parse_file(self, file_path: str, content: str) -> ParsedSource:
        """
        Parse JavaScript file using tree-sitter-javascript.

        Args:
            file_path: Path to the file being parsed
            content: File content as string

        Returns:
            ParsedSource with the token stream and the root AST node

        Raises:
            ParseError: If the file cannot be parsed
        """
        source = content.encode("utf-8")
        tree = self._parser.parse(source)

        if tree.root_node is None:
            raise ParseError(f"Failed to parse JavaScript file: {file_path}")

        if tree.root_node.has_error:
            logger.warning(f"JavaScript file has syntax errors: {file_path}")

        lines = _LineIndex(content, source)
        tokens: List[Token] = []
        self._collect_tokens(tree.root_node, lines, tokens)
        tokens.sort(key=lambda token: token.start)

        root = self._convert_to_ast_node(tree.root_node, lines)

        logger.debug(f"Parsed JavaScript file {file_path}: {len(tokens)} tokens")
        return ParsedSource(
            file_path=file_path,
            language=self.language_name,
            tokens=tokens,
            root=root,
        )

    def block_like(self, node: ASTNode) -> Optional[BlockLikeNode]:
        """
        Classify statement blocks and switch statements.

        Args:
            node: Node of a tree returned by parse_file

        Returns:
            StatementBlock, SwitchConstruct, or None for any other node
        """
        span = node.span().model_dump()

        if node.node_type == "statement_block":
            body = [
                child for child in node.children
                if child.is_named and child.node_type not in COMMENT_NODE_TYPES
            ]
            return StatementBlock(node_type=node.node_type, body=body, **span)

        if node.node_type == "switch_statement":
            cases: List[ASTNode] = []
            for child in node.children:
                if child.node_type == "switch_body":
                    cases = [c for c in child.children if c.node_type in CASE_NODE_TYPES]
            return SwitchConstruct(node_type=node.node_type, cases=cases, **span)

        return None

    def _collect_tokens(
        self,
        ts_node: tree_sitter.Node,
        lines: _LineIndex,
        tokens: List[Token]
    ) -> None:
        """
        Append the leaf tokens and comments below a node in source order.

        Args:
            ts_node: tree-sitter Node
            lines: Line index of the parsed source
            tokens: Output list
        """
        is_comment = ts_node.type in COMMENT_NODE_TYPES
        if is_comment or ts_node.child_count == 0:
            # Missing nodes inserted by error recovery have no source text
            if ts_node.end_byte > ts_node.start_byte:
                tokens.append(self._make_token(ts_node, lines, is_comment))
            return

        for child in ts_node.children:
            self._collect_tokens(child, lines, tokens)

    def _make_token(
        self,
        ts_node: tree_sitter.Node,
        lines: _LineIndex,
        is_comment: bool
    ) -> Token:
        value = ts_node.text.decode("utf-8", errors="replace")

        if not is_comment:
            kind = TokenKind.CODE
        elif value.startswith("/*"):
            kind = TokenKind.BLOCK_COMMENT
        else:
            kind = TokenKind.LINE_COMMENT

        start_line, start_column = lines.position(ts_node.start_byte)
        end_line, end_column = lines.position(ts_node.end_byte)
        return Token(
            kind=kind,
            value=value,
            start_line=start_line,
            start_column=start_column,
            end_line=end_line,
            end_column=end_column,
        )

    def _convert_to_ast_node(
        self,
        ts_node: tree_sitter.Node,
        lines: _LineIndex
    ) -> ASTNode:
        """
        Convert tree-sitter Node to ASTNode model.

        Args:
            ts_node: tree-sitter Node
            lines: Line index of the parsed source

        Returns:
            ASTNode model instance
        """
        # Recursively convert children
        children = [
            self._convert_to_ast_node(child, lines)
            for child in ts_node.children
            if not child.is_missing
        ]

        start_line, start_column = lines.position(ts_node.start_byte)
        end_line, end_column = lines.position(ts_node.end_byte)
        return ASTNode(
            node_type=ts_node.type,
            is_named=ts_node.is_named,
            start_line=start_line,
            end_line=end_line,
            start_column=start_column,
            end_column=end_column,
            children=children,
        )
