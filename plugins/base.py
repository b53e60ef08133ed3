"""
Base interface for language-specific parsing plugins.

This module defines the abstract base class that all language plugins must implement
to turn source text into the token stream and syntax tree the rules inspect.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from padcheck.models import ASTNode, BlockLikeNode, ParsedSource


class ParseError(Exception):
    """Raised when a plugin cannot produce a syntax tree for a file."""
    pass


class LanguagePlugin(ABC):
    """Base interface for language-specific parsing plugins."""

    @property
    @abstractmethod
    def language_name(self) -> str:
        """Return the language name (e.g., 'javascript')."""
        pass

    @property
    @abstractmethod
    def file_extensions(self) -> List[str]:
        """Return supported file extensions (e.g., ['.js', '.mjs'])."""
        pass

    @abstractmethod
    async def parse_file(self, file_path: str, content: str) -> ParsedSource:
        """
        Parse file content into tokens and an AST.

        The token stream must hold every token and comment of the file in
        source order, with 1-indexed lines and 0-indexed character columns.

        Args:
            file_path: Path to the file being parsed
            content: File content as string

        Returns:
            ParsedSource with the token stream and the root AST node

        Raises:
            ParseError: If the file cannot be parsed
        """
        pass

    @abstractmethod
    def block_like(self, node: ASTNode) -> Optional[BlockLikeNode]:
        """
        Classify an AST node as a block-like node.

        Args:
            node: Node of a tree returned by parse_file

        Returns:
            StatementBlock or SwitchConstruct for block-like nodes, None otherwise
        """
        pass
