"""
Source token navigation.

This module provides the SourceTokenNavigator class that moves through the
ordered token stream of a parsed file, including comments, and locates the
boundary tokens of AST nodes.
"""

from bisect import bisect_left, bisect_right
from typing import List, Sequence, Tuple

from padcheck.models import BlockLikeNode, SourceSpan, Token


class NavigatorExhaustedError(Exception):
    """Raised when navigation runs past either end of the token stream."""
    pass


class SourceTokenNavigator:
    """Comment-aware navigation over an ordered token stream."""

    def __init__(self, tokens: Sequence[Token]):
        """
        Initialize the navigator.

        Args:
            tokens: Tokens and comments of one file in source order. Tokens
                must not overlap and must have a non-empty range.
        """
        self._tokens: List[Token] = list(tokens)
        self._starts: List[Tuple[int, int]] = [t.start for t in self._tokens]
        self._ends: List[Tuple[int, int]] = [t.end for t in self._tokens]

    def opening_delimiter_of(self, node: BlockLikeNode) -> Token:
        """
        Return the opening delimiter of a non-empty block-like node.

        For a statement block this is its opening brace; for a switch
        construct it is the token immediately preceding the first case.
        """
        return node.opening_delimiter(self)

    def token_or_comment_after(self, token: Token) -> Token:
        """
        Return the token or comment that follows the given token.

        Raises:
            NavigatorExhaustedError: If the token is the last one
        """
        index = self._index_of(token) + 1
        if index >= len(self._tokens):
            raise NavigatorExhaustedError(
                f"No token after line {token.end_line}, column {token.end_column}"
            )
        return self._tokens[index]

    def token_or_comment_before(self, token: Token) -> Token:
        """
        Return the token or comment that precedes the given token.

        Raises:
            NavigatorExhaustedError: If the token is the first one
        """
        index = self._index_of(token) - 1
        if index < 0:
            raise NavigatorExhaustedError(
                f"No token before line {token.start_line}, column {token.start_column}"
            )
        return self._tokens[index]

    def token_before(self, node: SourceSpan) -> Token:
        """
        Return the closest non-comment token that ends before the node starts.

        Raises:
            NavigatorExhaustedError: If no such token exists
        """
        index = bisect_right(self._ends, node.start) - 1
        while index >= 0 and self._tokens[index].is_comment:
            index -= 1
        if index < 0:
            raise NavigatorExhaustedError(
                f"No token before line {node.start_line}, column {node.start_column}"
            )
        return self._tokens[index]

    def first_token(self, node: SourceSpan) -> Token:
        """
        Return the first non-comment token inside the node.

        Raises:
            NavigatorExhaustedError: If the node contains no token
        """
        index = bisect_left(self._starts, node.start)
        while index < len(self._tokens) and self._tokens[index].is_comment:
            index += 1
        if index >= len(self._tokens) or self._tokens[index].end > node.end:
            raise NavigatorExhaustedError(
                f"No token inside node at line {node.start_line}, column {node.start_column}"
            )
        return self._tokens[index]

    def last_token(self, node: SourceSpan) -> Token:
        """
        Return the last non-comment token inside the node.

        Raises:
            NavigatorExhaustedError: If the node contains no token
        """
        index = bisect_right(self._ends, node.end) - 1
        while index >= 0 and self._tokens[index].is_comment:
            index -= 1
        if index < 0 or self._tokens[index].start < node.start:
            raise NavigatorExhaustedError(
                f"No token inside node at line {node.start_line}, column {node.start_column}"
            )
        return self._tokens[index]

    def _index_of(self, token: Token) -> int:
        """Locate a token of this stream by its start position."""
        index = bisect_left(self._starts, token.start)
        if index >= len(self._tokens) or self._tokens[index] != token:
            raise ValueError(
                f"Token at line {token.start_line}, column {token.start_column} "
                "is not part of this stream"
            )
        return index
