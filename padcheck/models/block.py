"""
Block-like node data models.

A block-like node is either a brace-delimited statement list or the case
list of a ``switch`` construct. Both variants share the same padding check
and differ only in where their opening delimiter sits.
"""

from abc import abstractmethod
from typing import TYPE_CHECKING, List, Literal

from .ast_node import ASTNode
from .span import SourceSpan
from .token import Token

if TYPE_CHECKING:
    from padcheck.analyzers.navigator import SourceTokenNavigator


class BlockLikeNode(SourceSpan):
    """Common shape of every block-like node."""

    node_type: str

    @abstractmethod
    def is_empty(self) -> bool:
        """Return True when the node has no statements or case clauses."""

    @abstractmethod
    def opening_delimiter(self, navigator: "SourceTokenNavigator") -> Token:
        """Return the token that opens the padded interior of the node."""


class StatementBlock(BlockLikeNode):
    """A brace-delimited, possibly empty list of statements."""

    kind: Literal["statement_block"] = "statement_block"
    body: List[ASTNode] = []

    def is_empty(self) -> bool:
        return len(self.body) == 0

    def opening_delimiter(self, navigator: "SourceTokenNavigator") -> Token:
        return navigator.first_token(self)


class SwitchConstruct(BlockLikeNode):
    """A switch construct together with its case clauses."""

    kind: Literal["switch_construct"] = "switch_construct"
    cases: List[ASTNode] = []

    def is_empty(self) -> bool:
        return len(self.cases) == 0

    def opening_delimiter(self, navigator: "SourceTokenNavigator") -> Token:
        # The token preceding the first case is not always a literal brace.
        return navigator.token_before(self.cases[0])
