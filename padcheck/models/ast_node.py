"""AST node data models."""

from typing import List

from .span import SourceSpan


class ASTNode(SourceSpan):
    """Abstract Syntax Tree node representation."""

    node_type: str
    is_named: bool = True
    children: List['ASTNode'] = []


# Enable forward references for recursive model
ASTNode.model_rebuild()
