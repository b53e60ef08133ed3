"""Parsed source data models."""

from typing import List

from pydantic import BaseModel

from .ast_node import ASTNode
from .token import Token


class ParsedSource(BaseModel):
    """Token stream and syntax tree of one parsed file."""

    file_path: str
    language: str
    tokens: List[Token]
    root: ASTNode
