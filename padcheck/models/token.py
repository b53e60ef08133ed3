"""Token data models."""

from enum import Enum

from pydantic import ConfigDict

from .span import SourceSpan


class TokenKind(str, Enum):
    """Kind of a lexical token."""

    CODE = "code"
    LINE_COMMENT = "line_comment"
    BLOCK_COMMENT = "block_comment"


class Token(SourceSpan):
    """A single token or comment of the source stream."""

    model_config = ConfigDict(frozen=True)

    kind: TokenKind
    value: str

    @property
    def is_comment(self) -> bool:
        return self.kind is not TokenKind.CODE
