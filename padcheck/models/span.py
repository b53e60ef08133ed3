"""Source range data models."""

from typing import Tuple

from pydantic import BaseModel


class SourceSpan(BaseModel):
    """A range of source text.

    Lines are 1-indexed and columns are 0-indexed character offsets, matching
    the locations reported in diagnostics.
    """

    start_line: int
    start_column: int
    end_line: int
    end_column: int

    @property
    def start(self) -> Tuple[int, int]:
        return (self.start_line, self.start_column)

    @property
    def end(self) -> Tuple[int, int]:
        return (self.end_line, self.end_column)

    def span(self) -> "SourceSpan":
        """Return a plain copy of this range without any subclass fields."""
        return SourceSpan(
            start_line=self.start_line,
            start_column=self.start_column,
            end_line=self.end_line,
            end_column=self.end_column,
        )
