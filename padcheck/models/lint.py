"""Lint run and API data models."""

from typing import List, Literal, Optional

from pydantic import BaseModel, Field, computed_field

from .diagnostic import Diagnostic, Severity


class LintResult(BaseModel):
    """Diagnostics reported for one file."""

    file_path: str
    language: str
    diagnostics: List[Diagnostic] = []

    @computed_field
    @property
    def error_count(self) -> int:
        return sum(1 for d in self.diagnostics if d.severity is Severity.ERROR)

    @computed_field
    @property
    def warning_count(self) -> int:
        return sum(1 for d in self.diagnostics if d.severity is Severity.WARNING)


class LintRequest(BaseModel):
    """Body of a lint request."""

    source: str = Field(..., description="Source text to check")
    file_path: str = Field("input.js", description="File name used to select the language plugin")
    padded_blocks: Optional[Literal["always", "never"]] = Field(
        None, description="Overrides the configured padded-blocks option"
    )


class LintResponse(BaseModel):
    """Response of a lint request."""

    file_path: str
    language: str
    diagnostics: List[Diagnostic]
    error_count: int
    warning_count: int


class LanguagesResponse(BaseModel):
    """Languages and file extensions the linter accepts."""

    languages: List[str]
    extensions: List[str]
