"""Diagnostic data models."""

from enum import Enum
from typing import Optional

from pydantic import BaseModel

from .span import SourceSpan


class Severity(str, Enum):
    """Severity level of a rule and of the diagnostics it reports."""

    OFF = "off"
    WARNING = "warning"
    ERROR = "error"


class Location(BaseModel):
    """Line (1-indexed) and column (0-indexed) a diagnostic points at."""

    line: int
    column: int


class Diagnostic(BaseModel):
    """A single rule violation."""

    rule_name: str
    message: str
    severity: Severity = Severity.ERROR
    location: Location
    node_type: str
    node_span: SourceSpan
    file_path: Optional[str] = None
