"""Linting services package."""

from padcheck.services.linter import Linter, UnsupportedFileError
from padcheck.services.rule_config import (
    ConfigurationError,
    load_rule_config,
    parse_rule_config,
    parse_rule_entry,
    resolve_rule_settings,
)

__all__ = [
    'Linter',
    'UnsupportedFileError',
    'ConfigurationError',
    'load_rule_config',
    'parse_rule_config',
    'parse_rule_entry',
    'resolve_rule_settings',
]
