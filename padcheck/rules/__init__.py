"""
Lint rules.

``RULES`` maps every rule name to its implementation and is the registry the
configuration loader and the linter look rules up in.
"""

from typing import Dict, Type

from padcheck.rules.base import DiagnosticCollector, Rule, RuleContext
from padcheck.rules.padded_blocks import ALWAYS_MESSAGE, NEVER_MESSAGE, PaddedBlocksRule

RULES: Dict[str, Type[Rule]] = {
    PaddedBlocksRule.name: PaddedBlocksRule,
}

__all__ = [
    "RULES",
    "Rule",
    "RuleContext",
    "DiagnosticCollector",
    "PaddedBlocksRule",
    "ALWAYS_MESSAGE",
    "NEVER_MESSAGE",
]
