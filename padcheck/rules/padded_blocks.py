"""
Padded blocks rule.

Requires or forbids a blank line at the start and end of every non-empty
statement block and switch case list.
"""

import logging
from typing import Dict, Optional

from padcheck.analyzers.padding import is_bottom_padded, is_top_padded
from padcheck.models import BlockLikeNode, Location, Policy, StatementBlock, SwitchConstruct
from padcheck.rules.base import Rule, RuleContext, Visitor

logger = logging.getLogger(__name__)

ALWAYS_MESSAGE = "Block must be padded by blank lines."
NEVER_MESSAGE = "Block must not be padded by blank lines."


class PaddedBlocksRule(Rule):
    """Enforce consistent blank-line padding inside blocks."""

    name = "padded-blocks"
    description = "Require or disallow padding within blocks"
    schema = [Policy.ALWAYS.value, Policy.NEVER.value]

    def __init__(self, context: RuleContext, option: Optional[str] = None):
        super().__init__(context, option)
        self.policy = Policy.from_option(option)

    def visitors(self) -> Dict[str, Visitor]:
        return {
            "statement_block": self.on_statement_block,
            "switch_construct": self.on_switch_construct,
        }

    def on_statement_block(self, node: StatementBlock) -> None:
        """Check a statement block, skipping blocks without statements."""
        if node.is_empty():
            return
        self._check_padding(node)

    def on_switch_construct(self, node: SwitchConstruct) -> None:
        """Check a switch construct, skipping switches without cases."""
        if node.is_empty():
            return
        self._check_padding(node)

    def _check_padding(self, node: BlockLikeNode) -> None:
        navigator = self.context.navigator
        has_top_padding = is_top_padded(node, navigator)
        has_bottom_padding = is_bottom_padded(node, navigator)

        if self.policy is Policy.ALWAYS:
            message = ALWAYS_MESSAGE
            top_violated = not has_top_padding
            bottom_violated = not has_bottom_padding
        else:
            message = NEVER_MESSAGE
            top_violated = has_top_padding
            bottom_violated = has_bottom_padding

        if top_violated:
            self.context.report(self.name, node, message)

        if bottom_violated:
            self.context.report(
                self.name,
                node,
                message,
                location=Location(line=node.end_line, column=node.end_column - 1),
            )

        logger.debug(
            f"Checked {node.node_type} at line {node.start_line}: "
            f"top={has_top_padding}, bottom={has_bottom_padding}"
        )
