"""
Blank-line padding analysis for block-like nodes.

A block is padded at the top when at least one blank line separates its
opening delimiter from the first substantive token, and at the bottom when
at least one blank line separates the last substantive token from its
closing delimiter. Comments sharing a line with the delimiter are skipped;
comments on any other line count as content.
"""

from padcheck.analyzers.navigator import SourceTokenNavigator
from padcheck.models import BlockLikeNode


def is_top_padded(node: BlockLikeNode, navigator: SourceTokenNavigator) -> bool:
    """
    Check whether a non-empty block starts with a blank line.

    Args:
        node: Block-like node with at least one statement or case
        navigator: Navigator over the token stream the node belongs to

    Returns:
        True if the first substantive line is two or more lines below the
        opening delimiter
    """
    open_brace = navigator.opening_delimiter_of(node)
    block_start = open_brace.start_line

    first = navigator.token_or_comment_after(open_brace)
    while first.is_comment and first.start_line == block_start:
        first = navigator.token_or_comment_after(first)

    return first.start_line >= block_start + 2


def is_bottom_padded(node: BlockLikeNode, navigator: SourceTokenNavigator) -> bool:
    """
    Check whether a non-empty block ends with a blank line.

    Args:
        node: Block-like node with at least one statement or case
        navigator: Navigator over the token stream the node belongs to

    Returns:
        True if the last substantive line is two or more lines above the
        closing delimiter
    """
    close_brace = navigator.last_token(node)
    block_end = close_brace.end_line

    last = navigator.token_or_comment_before(close_brace)
    while last.is_comment and last.end_line == block_end:
        last = navigator.token_or_comment_before(last)

    return last.end_line <= block_end - 2
