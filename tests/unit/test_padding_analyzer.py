"""
Unit tests for the padding analyzer.

Token streams are built by hand so that each case isolates one edge rule.
"""

from padcheck.analyzers.navigator import SourceTokenNavigator
from padcheck.analyzers.padding import is_bottom_padded, is_top_padded
from padcheck.models import ASTNode, StatementBlock, Token, TokenKind


def code(line, column, value):
    return Token(
        kind=TokenKind.CODE,
        value=value,
        start_line=line,
        start_column=column,
        end_line=line,
        end_column=column + len(value),
    )


def comment(line, column, value, end_line=None):
    kind = TokenKind.BLOCK_COMMENT if value.startswith("/*") else TokenKind.LINE_COMMENT
    return Token(
        kind=kind,
        value=value,
        start_line=line,
        start_column=column,
        end_line=end_line or line,
        end_column=column + len(value) if end_line is None else 2,
    )


def block_over(tokens):
    """Build a statement block spanning the given tokens, with one statement."""
    first, last = tokens[0], tokens[-1]
    statement = ASTNode(
        node_type="expression_statement",
        start_line=first.start_line, start_column=first.start_column,
        end_line=last.end_line, end_column=last.end_column,
    )
    return StatementBlock(
        node_type="statement_block",
        body=[statement],
        start_line=first.start_line,
        start_column=first.start_column,
        end_line=last.end_line,
        end_column=last.end_column,
    )


def analyze(tokens):
    navigator = SourceTokenNavigator(tokens)
    node = block_over(tokens)
    return is_top_padded(node, navigator), is_bottom_padded(node, navigator)


def test_unpadded_block():
    """Test a block whose statement directly follows and precedes the braces."""
    tokens = [code(1, 0, "{"), code(2, 4, "foo"), code(2, 7, ";"), code(3, 0, "}")]

    assert analyze(tokens) == (False, False)


def test_padded_block():
    """Test a block with one blank line on each side."""
    tokens = [code(1, 0, "{"), code(3, 4, "foo"), code(3, 7, ";"), code(5, 0, "}")]

    assert analyze(tokens) == (True, True)


def test_many_blank_lines_still_count_as_padded():
    """Test that the threshold is a minimum, not an exact count."""
    tokens = [code(1, 0, "{"), code(6, 4, "foo"), code(6, 7, ";"), code(12, 0, "}")]

    assert analyze(tokens) == (True, True)


def test_padding_is_checked_per_edge():
    """Test that top and bottom are decided independently."""
    tokens = [code(1, 0, "{"), code(3, 4, "foo"), code(3, 7, ";"), code(4, 0, "}")]

    assert analyze(tokens) == (True, False)


def test_same_line_comment_after_opening_brace_is_skipped():
    """Test that `{ // note` does not count as the first content line."""
    tokens = [
        code(1, 0, "{"),
        comment(1, 2, "// note"),
        code(3, 4, "foo"),
        code(3, 7, ";"),
        code(5, 0, "}"),
    ]

    assert analyze(tokens) == (True, True)


def test_several_same_line_comments_are_skipped():
    """Test that every comment on the delimiter line is transparent."""
    tokens = [
        code(1, 0, "{"),
        comment(1, 2, "/* a */"),
        comment(1, 10, "// b"),
        code(2, 4, "foo"),
        code(2, 7, ";"),
        code(3, 0, "}"),
    ]

    assert analyze(tokens) == (False, False)


def test_comment_on_next_line_counts_as_content():
    """Test that a comment below the brace is treated like a statement."""
    tokens = [
        code(1, 0, "{"),
        comment(2, 4, "// comment"),
        code(3, 4, "foo"),
        code(3, 7, ";"),
        code(5, 0, "}"),
    ]

    assert analyze(tokens) == (False, True)


def test_same_line_comment_before_closing_brace_is_skipped():
    """Test that `/* c */ }` does not count as the last content line."""
    tokens = [
        code(1, 0, "{"),
        code(3, 4, "foo"),
        code(3, 7, ";"),
        comment(5, 0, "/* c */"),
        code(5, 8, "}"),
    ]

    assert analyze(tokens) == (True, True)


def test_multiline_comment_ending_on_closing_line_is_skipped():
    """Test that a block comment ending on the brace line is transparent."""
    tokens = [
        code(1, 0, "{"),
        code(3, 4, "foo"),
        code(3, 7, ";"),
        comment(4, 0, "/*\n */", end_line=5),
        code(5, 4, "}"),
    ]

    assert analyze(tokens) == (True, True)


def test_trailing_comment_on_previous_line_counts_as_content():
    """Test that a comment just above the closing brace blocks bottom padding."""
    tokens = [
        code(1, 0, "{"),
        code(3, 4, "foo"),
        code(3, 7, ";"),
        comment(4, 4, "// trailing"),
        code(5, 0, "}"),
    ]

    assert analyze(tokens) == (True, False)


def test_analysis_is_deterministic():
    """Test that repeated analysis of the same stream gives the same answer."""
    tokens = [code(1, 0, "{"), code(3, 4, "foo"), code(3, 7, ";"), code(4, 0, "}")]
    navigator = SourceTokenNavigator(tokens)
    node = block_over(tokens)

    results = {(is_top_padded(node, navigator), is_bottom_padded(node, navigator)) for _ in range(5)}

    assert results == {(True, False)}
