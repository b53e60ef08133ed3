"""
Utility modules for padcheck.
"""

from padcheck.utils.logging import (
    get_logger,
    setup_logging,
    log_lint_result,
    log_error_with_context,
)

__all__ = [
    "get_logger",
    "setup_logging",
    "log_lint_result",
    "log_error_with_context",
]
