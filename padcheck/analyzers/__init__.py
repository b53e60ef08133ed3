"""Token navigation and padding analyzers package."""

from padcheck.analyzers.navigator import NavigatorExhaustedError, SourceTokenNavigator
from padcheck.analyzers.padding import is_bottom_padded, is_top_padded

__all__ = [
    "NavigatorExhaustedError",
    "SourceTokenNavigator",
    "is_bottom_padded",
    "is_top_padded",
]
