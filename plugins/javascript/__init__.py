"""
JavaScript language plugin.

This plugin provides JavaScript tokenization and parsing for the block rules.
"""

from plugins.javascript.plugin import JavaScriptPlugin

__all__ = ['JavaScriptPlugin']
