"""
Language plugin architecture for block padding checks.

This package provides the plugin system for language-specific parsing,
including the base plugin interface and plugin manager.
"""

from plugins.base import LanguagePlugin, ParseError
from plugins.manager import PluginManager, get_plugin_manager

__all__ = ['LanguagePlugin', 'ParseError', 'PluginManager', 'get_plugin_manager']
