"""
Plugin registry.

Maps file extensions to the language plugin that parses them.
"""

import logging
from pathlib import Path
from typing import Dict, List, Optional

from plugins.base import LanguagePlugin

logger = logging.getLogger(__name__)


class PluginManager:
    """Selects the language plugin for a file by its extension."""

    def __init__(self):
        self._plugins: Dict[str, LanguagePlugin] = {}
        self._by_extension: Dict[str, LanguagePlugin] = {}

    def register_plugin(self, plugin: LanguagePlugin) -> None:
        """
        Register a language plugin for all of its file extensions.

        A later registration takes over extensions that an earlier plugin
        already claimed.

        Args:
            plugin: LanguagePlugin instance to register
        """
        self._plugins[plugin.language_name] = plugin

        for ext in plugin.file_extensions:
            previous = self._by_extension.get(ext)
            if previous is not None and previous is not plugin:
                logger.warning(
                    f"Extension '{ext}' moves from '{previous.language_name}' "
                    f"to '{plugin.language_name}'"
                )
            self._by_extension[ext] = plugin

        logger.info(f"Registered '{plugin.language_name}' for {plugin.file_extensions}")

    def get_plugin_for_file(self, file_path: str) -> Optional[LanguagePlugin]:
        """
        Return the plugin handling a file, or None for unknown extensions.

        Args:
            file_path: Path to the file
        """
        plugin = self._by_extension.get(Path(file_path).suffix)
        if plugin is None:
            logger.debug(f"No plugin handles {file_path}")
        return plugin

    def list_supported_languages(self) -> List[str]:
        return sorted(self._plugins)

    def list_supported_extensions(self) -> List[str]:
        return sorted(self._by_extension)


_plugin_manager: Optional[PluginManager] = None


def get_plugin_manager() -> PluginManager:
    """
    Get or create the global plugin manager with the bundled plugins registered.

    Returns:
        PluginManager instance
    """
    global _plugin_manager
    if _plugin_manager is None:
        from plugins.javascript import JavaScriptPlugin

        manager = PluginManager()
        manager.register_plugin(JavaScriptPlugin())
        _plugin_manager = manager
    return _plugin_manager
