#!/usr/bin/env python3
"""
Exceptions raised by the plugin toolkit.

Configuration problems (duplicate plugins, missing parameters, unknown
parsers) and broken command declarations are fatal and raised where they are
detected. Unknown commands are not errors: they go to the fallback handler.
"""


class PluginError(Exception):
    """Base exception for plugin operations."""
    pass


class DuplicatePluginError(PluginError):
    """Raised when a plugin name is already registered."""
    pass


class MissingParameterError(PluginError, KeyError):
    """Raised when a required parameter is absent and no default was given."""

    def __init__(self, plugin_name: str, parameter: str):
        self.plugin_name = plugin_name
        self.parameter = parameter
        super().__init__(f"Required param: {parameter} (plugin '{plugin_name}')")

    def __str__(self) -> str:
        # KeyError would otherwise quote the message
        return self.args[0]


class UnknownParserError(PluginError):
    """Raised when no conversion rule exists for a requested type."""
    pass


class UnknownBooleanError(PluginError, ValueError):
    """Raised when a value can't be read as a boolean."""
    pass


class BadPluginCommandError(PluginError):
    """Raised when a declared command has no callable handler."""
    pass


class UnknownCommandError(PluginError):
    """Raised when no plugin claims a command and there is no fallback."""
    pass


class MapDataError(PluginError):
    """Raised when map data lacks the fields or layers the hook expects."""
    pass


class PluginConfigError(PluginError):
    """Raised when the plugin list can't be read."""
    pass
