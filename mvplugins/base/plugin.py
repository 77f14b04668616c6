#!/usr/bin/env python3
"""
Base class for plugins.

A plugin has a unique name, a table of raw parameters (strings, as the
engine's plugin manager supplies them) and an optional set of commands that
events can invoke. Subclass Plugin, declare commands in make_commands_list()
and register one instance with a PluginRegistry:

    class WebLoad(Plugin):
        parsers = {'URL': parse_url}

        def make_commands_list(self):
            return ['load_event']

        def load_event(self, event, url):
            ...

    registry.create(WebLoad, 'WebLoad', config=plugin_config)

Command handlers are called with the triggering event first, then the
remaining plugin command arguments.
"""

from types import MappingProxyType
from typing import Any, Callable, Dict, List, Mapping, Optional, Union, TYPE_CHECKING

from mvplugins.base.errors import BadPluginCommandError, MissingParameterError
from mvplugins.utils.parsers import ParserCatalog, Parser, default_catalog
from mvplugins.utils.logging_config import get_logger

if TYPE_CHECKING:
    from mvplugins.base.config import PluginConfig

logger = get_logger("PLUGINS")


class _Missing:
    """Marker for "no default given" so None stays a usable default."""

    def __repr__(self) -> str:
        return 'MISSING'


MISSING = _Missing()


class Plugin:
    """
    Base class for plugins.

    Class attributes:
        parsers: Conversion rules that shadow the global ones for this plugin,
            keyed by type name (e.g. {'Color': my_color_parser}).
    """

    parsers: Mapping[str, Parser] = MappingProxyType({})

    def __init__(self, name: str, parameters: Optional[Mapping[str, Any]] = None,
                 config: Optional['PluginConfig'] = None):
        """
        Initialize the plugin.

        Args:
            name: Unique plugin name, also the command word events use.
            parameters: Raw parameter table. If omitted it's read from
                ``config`` on first use.
            config: Plugin configuration to read parameters from.
        """
        if not name:
            raise ValueError("Plugin needs a name")
        self.name = name
        self._config = config
        self._parameters: Optional[Mapping[str, Any]] = parameters
        self._parsed: Dict[str, Any] = {}
        self.parser_catalog = default_catalog.child(self.parsers)
        self.valid_commands: List[str] = list(self.make_commands_list())

    def __repr__(self) -> str:
        return f"<{type(self).__name__} '{self.name}'>"

    # Commands

    def make_commands_list(self) -> List[str]:
        """
        Names of methods that events may call as plugin commands.

        Override to declare commands, e.g. ``return ['load_event']``.
        """
        return []

    def command_handlers(self) -> Dict[str, Callable[..., Any]]:
        """
        Map each declared command to its handler.

        By default a command maps to the method of the same name. Override to
        map command words to other callables.

        Raises:
            BadPluginCommandError: If a declared command has no callable.
        """
        handlers: Dict[str, Callable[..., Any]] = {}
        for command in self.valid_commands:
            handler = getattr(self, command, None)
            if not callable(handler):
                raise BadPluginCommandError(
                    f"bad plugin command: '{command}' is declared by plugin '{self.name}' but has no handler")
            handlers[command] = handler
        return handlers

    # Parameters

    def parameters(self) -> Mapping[str, Any]:
        """Return the raw parameter table."""
        if self._parameters is None:
            if self._config is not None:
                self._parameters = self._config.parameters(self.name)
            else:
                self._parameters = {}
        return self._parameters

    def parameter(self, name: str, type: Union[str, Parser, None] = None,
                  default: Any = MISSING) -> Any:
        """
        Return a parameter converted to a type.

        Values are converted once and cached; later calls return the cached
        value.

        Args:
            name: Parameter name.
            type: 'Bool', 'Int', 'Float', 'String', 'Color', any other name
                the plugin's catalog knows, or a parser callable. None returns
                the raw value.
            default: Returned, unconverted, when the parameter is absent.

        Raises:
            MissingParameterError: If absent and no default was given.
            UnknownParserError: If ``type`` names no known parser.
        """
        if name in self._parsed:
            return self._parsed[name]

        parameters = self.parameters()
        if name not in parameters:
            if default is MISSING:
                logger.error(f"Plugin '{self.name}' is missing required parameter '{name}'")
                raise MissingParameterError(self.name, name)
            self._parsed[name] = default
            return default

        raw = parameters[name]
        if type is not None:
            return self._parse_param(raw, type, name)
        self._parsed[name] = raw
        return raw

    def param_bool(self, name: str, default: Any = MISSING) -> Any:
        return self.parameter(name, 'Bool', default)

    def param_int(self, name: str, default: Any = MISSING) -> Any:
        return self.parameter(name, 'Int', default)

    def param_float(self, name: str, default: Any = MISSING) -> Any:
        return self.parameter(name, 'Float', default)

    def param_string(self, name: str, default: Any = MISSING) -> Any:
        return self.parameter(name, 'String', default)

    def param_color(self, name: str, default: Any = MISSING) -> Any:
        return self.parameter(name, 'Color', default)

    def parse(self, value: Any, type: Union[str, Parser]) -> Any:
        """Convert a value with this plugin's rules, without caching."""
        return self.parser_catalog.resolve(type)(value)

    def _parse_param(self, raw: Any, type: Union[str, Parser], name: str) -> Any:
        parsed = self.parse(raw, type)
        self._parsed[name] = parsed
        logger.debug(f"Plugin '{self.name}' parameter '{name}' parsed as {parsed!r}")
        return parsed
