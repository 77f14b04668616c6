#!/usr/bin/env python3
"""
Plugin registration and plugin command dispatch.

Events issue plugin commands as a command word followed by string
arguments, e.g. ``WebLoad load_event http://...``. The command word is a
plugin's name and the first argument names one of that plugin's declared
commands. Anything the registry can't route goes to the fallback handler,
normally the engine's own plugin command processing.
"""

from typing import Any, Callable, Dict, Iterator, List, Optional, Sequence, Type

from mvplugins.base.errors import BadPluginCommandError, DuplicatePluginError, UnknownCommandError
from mvplugins.base.plugin import Plugin
from mvplugins.utils.logging_config import get_logger

logger = get_logger("PLUGINS")

# fallback(command, args)
FallbackHandler = Callable[[str, Sequence[str]], Any]


class PluginRegistry:
    """
    Plugins by name, with the command table of each.

    Command tables are built when a plugin registers, so a declared command
    without a handler is reported at startup rather than when an event
    first uses it.
    """

    def __init__(self, fallback: Optional[FallbackHandler] = None):
        """
        Initialize the registry.

        Args:
            fallback: Called as ``fallback(command, args)`` for commands no
                plugin claims.
        """
        self.fallback = fallback
        self._plugins: Dict[str, Plugin] = {}
        self._commands: Dict[str, Dict[str, Callable[..., Any]]] = {}

    def register(self, plugin: Plugin) -> Plugin:
        """
        Add a plugin under its name.

        Raises:
            DuplicatePluginError: If the name is already registered.
            BadPluginCommandError: If a declared command has no callable
                handler, or the handler table maps an undeclared command.
        """
        if plugin.name in self._plugins:
            logger.error(f"Duplicate plugin '{plugin.name}'")
            raise DuplicatePluginError(f"Duplicate plugin: {plugin.name}")

        handlers = self._check_handlers(plugin, plugin.command_handlers())
        self._plugins[plugin.name] = plugin
        self._commands[plugin.name] = handlers
        logger.debug(f"Registered plugin '{plugin.name}' with commands {list(handlers)}")
        return plugin

    @staticmethod
    def _check_handlers(plugin: Plugin, handlers: Dict[str, Callable[..., Any]]) -> Dict[str, Callable[..., Any]]:
        """The handler table must cover exactly the declared commands, all callable."""
        declared = list(plugin.valid_commands)
        undeclared = [name for name in handlers if name not in declared]
        if undeclared:
            logger.error(f"Plugin '{plugin.name}' maps undeclared commands {undeclared}")
            raise BadPluginCommandError(
                f"bad plugin command: plugin '{plugin.name}' maps undeclared commands {undeclared}")
        for command in declared:
            if not callable(handlers.get(command)):
                logger.error(f"Plugin '{plugin.name}' has no handler for '{command}'")
                raise BadPluginCommandError(
                    f"bad plugin command: '{command}' is declared by plugin '{plugin.name}' but has no handler")
        return {command: handlers[command] for command in declared}

    def create(self, plugin_cls: Type[Plugin], name: str, *args, **kwargs) -> Plugin:
        """Construct a plugin with an explicit name and register it."""
        return self.register(plugin_cls(name, *args, **kwargs))

    def get(self, name: str) -> Optional[Plugin]:
        return self._plugins.get(name)

    def names(self) -> List[str]:
        """Registered plugin names, in registration order."""
        return list(self._plugins)

    def commands(self, name: str) -> List[str]:
        """Commands a registered plugin accepts."""
        return list(self._commands.get(name, {}))

    def __contains__(self, name: str) -> bool:
        return name in self._plugins

    def __len__(self) -> int:
        return len(self._plugins)

    def __iter__(self) -> Iterator[Plugin]:
        return iter(self._plugins.values())

    def resolve(self, command: str, args: Sequence[str]) -> Optional[Callable[..., Any]]:
        """
        Find the handler for a plugin command.

        Returns None when the command word isn't a plugin or the first
        argument isn't one of its declared commands.
        """
        handlers = self._commands.get(command)
        if handlers is None or not args:
            return None
        return handlers.get(args[0])

    def dispatch(self, command: str, context: Any, args: Sequence[str],
                 fallback: Optional[FallbackHandler] = None) -> Any:
        """
        Run a plugin command.

        Args:
            command: The command word (a plugin name).
            context: Passed as the handler's first argument, usually the
                event that issued the command.
            args: Command arguments; the first selects the plugin command.
            fallback: Overrides the registry's fallback for this call.

        Returns:
            The handler's result, or the fallback's.

        Raises:
            UnknownCommandError: If nothing claims the command and there is
                no fallback.
        """
        handler = self.resolve(command, args)
        if handler is None:
            fallback = fallback or self.fallback
            if fallback is None:
                raise UnknownCommandError(f"unknown command {command}")
            logger.debug(f"Command '{command}' not handled by a plugin, passing to fallback")
            return fallback(command, args)

        logger.debug(f"Dispatching '{command} {args[0]}' to plugin '{command}'")
        return handler(context, *args[1:])
