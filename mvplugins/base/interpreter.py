#!/usr/bin/env python3
"""
Bridge between the event interpreter's plugin command hook and a registry.

The engine's interpreter calls ``plugin_command(command, args)`` for every
Plugin Command event. The bridge routes registered plugin names to the
registry, passing the event that runs the interpreter as the handler's
first argument, and hands everything else to the interpreter's previous
handler unchanged.
"""

from typing import Any, Callable, Optional, Sequence

from mvplugins.base.registry import PluginRegistry
from mvplugins.utils.logging_config import get_logger

logger = get_logger("PLUGINS")

# previous(interpreter, command, args)
InterpreterHandler = Callable[[Any, str, Sequence[str]], Any]


def _interpreter_itself(interpreter: Any) -> Any:
    return interpreter


class PluginCommandBridge:
    """
    Routes an interpreter's plugin commands through a PluginRegistry.
    """

    def __init__(self, registry: PluginRegistry, previous: InterpreterHandler,
                 context_resolver: Optional[Callable[[Any], Any]] = None):
        """
        Args:
            registry: Registry holding the plugins.
            previous: The interpreter's original plugin command handler.
            context_resolver: Maps the interpreter to the handler context,
                typically ``lambda i: game_map.event(i.event_id())``.
                Defaults to the interpreter itself.
        """
        self.registry = registry
        self.previous = previous
        self.context_resolver = context_resolver or _interpreter_itself

    def plugin_command(self, interpreter: Any, command: str, args: Sequence[str]) -> Any:
        """Handle one Plugin Command issued by ``interpreter``."""
        def fallback(cmd: str, cmd_args: Sequence[str]) -> Any:
            return self.previous(interpreter, cmd, cmd_args)

        if self.registry.resolve(command, args) is None:
            return fallback(command, args)

        context = self.context_resolver(interpreter)
        logger.debug(f"Plugin command '{command}' from {interpreter!r} with context {context!r}")
        return self.registry.dispatch(command, context, args, fallback=fallback)

    def __call__(self, interpreter: Any, command: str, args: Sequence[str]) -> Any:
        return self.plugin_command(interpreter, command, args)
