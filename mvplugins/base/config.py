#!/usr/bin/env python3
"""
Plugin configuration.

The engine lists its plugins in ``js/plugins.js``:

    var $plugins =
    [
    {"name":"EraseShadows","status":true,"description":"","parameters":{}},
    {"name":"WebLoad","status":false,"description":"...","parameters":{"URL":"..."}}
    ];

PluginConfig reads that file (or the same list as plain JSON) and hands each
plugin its raw parameter table. Like the engine, names are matched
case-insensitively and only enabled plugins have parameters.
"""

import os
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Mapping, Optional

from mvplugins.base.errors import PluginConfigError
from mvplugins.utils.json_utils import load_json, load_js_assignment
from mvplugins.utils.logging_config import get_logger

logger = get_logger("CONFIG")


@dataclass
class PluginEntry:
    """One plugin in the plugin list."""
    name: str
    status: bool = True
    description: str = ""
    parameters: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> 'PluginEntry':
        name = data.get("name")
        if not name or not isinstance(name, str):
            raise PluginConfigError(f"Plugin entry without a name: {data!r}")
        parameters = data.get("parameters") or {}
        if not isinstance(parameters, Mapping):
            raise PluginConfigError(f"Parameters of plugin '{name}' must be an object")
        return cls(
            name=name,
            status=bool(data.get("status", True)),
            description=str(data.get("description", "") or ""),
            parameters=dict(parameters),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "status": self.status,
            "description": self.description,
            "parameters": dict(self.parameters),
        }


class PluginConfig:
    """
    The plugin list and each plugin's raw parameters.
    """

    def __init__(self, entries: Optional[Iterable[PluginEntry]] = None):
        self._entries: Dict[str, PluginEntry] = {}
        for entry in entries or []:
            key = entry.name.lower()
            if key in self._entries:
                # The engine keeps the later entry
                logger.warning(f"Plugin '{entry.name}' is listed more than once; using the last entry")
            self._entries[key] = entry

    @classmethod
    def from_entries(cls, entries: Iterable[Mapping[str, Any]]) -> 'PluginConfig':
        """Build from plain dicts as they appear in plugins.js."""
        return cls(PluginEntry.from_dict(e) for e in entries)

    @classmethod
    def from_file(cls, file_path: str) -> 'PluginConfig':
        """
        Load ``js/plugins.js`` or a JSON file with the same content.

        The JSON form may also be an object mapping plugin names to
        parameter tables, all enabled.

        Raises:
            PluginConfigError: If the file is missing or malformed.
        """
        if not os.path.exists(file_path):
            raise PluginConfigError(f"Plugin config not found: {file_path}")

        logger.info(f"Loading plugin config from: {file_path}")
        try:
            if file_path.endswith('.js'):
                data = load_js_assignment(file_path)
            else:
                data = load_json(file_path)
        except ValueError as e:
            raise PluginConfigError(f"Malformed plugin config {file_path}: {e}") from e
        except OSError as e:
            raise PluginConfigError(f"Can't read plugin config {file_path}: {e}") from e

        if isinstance(data, Mapping):
            data = [{"name": name, "parameters": params} for name, params in data.items()]
        if not isinstance(data, list):
            raise PluginConfigError(f"Plugin config {file_path} must hold a list of plugins")

        config = cls.from_entries(data)
        logger.info(f"Loaded {len(config)} plugin entries ({len(config.enabled_names())} enabled)")
        return config

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, name: str) -> bool:
        return name.lower() in self._entries

    def entry(self, name: str) -> Optional[PluginEntry]:
        return self._entries.get(name.lower())

    def names(self) -> List[str]:
        return [entry.name for entry in self._entries.values()]

    def enabled_names(self) -> List[str]:
        return [entry.name for entry in self._entries.values() if entry.status]

    def is_enabled(self, name: str) -> bool:
        entry = self.entry(name)
        return bool(entry and entry.status)

    def description(self, name: str) -> str:
        entry = self.entry(name)
        return entry.description if entry else ""

    def parameters(self, name: str) -> Dict[str, Any]:
        """
        Raw parameters of an enabled plugin.

        Unknown and disabled plugins get an empty table.
        """
        entry = self.entry(name)
        if entry is None:
            logger.debug(f"No plugin config entry for '{name}'")
            return {}
        if not entry.status:
            logger.debug(f"Plugin '{name}' is disabled; ignoring its parameters")
            return {}
        return entry.parameters
