#!/usr/bin/env python3
"""
JSON utilities for the plugin toolkit.

Reads and writes the engine's data files. Besides plain JSON this handles
script files holding a single JSON assignment, such as ``js/plugins.js``
(``var $plugins = [...];``).
"""

import json
import re
from typing import Any

from mvplugins.utils.logging_config import get_logger

logger = get_logger("SYSTEM")

# var $plugins =
_ASSIGNMENT_PREFIX = re.compile(r'^\s*(?:var|let|const)?\s*[\w$.]+\s*=\s*', re.S)


def strip_js_assignment(text: str) -> str:
    """
    Remove a leading ``name =`` and trailing ``;`` around a JSON literal.

    Line comments before the assignment (the engine writes a banner) are
    dropped as well.
    """
    lines = [line for line in text.splitlines() if not line.lstrip().startswith('//')]
    body = '\n'.join(lines).strip()
    body = _ASSIGNMENT_PREFIX.sub('', body, count=1)
    if body.endswith(';'):
        body = body[:-1]
    return body.strip()


def to_json(obj: Any, pretty: bool = False) -> str:
    """Convert an object to a JSON string."""
    indent = 4 if pretty else None
    separators = None if pretty else (',', ':')
    return json.dumps(obj, indent=indent, separators=separators, ensure_ascii=False)


def load_json(file_path: str) -> Any:
    """Load an object from a JSON file."""
    try:
        with open(file_path, 'r', encoding='utf-8') as f:
            return json.load(f)
    except Exception as e:
        logger.error(f"Error loading JSON from {file_path}: {e}")
        raise


def load_js_assignment(file_path: str) -> Any:
    """Load the JSON literal assigned in a script file like js/plugins.js."""
    try:
        with open(file_path, 'r', encoding='utf-8') as f:
            return json.loads(strip_js_assignment(f.read()))
    except Exception as e:
        logger.error(f"Error loading script data from {file_path}: {e}")
        raise


def save_json(obj: Any, file_path: str, pretty: bool = False) -> None:
    """
    Save an object to a JSON file.

    The engine writes its data files compact, so that is the default here.
    """
    try:
        with open(file_path, 'w', encoding='utf-8') as f:
            f.write(to_json(obj, pretty=pretty))
    except Exception as e:
        logger.error(f"Error saving JSON to {file_path}: {e}")
        raise
