#!/usr/bin/env python3
"""
Metadata lookup for game entities.

Database records carry a free-form note field; tags such as ``<speed:4>`` or
``<ghost>`` in it become the record's metadata table. get_meta() reads one
entry from any source implementing HasMetadata and can convert it with the
same parsers plugin parameters use:

    get_meta(actor, 'speed', 'Int', 3)
"""

import re
from typing import Any, Mapping, Optional, Protocol, Union, runtime_checkable

from mvplugins.utils.parsers import Parser, get_parser
from mvplugins.utils.logging_config import get_logger

logger = get_logger("META")

_NOTE_TAG = re.compile(r'<([^<>:]+)(:?)([^>]*)>')


@runtime_checkable
class HasMetadata(Protocol):
    """Anything that can produce a metadata table (or None)."""

    def get_metadata(self) -> Optional[Mapping[str, Any]]:
        ...


def parse_note_metadata(note: Optional[str]) -> dict:
    """
    Extract note tags into a metadata table.

    ``<key:value>`` maps key to the string value, ``<flag>`` maps flag to
    True. Later tags win.
    """
    meta = {}
    for key, colon, value in _NOTE_TAG.findall(note or ''):
        meta[key] = value if colon == ':' else True
    return meta


def extract_from_meta(meta: Optional[Mapping[str, Any]], param: Optional[str] = None,
                      parser: Union[str, Parser, None] = None, default: Any = None) -> Any:
    """
    Read an entry from a metadata table.

    Args:
        meta: The table, or None when the source has none.
        param: Entry name. None returns the whole table.
        parser: Type name ('Int', 'Bool', ...) or callable to convert with.
        default: Returned when the table or the entry is missing.

    Raises:
        UnknownParserError: If ``parser`` names no known parser.
    """
    if meta is None:
        return default
    if param is None:
        return meta
    if param not in meta:
        return default

    value = meta[param]
    if parser is not None:
        value = get_parser(parser)(value)
    return value


def metadata_of(source: Any) -> Optional[Mapping[str, Any]]:
    """Return a source's metadata table, or None."""
    if isinstance(source, HasMetadata):
        return source.get_metadata()
    if isinstance(source, Mapping):
        return source.get('meta')
    return getattr(source, 'meta', None)


def get_meta(source: Any, param: Optional[str] = None,
             parser: Union[str, Parser, None] = None, default: Any = None) -> Any:
    """
    Read an entry from an entity's metadata.

    ``source`` is normally a HasMetadata adapter; objects or dicts with a
    ``meta`` table work too.
    """
    meta = metadata_of(source)
    if meta is None:
        logger.debug(f"No metadata on {source!r}; using default for '{param}'")
        return default
    return extract_from_meta(meta, param, parser, default)
