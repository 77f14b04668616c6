#!/usr/bin/env python3
"""
Parameter conversion rules.

Plugin parameters and note-tag metadata arrive as strings. The parsers here
turn them into typed values and are looked up by name ("Bool", "Int",
"Float", "String", "Color") through a ParserCatalog. Plugins can shadow any
of them with their own rules; see Plugin.parsers.

Numeric parsing is permissive: text that isn't a number becomes ``nan``
rather than raising, matching how the engine reads numbers. A warning is
logged so the bad value can still be traced.
"""

import math
from typing import Any, Callable, Dict, Iterable, Mapping, Optional, Union

from mvplugins.base.errors import UnknownBooleanError, UnknownParserError
from mvplugins.utils.color import Color
from mvplugins.utils.logging_config import get_logger

logger = get_logger("PARAMS")

Parser = Callable[[Any], Any]
Number = Union[int, float]

TRUE_VALUES = ('true', 'y', 'yes', 'on', '1')
FALSE_VALUES = ('false', 'n', 'no', 'off', '0')

_INFINITIES = {'infinity': math.inf, '+infinity': math.inf, '-infinity': -math.inf}
_RADIX_PREFIXES = ('0x', '0o', '0b')


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def to_number(value: Any) -> Number:
    """
    Convert a raw value to a number the way the engine's scripts do.

    None and empty strings are 0, booleans are 0 or 1, strings may be
    decimal, float, or 0x/0o/0b literals. Anything else is ``nan``.
    """
    if value is None:
        return 0
    if isinstance(value, bool):
        return int(value)
    if _is_number(value):
        return value
    if not isinstance(value, str):
        return math.nan

    text = value.strip()
    if not text:
        return 0
    lowered = text.lower()
    if lowered in _INFINITIES:
        return _INFINITIES[lowered]
    if lowered.startswith(_RADIX_PREFIXES):
        try:
            return int(lowered, 0)
        except ValueError:
            return math.nan
    # float() would also take "inf", "nan" and "1_000"
    if '_' in lowered or 'inf' in lowered or 'nan' in lowered:
        return math.nan
    try:
        return int(text)
    except ValueError:
        pass
    try:
        return float(text)
    except ValueError:
        return math.nan


def parse_bool(param: Any) -> bool:
    """Read yes/no style text as a boolean."""
    if param is True or param is False:
        return param
    text = str(param).lower().strip()
    if text in TRUE_VALUES:
        return True
    if text in FALSE_VALUES:
        return False
    raise UnknownBooleanError(f"unknown boolean value: {param}")


def parse_int(param: Any) -> Number:
    """Read an integer, flooring fractional input. Non-numbers give nan."""
    if isinstance(param, int) and not isinstance(param, bool):
        return param
    if isinstance(param, float) and param.is_integer():
        return int(param)
    number = to_number(param)
    if isinstance(number, float) and not math.isfinite(number):
        if math.isnan(number):
            logger.warning(f"Int parameter is not a number: {param!r}")
        return number
    return int(math.floor(number))


def parse_float(param: Any) -> float:
    """Read a float. Non-numbers give nan."""
    if _is_number(param) and math.isfinite(param):
        return float(param)
    number = float(to_number(param))
    if math.isnan(number):
        logger.warning(f"Float parameter is not a number: {param!r}")
    return number


def parse_string(param: Any) -> str:
    """Stringify anything that isn't already a string."""
    if isinstance(param, str):
        return param
    return str(param)


def parse_color(param: Any) -> Color:
    """Read a packed hex colour. Color and QColor values are converted."""
    if isinstance(param, Color):
        return param
    if hasattr(param, 'red') and hasattr(param, 'green') and hasattr(param, 'blue'):
        return Color.from_qcolor(param)
    return Color.parse(param)


class ParserCatalog:
    """
    Named conversion rules with an optional parent catalog.

    Lookups check this catalog first, then walk up the parents. Each plugin
    gets a catalog of its own overrides whose parent is ``default_catalog``.
    """

    def __init__(self, parsers: Optional[Mapping[str, Parser]] = None,
                 parent: Optional['ParserCatalog'] = None):
        self._parsers: Dict[str, Parser] = dict(parsers or {})
        self.parent = parent

    def register(self, name: str, parser: Parser) -> None:
        """Add or replace the rule for a type name."""
        if not callable(parser):
            raise TypeError(f"Parser for '{name}' must be callable")
        self._parsers[name] = parser

    def get(self, name: str) -> Optional[Parser]:
        """Return the rule for a type name, or None."""
        if name in self._parsers:
            return self._parsers[name]
        if self.parent is not None:
            return self.parent.get(name)
        return None

    def resolve(self, parser: Union[str, Parser]) -> Parser:
        """
        Return a callable parser.

        Args:
            parser: A type name, or a callable which is returned as-is.

        Raises:
            UnknownParserError: If no catalog in the chain defines the name.
        """
        if callable(parser):
            return parser
        method = self.get(parser)
        if method is None:
            raise UnknownParserError(f"no parser for type {parser}")
        return method

    def names(self) -> Iterable[str]:
        """All type names visible from this catalog."""
        seen = dict.fromkeys(self._parsers)
        if self.parent is not None:
            for name in self.parent.names():
                seen.setdefault(name, None)
        return list(seen)

    def __contains__(self, name: str) -> bool:
        return self.get(name) is not None

    def child(self, parsers: Optional[Mapping[str, Parser]] = None) -> 'ParserCatalog':
        """Create a catalog that overrides this one."""
        return ParserCatalog(parsers, parent=self)


default_catalog = ParserCatalog({
    'Bool': parse_bool,
    'Int': parse_int,
    'Float': parse_float,
    'String': parse_string,
    'Color': parse_color,
})


def get_parser(name: Union[str, Parser]) -> Parser:
    """Resolve a parser from the global catalog."""
    return default_catalog.resolve(name)
