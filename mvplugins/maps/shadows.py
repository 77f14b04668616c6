#!/usr/bin/env python3
"""
Shadow removal for map data.

A map's ``data`` array stores ``width * height`` tile ids per layer: four
tile layers, then the shadow layer, then the region layer. Clearing the
second-to-last layer removes the auto-shadows the editor paints beside walls.
"""

from typing import Any, Callable, MutableMapping, MutableSequence, Optional

from mvplugins.base.errors import MapDataError
from mvplugins.utils.json_utils import load_json
from mvplugins.utils.logging_config import get_logger

logger = get_logger("MAPS")


def looks_like_map(obj: Any) -> bool:
    """True for map data: a mapping with width, height and data."""
    return (
        isinstance(obj, MutableMapping)
        and 'width' in obj
        and 'height' in obj
        and isinstance(obj.get('data'), list)
    )


def erase_shadows(map_data: MutableMapping[str, Any]) -> int:
    """
    Zero the shadow layer of a map in place.

    Args:
        map_data: Map data with ``width``, ``height`` and ``data``.

    Returns:
        The number of cells cleared.

    Raises:
        MapDataError: If fields are missing, ``data`` is not a list, or it
            holds fewer than the shadow and region layers.
    """
    try:
        width = int(map_data['width'])
        height = int(map_data['height'])
        data = map_data['data']
    except (KeyError, TypeError, ValueError) as e:
        raise MapDataError(f"Map data lacks width/height/data: {e}") from e
    if not isinstance(data, MutableSequence):
        raise MapDataError(f"Map data must be a list, got {type(data).__name__}")

    cells = width * height
    length = len(data)
    if cells < 0 or length < cells * 2:
        raise MapDataError(
            f"Map data has {length} entries, expected at least {cells * 2} for a {width}x{height} map")

    start, end = length - cells * 2, length - cells
    data[start:end] = [0] * cells
    logger.debug(f"Erased shadows of {width}x{height} map (entries {start}-{end - 1})")
    return cells


class ShadowEraserHook:
    """
    Data-load hook: strips shadows from maps, then calls the previous hook.

    Usage:
        data_manager.on_load = ShadowEraserHook(data_manager.on_load)
    """

    def __init__(self, previous: Optional[Callable[[Any], Any]] = None,
                 is_map: Callable[[Any], bool] = looks_like_map):
        self.previous = previous
        self.is_map = is_map

    def __call__(self, obj: Any) -> Any:
        if self.is_map(obj):
            erase_shadows(obj)
        if self.previous is not None:
            return self.previous(obj)
        return None


def load_map(file_path: str, erase: bool = True) -> MutableMapping[str, Any]:
    """Load a MapXXX.json file, stripping its shadows unless ``erase`` is False."""
    map_data = load_json(file_path)
    if not looks_like_map(map_data):
        raise MapDataError(f"{file_path} is not map data")
    if erase:
        erase_shadows(map_data)
    return map_data
