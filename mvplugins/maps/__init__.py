"""
Map data hooks.
"""

from mvplugins.maps.shadows import (
    erase_shadows, looks_like_map, load_map, ShadowEraserHook
)
