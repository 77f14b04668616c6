"""
Metadata lookup for game entities.
"""

from mvplugins.meta.metadata import (
    HasMetadata, extract_from_meta, get_meta, parse_note_metadata
)
from mvplugins.meta.adapters import (
    ActorMetadata, MapMetadata, EventMetadata, PlayerMetadata, FollowerMetadata
)
