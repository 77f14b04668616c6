#!/usr/bin/env python3
"""
HasMetadata adapters for the engine's entity kinds.

Actors, maps and events read metadata from their own database record.
The player and followers have no record of their own and use the metadata
of the actor they show (the party leader for the player).
"""

from typing import Any, Callable, Mapping, Optional

from mvplugins.meta.metadata import parse_note_metadata

Record = Mapping[str, Any]


def record_metadata(record: Optional[Record]) -> Optional[Mapping[str, Any]]:
    """
    Metadata of a database record.

    Records loaded by the engine already carry ``meta``; raw JSON records only
    have the note, which is parsed on the fly.
    """
    if record is None:
        return None
    if 'meta' in record:
        return record['meta']
    if 'note' in record:
        return parse_note_metadata(record['note'])
    return None


class RecordMetadata:
    """Metadata read from a database record."""

    def __init__(self, record: Optional[Record]):
        self.record = record

    def get_metadata(self) -> Optional[Mapping[str, Any]]:
        return record_metadata(self.record)

    def __repr__(self) -> str:
        name = self.record.get('name') if self.record else None
        return f"<{type(self).__name__} {name!r}>"


class ActorMetadata(RecordMetadata):
    """An actor, from its $dataActors record."""


class MapMetadata(RecordMetadata):
    """The current map, from its MapXXX.json data."""


class EventMetadata(RecordMetadata):
    """A map event. Metadata belongs to the event, not to its pages."""


class _ActorBackedMetadata:
    def __init__(self, actor: Callable[[], Optional[Record]]):
        self._actor = actor

    def get_metadata(self) -> Optional[Mapping[str, Any]]:
        return record_metadata(self._actor())


class PlayerMetadata(_ActorBackedMetadata):
    """
    The player character.

    Args:
        leader: Returns the party leader's actor record, or None for an
            empty party.
    """


class FollowerMetadata(_ActorBackedMetadata):
    """
    A party follower.

    Args:
        actor: Returns the follower's actor record, or None when the slot is
            empty.
    """
