"""In-memory implementation of the PlayCatalog."""

from collections.abc import Mapping
from typing import Any, Self

from theater.domain import Play
from theater.domain.errors import InvalidInvoiceError
from theater.stores.interfaces import PlayCatalog


class InMemoryPlayCatalog(PlayCatalog):
    """Play catalog backed by a read-only copy of a mapping.

    Entries may be ``Play`` objects or raw ``{"name": ..., "type": ...}``
    payloads; raw entries are parsed when they are looked up, so only plays
    an invoice actually references need a known type.
    """

    def __init__(self, plays: Mapping[str, Play | Mapping[str, Any]]) -> None:
        self._plays = dict(plays)

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> Self:
        """Build a catalog from ``{"hamlet": {"name": ..., "type": ...}}``.

        Raises:
            InvalidInvoiceError: If the payload is not an object of plays.
        """
        if not isinstance(raw, Mapping):
            raise InvalidInvoiceError("plays must be an object keyed by play ID")
        return cls(raw)

    def get_play(self, play_id: str) -> Play | None:
        """Return the play with this ID, or None if not found.

        Raises:
            UnknownPlayTypeError: If the stored entry has an unrecognised type.
            InvalidInvoiceError: If the stored entry is malformed.
        """
        entry = self._plays.get(play_id)
        if entry is None or isinstance(entry, Play):
            return entry
        return Play.from_dict(entry)
