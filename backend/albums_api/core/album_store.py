"""Album Store — the process-wide ordered collection of albums.

Invariants:
    - Insertion order is the only ordering; records are never re-sorted
    - Lookups are linear scans returning the FIRST record whose id matches
      exactly (case-sensitive)
    - replace() keeps the record's position; remove() keeps the relative
      order of the remaining records
    - Duplicate ids are allowed; nothing here validates album contents

Design Decisions:
    - Explicitly owned object (held on app.state) over a module-level list,
      so tests get an isolated store per client
    - threading.Lock around every read/write: concurrent writers are
      serialized. No cross-call transactions (read-then-write by a client
      can still interleave with other requests)
    - Linear scan over a keyed dict: collections are small and duplicate
      ids must keep working
"""

import logging
import threading
from collections.abc import Iterable

from albums_api.core.errors import AlbumNotFoundError
from albums_api.core.seed_albums import SEED_ALBUMS
from albums_api.schemas.album import Album

logger = logging.getLogger(__name__)


class AlbumStore:
    """In-memory ordered album collection."""

    def __init__(self, albums: Iterable[Album] = ()):
        self._albums: list[Album] = list(albums)
        self._lock = threading.Lock()

    @classmethod
    def seeded(cls) -> "AlbumStore":
        """Store pre-loaded with the seed records."""
        return cls(album.model_copy() for album in SEED_ALBUMS)

    def __len__(self) -> int:
        with self._lock:
            return len(self._albums)

    def list_all(self) -> list[Album]:
        """Snapshot of every album in insertion order."""
        with self._lock:
            return list(self._albums)

    def find(self, album_id: str) -> Album:
        with self._lock:
            return self._albums[self._index_of(album_id)]

    def append(self, album: Album) -> Album:
        with self._lock:
            self._albums.append(album)
        logger.info("Album appended", extra={"album_id": album.id})
        return album

    def replace(self, album_id: str, album: Album) -> Album:
        """Swap the first match for `album`, including its id."""
        with self._lock:
            self._albums[self._index_of(album_id)] = album
        logger.info("Album replaced", extra={"album_id": album_id})
        return album

    def remove(self, album_id: str) -> Album:
        with self._lock:
            removed = self._albums.pop(self._index_of(album_id))
        logger.info("Album removed", extra={"album_id": album_id})
        return removed

    def _index_of(self, album_id: str) -> int:
        # Caller holds the lock.
        for i, album in enumerate(self._albums):
            if album.id == album_id:
                return i
        raise AlbumNotFoundError(album_id)
