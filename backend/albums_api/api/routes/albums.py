"""Albums — the five CRUD endpoints over the in-memory AlbumStore.

Invariants:
    - Request bodies are decoded by Pydantic before reaching the handler
      (decode failures become 400 before any lookup happens)
    - Unknown ids surface as AlbumNotFoundError → 404 "Album not found"
    - PUT replaces the whole record, including its id

Design Decisions:
    - Routes never touch the list directly; the store owns ordering and scans
    - PUT with body id != path id renames the record silently (kept behavior)
"""

import logging

from fastapi import APIRouter, Depends, status

from albums_api.api.dependencies import get_album_store
from albums_api.core.album_store import AlbumStore
from albums_api.schemas.album import (
    Album, AlbumEnvelope, AlbumListEnvelope, EmptyEnvelope, ErrorEnvelope,
)

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/albums", tags=["albums"])

_NOT_FOUND = {status.HTTP_404_NOT_FOUND: {"model": ErrorEnvelope}}
_BAD_BODY = {status.HTTP_400_BAD_REQUEST: {"model": ErrorEnvelope}}


@router.get("", response_model=AlbumListEnvelope)
async def list_albums(store: AlbumStore = Depends(get_album_store)):
    """Every album in insertion order."""
    return AlbumListEnvelope(data=store.list_all())


@router.get(
    "/{album_id}", response_model=AlbumEnvelope, responses=_NOT_FOUND,
)
async def get_album(
    album_id: str, store: AlbumStore = Depends(get_album_store),
):
    """First album whose id matches exactly."""
    return AlbumEnvelope(data=store.find(album_id))


@router.post(
    "", response_model=AlbumEnvelope,
    status_code=status.HTTP_201_CREATED, responses=_BAD_BODY,
)
async def create_album(
    album: Album, store: AlbumStore = Depends(get_album_store),
):
    """Append the album verbatim — no id assignment, no uniqueness check."""
    return AlbumEnvelope(data=store.append(album))


@router.put(
    "/{album_id}", response_model=AlbumEnvelope,
    responses={**_BAD_BODY, **_NOT_FOUND},
)
async def update_album(
    album_id: str, album: Album,
    store: AlbumStore = Depends(get_album_store),
):
    """Replace the first match in place with the request body."""
    if album.id != album_id:
        logger.info(
            f"Album '{album_id}' renamed to '{album.id}' by update",
            extra={"album_id": album_id},
        )
    return AlbumEnvelope(data=store.replace(album_id, album))


@router.delete(
    "/{album_id}", response_model=EmptyEnvelope, responses=_NOT_FOUND,
)
async def delete_album(
    album_id: str, store: AlbumStore = Depends(get_album_store),
):
    """Remove the first match; remaining albums keep their order."""
    store.remove(album_id)
    return EmptyEnvelope()
