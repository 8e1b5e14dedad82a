"""Route Dependencies — hands the app-owned AlbumStore to route handlers."""

from fastapi import Request

from albums_api.core.album_store import AlbumStore


def get_album_store(request: Request) -> AlbumStore:
    """The store created by the lifespan and held on app.state."""
    return request.app.state.album_store
