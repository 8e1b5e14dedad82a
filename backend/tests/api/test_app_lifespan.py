"""App Lifespan — store creation on startup, driven by settings."""

import logging

import pytest

from albums_api.config import get_settings
from albums_api.core.album_store import AlbumStore
from albums_api.infrastructure import observability
from albums_api.main import app


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch):
    monkeypatch.setenv("LOG_FORMAT", "text")
    get_settings.cache_clear()
    handlers, level = list(logging.root.handlers), logging.root.level
    yield
    get_settings.cache_clear()
    # startup installs a root handler; undo it for later tests
    logging.root.handlers[:] = handlers
    logging.root.setLevel(level)


async def test_startup_creates_seeded_store():
    async with app.router.lifespan_context(app):
        store = app.state.album_store
        assert isinstance(store, AlbumStore)
        assert [a.id for a in store.list_all()] == ["1", "2", "3"]


async def test_startup_without_seed(monkeypatch):
    monkeypatch.setenv("SEED_ALBUMS", "false")
    get_settings.cache_clear()
    async with app.router.lifespan_context(app):
        assert len(app.state.album_store) == 0


async def test_each_startup_gets_a_new_store():
    async with app.router.lifespan_context(app):
        app.state.album_store.remove("1")
    async with app.router.lifespan_context(app):
        assert len(app.state.album_store) == 3


async def test_earlier_startups_left_no_root_handler():
    # runs after the startups above; the fixture must have removed theirs
    assert observability._handler not in logging.root.handlers
