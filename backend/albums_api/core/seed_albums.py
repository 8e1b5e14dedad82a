"""Seed Albums — records loaded into the store at startup."""

from albums_api.schemas.album import Album


SEED_ALBUMS: tuple[Album, ...] = (
    Album(id="1", title="Blue Train", artist="John Coltrane", price=56.99),
    Album(id="2", title="Jeru", artist="Gerry Mulligan", price=17.99),
    Album(
        id="3", title="Sarah Vaughan and Clifford Brown",
        artist="Sarah Vaughan", price=39.99,
    ),
)
