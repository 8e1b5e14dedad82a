"""Album Schemas — the Album shape and the {success, data, error} envelopes.

Invariants:
    - Album fields default to zero values ("" / 0.0) when absent or null
    - price takes JSON numbers only (no numeric strings, no booleans)
    - Unknown body fields are ignored
    - Success envelopes never carry `error`; failure envelopes always do
    - `data` is always serialized (null when there is nothing to return)

Design Decisions:
    - One envelope model per response kind over a single `data: Any` model:
      keeps the wire contract explicit per route while producing the same JSON
    - No range/format checks: negative prices and empty ids are accepted as-is
"""

from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Strict, field_validator


class Album(BaseModel):
    """A record album."""
    model_config = ConfigDict(extra="ignore")

    id: str = ""
    title: str = ""
    artist: str = ""
    price: Annotated[float, Strict()] = 0.0

    @field_validator("id", "title", "artist", "price", mode="before")
    @classmethod
    def null_to_zero_value(cls, v, info):
        if v is None:
            return cls.model_fields[info.field_name].default
        return v


class AlbumEnvelope(BaseModel):
    """Single album response (GET by id, POST, PUT)."""
    success: Literal[True] = True
    data: Album


class AlbumListEnvelope(BaseModel):
    """Full collection response (GET /albums)."""
    success: Literal[True] = True
    data: list[Album]


class EmptyEnvelope(BaseModel):
    """Success without payload (DELETE)."""
    success: Literal[True] = True
    data: None = None


class ErrorEnvelope(BaseModel):
    """Failure response — 400, 404 and 500 all share this shape."""
    success: Literal[False] = False
    data: None = None
    error: str
