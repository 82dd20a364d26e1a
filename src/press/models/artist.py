"""Artwork artist models."""

from datetime import datetime

from sqlmodel import Field, SQLModel

from src.press.core.formatter import make_url_safe
from src.press.models.base import utc_now


class Artist(SQLModel, table=True):
    """Artist of a cover artwork.

    ``url_name`` is persisted for lookups, but ``slug`` and ``url`` are always
    derived from the current ``name`` so a rename is never masked by a stale value.
    """

    __tablename__ = "artists"

    id: int | None = Field(default=None, primary_key=True)
    name: str = Field(default="", max_length=255)
    url_name: str = Field(default="", max_length=255, unique=True, index=True)
    death_year: int | None = Field(default=None)
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)

    @property
    def slug(self) -> str:
        if not self.name:
            return ""
        return make_url_safe(self.name)

    @property
    def url(self) -> str:
        return f"/artworks/{self.slug}"


class ArtistAlternateName(SQLModel, table=True):
    """Another name an artist is known by, e.g. a pseudonym or transliteration."""

    __tablename__ = "artist_alternate_names"

    id: int | None = Field(default=None, primary_key=True)
    artist_id: int = Field(foreign_key="artists.id", ondelete="CASCADE", index=True)
    name: str = Field(max_length=255)
    url_name: str = Field(max_length=255, index=True)
