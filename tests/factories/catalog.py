"""Artist and ebook factories for test data generation."""

from uuid import uuid4

from polyfactory import Use

from src.press.models import Artist, ArtistAlternateName, Ebook, EbookPlaceholder
from tests.factories.base import BaseFactory, utc_now


class ArtistFactory(BaseFactory):
    """Factory for generating Artist test data.

    ``url_name`` is random so directly inserted rows never collide; artists
    saved through the service get it recomputed from the name.
    """

    __model__ = Artist

    id = None
    name = Use(lambda: f"Artist {uuid4().hex[:8]}")
    url_name = Use(lambda: f"artist-{uuid4().hex[:8]}")
    death_year = None
    created_at = Use(utc_now)
    updated_at = Use(utc_now)


class ArtistAlternateNameFactory(BaseFactory):
    __model__ = ArtistAlternateName

    id = None
    artist_id = None
    name = "Alternate Name"
    url_name = "alternate-name"


class EbookFactory(BaseFactory):
    __model__ = Ebook

    id = None
    title = "Test Ebook"
    url_name = Use(lambda: f"test-author/ebook-{uuid4().hex[:8]}")


class EbookPlaceholderFactory(BaseFactory):
    __model__ = EbookPlaceholder

    ebook_id = None
    is_in_progress = False
