"""Artist catalog service - validation and persistence of artwork artists."""

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from src.press.core.config import get_settings
from src.press.core.exceptions import ArtistNotFoundError, InvalidArtistError
from src.press.core.logging import get_logger
from src.press.core.validation import ErrorCode, ValidationResult
from src.press.models import Artist
from src.press.models.base import utc_now
from src.press.repositories import ArtistRepository

logger = get_logger(__name__)

ANONYMOUS = "Anonymous"


class ArtistService:
    """Artist catalog service - business logic only."""

    def __init__(self, artist_repo: ArtistRepository, session: AsyncSession):
        self.artist_repo = artist_repo
        self.session = session

    def validate(self, artist: Artist) -> ValidationResult:
        """Check an artist's fields, normalizing them in place.

        Trims the name and drops the death year of anonymous artists before
        checking. Every problem is collected; nothing is raised.
        """
        settings = get_settings()
        result = ValidationResult()
        this_year = utc_now().year

        artist.name = (artist.name or "").strip()

        if artist.name == "":
            result.add("name", ErrorCode.REQUIRED, "An artist name is required.")
        elif len(artist.name) > settings.artwork_max_string_length:
            result.add("name", ErrorCode.TOO_LONG, "Artist Name is too long.")
        elif artist.slug == "":
            # Punctuation-only names would have no URL
            result.add(
                "name", ErrorCode.INVALID_FORMAT, "Artist Name must contain letters or digits."
            )

        if artist.name == ANONYMOUS and artist.death_year is not None:
            artist.death_year = None

        if artist.death_year is not None and (
            artist.death_year <= 0
            or artist.death_year > this_year + settings.death_year_future_margin
        ):
            result.add("death_year", ErrorCode.OUT_OF_RANGE, "Invalid year of death.")

        return result

    async def create(self, artist: Artist) -> Artist:
        """Validate and insert an artist.

        Raises:
            InvalidArtistError: With every field error found, or a duplicate
                error on ``name`` when another artist already has the same slug.
        """
        result = self.validate(artist)
        if not result.is_valid:
            raise InvalidArtistError(result)

        now = utc_now()
        artist.url_name = artist.slug
        artist.created_at = now
        artist.updated_at = now

        try:
            self.artist_repo.add(artist)
            await self.session.commit()
            await self.session.refresh(artist)
        except IntegrityError as e:
            await self.session.rollback()
            result.add("name", ErrorCode.DUPLICATE, "An artist with this name already exists.")
            raise InvalidArtistError(result) from e
        except Exception:
            await self.session.rollback()
            raise

        logger.info("Artist created", artist_id=artist.id, url_name=artist.url_name)
        return artist

    async def get_or_create(self, candidate: Artist) -> Artist:
        """Return the artist whose primary or alternate slug matches, else create it.

        ``artists.url_name`` is unique, so when two requests race to create
        the same artist the loser re-reads and returns the winner's row.
        """
        url_name = candidate.slug
        if url_name:
            existing = await self.artist_repo.get_by_any_url_name(url_name)
            if existing is not None:
                return existing

        try:
            return await self.create(candidate)
        except InvalidArtistError as e:
            if not e.result.has_error("name", ErrorCode.DUPLICATE):
                raise
            existing = await self.artist_repo.get_by_any_url_name(url_name)
            if existing is None:
                raise
            logger.info("Artist created concurrently, reusing", artist_id=existing.id)
            return existing

    async def get(self, artist_id: int | None) -> Artist:
        artist = await self.artist_repo.get_by_id(artist_id)
        if artist is None:
            raise ArtistNotFoundError()
        return artist

    async def get_all(self) -> list[Artist]:
        return await self.artist_repo.list_all()

    async def get_by_alternate_url_name(self, url_name: str | None) -> Artist:
        if url_name is None:
            raise ArtistNotFoundError()
        artist = await self.artist_repo.get_by_alternate_url_name(url_name)
        if artist is None:
            raise ArtistNotFoundError()
        return artist

    async def get_alternate_names(self, artist: Artist) -> list[str]:
        """Alternate names, read fresh on every call."""
        if artist.id is None:
            return []
        return await self.artist_repo.list_alternate_names(artist.id)

    async def delete(self, artist: Artist) -> None:
        """Delete the artist and its alternate names in one transaction."""
        if artist.id is None:
            raise ArtistNotFoundError()

        artist_id = artist.id
        try:
            await self.artist_repo.delete_with_alternate_names(artist_id)
            await self.session.commit()
        except Exception:
            await self.session.rollback()
            raise

        logger.info("Artist deleted", artist_id=artist_id)
