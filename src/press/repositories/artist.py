"""Repository for Artist entity and its alternate names."""

from sqlalchemy import delete, or_
from sqlmodel import select

from src.press.models import Artist, ArtistAlternateName
from src.press.repositories.base import BaseRepository


class ArtistRepository(BaseRepository[Artist]):
    """Repository for Artist entity."""

    model = Artist

    async def list_all(self) -> list[Artist]:
        """All artists, alphabetical by name."""
        result = await self.session.execute(select(Artist).order_by(Artist.name.asc()))
        return list(result.scalars().all())

    async def get_by_alternate_url_name(self, url_name: str) -> Artist | None:
        """Get the artist owning an alternate name with this slug."""
        result = await self.session.execute(
            select(Artist)
            .join(ArtistAlternateName, ArtistAlternateName.artist_id == Artist.id)
            .where(ArtistAlternateName.url_name == url_name)
            .order_by(Artist.id)
            .limit(1)
        )
        return result.scalars().first()

    async def get_by_any_url_name(self, url_name: str) -> Artist | None:
        """Match the primary slug or any alternate-name slug."""
        result = await self.session.execute(
            select(Artist)
            .outerjoin(ArtistAlternateName, ArtistAlternateName.artist_id == Artist.id)
            .where(
                or_(
                    Artist.url_name == url_name,
                    ArtistAlternateName.url_name == url_name,
                )
            )
            .order_by(Artist.id)
            .limit(1)
        )
        return result.scalars().first()

    async def list_alternate_names(self, artist_id: int) -> list[str]:
        result = await self.session.execute(
            select(ArtistAlternateName.name)
            .where(ArtistAlternateName.artist_id == artist_id)
            .order_by(ArtistAlternateName.id)
        )
        return list(result.scalars().all())

    async def delete_with_alternate_names(self, artist_id: int) -> None:
        """Delete alternate names then the artist row (no commit)."""
        await self.session.execute(
            delete(ArtistAlternateName).where(
                ArtistAlternateName.artist_id == artist_id  # type: ignore[arg-type]
            )
        )
        await self.session.execute(
            delete(Artist).where(Artist.id == artist_id)  # type: ignore[arg-type]
        )
