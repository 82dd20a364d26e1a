"""Repository for Ebook and EbookPlaceholder entities."""

from sqlalchemy import update
from sqlmodel import select

from src.press.models import Ebook, EbookPlaceholder
from src.press.repositories.base import BaseRepository


class EbookRepository(BaseRepository[Ebook]):
    """Repository for ebooks and their placeholder records."""

    model = Ebook

    async def get_placeholder(self, ebook_id: int) -> EbookPlaceholder | None:
        result = await self.session.execute(
            select(EbookPlaceholder).where(EbookPlaceholder.ebook_id == ebook_id)
        )
        return result.scalar_one_or_none()

    async def is_placeholder(self, ebook_id: int) -> bool:
        return await self.get_placeholder(ebook_id) is not None

    async def set_in_progress(self, ebook_id: int, in_progress: bool) -> int:
        """Flip the placeholder's in-progress flag. Returns rows updated (no commit)."""
        stmt = (
            update(EbookPlaceholder)
            .where(EbookPlaceholder.ebook_id == ebook_id)  # type: ignore[arg-type]
            .values(is_in_progress=in_progress)
        )
        result = await self.session.execute(stmt)
        return result.rowcount or 0  # type: ignore[attr-defined]
