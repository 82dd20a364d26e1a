"""Ebook models (only the parts projects depend on)."""

from sqlmodel import Field, SQLModel


class Ebook(SQLModel, table=True):
    __tablename__ = "ebooks"

    id: int | None = Field(default=None, primary_key=True)
    title: str = Field(max_length=255)
    url_name: str = Field(max_length=255, unique=True, index=True)


class EbookPlaceholder(SQLModel, table=True):
    """Marks an ebook as not yet released. Its presence makes the ebook a placeholder."""

    __tablename__ = "ebook_placeholders"

    ebook_id: int = Field(foreign_key="ebooks.id", ondelete="CASCADE", primary_key=True)
    is_in_progress: bool = Field(default=False)
