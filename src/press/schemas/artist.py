"""Artist schemas for API request/response."""

from datetime import datetime

from pydantic import BaseModel, Field

from src.press.schemas.forms import FormModel


class ArtistForm(FormModel):
    """Fields an editor can submit for an artist."""

    name: str | None = Field(default=None, max_length=1000)
    death_year: int | None = None


class ArtistRead(BaseModel):
    id: int
    name: str
    url_name: str
    url: str
    death_year: int | None
    created_at: datetime
    updated_at: datetime
    alternate_names: list[str] = []

    model_config = {"from_attributes": True}
