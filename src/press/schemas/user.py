from uuid import UUID

from pydantic import BaseModel


class UserRead(BaseModel):
    id: int
    uuid: UUID
    name: str | None

    model_config = {"from_attributes": True}
