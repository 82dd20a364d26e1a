"""Base class for form payloads that bind onto table models."""

from typing import Any

from pydantic import BaseModel


class FormModel(BaseModel):
    """Form payload whose submitted fields are copied onto an entity.

    Only fields the client actually sent are applied, so a partial form
    leaves the entity's other attributes untouched. Business rules are
    checked afterwards by the entity's validator, not here.
    """

    def apply_to(self, entity: Any) -> Any:
        for field_name in self.model_fields_set:
            setattr(entity, field_name, getattr(self, field_name))
        return entity
