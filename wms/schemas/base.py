"""Schema Base Classes — shared config and partial-update rules.

Invariants:
    - Response models read straight from ORM rows (from_attributes)
    - Update models reject explicit null for columns that are NOT NULL in storage
    - Unknown request fields are ignored (pydantic default)

Design Decisions:
    - Non-null guard lives on the schema, so a PATCH with {"name": null} is a
      400 validation error rather than a storage integrity failure
"""

from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field, model_validator


class ResponseModel(BaseModel):
    model_config = ConfigDict(from_attributes=True)


class UpdateModel(BaseModel):
    """Partial update payload. Merge with model_dump(exclude_unset=True)."""

    non_nullable: ClassVar[tuple[str, ...]] = ()

    @model_validator(mode="after")
    def reject_null_required(self):
        nulls = [
            name for name in self.non_nullable
            if name in self.model_fields_set and getattr(self, name) is None
        ]
        if nulls:
            raise ValueError(f"fields cannot be null: {', '.join(nulls)}")
        return self

    def changes(self) -> dict:
        """Only the fields the client actually sent, JSON-ready."""
        return self.model_dump(exclude_unset=True, mode="json")


class Dimensions(BaseModel):
    """Physical dimensions (meters)."""
    length: float = Field(ge=0)
    width: float = Field(ge=0)
    height: float = Field(ge=0)
