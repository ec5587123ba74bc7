from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from ..fields import Email, Rating

_FIELDS = ("food_name", "food_image", "restaurant_name", "rating", "user_email")


def _without_id(fields: dict[str, Any]) -> dict[str, Any]:
    # _id is assigned by MongoDB and immutable afterwards
    fields.pop("_id", None)
    return fields


class ReviewCreate(BaseModel):
    # Unknown fields are kept and stored with the review
    model_config = ConfigDict(extra="allow", populate_by_name=True)

    food_name: str = Field(..., alias="foodName", min_length=1)
    food_image: str = Field(..., alias="foodImage", min_length=1)
    restaurant_name: str = Field(..., alias="restaurantName", min_length=1)
    rating: Rating = Field(...)
    user_email: Email = Field(..., alias="userEmail")

    def to_document(self) -> dict[str, Any]:
        return _without_id(self.model_dump(by_alias=True))


class ReviewUpdate(BaseModel):
    """Partial update: every field is optional, but must be valid when given."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    food_name: str | None = Field(default=None, alias="foodName", min_length=1)
    food_image: str | None = Field(default=None, alias="foodImage", min_length=1)
    restaurant_name: str | None = Field(default=None, alias="restaurantName", min_length=1)
    rating: Rating | None = None
    user_email: Email | None = Field(default=None, alias="userEmail")

    @field_validator(*_FIELDS, mode="before")
    @classmethod
    def _reject_null(cls, value: Any) -> Any:
        if value is None:
            raise ValueError("Field may be omitted but not null")
        return value

    @model_validator(mode="after")
    def _not_empty(self) -> ReviewUpdate:
        extras = {k for k in (self.model_extra or {}) if k != "_id"}
        if not (self.model_fields_set - {"_id"}) and not extras:
            raise ValueError("No fields to update")
        return self

    def to_update(self) -> dict[str, Any]:
        fields = self.model_dump(by_alias=True, exclude_unset=True)
        fields.update(self.model_extra or {})
        return _without_id(fields)
