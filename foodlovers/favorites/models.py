from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from ..fields import Email


class FavoriteCreate(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    user_email: Email = Field(..., alias="userEmail")
    review_id: str = Field(..., alias="reviewId", min_length=1)

    def to_document(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True)
