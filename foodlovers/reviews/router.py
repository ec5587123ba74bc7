from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends, Query, status

from ..errors import raise_for_status
from ..storage.client import Storage, get_storage
from . import repository
from .models import ReviewCreate, ReviewUpdate

router = APIRouter(prefix="/reviews", tags=["reviews"])

_RESOURCE = "Review"


@router.get("")
async def list_reviews(
    user_email: str | None = Query(default=None, alias="userEmail"),
    search: str | None = None,
    storage: Storage = Depends(get_storage),
) -> dict[str, Any]:
    reviews = await repository.list_reviews(storage.reviews, user_email, search)
    return {"reviews": reviews}


# Declared before /{review_id} so "top" is not taken for an id
@router.get("/top")
async def top_reviews(storage: Storage = Depends(get_storage)) -> list[dict[str, Any]]:
    return await repository.top_reviews(storage.reviews)


@router.get("/{review_id}")
async def get_review(review_id: str, storage: Storage = Depends(get_storage)) -> dict[str, Any]:
    lookup = await repository.get_review(storage.reviews, review_id)
    raise_for_status(lookup.status, _RESOURCE)
    return lookup.document


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_review(
    body: ReviewCreate,
    storage: Storage = Depends(get_storage),
) -> dict[str, Any]:
    return await repository.create_review(storage.reviews, body.to_document())


@router.put("/{review_id}")
async def update_review(
    review_id: str,
    body: ReviewUpdate,
    storage: Storage = Depends(get_storage),
) -> dict[str, str]:
    outcome = await repository.update_review(storage.reviews, review_id, body.to_update())
    raise_for_status(outcome, _RESOURCE)
    return {"message": "Review updated"}


@router.delete("/{review_id}")
async def delete_review(review_id: str, storage: Storage = Depends(get_storage)) -> dict[str, str]:
    outcome = await repository.delete_review(storage.reviews, review_id)
    raise_for_status(outcome, _RESOURCE)
    return {"message": "Review deleted"}
