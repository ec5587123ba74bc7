from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends, HTTPException, status

from ..errors import raise_for_status
from ..storage.client import Storage, get_storage
from . import repository
from .models import FavoriteCreate

router = APIRouter(prefix="/favorites", tags=["favorites"])


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_favorite(
    body: FavoriteCreate,
    storage: Storage = Depends(get_storage),
) -> dict[str, Any]:
    try:
        return await repository.create_favorite(storage.favorites, body.to_document())
    except repository.AlreadyFavorited:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Review already favorited")


@router.get("/{email}")
async def list_favorites(email: str, storage: Storage = Depends(get_storage)) -> list[dict[str, Any]]:
    return await repository.list_favorites(storage.favorites, storage.reviews, email)


@router.delete("/{favorite_id}")
async def delete_favorite(favorite_id: str, storage: Storage = Depends(get_storage)) -> dict[str, str]:
    outcome = await repository.delete_favorite(storage.favorites, favorite_id)
    raise_for_status(outcome, "Favorite")
    return {"message": "Favorite removed"}
