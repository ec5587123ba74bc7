from __future__ import annotations

import asyncio
import logging
from datetime import datetime, timezone
from typing import Any

from pymongo import DESCENDING
from pymongo.errors import DuplicateKeyError

from ..storage.documents import insertion_result, serialize_document, serialize_review
from ..storage.ids import LookupStatus, parse_object_id

logger = logging.getLogger(__name__)


class AlreadyFavorited(Exception):
    """The (userEmail, reviewId) pair is already stored."""


async def create_favorite(collection: Any, document: dict[str, Any]) -> dict[str, Any]:
    """
    Insert a favorite stamped with the current time.

    Uniqueness comes from the compound unique index on
    (userEmail, reviewId), so concurrent duplicates cannot both land.
    """
    doc = {**document, "date": datetime.now(timezone.utc)}
    try:
        result = await collection.insert_one(doc)
    except DuplicateKeyError as exc:
        logger.debug(
            "Duplicate favorite %s -> %s", document.get("userEmail"), document.get("reviewId")
        )
        raise AlreadyFavorited() from exc
    return insertion_result(result)


async def _joined_review(reviews: Any, review_id: Any) -> dict[str, Any] | None:
    oid = parse_object_id(review_id)
    if oid is None:
        return None
    doc = await reviews.find_one({"_id": oid})
    return serialize_review(doc) if doc is not None else None


async def list_favorites(favorites: Any, reviews: Any, user_email: str) -> list[dict[str, Any]]:
    """
    Return the user's favorites, each with its review embedded under ``review``.

    A malformed or dangling ``reviewId`` yields ``review: None`` for that
    item only; storage errors still propagate.
    """
    cursor = favorites.find({"userEmail": user_email}).sort("date", DESCENDING)
    docs = await cursor.to_list(length=None)
    joined = await asyncio.gather(*(_joined_review(reviews, d.get("reviewId")) for d in docs))
    return [{**serialize_document(d), "review": review} for d, review in zip(docs, joined)]


async def delete_favorite(collection: Any, favorite_id: str) -> LookupStatus:
    oid = parse_object_id(favorite_id)
    if oid is None:
        return LookupStatus.malformed
    result = await collection.delete_one({"_id": oid})
    if result.deleted_count == 0:
        return LookupStatus.not_found
    return LookupStatus.found
