from __future__ import annotations

import re
from datetime import datetime, timezone
from typing import Any

from pymongo import DESCENDING

from ..storage.documents import insertion_result, serialize_review
from ..storage.ids import MALFORMED, NOT_FOUND, Lookup, LookupStatus, parse_object_id

TOP_LIMIT = 6


def build_filter(user_email: str | None = None, search: str | None = None) -> dict[str, Any]:
    """Translate list query parameters into a MongoDB filter document."""
    query: dict[str, Any] = {}
    if user_email:
        query["userEmail"] = user_email
    term = (search or "").strip()
    if term:
        query["foodName"] = {"$regex": re.escape(term), "$options": "i"}
    return query


async def list_reviews(
    collection: Any,
    user_email: str | None = None,
    search: str | None = None,
) -> list[dict[str, Any]]:
    cursor = collection.find(build_filter(user_email, search)).sort("date", DESCENDING)
    docs = await cursor.to_list(length=None)
    return [serialize_review(d) for d in docs]


async def top_reviews(collection: Any, limit: int = TOP_LIMIT) -> list[dict[str, Any]]:
    # Order among equal ratings is whatever the server returns
    cursor = collection.find({}).sort("rating", DESCENDING).limit(limit)
    docs = await cursor.to_list(length=None)
    return [serialize_review(d) for d in docs]


async def get_review(collection: Any, review_id: str) -> Lookup:
    oid = parse_object_id(review_id)
    if oid is None:
        return MALFORMED
    doc = await collection.find_one({"_id": oid})
    if doc is None:
        return NOT_FOUND
    return Lookup(LookupStatus.found, serialize_review(doc))


async def create_review(collection: Any, document: dict[str, Any]) -> dict[str, Any]:
    doc = {**document, "date": datetime.now(timezone.utc)}
    result = await collection.insert_one(doc)
    return insertion_result(result)


async def update_review(collection: Any, review_id: str, fields: dict[str, Any]) -> LookupStatus:
    oid = parse_object_id(review_id)
    if oid is None:
        return LookupStatus.malformed
    result = await collection.update_one({"_id": oid}, {"$set": fields})
    if result.matched_count == 0:
        return LookupStatus.not_found
    return LookupStatus.found


async def delete_review(collection: Any, review_id: str) -> LookupStatus:
    oid = parse_object_id(review_id)
    if oid is None:
        return LookupStatus.malformed
    result = await collection.delete_one({"_id": oid})
    if result.deleted_count == 0:
        return LookupStatus.not_found
    return LookupStatus.found
