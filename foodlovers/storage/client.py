from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from fastapi import Request
from pymongo import ASCENDING, TEXT, AsyncMongoClient
from pymongo.errors import PyMongoError

from ..config import DEFAULT_CONFIG, AppConfig

logger = logging.getLogger(__name__)

REVIEWS_COLLECTION = "reviews"
FAVORITES_COLLECTION = "favorites"


@dataclass(frozen=True)
class Storage:
    client: Any
    db: Any
    reviews: Any
    favorites: Any


async def _ensure_indexes(storage: Storage) -> None:
    await storage.reviews.create_index([("foodName", TEXT)])
    await storage.favorites.create_index(
        [("userEmail", ASCENDING), ("reviewId", ASCENDING)],
        unique=True,
        name="userEmail_reviewId_unique",
    )


async def connect_storage(config: AppConfig = DEFAULT_CONFIG) -> Storage:
    """
    Open the MongoDB connection and bind both collections.

    Pings the server first so an unreachable database fails startup
    instead of the first request. Errors are logged and re-raised.
    """
    client = AsyncMongoClient(
        config.mongo_uri,
        serverSelectionTimeoutMS=config.server_selection_timeout_ms,
    )
    try:
        await client.admin.command("ping")
        db = client[config.db_name]
        storage = Storage(
            client=client,
            db=db,
            reviews=db[REVIEWS_COLLECTION],
            favorites=db[FAVORITES_COLLECTION],
        )
        await _ensure_indexes(storage)
    except PyMongoError:
        logger.exception("MongoDB connection failed")
        await client.close()
        raise

    logger.info("MongoDB connected (database=%s)", config.db_name)
    return storage


async def close_storage(storage: Storage) -> None:
    await storage.client.close()
    logger.info("MongoDB connection closed")


async def ping_storage(storage: Storage) -> bool:
    """Return ``True`` if the server answers a ping."""
    try:
        await storage.db.command("ping")
    except PyMongoError as exc:
        logger.warning("MongoDB ping failed: %s", exc)
        return False
    return True


def get_storage(request: Request) -> Storage:
    """FastAPI dependency returning the handle opened during startup."""
    return request.app.state.storage
