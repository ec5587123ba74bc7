from __future__ import annotations

from typing import Any

from bson import ObjectId


def _num(v: Any) -> Any:
    # numeric strings from older writes -> int/float
    if isinstance(v, (int, float)):
        return v
    if isinstance(v, str):
        raw = v.strip()
        try:
            return int(raw)
        except ValueError:
            pass
        try:
            return float(raw)
        except ValueError:
            return v
    return v


def serialize_document(doc: dict[str, Any]) -> dict[str, Any]:
    """Copy a stored document with every ``ObjectId`` turned into its hex string."""
    out: dict[str, Any] = {}
    for key, value in doc.items():
        if isinstance(value, ObjectId):
            out[key] = str(value)
        elif isinstance(value, dict):
            out[key] = serialize_document(value)
        else:
            out[key] = value
    return out


def serialize_review(doc: dict[str, Any]) -> dict[str, Any]:
    out = serialize_document(doc)
    if "rating" in out:
        out["rating"] = _num(out["rating"])
    return out


def insertion_result(result: Any) -> dict[str, Any]:
    """Render a driver ``InsertOneResult`` the way clients of the API expect it."""
    return {
        "acknowledged": result.acknowledged,
        "insertedId": str(result.inserted_id),
    }
