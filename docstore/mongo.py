"""MongoDB helpers shared by the backend services.

Each service owns exactly one collection. The collection handle is opened
once at startup and wrapped in a `DocumentStore`, which the route handlers
receive through a FastAPI dependency.

The store's pydantic schema acts as the model layer:
- unknown fields are dropped
- values are cast to the declared type ("1.5" -> 1.5)
- a value that cannot be cast is rejected with `InvalidDocumentError`
"""

from __future__ import annotations

import logging
from typing import Any

from bson import ObjectId
from bson.errors import InvalidId
from pydantic import BaseModel, ValidationError
from pymongo import MongoClient, ReturnDocument, errors

from .errors import (
    DocumentNotFoundError,
    InvalidDocumentError,
    InvalidIdError,
    StoreUnavailableError,
)

logger = logging.getLogger(__name__)


def get_collection(uri: str, db_name: str, collection_name: str):
    """Connect to MongoDB and return the configured collection.

    MongoClient connects lazily, so we ping once to report the outcome.
    A failed ping is only logged: the handle is returned anyway and every
    request will fail until the server becomes reachable.

    If the URI itself is unusable (bad port, unresolvable SRV record) there
    is no client at all; an `UnavailableCollection` is returned instead so
    the service still starts and each request fails with a store error.
    """
    try:
        client = MongoClient(uri)
    except (errors.PyMongoError, ValueError) as e:
        logger.error("[Mongo] Connection error: %s", e)
        return UnavailableCollection(str(e))
    try:
        client.admin.command("ping")
        logger.info("[Mongo] Connected to %s/%s", db_name, collection_name)
    except errors.PyMongoError as e:
        logger.error("[Mongo] Connection error: %s", e)
    return client[db_name][collection_name]


class UnavailableCollection:
    """Stands in for the collection when no client could be created.

    Any collection call raises `StoreUnavailableError`.
    """

    def __init__(self, reason: str) -> None:
        self.reason = reason

    def __getattr__(self, name: str):
        if name.startswith("_"):
            raise AttributeError(name)
        raise StoreUnavailableError(self.reason)


def serialize(doc: dict[str, Any] | None) -> dict[str, Any] | None:
    """Make a stored document JSON-friendly (`_id` becomes a string)."""
    if doc is None:
        return None
    out = dict(doc)
    if isinstance(out.get("_id"), ObjectId):
        out["_id"] = str(out["_id"])
    return out


def _object_id(doc_id: str) -> ObjectId:
    try:
        return ObjectId(doc_id)
    except (InvalidId, TypeError):
        raise InvalidIdError(doc_id) from None


class DocumentStore:
    """CRUD over one collection.

    Args:
        collection: pymongo collection handle.
        schema: model validating a full document on create.
        patch_schema: model with every field optional, validating updates.
    """

    def __init__(self, collection, schema: type[BaseModel], patch_schema: type[BaseModel]) -> None:
        self.collection = collection
        self.schema = schema
        self.patch_schema = patch_schema

    def _validate(self, model: type[BaseModel], payload: Any) -> dict[str, Any]:
        try:
            return model.model_validate(payload).model_dump(exclude_unset=True)
        except ValidationError as e:
            raise InvalidDocumentError(str(e)) from e

    def create(self, payload: Any) -> dict[str, Any]:
        doc = self._validate(self.schema, payload)
        result = self.collection.insert_one(doc)
        doc["_id"] = result.inserted_id
        logger.debug("[Mongo] Inserted %s", result.inserted_id)
        return serialize(doc)

    def list_all(self) -> list[dict[str, Any]]:
        return [serialize(doc) for doc in self.collection.find({})]

    def find_by_id(self, doc_id: str) -> dict[str, Any]:
        doc = self.collection.find_one({"_id": _object_id(doc_id)})
        if doc is None:
            raise DocumentNotFoundError(doc_id)
        return serialize(doc)

    def update_by_id(self, doc_id: str, payload: Any) -> dict[str, Any] | None:
        """Set only the supplied fields; return the updated document or None."""
        oid = _object_id(doc_id)
        changes = self._validate(self.patch_schema, payload)
        if not changes:
            return serialize(self.collection.find_one({"_id": oid}))
        doc = self.collection.find_one_and_update(
            {"_id": oid},
            {"$set": changes},
            return_document=ReturnDocument.AFTER,
        )
        return serialize(doc)

    def delete_by_id(self, doc_id: str) -> dict[str, Any] | None:
        """Remove a document and return it, or None if nothing matched."""
        doc = self.collection.find_one_and_delete({"_id": _object_id(doc_id)})
        if doc is not None:
            logger.debug("[Mongo] Deleted %s", doc_id)
        return serialize(doc)
