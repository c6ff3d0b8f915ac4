"""MongoDB-backed document store shared by the item and order services."""

from .errors import (
    DocumentNotFoundError,
    InvalidDocumentError,
    InvalidIdError,
    StoreError,
    StoreUnavailableError,
)
from .mongo import DocumentStore, get_collection, serialize

__all__ = [
    "DocumentNotFoundError",
    "DocumentStore",
    "InvalidDocumentError",
    "InvalidIdError",
    "StoreError",
    "StoreUnavailableError",
    "get_collection",
    "serialize",
]
