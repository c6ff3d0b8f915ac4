"""Store-level failures raised by `DocumentStore`.

Driver errors (`pymongo.errors.PyMongoError`) are not wrapped; handlers
catch both kinds.
"""

from __future__ import annotations


class StoreError(Exception):
    """Base class for document store failures."""


class InvalidIdError(StoreError):
    """The identifier is not a valid ObjectId."""

    def __init__(self, value: str) -> None:
        super().__init__(f'Cast to ObjectId failed for value "{value}" at path "_id"')
        self.value = value


class InvalidDocumentError(StoreError):
    """The payload does not fit the collection schema."""


class DocumentNotFoundError(StoreError):
    """No document has the requested identifier."""

    def __init__(self, doc_id: str) -> None:
        super().__init__(f"No document found for _id {doc_id}")
        self.doc_id = doc_id


class StoreUnavailableError(StoreError):
    """The client could not be built from the configured connection string."""
