"""item-service FastAPI application.

Responsibilities:
- Own the `items` collection
- Expose create / list / read / update / delete over HTTP

Every handler catches its own failures and answers with a JSON message;
the status codes below are what the gateway is built against.
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import Body, Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from docstore import DocumentStore, get_collection

from .config import LOG_LEVEL, MONGO_COLLECTION, MONGO_DB, MONGO_URI, PORT
from .models import Item

logger = logging.getLogger(__name__)

# Handlers take the raw JSON body; publish the stored fields in /api-docs.
ITEM_BODY = {
    "requestBody": {"content": {"application/json": {"schema": Item.model_json_schema()}}}
}

app = FastAPI(
    title="Item Management API",
    version="1.0.0",
    description="A simple API to manage items in the inventory",
    docs_url="/api-docs",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.on_event("startup")
def on_startup() -> None:
    """Connect to MongoDB once and keep the store on the app state."""
    logging.basicConfig(
        level=LOG_LEVEL,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    collection = get_collection(MONGO_URI, MONGO_DB, MONGO_COLLECTION)
    app.state.store = DocumentStore(collection, Item, Item)
    logger.info("ItemService running on port %s", PORT)


def get_store(request: Request) -> DocumentStore:
    return request.app.state.store


def _failure(status_code: int, message: str, error: Exception) -> JSONResponse:
    logger.warning("%s: %s", message, error)
    return JSONResponse(status_code=status_code, content={"message": message, "error": str(error)})


@app.get("/health")
def health() -> dict[str, str]:
    """Basic liveness endpoint."""
    return {"status": "ok"}


@app.post("/items", status_code=201, summary="Create a new item", openapi_extra=ITEM_BODY)
def create_item(payload: Any = Body(None), store: DocumentStore = Depends(get_store)):
    """Body fields: `name`, `description`, `price`. Other fields are dropped."""
    try:
        return store.create(payload)
    except Exception as e:
        return _failure(400, "Error creating item", e)


@app.get("/getAllItems", summary="Get all items")
def get_all_items(store: DocumentStore = Depends(get_store)):
    try:
        return store.list_all()
    except Exception as e:
        return _failure(400, "Internal server error", e)


@app.get("/getById/{item_id}", summary="Get item by ID")
def get_by_id(item_id: str, store: DocumentStore = Depends(get_store)):
    """A malformed or unknown id is reported as a 400, not a 404."""
    try:
        return store.find_by_id(item_id)
    except Exception as e:
        return _failure(400, "Error retrieving item", e)


@app.put("/update/{item_id}", summary="Update an existing item", openapi_extra=ITEM_BODY)
def update_item(item_id: str, payload: Any = Body(None), store: DocumentStore = Depends(get_store)):
    """Replace only the supplied fields and return the updated item."""
    try:
        updated = store.update_by_id(item_id, payload)
    except Exception as e:
        return _failure(400, "Item not updated", e)
    if updated is None:
        return JSONResponse(status_code=404, content={"message": "Item not found"})
    return updated


@app.delete("/delete/{item_id}", summary="Delete an item by ID")
def delete_item(item_id: str, store: DocumentStore = Depends(get_store)):
    """Return the deleted item, or null when nothing matched."""
    try:
        return store.delete_by_id(item_id)
    except Exception as e:
        return _failure(400, "Unable to delete", e)


def run() -> None:
    import uvicorn

    uvicorn.run("item_service.main:app", host="0.0.0.0", port=PORT)


if __name__ == "__main__":
    run()
