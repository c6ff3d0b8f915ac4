"""order-service FastAPI application.

Same CRUD shape as item-service, on the `orders` collection. Error bodies are
`{"error": "..."}` and the status codes differ from item-service:

    list / read failures  -> 500 / 404
    create / update / delete failures -> 400
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import Body, Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from docstore import DocumentStore, get_collection

from .config import LOG_LEVEL, MONGO_COLLECTION, MONGO_DB, MONGO_URI, PORT
from .models import Order, OrderPatch

logger = logging.getLogger(__name__)

# Handlers take the raw JSON body; publish the stored fields in /api-docs.
ORDER_BODY = {
    "requestBody": {"content": {"application/json": {"schema": Order.model_json_schema()}}}
}
ORDER_PATCH_BODY = {
    "requestBody": {"content": {"application/json": {"schema": OrderPatch.model_json_schema()}}}
}

app = FastAPI(
    title="Orders Management API",
    version="1.0.0",
    description="API for managing orders",
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
    app.state.store = DocumentStore(collection, Order, OrderPatch)
    logger.info("OrderService running on port %s", PORT)


def get_store(request: Request) -> DocumentStore:
    return request.app.state.store


def _error(status_code: int, error: Exception) -> JSONResponse:
    logger.warning("[Orders] %s", error)
    return JSONResponse(status_code=status_code, content={"error": str(error)})


@app.get("/health")
def health() -> dict[str, str]:
    """Basic liveness endpoint."""
    return {"status": "ok"}


@app.post("/orders", status_code=201, summary="Create a new order", openapi_extra=ORDER_BODY)
def create_order(payload: Any = Body(None), store: DocumentStore = Depends(get_store)):
    """Body fields: `productName`, `quantity`, `totalPrice` (all required)."""
    try:
        return store.create(payload)
    except Exception as e:
        return _error(400, e)


@app.get("/orders", summary="Get all orders")
def get_orders(store: DocumentStore = Depends(get_store)):
    try:
        return store.list_all()
    except Exception as e:
        return _error(500, e)


@app.get("/orders/{order_id}", summary="Get an order by ID")
def get_order(order_id: str, store: DocumentStore = Depends(get_store)):
    try:
        return store.find_by_id(order_id)
    except Exception as e:
        return _error(404, e)


@app.put("/orders/{order_id}", summary="Update an order by ID", openapi_extra=ORDER_PATCH_BODY)
def update_order(order_id: str, payload: Any = Body(None), store: DocumentStore = Depends(get_store)):
    """Return the updated order, or null when no order has this id."""
    try:
        return store.update_by_id(order_id, payload)
    except Exception as e:
        return _error(400, e)


@app.delete("/orders/{order_id}", summary="Delete an order by ID")
def delete_order(order_id: str, store: DocumentStore = Depends(get_store)):
    try:
        return store.delete_by_id(order_id)
    except Exception as e:
        return _error(400, e)


def run() -> None:
    import uvicorn

    uvicorn.run("order_service.main:app", host="0.0.0.0", port=PORT)


if __name__ == "__main__":
    run()
