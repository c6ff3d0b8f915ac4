"""gateway FastAPI application.

A 1:1 router: each client route is forwarded to one fixed backend URL and
the backend's JSON body is relayed back. The gateway does not validate,
retry, aggregate or transform anything; see `forwarding.py` for how
failures are collapsed.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx
from fastapi import Body, Depends, FastAPI, Request

from .config import ITEM_SERVICE_URL, LOG_LEVEL, ORDER_SERVICE_URL, PORT
from .forwarding import Relay, forward, relay

logger = logging.getLogger(__name__)

app = FastAPI(
    title="API Gateway",
    version="1.0.0",
    description="API Gateway to route requests to Item and Order Services",
    docs_url="/api-docs",
)


def _json_body(**fields: str) -> dict:
    """OpenAPI requestBody for /api-docs; the body itself is never checked."""
    properties = {name: {"type": kind} for name, kind in fields.items()}
    return {
        "requestBody": {
            "content": {"application/json": {"schema": {"type": "object", "properties": properties}}}
        }
    }


ITEM_BODY = _json_body(name="string", description="string", price="number")
ORDER_BODY = _json_body(productName="string", quantity="number", totalPrice="number")

# Client-visible outcome per route.
LIST_ITEMS = Relay(200, 500, "Failed to retrieve items")
GET_ITEM = Relay(200, 404, "Item not found")
CREATE_ITEM = Relay(201, 500, "Failed to create item")
UPDATE_ITEM = Relay(200, 500, "Failed to update item")
DELETE_ITEM = Relay(200, 500, "Failed to delete item")

LIST_ORDERS = Relay(200, 500, "Failed to retrieve orders")
GET_ORDER = Relay(200, 404, "Order not found")
CREATE_ORDER = Relay(201, 500, "Failed to create order")
UPDATE_ORDER = Relay(200, 500, "Failed to update order")
DELETE_ORDER = Relay(200, 500, "Failed to delete order")


@app.on_event("startup")
def on_startup() -> None:
    """Create one pooled HTTP client for all downstream calls."""
    logging.basicConfig(
        level=LOG_LEVEL,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    app.state.client = httpx.Client()
    logger.info("API Gateway running on port %s", PORT)


@app.on_event("shutdown")
def on_shutdown() -> None:
    client = getattr(app.state, "client", None)
    if client is not None:
        client.close()


def get_client(request: Request) -> httpx.Client:
    return request.app.state.client


@app.get("/health")
def health() -> dict[str, str]:
    """Basic liveness endpoint."""
    return {"status": "ok"}


# --- Item service -------------------------------------------------------------


@app.get("/items", summary="Get all items")
def list_items(client: httpx.Client = Depends(get_client)):
    return relay(forward(client, "GET", f"{ITEM_SERVICE_URL}/getAllItems"), LIST_ITEMS)


@app.get("/item/{item_id}", summary="Get item by ID")
def get_item(item_id: str, client: httpx.Client = Depends(get_client)):
    return relay(forward(client, "GET", f"{ITEM_SERVICE_URL}/getById/{item_id}"), GET_ITEM)


@app.post("/item", summary="Create a new item", openapi_extra=ITEM_BODY)
def create_item(payload: Any = Body(None), client: httpx.Client = Depends(get_client)):
    return relay(forward(client, "POST", f"{ITEM_SERVICE_URL}/items", payload), CREATE_ITEM)


@app.put("/item/{item_id}", summary="Update an existing item", openapi_extra=ITEM_BODY)
def update_item(item_id: str, payload: Any = Body(None), client: httpx.Client = Depends(get_client)):
    return relay(
        forward(client, "PUT", f"{ITEM_SERVICE_URL}/update/{item_id}", payload),
        UPDATE_ITEM,
    )


@app.delete("/item/{item_id}", summary="Delete an item by ID")
def delete_item(item_id: str, client: httpx.Client = Depends(get_client)):
    return relay(forward(client, "DELETE", f"{ITEM_SERVICE_URL}/delete/{item_id}"), DELETE_ITEM)


# --- Order service ------------------------------------------------------------


@app.get("/orders", summary="Get all orders")
def list_orders(client: httpx.Client = Depends(get_client)):
    return relay(forward(client, "GET", f"{ORDER_SERVICE_URL}/orders"), LIST_ORDERS)


@app.get("/order/{order_id}", summary="Get order by ID")
def get_order(order_id: str, client: httpx.Client = Depends(get_client)):
    return relay(forward(client, "GET", f"{ORDER_SERVICE_URL}/orders/{order_id}"), GET_ORDER)


@app.post("/order", summary="Create a new order", openapi_extra=ORDER_BODY)
def create_order(payload: Any = Body(None), client: httpx.Client = Depends(get_client)):
    return relay(forward(client, "POST", f"{ORDER_SERVICE_URL}/orders", payload), CREATE_ORDER)


@app.put("/order/{order_id}", summary="Update an existing order", openapi_extra=ORDER_BODY)
def update_order(order_id: str, payload: Any = Body(None), client: httpx.Client = Depends(get_client)):
    return relay(
        forward(client, "PUT", f"{ORDER_SERVICE_URL}/orders/{order_id}", payload),
        UPDATE_ORDER,
    )


@app.delete("/order/{order_id}", summary="Delete an order by ID")
def delete_order(order_id: str, client: httpx.Client = Depends(get_client)):
    return relay(forward(client, "DELETE", f"{ORDER_SERVICE_URL}/orders/{order_id}"), DELETE_ORDER)


def run() -> None:
    import uvicorn

    uvicorn.run("gateway.main:app", host="0.0.0.0", port=PORT)


if __name__ == "__main__":
    run()
