"""Pydantic models for order-service.

Like item-service, these describe the stored document. Note that an order
carries a product name, not a reference to an item document.
"""

from __future__ import annotations

from typing import Optional, Union

from pydantic import BaseModel, ConfigDict


class Order(BaseModel):
    """Schema for `POST /orders`; every field is required."""

    model_config = ConfigDict(allow_inf_nan=False)

    productName: str
    quantity: Union[int, float]
    totalPrice: Union[int, float]


class OrderPatch(BaseModel):
    """Schema for `PUT /orders/{id}`; only supplied fields are written."""

    model_config = ConfigDict(allow_inf_nan=False)

    productName: Optional[str] = None
    quantity: Optional[Union[int, float]] = None
    totalPrice: Optional[Union[int, float]] = None
