"""Pydantic models for item-service.

These are the collection schema, not request validators: the route handlers
accept any JSON body and let `DocumentStore` cast it through these models, so
a bad value surfaces as a store failure (400) rather than a 422.
"""

from __future__ import annotations

from typing import Optional, Union

from pydantic import BaseModel, ConfigDict


class Item(BaseModel):
    """An inventory item. No field is required, so the same model validates
    both new documents and partial updates."""

    # NaN/Infinity cannot be sent back as JSON.
    model_config = ConfigDict(allow_inf_nan=False)

    name: Optional[str] = None
    description: Optional[str] = None
    price: Optional[Union[int, float]] = None
