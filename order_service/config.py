"""order-service configuration.

Read once from environment variables; defaults suit local development.
"""

from __future__ import annotations

import os

# HTTP port the gateway expects this service on.
PORT: int = int(os.getenv("PORT", "5002"))

LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

# --- MongoDB -----------------------------------------------------------------
# Mongo connection string. Example: "mongodb://mongo:27017"
MONGO_URI: str = os.getenv("MONGO_URI", "mongodb://localhost:27017")

MONGO_DB: str = os.getenv("MONGO_DB", "orders")

MONGO_COLLECTION: str = os.getenv("MONGO_COLLECTION", "orders")
