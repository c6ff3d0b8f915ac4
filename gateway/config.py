"""gateway configuration.

The gateway is the only client-facing service. It holds no state; it only
needs to know where the two backends live. Those addresses are read once at
import and never rediscovered.
"""

from __future__ import annotations

import os

PORT: int = int(os.getenv("GATEWAY_PORT", "5000"))

LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

# Backend base URLs (no trailing slash)
ITEM_SERVICE_URL: str = os.getenv("ITEM_SERVICE_URL", "http://localhost:5001")
ORDER_SERVICE_URL: str = os.getenv("ORDER_SERVICE_URL", "http://localhost:5002")
