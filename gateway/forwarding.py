"""Forwarding and relaying for the gateway.

Two steps, kept apart so the lossy part is explicit:

1) `forward()` makes the downstream call and reduces it to an `Outcome`:
   either the parsed JSON body, or a failure.
2) `relay()` maps an `Outcome` to the client response using a fixed `Relay`
   policy. Every failure (connection refused, timeout, non-2xx, body that is
   not JSON) becomes the same status and message; the downstream detail is
   logged and dropped.

No retries and no timeout override: the httpx defaults apply.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Optional

import httpx
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Outcome:
    ok: bool
    body: Any = None
    error: Optional[str] = None


@dataclass(frozen=True)
class Relay:
    """What the client sees for one route."""

    success_status: int
    failure_status: int
    failure_message: str


def forward(
    client: httpx.Client,
    method: str,
    url: str,
    body: Any = None,
) -> Outcome:
    """Call `url` and return its JSON body, or a failed Outcome.

    `body` is passed through untouched; None sends no body.
    """
    try:
        resp = client.request(method, url, json=body)
        resp.raise_for_status()
        return Outcome(ok=True, body=resp.json())
    except (httpx.HTTPError, ValueError) as e:
        logger.warning("[Gateway] %s %s failed: %s", method, url, e)
        return Outcome(ok=False, error=str(e))


def relay(outcome: Outcome, policy: Relay) -> JSONResponse:
    if outcome.ok:
        return JSONResponse(status_code=policy.success_status, content=outcome.body)
    return JSONResponse(
        status_code=policy.failure_status,
        content={"message": policy.failure_message},
    )
