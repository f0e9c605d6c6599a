"""Liveness and maintenance status endpoints.

Both are evaluated before the maintenance gate and answer for any method.
"""

import os
import time
from datetime import datetime, timezone

from fastapi import Request
from fastapi.responses import JSONResponse, PlainTextResponse
from starlette.routing import Route

from isam_gateway.api.dependencies import get_maintenance_config
from isam_gateway.api.routes import AnyMethodEndpoint
from isam_gateway.api.schemas import MaintenanceStatusResponse

_STARTED_AT = time.monotonic()


async def health(request: Request) -> PlainTextResponse:
    """Liveness check."""
    return PlainTextResponse("ok")


async def maintenance_status(request: Request) -> JSONResponse:
    """Expose the maintenance flag and where it was read from.

    Returns:
        ``{enabled, sourceVar, pid, uptimeSeconds, timestamp}``, never cached
    """
    config = get_maintenance_config(request)
    status = MaintenanceStatusResponse(
        enabled=config.enabled,
        source_var=config.source_var,
        pid=os.getpid(),
        uptime_seconds=round(time.monotonic() - _STARTED_AT, 3),
        timestamp=datetime.now(timezone.utc)
        .isoformat(timespec="milliseconds")
        .replace("+00:00", "Z"),
    )
    return JSONResponse(
        status.model_dump(by_alias=True),
        media_type="application/json; charset=utf-8",
        headers={"Cache-Control": "no-store"},
    )


routes = [
    Route("/healthz", AnyMethodEndpoint(health), include_in_schema=False),
    Route("/health", AnyMethodEndpoint(health), include_in_schema=False),
    Route(
        "/__maintenance-status",
        AnyMethodEndpoint(maintenance_status),
        name="maintenance_status",
        include_in_schema=False,
    ),
]
