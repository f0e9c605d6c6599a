"""Middleware deriving maintenance state and the decoded path for every request."""

import os

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import PlainTextResponse, Response

from isam_gateway.core.maintenance import MAINTENANCE_HEADER, compute_maintenance_config
from isam_gateway.core.static_files import resolve_request_pathname


class MaintenanceModeMiddleware(BaseHTTPMiddleware):
    """Decode the request path and tag every response with the maintenance state.

    Malformed percent-encoding is answered here with 400, before routing.
    """

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        config = compute_maintenance_config(os.environ)
        request.state.maintenance = config

        resolution = resolve_request_pathname(
            request.scope.get("raw_path") or request.scope.get("path")
        )
        if resolution.ok:
            request.state.pathname = resolution.pathname
            response = await call_next(request)
        else:
            response = PlainTextResponse("Bad request", status_code=400)

        response.headers[MAINTENANCE_HEADER] = config.header_value
        return response
