"""API routes."""

from collections.abc import Awaitable, Callable

from starlette.requests import Request
from starlette.responses import Response
from starlette.types import Receive, Scope, Send


class AnyMethodEndpoint:
    """ASGI endpoint that hands every HTTP method to one request handler.

    Starlette routes built on a plain function default to GET/HEAD; an ASGI
    class endpoint with no ``methods`` matches any method.
    """

    def __init__(self, handler: Callable[[Request], Awaitable[Response]]) -> None:
        self.handler = handler

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        request = Request(scope, receive, send)
        response = await self.handler(request)
        await response(scope, receive, send)
