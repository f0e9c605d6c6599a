"""Catch-all site handler: maintenance gate, then static files with SPA fallback."""

from fastapi import Request
from fastapi.responses import FileResponse, HTMLResponse, PlainTextResponse, Response
from starlette.routing import Route

from isam_gateway.api.dependencies import (
    get_doc_root,
    get_maintenance_config,
    get_request_pathname,
)
from isam_gateway.api.routes import AnyMethodEndpoint
from isam_gateway.core.maintenance import (
    MAINTENANCE_CACHE_CONTROL,
    MaintenanceConfig,
    render_maintenance_page,
    should_intercept,
)
from isam_gateway.core.static_files import (
    NotFound,
    cache_control_for,
    content_type_for,
    locate_file,
    resolve_path_from_request,
)


def maintenance_response(config: MaintenanceConfig, method: str) -> Response:
    """503 maintenance page; HEAD gets headers only."""
    headers = {"Cache-Control": MAINTENANCE_CACHE_CONTROL}
    if method.upper() == "HEAD":
        return Response(
            status_code=503,
            media_type="text/html; charset=utf-8",
            headers=headers,
        )
    return HTMLResponse(
        render_maintenance_page(config), status_code=503, headers=headers
    )


async def serve_site(request: Request) -> Response:
    """Serve a static file, a directory index or the SPA shell.

    Returns:
        503 maintenance page, 400 on traversal, 404 when even the SPA shell
        is missing, otherwise the file
    """
    pathname = get_request_pathname(request)
    config = get_maintenance_config(request)
    doc_root = get_doc_root(request)

    if should_intercept(config, request.method, pathname):
        return maintenance_response(config, request.method)

    requested = resolve_path_from_request(doc_root, pathname)
    if requested is None:
        return PlainTextResponse("Bad request", status_code=400)

    located = await locate_file(doc_root, requested, pathname)
    if isinstance(located, NotFound):
        return PlainTextResponse("Not found", status_code=404)

    return FileResponse(
        located.file_path,
        media_type=content_type_for(located.file_path),
        headers={
            "Cache-Control": cache_control_for(located.request_path, located.file_path)
        },
        stat_result=located.stat_result,
    )


routes = [
    Route(
        "/{full_path:path}",
        AnyMethodEndpoint(serve_site),
        name="serve_site",
        include_in_schema=False,
    ),
]
