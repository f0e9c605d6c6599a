"""Core utilities and shared code."""

from isam_gateway.core.maintenance import (
    MaintenanceConfig,
    compute_maintenance_config,
    render_maintenance_page,
    should_intercept,
)
from isam_gateway.core.routes import RouteTableError
from isam_gateway.core.static_files import (
    NotFound,
    Served,
    locate_file,
    resolve_doc_root,
    resolve_path_from_request,
    resolve_request_pathname,
)

__all__ = [
    "MaintenanceConfig",
    "NotFound",
    "RouteTableError",
    "Served",
    "compute_maintenance_config",
    "locate_file",
    "render_maintenance_page",
    "resolve_doc_root",
    "resolve_path_from_request",
    "resolve_request_pathname",
    "should_intercept",
]
