"""Request-scoped accessors for state set at startup and by the middleware."""

from pathlib import Path

from fastapi import Request

from isam_gateway.core.maintenance import MaintenanceConfig


def get_doc_root(request: Request) -> Path:
    """Document root resolved at application startup.

    Returns:
        Absolute document root path
    """
    return request.app.state.doc_root


def get_maintenance_config(request: Request) -> MaintenanceConfig:
    """Maintenance config computed for this request by the middleware."""
    return request.state.maintenance


def get_request_pathname(request: Request) -> str:
    """Decoded request pathname set by the middleware."""
    return request.state.pathname
