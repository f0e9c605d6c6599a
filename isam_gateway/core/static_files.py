"""Request path decoding, document root resolution and static file lookup."""

import os
import re
import stat
from dataclasses import dataclass
from pathlib import Path
from urllib.parse import unquote_to_bytes

import anyio
import structlog

from isam_gateway.config import Settings

logger = structlog.get_logger(__name__)

MIME_TYPES = {
    ".css": "text/css; charset=utf-8",
    ".gif": "image/gif",
    ".html": "text/html; charset=utf-8",
    ".ico": "image/x-icon",
    ".jpeg": "image/jpeg",
    ".jpg": "image/jpeg",
    ".js": "application/javascript; charset=utf-8",
    ".json": "application/json; charset=utf-8",
    ".png": "image/png",
    ".svg": "image/svg+xml",
    ".txt": "text/plain; charset=utf-8",
    ".webp": "image/webp",
    ".woff": "font/woff",
    ".woff2": "font/woff2",
    ".xml": "application/xml; charset=utf-8",
}
DEFAULT_MIME_TYPE = "application/octet-stream"

# Content-hashed build output, e.g. /assets/index-B4x9kQ2a.js
IMMUTABLE_ASSET_PATTERN = re.compile(
    r"^/assets/.+-[A-Za-z0-9_-]{8,}\.[a-z0-9]+$", re.IGNORECASE
)

CACHE_HTML = "no-cache, must-revalidate"
CACHE_IMMUTABLE = "public, max-age=31536000, immutable"
CACHE_DEFAULT = "public, max-age=86400"

INDEX_FILE = "index.html"

_MALFORMED_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")


@dataclass(frozen=True)
class PathResolution:
    """Outcome of decoding a request target."""

    ok: bool
    pathname: str


@dataclass(frozen=True)
class Served:
    """A regular file to stream back."""

    file_path: Path
    request_path: str
    stat_result: os.stat_result


@dataclass(frozen=True)
class NotFound:
    """No candidate file exists."""


def resolve_request_pathname(target: str | bytes | None) -> PathResolution:
    """Strip the query string and percent-decode the path.

    Args:
        target: Raw request target, optionally with a query string

    Returns:
        ``ok=False`` (pathname ``/``) on malformed escapes or invalid UTF-8
    """
    if isinstance(target, bytes):
        try:
            target = target.decode("utf-8")
        except UnicodeDecodeError:
            return PathResolution(ok=False, pathname="/")

    raw_path = (target or "/").split("?", 1)[0] or "/"
    if _MALFORMED_ESCAPE.search(raw_path):
        return PathResolution(ok=False, pathname="/")

    try:
        pathname = unquote_to_bytes(raw_path).decode("utf-8")
    except UnicodeDecodeError:
        return PathResolution(ok=False, pathname="/")

    return PathResolution(ok=True, pathname=pathname)


def resolve_doc_root(settings: Settings) -> Path:
    """Pick the first existing candidate directory, else the first candidate.

    Called once at startup; the result is fixed for the process lifetime.
    """
    candidates = settings.doc_root_candidates()
    for candidate in candidates:
        if candidate.is_dir():
            return Path(os.path.abspath(candidate))

    fallback = Path(os.path.abspath(candidates[0]))
    logger.warning(
        "doc_root_missing",
        candidates=[str(c) for c in candidates],
        using=str(fallback),
    )
    return fallback


def resolve_path_from_request(doc_root: Path, pathname: str) -> Path | None:
    """Map a decoded pathname to an absolute path under ``doc_root``.

    Purely lexical, so it runs before any filesystem access.

    Returns:
        Absolute path, or None if it escapes the document root
    """
    relative = "/" + INDEX_FILE if pathname == "/" else pathname
    root = os.path.abspath(doc_root)
    resolved = os.path.abspath(os.path.join(root, "." + relative))
    if resolved != root and not resolved.startswith(root.rstrip(os.sep) + os.sep):
        return None
    return Path(resolved)


def content_type_for(file_path: Path) -> str:
    """MIME type from the file extension."""
    return MIME_TYPES.get(file_path.suffix.lower(), DEFAULT_MIME_TYPE)


def cache_control_for(request_path: str, file_path: Path) -> str:
    """Cache-Control value for a served file."""
    if file_path.suffix.lower() == ".html":
        return CACHE_HTML
    if IMMUTABLE_ASSET_PATTERN.match(request_path):
        return CACHE_IMMUTABLE
    return CACHE_DEFAULT


async def _stat(path: Path) -> os.stat_result | None:
    try:
        return await anyio.Path(path).stat()
    except (OSError, ValueError):
        return None


async def _regular_file(path: Path) -> os.stat_result | None:
    result = await _stat(path)
    if result is not None and stat.S_ISREG(result.st_mode):
        return result
    return None


async def locate_file(
    doc_root: Path, requested: Path, pathname: str
) -> Served | NotFound:
    """Find the file to serve for ``requested``, falling back to the SPA shell.

    Candidates, tried in order:
        - the requested path itself, if it is a regular file
        - ``<dir>/index.html`` when the requested path is a directory
        - the top-level ``index.html``

    Args:
        doc_root: Document root
        requested: Absolute path from ``resolve_path_from_request``
        pathname: Decoded request pathname

    Returns:
        ``Served`` for the first regular file found, else ``NotFound``
    """
    requested_stat = await _stat(requested)
    if requested_stat is not None and stat.S_ISREG(requested_stat.st_mode):
        return Served(requested, pathname, requested_stat)

    candidates: list[tuple[Path, str]] = []
    if requested_stat is not None and stat.S_ISDIR(requested_stat.st_mode):
        candidates.append(
            (requested / INDEX_FILE, f"{pathname.rstrip('/')}/{INDEX_FILE}")
        )
    candidates.append((doc_root / INDEX_FILE, "/" + INDEX_FILE))

    for candidate, request_path in candidates:
        candidate_stat = await _regular_file(candidate)
        if candidate_stat is not None:
            return Served(candidate, request_path, candidate_stat)

    return NotFound()
