"""Canonical localized route table shared by the site build tooling.

The gateway never consults this table at request time: localized paths that
have no prerendered snapshot reach the SPA shell through the static file
fallback, and the client application does the routing.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType
from urllib.parse import unquote

LANGUAGES = ("fa", "en")
DEFAULT_LANGUAGE = "en"
DEFAULT_PAGE_KEY = "home"

PAGE_KEYS = (
    "home",
    "about",
    "services",
    "contact",
    "privacy_policy",
    "data_privacy",
)

ROUTE_MAP = MappingProxyType(
    {
        "fa": MappingProxyType(
            {
                "home": "/fa",
                "about": "/fa/درباره-ما",
                "services": "/fa/خدمات",
                "contact": "/fa/تماس-با-ما",
                "privacy_policy": "/fa/سیاست-حریم-خصوصی",
                "data_privacy": "/fa/حریم-داده",
            }
        ),
        "en": MappingProxyType(
            {
                "home": "/en",
                "about": "/en/about-us",
                "services": "/en/services",
                "contact": "/en/contact",
                "privacy_policy": "/en/privacy-policy",
                "data_privacy": "/en/data-privacy",
            }
        ),
    }
)

LEGACY_ROUTE_MAP = MappingProxyType(
    {
        "/fa/about": ROUTE_MAP["fa"]["about"],
        "/fa/services": ROUTE_MAP["fa"]["services"],
        "/fa/contact": ROUTE_MAP["fa"]["contact"],
        "/fa/privacy-policy": ROUTE_MAP["fa"]["privacy_policy"],
        "/fa/data-privacy": ROUTE_MAP["fa"]["data_privacy"],
        "/en/about": ROUTE_MAP["en"]["about"],
        "/en/services": ROUTE_MAP["en"]["services"],
        "/en/contact": ROUTE_MAP["en"]["contact"],
        "/en/privacy-policy": ROUTE_MAP["en"]["privacy_policy"],
        "/en/data-privacy": ROUTE_MAP["en"]["data_privacy"],
    }
)


class RouteTableError(ValueError):
    """The route table violates its one-path-per-page-per-language invariant."""


@dataclass(frozen=True)
class RouteEntry:
    """One canonical localized page path."""

    language: str
    page_key: str
    path: str


@dataclass(frozen=True)
class LegacyRedirect:
    """Old path and the canonical path it now maps to."""

    source: str
    target: str


def build_page_index(
    route_map: Mapping[str, Mapping[str, str]] = ROUTE_MAP,
    legacy_map: Mapping[str, str] = LEGACY_ROUTE_MAP,
) -> dict[str, str]:
    """Index canonical paths to page keys, validating the table.

    Raises:
        RouteTableError: On a missing language/page path, a path shared by two
            page keys, or a legacy redirect that does not target a canonical path
    """
    page_by_path: dict[str, str] = {}
    for language in LANGUAGES:
        paths = route_map.get(language)
        if paths is None:
            raise RouteTableError(f"Missing language: {language}")
        if set(paths) != set(PAGE_KEYS):
            raise RouteTableError(
                f"Language {language} must define exactly {list(PAGE_KEYS)}"
            )
        for page_key in PAGE_KEYS:
            path = paths[page_key]
            if path in page_by_path:
                raise RouteTableError(
                    f"Path {path} is shared by {page_by_path[path]} and {page_key}"
                )
            page_by_path[path] = page_key

    for source, target in legacy_map.items():
        if target not in page_by_path:
            raise RouteTableError(
                f"Legacy redirect {source} targets unknown path {target}"
            )

    return page_by_path


_PAGE_BY_PATH = build_page_index()

ROUTE_PAGE_KEYS = PAGE_KEYS
LOCALIZED_ROUTE_ENTRIES = tuple(
    RouteEntry(language=language, page_key=page_key, path=ROUTE_MAP[language][page_key])
    for page_key in PAGE_KEYS
    for language in LANGUAGES
)
LEGACY_REDIRECTS = tuple(
    LegacyRedirect(source=source, target=target)
    for source, target in LEGACY_ROUTE_MAP.items()
)


def normalize_pathname(pathname: str = "") -> str:
    """Decode, ensure a leading slash and drop trailing slashes."""
    if not pathname:
        return "/"

    try:
        decoded = unquote(pathname, errors="strict")
    except UnicodeDecodeError:
        decoded = pathname

    if not decoded.startswith("/"):
        decoded = f"/{decoded}"

    return decoded.rstrip("/") or "/"


def get_language_from_path(pathname: str = "") -> str | None:
    """Language prefix of the path (``fa``/``en``), or None."""
    first_segment = normalize_pathname(pathname).split("/")[1]
    return first_segment if first_segment in LANGUAGES else None


def get_page_key_from_path(pathname: str = "") -> str | None:
    """Page key for a canonical or legacy path, or None."""
    normalized = normalize_pathname(pathname)
    if normalized in _PAGE_BY_PATH:
        return _PAGE_BY_PATH[normalized]

    redirect_target = LEGACY_ROUTE_MAP.get(normalized)
    return _PAGE_BY_PATH.get(redirect_target) if redirect_target else None


def get_path(language: str | None, page_key: str = DEFAULT_PAGE_KEY) -> str:
    """Canonical path for a page, defaulting to English and the home page."""
    safe_language = language if language in LANGUAGES else DEFAULT_LANGUAGE
    safe_page_key = page_key if page_key in PAGE_KEYS else DEFAULT_PAGE_KEY
    return ROUTE_MAP[safe_language][safe_page_key]


def map_path_to_language(pathname: str = "", target_language: str = "en") -> str:
    """Same page in another language; unknown pages map to that language's home."""
    page_key = get_page_key_from_path(pathname)
    return get_path(target_language, page_key or DEFAULT_PAGE_KEY)


def get_legacy_redirect(pathname: str = "") -> str | None:
    """Canonical target of a legacy path, or None."""
    return LEGACY_ROUTE_MAP.get(normalize_pathname(pathname))
