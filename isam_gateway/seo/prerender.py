"""Per-route HTML snapshots with localized head metadata.

Snapshots are written as ``<dist>/<segments>/index.html``; the gateway serves
them through its directory-index rule, so crawlers get localized metadata
without running the SPA.
"""

import re
from html import escape
from pathlib import Path

import structlog

from isam_gateway.core.routes import LOCALIZED_ROUTE_ENTRIES, ROUTE_MAP, RouteEntry
from isam_gateway.seo.page_meta import get_page_meta
from isam_gateway.seo.sitemap import to_absolute_url

logger = structlog.get_logger(__name__)

_HTML_OPEN_TAG = re.compile(r'<html\s+lang="[^"]*"\s+dir="[^"]*">', re.IGNORECASE)


def _tag_pattern(expr: str) -> re.Pattern[str]:
    return re.compile(expr, re.IGNORECASE)


def route_to_output_path(dist_dir: Path, route_path: str) -> Path:
    """Snapshot location for a route, e.g. ``/en/about-us`` -> ``en/about-us/index.html``."""
    segments = [segment for segment in route_path.split("/") if segment]
    return dist_dir.joinpath(*segments, "index.html")


def upsert_tag(html: str, pattern: re.Pattern[str], tag: str) -> str:
    """Replace the first tag matching ``pattern``, or insert ``tag`` before ``</head>``."""
    if pattern.search(html):
        return pattern.sub(lambda _: tag, html, count=1)
    return html.replace("</head>", f"{tag}</head>", 1)


def head_values(entry: RouteEntry, site_url: str) -> dict[str, str]:
    """Escaped metadata values for one route entry."""
    meta = get_page_meta(entry.page_key, entry.language)
    return {
        "title": escape(meta.title),
        "description": escape(meta.description),
        "keywords": escape(meta.keywords),
        "canonical": to_absolute_url(site_url, entry.path),
        "fa_href": to_absolute_url(site_url, ROUTE_MAP["fa"][entry.page_key]),
        "en_href": to_absolute_url(site_url, ROUTE_MAP["en"][entry.page_key]),
        "default_href": f"{site_url.rstrip('/')}/",
        "og_locale": "fa_IR" if entry.language == "fa" else "en_US",
    }


def inject_metadata(template_html: str, entry: RouteEntry, site_url: str) -> str:
    """Return ``template_html`` localized for ``entry``."""
    values = head_values(entry, site_url)
    html_dir = "rtl" if entry.language == "fa" else "ltr"

    html = _HTML_OPEN_TAG.sub(
        lambda _: f'<html lang="{entry.language}" dir="{html_dir}">',
        template_html,
        count=1,
    )

    replacements = [
        (r"<title>.*?</title>", f"<title>{values['title']}</title>"),
        (
            r"<meta\s+name=[\"']description[\"'][^>]*>",
            f'<meta name="description" content="{values["description"]}" />',
        ),
        (
            r"<meta\s+name=[\"']keywords[\"'][^>]*>",
            f'<meta name="keywords" content="{values["keywords"]}" />',
        ),
        (
            r"<meta\s+name=[\"']robots[\"'][^>]*>",
            '<meta name="robots" content="index, follow" />',
        ),
        (
            r"<meta\s+property=[\"']og:title[\"'][^>]*>",
            f'<meta property="og:title" content="{values["title"]}" />',
        ),
        (
            r"<meta\s+property=[\"']og:description[\"'][^>]*>",
            f'<meta property="og:description" content="{values["description"]}" />',
        ),
        (
            r"<meta\s+property=[\"']og:url[\"'][^>]*>",
            f'<meta property="og:url" content="{values["canonical"]}" />',
        ),
        (
            r"<meta\s+property=[\"']og:locale[\"'][^>]*>",
            f'<meta property="og:locale" content="{values["og_locale"]}" />',
        ),
        (
            r"<meta\s+name=[\"']twitter:title[\"'][^>]*>",
            f'<meta name="twitter:title" content="{values["title"]}" />',
        ),
        (
            r"<meta\s+name=[\"']twitter:description[\"'][^>]*>",
            f'<meta name="twitter:description" content="{values["description"]}" />',
        ),
        (
            r"<link\s+rel=[\"']canonical[\"'][^>]*>",
            f'<link rel="canonical" href="{values["canonical"]}" />',
        ),
        (
            r"<link\s+rel=[\"']alternate[\"'][^>]*hreflang=[\"']fa[\"'][^>]*>",
            f'<link rel="alternate" hreflang="fa" href="{values["fa_href"]}" />',
        ),
        (
            r"<link\s+rel=[\"']alternate[\"'][^>]*hreflang=[\"']en[\"'][^>]*>",
            f'<link rel="alternate" hreflang="en" href="{values["en_href"]}" />',
        ),
        (
            r"<link\s+rel=[\"']alternate[\"'][^>]*hreflang=[\"']x-default[\"'][^>]*>",
            f'<link rel="alternate" hreflang="x-default" href="{values["default_href"]}" />',
        ),
    ]
    for expr, tag in replacements:
        html = upsert_tag(html, _tag_pattern(expr), tag)

    return html


def prerender_snapshots(dist_dir: Path, site_url: str) -> list[Path]:
    """Write one localized snapshot per canonical route.

    Args:
        dist_dir: Build output containing the SPA ``index.html``
        site_url: Public site origin used for canonical and alternate links

    Returns:
        Paths of the written snapshots

    Raises:
        FileNotFoundError: If ``dist_dir/index.html`` does not exist
    """
    template_path = dist_dir / "index.html"
    if not template_path.is_file():
        raise FileNotFoundError(f"SPA template not found: {template_path}")

    template = template_path.read_text(encoding="utf-8")
    written: list[Path] = []

    for entry in LOCALIZED_ROUTE_ENTRIES:
        output_path = route_to_output_path(dist_dir, entry.path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(
            inject_metadata(template, entry, site_url), encoding="utf-8"
        )
        logger.info("prerender_written", route=entry.path, path=str(output_path))
        written.append(output_path)

    logger.info("prerender_completed", count=len(written))
    return written
