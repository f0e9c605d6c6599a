"""sitemap.xml generation from the canonical route table."""

from datetime import date
from pathlib import Path
from urllib.parse import quote

import structlog

from isam_gateway.core.routes import ROUTE_MAP, ROUTE_PAGE_KEYS

logger = structlog.get_logger(__name__)

PAGE_SITEMAP_OPTIONS = {
    "home": {"priority": "1.0", "changefreq": "monthly"},
    "about": {"priority": "0.8", "changefreq": "monthly"},
    "services": {"priority": "0.8", "changefreq": "monthly"},
    "contact": {"priority": "0.7", "changefreq": "monthly"},
    "privacy_policy": {"priority": "0.3", "changefreq": "yearly"},
    "data_privacy": {"priority": "0.3", "changefreq": "yearly"},
}


def to_absolute_url(site_url: str, route_path: str) -> str:
    """Absolute, percent-encoded URL for a route path."""
    return f"{site_url.rstrip('/')}{quote(route_path, safe='/')}"


def _url_entry(
    loc: str, alternates: list[tuple[str, str]], lastmod: str, options: dict[str, str]
) -> str:
    alternate_tags = "\n".join(
        f'    <xhtml:link rel="alternate" hreflang="{hreflang}" href="{href}" />'
        for hreflang, href in alternates
    )
    return "\n".join(
        [
            "  <url>",
            f"    <loc>{loc}</loc>",
            f"    <lastmod>{lastmod}</lastmod>",
            f"    <changefreq>{options['changefreq']}</changefreq>",
            f"    <priority>{options['priority']}</priority>",
            alternate_tags,
            "  </url>",
        ]
    )


def build_sitemap_xml(site_url: str, lastmod: date | None = None) -> str:
    """Build the sitemap document.

    Args:
        site_url: Public site origin, e.g. ``https://isam-tech.com``
        lastmod: Date stamped on every entry (default: today)

    Returns:
        XML text with one entry per page and language
    """
    site_url = site_url.rstrip("/")
    stamp = (lastmod or date.today()).isoformat()
    entries: list[str] = []

    for page_key in ROUTE_PAGE_KEYS:
        fa_url = to_absolute_url(site_url, ROUTE_MAP["fa"][page_key])
        en_url = to_absolute_url(site_url, ROUTE_MAP["en"][page_key])
        alternates = [("fa", fa_url), ("en", en_url), ("x-default", f"{site_url}/")]
        options = PAGE_SITEMAP_OPTIONS.get(page_key, PAGE_SITEMAP_OPTIONS["home"])

        entries.append(_url_entry(fa_url, alternates, stamp, options))
        entries.append(_url_entry(en_url, alternates, stamp, options))

    return "\n".join(
        [
            '<?xml version="1.0" encoding="UTF-8"?>',
            "<urlset",
            '  xmlns="http://www.sitemaps.org/schemas/sitemap/0.9"',
            '  xmlns:xhtml="http://www.w3.org/1999/xhtml"',
            ">",
            "\n".join(entries),
            "</urlset>",
            "",
        ]
    )


def write_sitemap(
    output_path: Path, site_url: str, lastmod: date | None = None
) -> Path:
    """Write ``sitemap.xml`` and return its path."""
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(build_sitemap_xml(site_url, lastmod), encoding="utf-8")
    logger.info("sitemap_written", path=str(output_path))
    return output_path
