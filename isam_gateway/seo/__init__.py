"""SEO metadata and build-time site tooling."""

from isam_gateway.seo.page_meta import PAGE_META, PageMeta, get_page_meta

__all__ = ["PAGE_META", "PageMeta", "get_page_meta"]
