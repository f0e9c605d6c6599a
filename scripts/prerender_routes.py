"""Script to write localized HTML snapshots for every canonical route."""

import sys
from pathlib import Path

from isam_gateway.config import get_settings
from isam_gateway.core.logger import configure_logging
from isam_gateway.core.static_files import resolve_doc_root
from isam_gateway.seo.prerender import prerender_snapshots


def main() -> None:
    """Prerender into the dist directory given as argument, else the doc root."""
    settings = get_settings()
    configure_logging(settings)

    dist_dir = Path(sys.argv[1]) if len(sys.argv) > 1 else resolve_doc_root(settings)
    written = prerender_snapshots(dist_dir, settings.site_url)
    print(f"Prerendered {len(written)} routes into {dist_dir}")


if __name__ == "__main__":
    main()
