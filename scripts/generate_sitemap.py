"""Script to generate public/sitemap.xml from the canonical route table."""

import sys
from pathlib import Path

from isam_gateway.config import get_settings
from isam_gateway.core.logger import configure_logging
from isam_gateway.seo.sitemap import write_sitemap


def main() -> None:
    """Write the sitemap to the path given as argument, else ``public/sitemap.xml``."""
    settings = get_settings()
    configure_logging(settings)

    output_path = (
        Path(sys.argv[1])
        if len(sys.argv) > 1
        else settings.app_root / "public" / "sitemap.xml"
    )
    write_sitemap(output_path, settings.site_url)
    print(f"Sitemap written to {output_path}")


if __name__ == "__main__":
    main()
