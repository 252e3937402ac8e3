#!/usr/bin/env python3
"""Write the documentation site as static HTML files.

Usage:
    # Default output directory (SITE_OUTPUT_DIR, "build")
    elkaliases-docs-build

    # Custom output directory
    elkaliases-docs-build --output /tmp/site
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional, Union

from .config import config
from .pages import iter_pages, render_page
from .utils.exceptions import BuildError
from .utils.logger import logger


def build_site(output_dir: Union[str, Path]) -> List[Path]:
    """Render every page into output_dir, mirroring its URL path.

    Returns:
        Paths of the written files, in page registration order

    Raises:
        BuildError: If a page cannot be written
    """
    root = Path(output_dir)
    written: List[Path] = []

    for page in iter_pages():
        target = root / page.path.lstrip("/")
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(render_page(page), encoding="utf-8")
        except OSError as e:
            raise BuildError(f"Failed to write {page.path}: {e}", str(target)) from e
        logger.debug(f"Wrote {target}")
        written.append(target)

    logger.info(f"Built {len(written)} pages into {root}")
    return written


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Build the ElkAliases documentation site")
    parser.add_argument(
        "--output", "-o",
        default=config.site_output_dir,
        help=f"Output directory (default: {config.site_output_dir})",
    )
    args = parser.parse_args(argv)

    try:
        build_site(args.output)
    except BuildError as e:
        logger.error(str(e))
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
