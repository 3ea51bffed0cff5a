"""
Download the Lackey card catalog.

Run this job to keep a local carddata.txt for offline startup
(set REDECK_CATALOG_PATH to the downloaded file).
"""

import asyncio
import logging
from pathlib import Path

from redeck.services.catalog import FetchError, fetch_catalog_text, load_catalog

logger = logging.getLogger(__name__)

DATA_DIR = Path(__file__).parent.parent.parent / "data"


async def run_download(output_path: Path | None = None) -> Path:
    """
    Download the catalog and save it.

    The text is normalized once before saving so a broken download is
    caught here rather than at service startup.
    """
    if output_path is None:
        output_path = DATA_DIR / "carddata.txt"

    logger.info("Downloading card catalog...")

    try:
        text = await fetch_catalog_text()
    except FetchError as e:
        logger.error("Failed to download card catalog: %s", e)
        raise

    catalog = load_catalog(text)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(text, encoding="utf-8")
    logger.info("Saved %d cards to %s", len(catalog), output_path)
    return output_path


def main() -> None:
    """CLI entry point."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    asyncio.run(run_download())


if __name__ == "__main__":
    main()
