# main.py

"""Entry point for the storefront terminal browser."""

import argparse
import locale
import logging

from storefront.config.logging_config import setup_logging
from storefront.config.settings import Settings

logger = logging.getLogger("storefront.main")


def _build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the launcher."""
    parser = argparse.ArgumentParser(
        prog="storefront",
        description="Browse shops and their spreadsheet catalogs.",
        epilog=(
            "Set SHOP_DIRECTORY_URL (environment or .env) to the "
            "published CSV of the shop directory; without it the "
            "built-in sample shops are shown."
        ),
    )
    parser.add_argument(
        "slug",
        nargs="?",
        default=None,
        help="Open this shop directly instead of the directory.",
    )
    return parser


def _run_tui(slug: str | None) -> None:
    """Launch the interactive Textual TUI."""
    from storefront.services.catalog import ShopCatalog
    from storefront.ui.app import StorefrontApp

    catalog = ShopCatalog.with_sample_data(Settings.SHOP_DIRECTORY_URL)
    try:
        app = StorefrontApp(catalog=catalog, slug=slug)
        app.run()
    except Exception:
        logger.critical("Fatal error during TUI run", exc_info=True)
        raise
    finally:
        logger.info("storefront TUI shutting down")


def main() -> None:
    """Parse arguments and start the TUI."""
    log_file = setup_logging()
    logger.info("storefront starting, log file: %s", log_file)
    if not Settings.SHOP_DIRECTORY_URL:
        logger.info("SHOP_DIRECTORY_URL not set, sample data enabled")

    try:
        # Product names collate by the user's locale
        locale.setlocale(locale.LC_COLLATE, "")
    except locale.Error:
        logger.warning("Could not apply system collation locale", exc_info=True)

    args = _build_parser().parse_args()
    _run_tui(args.slug)


if __name__ == "__main__":
    main()
