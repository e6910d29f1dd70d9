# storefront/services/catalog.py

"""Shop directory and product catalog with fallback to sample data."""

import logging

from storefront.models.product import Product
from storefront.models.shop import Shop
from storefront.sources.mock_source import MockCatalogSource
from storefront.sources.sheet_fetcher import SheetFetcher
from storefront.sources.sheets_source import SheetsCatalogSource

logger = logging.getLogger("storefront.catalog")


class ShopCatalog:
    """Read-only access to shops and their products.

    The live sheets provider is used when a directory URL is
    configured.  Otherwise shops come from *fallback*; pass ``None``
    to build without the sample dataset.  Neither operation raises:
    fetch failures are logged and reported as an empty list.
    """

    def __init__(
        self,
        directory_url: str | None = None,
        fallback: MockCatalogSource | None = None,
        fetcher: SheetFetcher | None = None,
    ) -> None:
        self.directory_url = directory_url or None
        self.fallback = fallback
        self.live = SheetsCatalogSource(
            self.directory_url, fetcher=fetcher
        )

    @classmethod
    def with_sample_data(
        cls,
        directory_url: str | None = None,
        fetcher: SheetFetcher | None = None,
    ) -> "ShopCatalog":
        """Build a catalog that falls back to the sample dataset."""
        return cls(
            directory_url=directory_url,
            fallback=MockCatalogSource(),
            fetcher=fetcher,
        )

    async def list_shops(self) -> list[Shop]:
        """Return every shop that has a name and a slug."""
        if self.directory_url:
            try:
                return await self.live.list_shops()
            except Exception as exc:
                logger.error(
                    "Error fetching shop directory %s: %s",
                    self.directory_url,
                    exc,
                    exc_info=True,
                )
                return []

        if self.fallback is None:
            logger.warning(
                "No shop directory URL configured and no "
                "fallback provider installed"
            )
            return []

        logger.warning(
            "No shop directory URL configured, using sample data"
        )
        return await self.fallback.list_shops()

    async def list_products(self, source_ref: str) -> list[Product]:
        """Return the valid products for *source_ref*, cheapest first."""
        if not source_ref:
            return []

        if MockCatalogSource.handles(source_ref):
            if self.fallback is None:
                logger.warning(
                    "Sample sheet '%s' requested but no fallback "
                    "provider is installed",
                    source_ref,
                )
                return []
            return await self.fallback.list_products(source_ref)

        try:
            return await self.live.list_products(source_ref)
        except Exception as exc:
            logger.error(
                "Error fetching product sheet '%s': %s",
                source_ref,
                exc,
                exc_info=True,
            )
            return []

    async def find_shop(self, slug: str) -> Shop | None:
        """Return the shop whose slug matches exactly, if any."""
        shops = await self.list_shops()
        return next((s for s in shops if s.slug == slug), None)
