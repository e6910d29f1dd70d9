# storefront/sources/sheets_source.py

"""Live catalog provider backed by published Google Sheets."""

import logging

from storefront.config.settings import Settings
from storefront.filters.product_sorter import sort_products
from storefront.filters.record_validator import (
    ProductValidator,
    ShopValidator,
)
from storefront.models.product import Product
from storefront.models.shop import Shop
from storefront.sources.base_source import CatalogSource
from storefront.sources.sheet_fetcher import SheetFetcher


def resolve_sheet_url(source_ref: str) -> str:
    """Turn a product source reference into a fetchable CSV URL.

    Full URLs are used as-is; bare sheet ids are templated into the
    public CSV export endpoint.
    """
    ref = source_ref.strip()
    if ref.startswith("http"):
        return ref
    return Settings.SHEET_EXPORT_URL.format(sheet_id=ref)


class SheetsCatalogSource(CatalogSource):
    """Reads the shop directory and product sheets over HTTP.

    Fetch errors propagate as ``SheetFetchError``; the catalog
    service decides how to surface them.
    """

    name = "sheets"

    def __init__(
        self,
        directory_url: str | None = None,
        fetcher: SheetFetcher | None = None,
    ) -> None:
        self.directory_url = directory_url
        self.fetcher = fetcher or SheetFetcher()
        self.logger = logging.getLogger("storefront.sources")

    async def list_shops(self) -> list[Shop]:
        if not self.directory_url:
            raise ValueError("No shop directory URL configured")
        rows = await self.fetcher.fetch_rows(self.directory_url)
        shops, _ = ShopValidator.validate(
            [Shop.from_row(row) for row in rows]
        )
        return shops

    async def list_products(self, source_ref: str) -> list[Product]:
        url = resolve_sheet_url(source_ref)
        self.logger.debug("Resolved product sheet %r to %s", source_ref, url)
        rows = await self.fetcher.fetch_rows(url)
        products, _ = ProductValidator.validate(
            [Product.from_row(row) for row in rows]
        )
        return sort_products(products, Settings.DEFAULT_SORT)
