# storefront/sources/mock_source.py

"""Built-in sample shops for local development without a sheet."""

import asyncio
import logging

from storefront.config.settings import Settings
from storefront.filters.product_sorter import sort_products
from storefront.models.product import Product
from storefront.models.shop import Shop
from storefront.sources.base_source import CatalogSource

MOCK_SHOPS: list[Shop] = [
    Shop(
        id="1",
        name="Tech Store",
        slug="tech-store",
        logo_url="https://placehold.co/100x100/3b82f6/white?text=Tech",
        theme_color="#3b82f6",
        contact_info="contact@tech.com",
        phone_number="9944513415",
        product_sheet_id="mock-sheet-1",
    ),
    Shop(
        id="2",
        name="Home Decor",
        slug="home-decor",
        logo_url="https://placehold.co/100x100/ef4444/white?text=Home",
        theme_color="#ef4444",
        contact_info="hello@homedecor.com",
        phone_number="9788545102",
        product_sheet_id="mock-sheet-2",
    ),
]

MOCK_PRODUCTS: dict[str, list[Product]] = {
    "mock-sheet-1": [
        Product(
            id="101",
            name="Wireless Mouse",
            price="25.00",
            category="Electronics",
            image_url="https://placehold.co/300x300?text=Mouse",
            stock="50",
        ),
        Product(
            id="102",
            name="Mechanical Keyboard",
            price="120.00",
            category="Electronics",
            image_url="https://placehold.co/300x300?text=Keyboard",
            stock="20",
        ),
        Product(
            id="103",
            name='Monitor 27"',
            price="300.00",
            category="Electronics",
            image_url="https://placehold.co/300x300?text=Monitor",
            stock="10",
        ),
    ],
    "mock-sheet-2": [
        Product(
            id="201",
            name="Modern Lamp",
            price="45.00",
            category="Lighting",
            image_url="https://placehold.co/300x300?text=Lamp",
            stock="15",
        ),
        Product(
            id="202",
            name="Vase",
            price="20.00",
            category="Decor",
            image_url="https://placehold.co/300x300?text=Vase",
            stock="30",
        ),
    ],
}


class MockCatalogSource(CatalogSource):
    """Serves the fixed sample dataset after a simulated delay.

    :meth:`handles` tells the catalog service which reserved
    ``mock-sheet-*`` references belong here.
    """

    name = "mock"

    def __init__(self, latency: float | None = None) -> None:
        self.latency = (
            Settings.MOCK_LATENCY if latency is None else latency
        )
        self.logger = logging.getLogger("storefront.sources")

    @staticmethod
    def handles(source_ref: str) -> bool:
        """True for references reserved for the sample dataset."""
        return source_ref.startswith(Settings.MOCK_SHEET_PREFIX)

    async def _simulate_latency(self) -> None:
        if self.latency > 0:
            await asyncio.sleep(self.latency)

    async def list_shops(self) -> list[Shop]:
        await self._simulate_latency()
        return list(MOCK_SHOPS)

    async def list_products(self, source_ref: str) -> list[Product]:
        await self._simulate_latency()
        products = MOCK_PRODUCTS.get(source_ref, [])
        if not products:
            self.logger.warning(
                "No sample products for '%s'", source_ref
            )
        return sort_products(products, Settings.DEFAULT_SORT)
