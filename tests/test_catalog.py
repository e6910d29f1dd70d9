# tests/test_catalog.py

"""Tests for ShopCatalog directory and product operations."""

import unittest
from unittest.mock import AsyncMock, MagicMock

from storefront.services.catalog import ShopCatalog
from storefront.sources.mock_source import MockCatalogSource
from storefront.sources.sheet_fetcher import SheetFetchError
from storefront.sources.sheets_source import resolve_sheet_url

DIRECTORY_URL = "https://example.com/directory.csv"


def _fake_fetcher(
    rows: list[dict[str, str | None]] | None = None,
    error: Exception | None = None,
) -> MagicMock:
    """A SheetFetcher stand-in whose fetch_rows is awaitable."""
    fetcher = MagicMock()
    if error is not None:
        fetcher.fetch_rows = AsyncMock(side_effect=error)
    else:
        fetcher.fetch_rows = AsyncMock(return_value=rows or [])
    return fetcher


class TestResolveSheetUrl(unittest.TestCase):
    """resolve_sheet_url unit tests."""

    def test_full_url_unchanged(self) -> None:
        url = "https://docs.google.com/spreadsheets/d/e/xyz/pub?output=csv"
        self.assertEqual(resolve_sheet_url(url), url)

    def test_bare_id_templated(self) -> None:
        self.assertEqual(
            resolve_sheet_url("abc123"),
            "https://docs.google.com/spreadsheets/d/abc123/pub?output=csv",
        )


class TestListShops(unittest.IsolatedAsyncioTestCase):
    """ShopCatalog.list_shops behaviour."""

    async def test_no_url_returns_sample_shops(self) -> None:
        fetcher = _fake_fetcher()
        catalog = ShopCatalog.with_sample_data(None, fetcher=fetcher)
        shops = await catalog.list_shops()
        self.assertEqual(
            [s.slug for s in shops], ["tech-store", "home-decor"]
        )
        fetcher.fetch_rows.assert_not_awaited()

    async def test_no_url_without_fallback_is_empty(self) -> None:
        catalog = ShopCatalog(fetcher=_fake_fetcher())
        self.assertEqual(await catalog.list_shops(), [])

    async def test_live_rows_filtered(self) -> None:
        """Rows without a name or slug never reach the caller."""
        fetcher = _fake_fetcher(
            [
                {"id": "1", "name": "Tech Store", "slug": "tech-store"},
                {"id": "2", "name": "", "slug": "no-name"},
                {"id": "3", "name": "No Slug", "slug": "  "},
                {"id": "4", "name": "Books", "slug": "books",
                 "phone_number": None},
            ]
        )
        catalog = ShopCatalog.with_sample_data(
            DIRECTORY_URL, fetcher=fetcher
        )
        shops = await catalog.list_shops()
        self.assertEqual([s.slug for s in shops], ["tech-store", "books"])
        fetcher.fetch_rows.assert_awaited_once_with(DIRECTORY_URL)

    async def test_fetch_failure_returns_empty(self) -> None:
        """A directory fetch error resolves to [] instead of raising."""
        fetcher = _fake_fetcher(error=SheetFetchError("HTTP 500"))
        catalog = ShopCatalog.with_sample_data(
            DIRECTORY_URL, fetcher=fetcher
        )
        with self.assertLogs("storefront.catalog", level="ERROR"):
            shops = await catalog.list_shops()
        self.assertEqual(shops, [])

    async def test_unexpected_error_returns_empty(self) -> None:
        fetcher = _fake_fetcher(error=RuntimeError("boom"))
        catalog = ShopCatalog(DIRECTORY_URL, fetcher=fetcher)
        self.assertEqual(await catalog.list_shops(), [])

    async def test_find_shop(self) -> None:
        catalog = ShopCatalog.with_sample_data(
            None, fetcher=_fake_fetcher()
        )
        shop = await catalog.find_shop("home-decor")
        self.assertIsNotNone(shop)
        assert shop is not None
        self.assertEqual(shop.name, "Home Decor")
        self.assertIsNone(await catalog.find_shop("nope"))


class TestListProducts(unittest.IsolatedAsyncioTestCase):
    """ShopCatalog.list_products behaviour."""

    async def test_empty_ref_makes_no_call(self) -> None:
        fetcher = _fake_fetcher()
        catalog = ShopCatalog.with_sample_data(
            DIRECTORY_URL, fetcher=fetcher
        )
        self.assertEqual(await catalog.list_products(""), [])
        fetcher.fetch_rows.assert_not_awaited()

    async def test_mock_sheet_returns_sorted_sample(self) -> None:
        fetcher = _fake_fetcher()
        catalog = ShopCatalog.with_sample_data(None, fetcher=fetcher)
        products = await catalog.list_products("mock-sheet-1")
        self.assertEqual(len(products), 3)
        self.assertEqual(
            [p.price_value for p in products], [25.0, 120.0, 300.0]
        )
        self.assertEqual(products[0].name, "Wireless Mouse")
        fetcher.fetch_rows.assert_not_awaited()

    async def test_mock_sheet_used_even_with_directory_url(self) -> None:
        catalog = ShopCatalog.with_sample_data(
            DIRECTORY_URL, fetcher=_fake_fetcher()
        )
        products = await catalog.list_products("mock-sheet-2")
        self.assertEqual([p.name for p in products], ["Vase", "Modern Lamp"])

    async def test_unknown_mock_sheet_is_empty(self) -> None:
        catalog = ShopCatalog.with_sample_data(
            None, fetcher=_fake_fetcher()
        )
        self.assertEqual(await catalog.list_products("mock-sheet-9"), [])

    async def test_mock_sheet_without_fallback_is_empty(self) -> None:
        fetcher = _fake_fetcher()
        catalog = ShopCatalog(fetcher=fetcher)
        self.assertEqual(await catalog.list_products("mock-sheet-1"), [])
        fetcher.fetch_rows.assert_not_awaited()

    async def test_bare_id_fetches_export_url(self) -> None:
        fetcher = _fake_fetcher([{"name": "Lamp", "price": "45"}])
        catalog = ShopCatalog(fetcher=fetcher)
        await catalog.list_products("abc123")
        fetcher.fetch_rows.assert_awaited_once_with(
            "https://docs.google.com/spreadsheets/d/abc123/pub?output=csv"
        )

    async def test_invalid_products_dropped_and_sorted(self) -> None:
        fetcher = _fake_fetcher(
            [
                {"id": "1", "name": "B", "price": "10"},
                {"id": "2", "name": "A", "price": "10"},
                {"id": "3", "name": "C", "price": "5"},
                {"id": "4", "name": "", "price": "1"},
                {"id": "5", "name": "No Price", "price": ""},
                {"id": "6", "name": "Bad Price", "price": "call us"},
            ]
        )
        catalog = ShopCatalog(fetcher=fetcher)
        products = await catalog.list_products("https://example.com/p.csv")
        self.assertEqual([p.name for p in products], ["C", "A", "B"])

    async def test_fetch_failure_returns_empty(self) -> None:
        fetcher = _fake_fetcher(error=SheetFetchError("HTTP 403"))
        catalog = ShopCatalog(fetcher=fetcher)
        with self.assertLogs("storefront.catalog", level="ERROR"):
            products = await catalog.list_products("abc123")
        self.assertEqual(products, [])


class TestMockCatalogSource(unittest.IsolatedAsyncioTestCase):
    """MockCatalogSource behaviour."""

    def test_handles_reserved_prefix_only(self) -> None:
        self.assertTrue(MockCatalogSource.handles("mock-sheet-1"))
        self.assertFalse(MockCatalogSource.handles("abc123"))
        self.assertFalse(MockCatalogSource.handles("https://x/mock-sheet-1"))

    async def test_sample_shops_are_copies(self) -> None:
        """Callers cannot mutate the built-in list."""
        source = MockCatalogSource(latency=0)
        shops = await source.list_shops()
        shops.clear()
        self.assertEqual(len(await source.list_shops()), 2)


if __name__ == "__main__":
    unittest.main()
