# storefront/services/shop_detail.py

"""Load-and-sort state machine behind the shop detail screen."""

import logging
from dataclasses import dataclass, field, replace

from storefront.config.settings import Settings
from storefront.filters.product_sorter import sort_products
from storefront.models.product import Product
from storefront.models.shop import Shop
from storefront.services.catalog import ShopCatalog

logger = logging.getLogger("storefront.detail")

LOADING = "loading"
ERROR = "error"
READY = "ready"

SHOP_NOT_FOUND = "Shop not found"
LOAD_FAILED = "Failed to load shop data"


@dataclass(frozen=True)
class ShopDetailState:
    """Snapshot of the shop detail view."""

    status: str  # "loading", "error", "ready"
    slug: str
    shop: Shop | None = None
    products: list[Product] = field(default_factory=list)
    sort_mode: str = Settings.DEFAULT_SORT
    error: str = ""


class ShopDetailController:
    """Drives a shop detail view through loading, error and ready.

    Every :meth:`load` takes a generation number.  A load that
    finishes after a newer one has started is discarded, so the
    held state always belongs to the latest requested slug.
    """

    def __init__(self, catalog: ShopCatalog) -> None:
        self.catalog = catalog
        self.state = ShopDetailState(status=LOADING, slug="")
        self.cart_count = 0
        self._generation = 0

    async def load(self, slug: str) -> ShopDetailState:
        """Resolve *slug*, fetch its products and apply the default sort."""
        self._generation += 1
        token = self._generation
        self.state = ShopDetailState(status=LOADING, slug=slug)
        logger.info("Loading shop '%s' (load #%d)", slug, token)

        try:
            shop = await self.catalog.find_shop(slug)
            if shop is None:
                logger.warning("No shop matches slug '%s'", slug)
                result = ShopDetailState(
                    status=ERROR, slug=slug, error=SHOP_NOT_FOUND
                )
            else:
                products = await self.catalog.list_products(
                    shop.product_sheet_id
                )
                result = ShopDetailState(
                    status=READY,
                    slug=slug,
                    shop=shop,
                    products=sort_products(
                        products, Settings.DEFAULT_SORT
                    ),
                )
        except Exception:
            logger.error(
                "Failed to load shop '%s'", slug, exc_info=True
            )
            result = ShopDetailState(
                status=ERROR, slug=slug, error=LOAD_FAILED
            )

        if token != self._generation:
            logger.info(
                "Discarding stale load #%d for '%s'", token, slug
            )
            return self.state

        self.state = result
        return result

    def change_sort(self, mode: str) -> ShopDetailState:
        """Re-sort the held products without fetching again."""
        if self.state.status != READY:
            logger.debug(
                "Ignoring sort change to '%s' while %s",
                mode,
                self.state.status,
            )
            return self.state
        self.state = replace(
            self.state,
            sort_mode=mode,
            products=sort_products(self.state.products, mode),
        )
        return self.state

    def add_to_cart(self, product: Product, quantity: int = 1) -> int:
        """Bump the in-memory cart counter; nothing is persisted."""
        self.cart_count += quantity
        logger.info(
            "Added to cart: %s x%d (cart=%d)",
            product.name,
            quantity,
            self.cart_count,
        )
        return self.cart_count
