# storefront/filters/record_validator.py

"""Record validation: drop invalid shops and products after a sheet load."""

import logging

from storefront.models.product import Product, parse_price
from storefront.models.shop import Shop

logger = logging.getLogger("storefront.filters")


class ShopValidator:
    """Validate shops and drop those missing a name or slug."""

    @staticmethod
    def validate(shops: list[Shop]) -> tuple[list[Shop], int]:
        """Drop shops with empty/whitespace names or slugs.

        Returns the valid shops and the count of dropped rows.
        """
        valid: list[Shop] = []
        dropped = 0

        for shop in shops:
            if not shop.name.strip() or not shop.slug.strip():
                logger.debug(
                    "Dropped shop without name or slug "
                    "(id=%s, name=%r, slug=%r)",
                    shop.id,
                    shop.name,
                    shop.slug,
                )
                dropped += 1
                continue
            valid.append(shop)

        if dropped:
            logger.info("Validation dropped %d invalid shops", dropped)

        return valid, dropped


class ProductValidator:
    """Validate products and drop those missing essential fields."""

    @staticmethod
    def validate(
        products: list[Product],
    ) -> tuple[list[Product], int]:
        """Drop products with empty names or unparseable prices.

        Returns the valid products and the count of dropped rows.
        """
        valid: list[Product] = []
        dropped = 0

        for product in products:
            if not product.name.strip():
                logger.debug(
                    "Dropped product with empty name (id=%s)",
                    product.id,
                )
                dropped += 1
                continue
            if parse_price(product.price) is None:
                logger.debug(
                    "Dropped product with unparseable price "
                    "(name=%s, price=%r)",
                    product.name,
                    product.price,
                )
                dropped += 1
                continue
            valid.append(product)

        if dropped:
            logger.info(
                "Validation dropped %d invalid products", dropped
            )

        return valid, dropped
