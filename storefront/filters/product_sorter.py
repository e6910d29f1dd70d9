# storefront/filters/product_sorter.py

"""Deterministic product ordering for the catalog grid."""

import locale
from collections.abc import Callable, Iterable
from typing import Any

from storefront.models.product import Product


def _name_key(product: Product) -> str:
    """Locale-aware collation key for a product name."""
    return locale.strxfrm(product.name or "")


def _price_low_high(product: Product) -> tuple[Any, ...]:
    return (product.price_value, _name_key(product))


def _price_high_low(product: Product) -> tuple[Any, ...]:
    # Name tie-break stays ascending
    return (-product.price_value, _name_key(product))


# mode id -> (key function, reverse)
_SORT_KEYS: dict[str, tuple[Callable[[Product], Any], bool]] = {
    "price-low-high": (_price_low_high, False),
    "price-high-low": (_price_high_low, False),
    "alphabetical-a-z": (_name_key, False),
    "alphabetical-z-a": (_name_key, True),
}


def sort_products(
    products: Iterable[Product], mode: str,
) -> list[Product]:
    """Return a new list of *products* ordered by *mode*.

    The sort is stable and never mutates the input.  Raises
    ``ValueError`` for a mode that is not registered.
    """
    try:
        key, reverse = _SORT_KEYS[mode]
    except KeyError:
        valid = ", ".join(_SORT_KEYS)
        raise ValueError(
            f"Unknown sort mode '{mode}' (expected one of: {valid})"
        ) from None
    return sorted(products, key=key, reverse=reverse)
