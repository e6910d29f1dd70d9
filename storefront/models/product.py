# storefront/models/product.py

"""Product data model for a shop's catalog sheet."""

import math
import re
from dataclasses import dataclass

# Whole cell: optional currency symbol or ISO code, then one number
_PRICE_PATTERN = re.compile(
    r"(?:[$€£¥₹]|[A-Z]{3})?\s*"
    r"(?P<number>[-+]?"
    r"(?:(?:\d{1,3}(?:,\d{3})+|\d+)(?:\.\d*)?|\.\d+)"
    r"(?:[eE][-+]?\d+)?)"
)


def parse_price(text: str | None) -> float | None:
    """Parse a sheet price cell like '25.00', '$1,299.00' or 'USD 40'.

    Returns ``None`` unless the whole cell is a single finite number,
    so prose such as 'Sold out 2024' or ranges like '12-15' are
    rejected.
    """
    if not text:
        return None
    match = _PRICE_PATTERN.fullmatch(text.strip())
    if not match:
        return None
    value = float(match.group("number").replace(",", ""))
    if not math.isfinite(value):
        return None
    return value


@dataclass(frozen=True)
class Product:
    """A single product row from a shop's catalog sheet.

    ``price`` and ``stock`` are kept as the raw sheet text.
    """

    id: str
    name: str
    price: str
    category: str = ""
    image_url: str = ""
    stock: str = ""

    @property
    def price_value(self) -> float:
        """Numeric price for comparisons; unparseable counts as 0."""
        value = parse_price(self.price)
        return value if value is not None else 0.0

    @classmethod
    def from_row(cls, row: dict[str, str | None]) -> "Product":
        """Build a Product from a CSV record, trimming every cell."""

        def cell(key: str) -> str:
            return (row.get(key) or "").strip()

        return cls(
            id=cell("id"),
            name=cell("name"),
            price=cell("price"),
            category=cell("category"),
            image_url=cell("image_url"),
            stock=cell("stock"),
        )
