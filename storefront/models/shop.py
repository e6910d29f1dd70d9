# storefront/models/shop.py

"""Shop data model for the directory listing."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Shop:
    """A single shop row from the shop directory sheet."""

    id: str
    name: str
    slug: str
    logo_url: str = ""
    theme_color: str = ""
    contact_info: str = ""
    phone_number: str = ""
    product_sheet_id: str = ""

    @classmethod
    def from_row(cls, row: dict[str, str | None]) -> "Shop":
        """Build a Shop from a CSV record, trimming every cell."""

        def cell(key: str) -> str:
            return (row.get(key) or "").strip()

        return cls(
            id=cell("id"),
            name=cell("name"),
            slug=cell("slug"),
            logo_url=cell("logo_url"),
            theme_color=cell("theme_color"),
            contact_info=cell("contact_info"),
            phone_number=cell("phone_number"),
            product_sheet_id=cell("product_sheet_id"),
        )
