# storefront/sources/base_source.py

"""Abstract base class for catalog data providers."""

from abc import ABC, abstractmethod

from storefront.models.product import Product
from storefront.models.shop import Shop


class CatalogSource(ABC):
    """A provider of shops and their product lists."""

    name: str = "base"

    @abstractmethod
    async def list_shops(self) -> list[Shop]:
        """Return every valid shop known to this provider."""
        ...

    @abstractmethod
    async def list_products(self, source_ref: str) -> list[Product]:
        """Return the valid products behind *source_ref*."""
        ...
