"""
Data Access Layer (DAL) for the recent orders function.

This module provides the commerce client interface and the factory used by the
handler to build a request-scoped client.
"""

from typing import Optional, Protocol

import httpx

from social_proof.models.bigcommerce import CatalogProduct, Order, OrderProduct


class CommerceClient(Protocol):
    """Protocol defining the upstream commerce API used by the logic layer."""

    def list_orders(self, status_id: str, limit: int = 10) -> list[Order]:
        """List the most recent orders with the given status."""
        ...

    def get_order_products(self, order_id: int) -> list[OrderProduct]:
        """List the products of an order."""
        ...

    def get_catalog_product(self, product_id: int) -> Optional[CatalogProduct]:
        """Retrieve a catalog product by its ID."""
        ...


def get_commerce_client(
    store_hash: str,
    access_token: str,
    base_url: str,
    transport: Optional[httpx.BaseTransport] = None,
):
    """
    Factory function to get the commerce API client.

    Args:
        store_hash: BigCommerce store hash
        access_token: BigCommerce API token
        base_url: API root URL
        transport: Optional httpx transport

    Returns:
        BigCommerce client instance, usable as a context manager
    """
    # Import here to avoid circular imports
    from social_proof.dal.bigcommerce_client import BigCommerceClient

    return BigCommerceClient(
        store_hash=store_hash,
        access_token=access_token,
        base_url=base_url,
        transport=transport,
    )


__all__ = [
    'CommerceClient',
    'get_commerce_client',
]
