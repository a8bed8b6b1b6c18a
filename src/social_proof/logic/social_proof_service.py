"""
Business Logic Layer for the social proof widget.

This module turns recent BigCommerce orders into widget entries: it lists the
orders, enriches each one with its first product and catalog data, and
aggregates up to ten entries. Per-order failures only skip that order.
"""

from concurrent.futures import ThreadPoolExecutor
from typing import List, Optional, Tuple

import httpx
from aws_lambda_powertools.metrics import MetricUnit
from pydantic import ValidationError

from social_proof.dal import CommerceClient
from social_proof.handlers.utils.errors import UpstreamServiceError
from social_proof.handlers.utils.observability import logger, metrics, tracer
from social_proof.models.bigcommerce import Order, OrderProduct
from social_proof.models.output import (
    NO_PRODUCT_URL,
    PLACEHOLDER_IMAGE_URL,
    UNKNOWN_LOCATION,
    WidgetEntry,
)

MAX_ENTRIES = 10
PRODUCT_PATH_TEMPLATE = '/products.php?productId={product_id}'

FETCH_MODE_PARALLEL = 'parallel'
FETCH_MODE_SEQUENTIAL = 'sequential'

# Failures that skip a single order instead of failing the request
RECOVERABLE_ERRORS = (UpstreamServiceError, httpx.HTTPError, ValidationError)


def resolve_city(order: Order) -> str:
    """Billing city, then first shipping city, then the unknown location sentinel."""
    if order.billing_address and order.billing_address.city:
        return order.billing_address.city
    if order.shipping_addresses and order.shipping_addresses[0].city:
        return order.shipping_addresses[0].city
    return UNKNOWN_LOCATION


class SocialProofService:
    """Builds social proof widget entries from recent orders."""

    def __init__(
        self,
        client: CommerceClient,
        fetch_mode: str = FETCH_MODE_PARALLEL,
        placeholder_image_url: str = PLACEHOLDER_IMAGE_URL,
        storefront_base_url: str = '',
        max_entries: int = MAX_ENTRIES,
    ):
        """
        Initialize the service.

        Args:
            client: Commerce API client
            fetch_mode: 'parallel' to enrich all orders concurrently then truncate,
                'sequential' to enrich one by one and stop at max_entries
            placeholder_image_url: Image used when no thumbnail can be resolved
            storefront_base_url: Prefix applied to relative product URLs
            max_entries: Maximum number of entries returned
        """
        if fetch_mode not in (FETCH_MODE_PARALLEL, FETCH_MODE_SEQUENTIAL):
            raise ValueError(f"Unsupported fetch mode: {fetch_mode}")

        self.client = client
        self.fetch_mode = fetch_mode
        self.placeholder_image_url = placeholder_image_url
        self.storefront_base_url = storefront_base_url.rstrip('/')
        self.max_entries = max_entries

    @tracer.capture_method
    def get_recent_purchases(self, status_id: str) -> List[WidgetEntry]:
        """
        List recent orders and turn them into widget entries.

        Args:
            status_id: BigCommerce order status used to filter orders

        Returns:
            At most max_entries entries, newest order first

        Raises:
            UpstreamServiceError: If the orders listing fails
        """
        tracer.put_annotation("status_id", status_id)
        tracer.put_annotation("fetch_mode", self.fetch_mode)

        orders = self.client.list_orders(status_id=status_id, limit=self.max_entries)
        logger.info(f"Found {len(orders)} orders", extra={"status_id": status_id})
        metrics.add_metric(name="OrdersFetched", unit=MetricUnit.Count, value=len(orders))

        if self.fetch_mode == FETCH_MODE_PARALLEL:
            entries, attempted = self._enrich_parallel(orders), len(orders)
        else:
            entries, attempted = self._enrich_sequential(orders)

        skipped = attempted - len(entries)
        if skipped:
            metrics.add_metric(name="OrdersSkipped", unit=MetricUnit.Count, value=skipped)

        return entries[:self.max_entries]

    def _enrich_parallel(self, orders: List[Order]) -> List[WidgetEntry]:
        if not orders:
            return []

        # One worker per order; executor.map keeps the listing order
        with ThreadPoolExecutor(max_workers=len(orders)) as executor:
            results = list(executor.map(self.enrich_order, orders))

        return [entry for entry in results if entry is not None]

    def _enrich_sequential(self, orders: List[Order]) -> Tuple[List[WidgetEntry], int]:
        entries: List[WidgetEntry] = []
        attempted = 0
        for order in orders:
            if len(entries) >= self.max_entries:
                break
            attempted += 1
            entry = self.enrich_order(order)
            if entry is not None:
                entries.append(entry)
        return entries, attempted

    def enrich_order(self, order: Order) -> Optional[WidgetEntry]:
        """
        Build the widget entry of a single order.

        Returns:
            The entry, or None when the order's products cannot be fetched or
            the order has none
        """
        try:
            products = self.client.get_order_products(order.id)
        except RECOVERABLE_ERRORS as exc:
            logger.error(f"Error fetching products for order {order.id}", extra={"error": str(exc)})
            return None

        if not products:
            logger.debug("Order has no products", extra={"order_id": order.id})
            return None

        product = products[0]
        product_image, product_url = self._resolve_media(product)

        return WidgetEntry(
            city=resolve_city(order),
            product_name=product.name,
            product_image=product_image,
            product_url=product_url,
            product_id=product.product_id or None,
        )

    def _resolve_media(self, product: OrderProduct) -> Tuple[str, str]:
        """Resolve image and storefront URL, consulting the catalog only without an inline image."""
        image = product.image_url
        url = None

        if not image and product.product_id:
            try:
                catalog_product = self.client.get_catalog_product(product.product_id)
            except RECOVERABLE_ERRORS as exc:
                logger.error("Error fetching catalog data", extra={
                    "product_id": product.product_id,
                    "error": str(exc),
                })
                catalog_product = None

            if catalog_product is not None:
                image = catalog_product.thumbnail_url
                url = catalog_product.canonical_url

        if not url and product.product_id:
            url = PRODUCT_PATH_TEMPLATE.format(product_id=product.product_id)

        return image or self.placeholder_image_url, self._absolute_url(url)

    def _absolute_url(self, url: Optional[str]) -> str:
        if not url:
            return NO_PRODUCT_URL
        if self.storefront_base_url and url.startswith('/'):
            return f"{self.storefront_base_url}{url}"
        return url
