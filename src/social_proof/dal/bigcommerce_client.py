"""
BigCommerce REST API client.

This module implements the data access layer for the recent orders function:
the v2 orders listing, the v2 order products listing and the v3 catalog
product lookup, all through a single request-scoped httpx client.
"""

from typing import Any, Dict, List, Optional

import httpx
from pydantic import TypeAdapter

from social_proof.handlers.utils.errors import UpstreamServiceError
from social_proof.handlers.utils.observability import logger, tracer
from social_proof.models.bigcommerce import CatalogProduct, Order, OrderProduct

DEFAULT_API_BASE_URL = 'https://api.bigcommerce.com'
ORDERS_PAGE_SIZE = 10
ORDERS_SORT = 'date_created:desc'

_orders_adapter = TypeAdapter(List[Order])
_order_products_adapter = TypeAdapter(List[OrderProduct])


class BigCommerceClient:
    """Thin synchronous client over the BigCommerce REST API."""

    def __init__(
        self,
        store_hash: str,
        access_token: str,
        base_url: str = DEFAULT_API_BASE_URL,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        """
        Initialize the client.

        Args:
            store_hash: BigCommerce store hash
            access_token: API token sent in the X-Auth-Token header
            base_url: API root URL
            transport: Optional httpx transport, used to stub the API in tests
        """
        self.store_hash = store_hash
        self._client = httpx.Client(
            base_url=f"{base_url.rstrip('/')}/stores/{store_hash}",
            headers={
                'X-Auth-Token': access_token,
                'Content-Type': 'application/json',
                'Accept': 'application/json',
            },
            transport=transport,
        )

    def __enter__(self) -> 'BigCommerceClient':
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def close(self) -> None:
        self._client.close()

    def _get(self, path: str, params: Optional[Dict[str, Any]] = None) -> Any:
        """
        Issue a GET request and decode the JSON body.

        Returns:
            Decoded JSON, or None for 204 No Content and empty bodies

        Raises:
            UpstreamServiceError: If the API answers with a non-2xx status or a non-JSON body
            httpx.HTTPError: On transport failures
        """
        response = self._client.get(path, params=params)

        if not response.is_success:
            logger.error("BigCommerce API error", extra={
                "path": path,
                "status_code": response.status_code,
                "response_text": response.text,
            })
            raise UpstreamServiceError(
                status_code=response.status_code,
                path=path,
                response_text=response.text,
            )

        if response.status_code == 204 or not response.content:
            return None

        try:
            return response.json()
        except ValueError as exc:
            logger.error("BigCommerce API returned a non-JSON body", extra={
                "path": path,
                "status_code": response.status_code,
                "error": str(exc),
            })
            raise UpstreamServiceError(
                status_code=response.status_code,
                path=path,
                response_text=response.text,
                message=f"BigCommerce API returned an invalid JSON body: {response.status_code}",
            ) from exc

    @tracer.capture_method
    def list_orders(self, status_id: str, limit: int = ORDERS_PAGE_SIZE) -> List[Order]:
        """
        List the most recent orders with the given status.

        Args:
            status_id: BigCommerce order status id
            limit: Page size

        Returns:
            Orders sorted by creation date, newest first
        """
        data = self._get('/v2/orders', params={
            'limit': limit,
            'sort': ORDERS_SORT,
            'status_id': status_id,
        })
        return _orders_adapter.validate_python(data or [])

    def get_order_products(self, order_id: int) -> List[OrderProduct]:
        """List the line items of an order."""
        data = self._get(f'/v2/orders/{order_id}/products')
        return _order_products_adapter.validate_python(data or [])

    def get_catalog_product(self, product_id: int) -> Optional[CatalogProduct]:
        """Fetch a catalog product with its images, None when the API returns no data."""
        data = self._get(f'/v3/catalog/products/{product_id}', params={'include': 'images'})
        if not isinstance(data, dict) or not data.get('data'):
            return None
        return CatalogProduct.model_validate(data['data'])
