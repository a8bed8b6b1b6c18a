"""
Recent Orders Social Proof Service Module.

This package contains the implementation of the recent orders function, which
feeds a storefront "social proof" widget with the latest BigCommerce purchases.
It follows the three-layer architecture pattern:

- handlers: Lambda entry point, CORS and method guard, response building
- logic: Order enrichment and aggregation into widget entries
- dal: BigCommerce REST API client
- models: Upstream payload, input and output models
"""

__version__ = "1.0.0"
__description__ = "BigCommerce recent orders feed for social proof widgets"

# Re-export commonly used classes for convenience
from social_proof.models.bigcommerce import CatalogProduct, Order, OrderProduct
from social_proof.models.output import WidgetEntry
from social_proof.handlers.utils.observability import logger, tracer, metrics

__all__ = [
    "CatalogProduct",
    "Order",
    "OrderProduct",
    "WidgetEntry",
    "logger",
    "tracer",
    "metrics",
]
