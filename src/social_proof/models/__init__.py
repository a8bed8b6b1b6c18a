"""
Service Models Package

This package contains all Pydantic models used throughout the service,
including BigCommerce payload models, input validation models and the widget
output models.
"""

from .bigcommerce import Address, CatalogImage, CatalogProduct, CustomUrl, Order, OrderProduct
from .input import RecentOrdersQuery
from .output import (
    NO_PRODUCT_URL,
    PLACEHOLDER_IMAGE_URL,
    UNKNOWN_LOCATION,
    ErrorOutput,
    WidgetEntry,
)

__all__ = [
    # Upstream models
    "Address",
    "CatalogImage",
    "CatalogProduct",
    "CustomUrl",
    "Order",
    "OrderProduct",

    # Input models
    "RecentOrdersQuery",

    # Output models
    "ErrorOutput",
    "WidgetEntry",
    "NO_PRODUCT_URL",
    "PLACEHOLDER_IMAGE_URL",
    "UNKNOWN_LOCATION",
]
