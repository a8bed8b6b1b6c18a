"""
BigCommerce payload models.

These models parse the subset of the BigCommerce v2 order and v3 catalog
responses used by the widget. Unknown fields are ignored.
"""

from typing import Annotated, Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Address(BaseModel):
    """Billing or shipping address attached to an order."""

    model_config = ConfigDict(extra='ignore')

    city: Annotated[Optional[str], Field(
        default=None,
        description='Address city',
        examples=['Austin']
    )] = None


class Order(BaseModel):
    """Order record from the v2 orders listing."""

    model_config = ConfigDict(extra='ignore')

    id: Annotated[int, Field(
        description='BigCommerce order identifier',
        examples=[100]
    )]

    billing_address: Annotated[Optional[Address], Field(
        default=None,
        description='Billing address of the order'
    )] = None

    shipping_addresses: Annotated[Optional[list[Address]], Field(
        default=None,
        description='Shipping addresses when expanded inline'
    )] = None

    @field_validator('shipping_addresses', mode='before')
    @classmethod
    def drop_resource_link(cls, v: Any) -> Any:
        """The listing endpoint returns a {url, resource} link here instead of a list."""
        if not isinstance(v, list):
            return None
        return v


class OrderProduct(BaseModel):
    """Line item snapshot stored on an order."""

    model_config = ConfigDict(extra='ignore')

    name: Annotated[str, Field(
        default='',
        description='Product name at the time of purchase',
        examples=['Orbit Terrarium - Large']
    )] = ''

    product_id: Annotated[Optional[int], Field(
        default=None,
        description='Catalog product identifier, 0 for custom line items'
    )] = None

    image_url: Annotated[Optional[str], Field(
        default=None,
        description='Inline image URL when the line item carries one'
    )] = None

    @field_validator('name', mode='before')
    @classmethod
    def null_name_as_empty(cls, v: Any) -> Any:
        return '' if v is None else v


class CatalogImage(BaseModel):
    model_config = ConfigDict(extra='ignore')

    url_thumbnail: Optional[str] = None


class CustomUrl(BaseModel):
    model_config = ConfigDict(extra='ignore')

    url: Optional[str] = None


class CatalogProduct(BaseModel):
    """Canonical product record from the v3 catalog."""

    model_config = ConfigDict(extra='ignore')

    images: Annotated[list[CatalogImage], Field(
        default_factory=list,
        description='Product images, first one is used as the thumbnail'
    )]

    custom_url: Annotated[Optional[CustomUrl], Field(
        default=None,
        description='Storefront path of the product'
    )] = None

    @property
    def thumbnail_url(self) -> Optional[str]:
        if self.images and self.images[0].url_thumbnail:
            return self.images[0].url_thumbnail
        return None

    @property
    def canonical_url(self) -> Optional[str]:
        if self.custom_url and self.custom_url.url:
            return self.custom_url.url
        return None
