"""
Output models for API responses using Pydantic.

This module defines the widget entry returned to the storefront and the error
body shared by every 4xx/5xx response.
"""

from typing import Annotated, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

UNKNOWN_LOCATION = 'Unknown Location'
PLACEHOLDER_IMAGE_URL = 'https://via.placeholder.com/200x200/CCCCCC/ffffff?text=No+Image'
NO_PRODUCT_URL = '#'


class WidgetEntry(BaseModel):
    """A single recent purchase shown in the social proof widget."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    city: Annotated[str, Field(
        default=UNKNOWN_LOCATION,
        description='City the order was placed from',
        examples=['Austin']
    )] = UNKNOWN_LOCATION

    product_name: Annotated[str, Field(
        description='Name of the first product in the order',
        examples=['Orbit Terrarium - Large']
    )]

    product_image: Annotated[str, Field(
        default=PLACEHOLDER_IMAGE_URL,
        description='Thumbnail URL of the product'
    )] = PLACEHOLDER_IMAGE_URL

    product_url: Annotated[str, Field(
        default=NO_PRODUCT_URL,
        description='Storefront URL of the product',
        examples=['/orbit-terrarium-large/', '#']
    )] = NO_PRODUCT_URL

    product_id: Annotated[Optional[int], Field(
        default=None,
        description='Catalog product identifier'
    )] = None

    def to_response(self) -> dict:
        return self.model_dump(by_alias=True, exclude_none=True)


class ErrorOutput(BaseModel):
    """Error body for 4xx/5xx responses."""

    error: Annotated[str, Field(
        description='Short error indicator',
        examples=['Method not allowed', 'Failed to fetch orders']
    )]

    message: Annotated[Optional[str], Field(
        default=None,
        description='Underlying error message'
    )] = None
