"""
Input models for request validation using Pydantic.
"""

from typing import Annotated

from pydantic import BaseModel, Field


class RecentOrdersQuery(BaseModel):
    """Query string parameters accepted by the recent orders endpoint."""

    status_id: Annotated[str, Field(
        pattern=r'^\d+$',
        description='BigCommerce order status id used to filter orders',
        examples=['2', '11']
    )]
