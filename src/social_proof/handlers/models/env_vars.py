"""
Environment variable models for type-safe configuration.

This module defines the Pydantic model for environment variables used by the
recent orders handler, loaded through aws-lambda-env-modeler.
"""

import os
from typing import Annotated, Literal

from aws_lambda_env_modeler import get_environment_variables
from pydantic import BaseModel, Field

from social_proof.handlers.utils.errors import ConfigurationError
from social_proof.handlers.utils.observability import logger
from social_proof.models.output import PLACEHOLDER_IMAGE_URL

REQUIRED_CREDENTIALS = ('BC_STORE_HASH', 'BC_ACCESS_TOKEN')


class RecentOrdersEnvVars(BaseModel):
    """Environment variables for the recent orders handler."""

    # BigCommerce credentials
    BC_STORE_HASH: Annotated[str, Field(
        description='BigCommerce store hash',
        min_length=1
    )]

    BC_ACCESS_TOKEN: Annotated[str, Field(
        description='BigCommerce API token sent as X-Auth-Token',
        min_length=1
    )]

    BC_API_BASE_URL: Annotated[str, Field(
        default='https://api.bigcommerce.com',
        description='BigCommerce API root URL'
    )] = 'https://api.bigcommerce.com'

    # Awaiting Fulfillment
    DEFAULT_STATUS_ID: Annotated[str, Field(
        default='2',
        description='Order status filter used when the request omits status_id',
        pattern=r'^\d+$'
    )] = '2'

    FETCH_MODE: Annotated[Literal['parallel', 'sequential'], Field(
        default='parallel',
        description='Enrich orders concurrently or one after another'
    )] = 'parallel'

    STOREFRONT_BASE_URL: Annotated[str, Field(
        default='',
        description='Prefix for relative product URLs, e.g. https://shop.example.com'
    )] = ''

    PLACEHOLDER_IMAGE_URL: Annotated[str, Field(
        default=PLACEHOLDER_IMAGE_URL,
        description='Image used when a product has no thumbnail'
    )] = PLACEHOLDER_IMAGE_URL

    # Service name for observability
    POWERTOOLS_SERVICE_NAME: Annotated[str, Field(
        default='recent-orders',
        description='Service name for AWS Powertools'
    )] = 'recent-orders'

    LOG_LEVEL: Annotated[str, Field(
        default='INFO',
        description='Log level for application logging',
        pattern=r'^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$'
    )] = 'INFO'


def get_handler_env_vars() -> RecentOrdersEnvVars:
    """
    Get typed environment variables for the handler.

    Returns:
        Validated environment variables model instance

    Raises:
        ConfigurationError: If credentials are missing or a value is invalid
    """
    missing = [name for name in REQUIRED_CREDENTIALS if not os.environ.get(name)]
    if missing:
        logger.error("Missing environment variables", extra={"missing": missing})
        raise ConfigurationError('Missing BC_STORE_HASH or BC_ACCESS_TOKEN environment variables')

    try:
        return get_environment_variables(model=RecentOrdersEnvVars)
    except ValueError as exc:
        logger.error("Invalid environment configuration", extra={"error": str(exc)})
        raise ConfigurationError('Invalid environment configuration') from exc
