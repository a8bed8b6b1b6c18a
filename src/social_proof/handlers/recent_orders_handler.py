"""
Recent Orders Handler - Lambda function for the social proof widget.

This module implements the handler layer of the recent orders API: CORS
preflight and method guard, configuration loading, query validation, and the
JSON response wrapping the widget entries built by the logic layer.
"""

import json
import os
from typing import Any, Dict

from aws_lambda_powertools.logging import correlation_paths
from aws_lambda_powertools.metrics import MetricUnit
from aws_lambda_powertools.utilities.typing import LambdaContext
from pydantic import ValidationError

from social_proof.dal import get_commerce_client
from social_proof.handlers.models.env_vars import RecentOrdersEnvVars, get_handler_env_vars
from social_proof.handlers.utils.errors import (
    BaseServiceError,
    MethodNotAllowedError,
    RequestValidationError,
    create_api_response,
    create_error_response,
)
from social_proof.handlers.utils.observability import logger, metrics, tracer
from social_proof.logic.social_proof_service import SocialProofService
from social_proof.models.input import RecentOrdersQuery
from social_proof.models.output import ErrorOutput


def parse_query(event: Dict[str, Any], env_vars: RecentOrdersEnvVars) -> RecentOrdersQuery:
    """
    Validate the query string of the request.

    Raises:
        RequestValidationError: If status_id is not a numeric status code
    """
    query_params = event.get('queryStringParameters') or {}
    status_id = query_params.get('status_id') or env_vars.DEFAULT_STATUS_ID

    try:
        return RecentOrdersQuery(status_id=status_id)
    except ValidationError as e:
        logger.warning("Request validation failed", extra={"validation_errors": str(e)})
        raise RequestValidationError(f"Invalid status_id: {status_id}")


@tracer.capture_method
def fetch_recent_orders(env_vars: RecentOrdersEnvVars, query: RecentOrdersQuery) -> Dict[str, Any]:
    """
    Fetch recent orders from BigCommerce and build the widget response.

    Args:
        env_vars: Validated configuration
        query: Validated query parameters

    Returns:
        API Gateway response with the JSON array of widget entries
    """
    logger.info("Fetching orders from BigCommerce...")

    with get_commerce_client(
        store_hash=env_vars.BC_STORE_HASH,
        access_token=env_vars.BC_ACCESS_TOKEN,
        base_url=env_vars.BC_API_BASE_URL,
    ) as client:
        service = SocialProofService(
            client=client,
            fetch_mode=env_vars.FETCH_MODE,
            placeholder_image_url=env_vars.PLACEHOLDER_IMAGE_URL,
            storefront_base_url=env_vars.STOREFRONT_BASE_URL,
        )
        entries = service.get_recent_purchases(status_id=query.status_id)

    logger.info(f"Returning {len(entries)} items")
    metrics.add_metric(name="EntriesReturned", unit=MetricUnit.Count, value=len(entries))

    return create_api_response(
        status_code=200,
        body=json.dumps([entry.to_response() for entry in entries]),
    )


def handle_request(event: Dict[str, Any]) -> Dict[str, Any]:
    """Route a proxy event: preflight, method guard, configuration, then the fetch."""
    http_method = (event.get('httpMethod') or '').upper()

    if http_method == 'OPTIONS':
        return create_api_response(status_code=200, body='')

    try:
        if http_method != 'GET':
            raise MethodNotAllowedError(http_method)
        env_vars = get_handler_env_vars()
        query = parse_query(event, env_vars)
    except BaseServiceError as e:
        return create_error_response(e)

    try:
        return fetch_recent_orders(env_vars, query)
    except Exception as e:
        logger.exception("Function error", extra={"error": str(e)})
        metrics.add_metric(name="RequestError", unit=MetricUnit.Count, value=1)

        error = ErrorOutput(error='Failed to fetch orders', message=str(e))
        return create_api_response(
            status_code=500,
            body=error.model_dump_json(),
        )


@tracer.capture_lambda_handler
@logger.inject_lambda_context(correlation_id_path=correlation_paths.API_GATEWAY_REST)
@metrics.log_metrics(capture_cold_start_metric=True)
def lambda_handler(event: Dict[str, Any], context: LambdaContext) -> Dict[str, Any]:
    """
    Main Lambda handler function.

    Args:
        event: API Gateway (or Netlify) proxy event
        context: Lambda context object

    Returns:
        API Gateway response
    """
    metrics.add_metric(name="RequestCount", unit=MetricUnit.Count, value=1)
    tracer.put_annotation("service", "recent-orders")
    tracer.put_annotation("environment", os.environ.get("ENVIRONMENT", "unknown"))

    return handle_request(event)
