"""
Error handling utilities for the recent orders handler.

This module defines the service error hierarchy, its mapping to HTTP status
codes and the helpers used to build API Gateway proxy responses.
"""

import json
import uuid
from enum import Enum
from typing import Any, Dict, Optional

from aws_lambda_powertools.metrics import MetricUnit

from social_proof.handlers.utils.observability import logger, metrics, tracer
from social_proof.models.output import ErrorOutput

# Fixed CORS headers returned on every response, preflight included
CORS_HEADERS = {
    'Access-Control-Allow-Origin': '*',
    'Access-Control-Allow-Headers': 'Content-Type',
    'Access-Control-Allow-Methods': 'GET, OPTIONS',
    'Content-Type': 'application/json',
}


class ErrorCategory(str, Enum):
    """Error categories for classification."""
    VALIDATION = "VALIDATION"
    CONFIGURATION = "CONFIGURATION"
    EXTERNAL_SERVICE = "EXTERNAL_SERVICE"
    PROTOCOL = "PROTOCOL"


class BaseServiceError(Exception):
    """Base exception class for service errors."""

    def __init__(
        self,
        message: str,
        error_code: str,
        category: ErrorCategory,
        user_message: Optional[str] = None,
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.category = category
        self.user_message = user_message or "An error occurred while processing your request."
        self.error_id = str(uuid.uuid4())

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary for logging."""
        return {
            "error_id": self.error_id,
            "error_code": self.error_code,
            "message": self.message,
            "user_message": self.user_message,
            "category": self.category.value,
        }


class ConfigurationError(BaseServiceError):
    """Raised when required environment configuration is missing or invalid."""

    def __init__(self, message: str):
        super().__init__(
            message=message,
            error_code="CONFIGURATION_ERROR",
            category=ErrorCategory.CONFIGURATION,
            user_message="Server configuration error",
        )


class MethodNotAllowedError(BaseServiceError):
    """Raised for any HTTP method other than GET and OPTIONS."""

    def __init__(self, method: str):
        super().__init__(
            message=f"HTTP method '{method}' is not allowed",
            error_code="METHOD_NOT_ALLOWED",
            category=ErrorCategory.PROTOCOL,
            user_message="Method not allowed",
        )
        self.method = method

    def to_output(self) -> ErrorOutput:
        # The 405 body carries no message field
        return ErrorOutput(error=self.user_message)


class RequestValidationError(BaseServiceError):
    """Raised when query parameters fail validation."""

    def __init__(self, message: str):
        super().__init__(
            message=message,
            error_code="VALIDATION_ERROR",
            category=ErrorCategory.VALIDATION,
            user_message="Invalid request",
        )


class UpstreamServiceError(BaseServiceError):
    """Raised when a BigCommerce API call returns a non-success status or an undecodable body."""

    def __init__(
        self,
        status_code: int,
        path: str,
        response_text: str = "",
        message: Optional[str] = None,
    ):
        super().__init__(
            message=message or f"BigCommerce API error: {status_code}",
            error_code="EXTERNAL_SERVICE_ERROR",
            category=ErrorCategory.EXTERNAL_SERVICE,
            user_message="Failed to fetch orders",
        )
        self.status_code = status_code
        self.path = path
        self.response_text = response_text


@tracer.capture_method
def log_error_metrics(error: BaseServiceError) -> None:
    """Log error metrics for monitoring and alerting."""
    metrics.add_metric(name="ErrorCount", unit=MetricUnit.Count, value=1)
    metrics.add_metric(name=f"Error{error.category.value}Count", unit=MetricUnit.Count, value=1)

    tracer.put_annotation("error_code", error.error_code)
    tracer.put_metadata("error_details", error.to_dict())

    logger.error(
        "Service error occurred",
        extra={
            "error_id": error.error_id,
            "error_code": error.error_code,
            "error_category": error.category.value,
            "error_message": error.message,
        }
    )


def format_error_response(error: BaseServiceError) -> Dict[str, Any]:
    """Format error for API response."""
    if isinstance(error, MethodNotAllowedError):
        output = error.to_output()
    else:
        output = ErrorOutput(error=error.user_message, message=error.message)
    return output.model_dump(exclude_none=True)


def get_http_status_code(error: BaseServiceError) -> int:
    """Get appropriate HTTP status code for error."""
    status_mapping = {
        "VALIDATION_ERROR": 400,
        "METHOD_NOT_ALLOWED": 405,
        "CONFIGURATION_ERROR": 500,
        "EXTERNAL_SERVICE_ERROR": 500,
    }

    return status_mapping.get(error.error_code, 500)


def create_api_response(status_code: int, body: Any) -> Dict[str, Any]:
    """Create standardized API Gateway response."""
    return {
        "statusCode": status_code,
        "headers": dict(CORS_HEADERS),
        "body": body if isinstance(body, str) else json.dumps(body),
    }


def create_error_response(error: BaseServiceError) -> Dict[str, Any]:
    """Log a service error and convert it into an API Gateway response."""
    log_error_metrics(error)
    return create_api_response(
        status_code=get_http_status_code(error),
        body=format_error_response(error),
    )
