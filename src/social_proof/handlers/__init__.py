"""
AWS Lambda Handlers Module.

This module contains the Lambda function handler that serves as the entry
point of the recent orders API. The handler uses AWS Lambda Powertools for:
- Structured logging with correlation IDs
- Distributed tracing with X-Ray
- Custom metrics collection
"""

from social_proof.handlers.utils.observability import logger, tracer, metrics

__all__ = [
    "logger",
    "tracer",
    "metrics",
]
