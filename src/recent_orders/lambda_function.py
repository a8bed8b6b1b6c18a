"""
Recent Orders Lambda Function - Entry point for the social proof widget API.

This module serves as the Lambda function entry point that delegates to the
recent orders handler.
"""

import os
import sys
from typing import Any, Dict

# Add the service module to the Python path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from aws_lambda_powertools.utilities.typing import LambdaContext
from social_proof.handlers.recent_orders_handler import lambda_handler as recent_orders_handler


def lambda_handler(event: Dict[str, Any], context: LambdaContext) -> Dict[str, Any]:
    """
    Lambda function entry point for the recent orders API.

    Args:
        event: Lambda event payload (API Gateway event)
        context: Lambda context object

    Returns:
        API Gateway response dictionary
    """
    return recent_orders_handler(event, context)
