"""
Business Logic Layer Module.

This module contains the aggregation logic of the recent orders function. It
implements the middle layer of the three-layer architecture: the handler layer
parses the request and builds the response, the data access layer talks to
BigCommerce, and this layer merges orders, order products and catalog data
into widget entries.
"""

from social_proof.logic.social_proof_service import (
    FETCH_MODE_PARALLEL,
    FETCH_MODE_SEQUENTIAL,
    MAX_ENTRIES,
    SocialProofService,
    resolve_city,
)

__all__ = [
    "FETCH_MODE_PARALLEL",
    "FETCH_MODE_SEQUENTIAL",
    "MAX_ENTRIES",
    "SocialProofService",
    "resolve_city",
]
