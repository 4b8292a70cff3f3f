"""
Data model definitions package.

Aggregates Pydantic models for use in other modules.
"""

from .envelope import (
    AccessPolicy,
    GraphQLError,
    GraphQLRequestBody,
    GraphQLResponseBody,
    RequestEnvelope,
    ResponsePayload,
    Route,
)

__all__ = [
    "AccessPolicy",
    "GraphQLError",
    "GraphQLRequestBody",
    "GraphQLResponseBody",
    "RequestEnvelope",
    "ResponsePayload",
    "Route",
]
