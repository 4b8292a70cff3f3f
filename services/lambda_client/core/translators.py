"""
Response translation.

Decodes the proxy response returned by Lambda Invoke into GraphQL data or an
httpx.Response.
"""

import logging
from typing import Any, Dict, Optional

import httpx
from pydantic import ValidationError

from services.lambda_client.core.exceptions import MalformedResponseError, RemoteError
from services.lambda_client.models.envelope import GraphQLResponseBody, ResponsePayload

logger = logging.getLogger("lambda_client.translators")


def parse_response_payload(raw: bytes, function_name: str = "") -> ResponsePayload:
    """
    Parse the raw Invoke payload as a proxy response.

    Raises:
        MalformedResponseError: payload is not a proxy response object
    """
    try:
        return ResponsePayload.model_validate_json(raw)
    except ValidationError as e:
        raise MalformedResponseError(function_name, "response envelope", e) from e


def parse_gql_response(raw: bytes, function_name: str = "") -> Dict[str, Any]:
    """
    Decode a GraphQL response and return its `data`.

    Raises:
        MalformedResponseError: envelope or body is not valid JSON
        RemoteError: the backend reported errors; the first message wins
    """
    payload = parse_response_payload(raw, function_name)
    try:
        body = GraphQLResponseBody.model_validate_json(payload.body)
    except ValidationError as e:
        raise MalformedResponseError(function_name, "GraphQL body", e) from e

    if body.errors:
        messages = [error.message for error in body.errors]
        logger.warning(
            f"GraphQL errors returned by {function_name}",
            extra={
                "function_name": function_name,
                "status_code": payload.status_code,
                "error_count": len(messages),
            },
        )
        raise RemoteError(messages[0], messages)
    return body.data


def parse_http_response(
    raw: bytes, function_name: str = "", request: Optional[httpx.Request] = None
) -> httpx.Response:
    """
    Rebuild an httpx.Response from the proxy response.

    Each header maps to a single value, so
    `response.headers.get_list(name) == [value]`.

    Raises:
        MalformedResponseError: payload is not a proxy response object
    """
    payload = parse_response_payload(raw, function_name)
    # A plain stream keeps httpx from adding a Content-Length header.
    response = httpx.Response(
        status_code=payload.status_code,
        headers=list(payload.headers.items()),
        stream=httpx.ByteStream(payload.body.encode("utf-8")),
        request=request,
    )
    response.read()
    return response
