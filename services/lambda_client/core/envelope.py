"""
Request envelope construction.

Turns a GraphQL query or an httpx.Request into the proxy-style JSON payload
passed to Lambda Invoke.
"""

import logging
from typing import Any, Dict, Optional

import httpx
from pydantic import ValidationError
from pydantic_core import PydanticSerializationError

from services.lambda_client.core.exceptions import BodyReadError, EnvelopeEncodingError
from services.lambda_client.core.headers import merge_headers
from services.lambda_client.models.envelope import GraphQLRequestBody, RequestEnvelope

logger = logging.getLogger("lambda_client.envelope")


def _encode(envelope: RequestEnvelope) -> bytes:
    try:
        return envelope.model_dump_json(by_alias=True).encode("utf-8")
    except PydanticSerializationError as e:
        logger.critical(f"Failed to serialize envelope for {envelope.path}", exc_info=True)
        raise EnvelopeEncodingError("request envelope", e) from e


def build_gql_envelope(
    path: str,
    query: str,
    variables: Optional[Dict[str, Any]],
    headers: Dict[str, str],
) -> bytes:
    """
    Build the invocation payload for a GraphQL query.

    The query and variables are serialized into the envelope body and sent as
    a POST to `path`.

    Raises:
        EnvelopeEncodingError: variables are not JSON-serializable
    """
    try:
        body = GraphQLRequestBody(query=query, variables=variables or {}).model_dump_json()
    except (PydanticSerializationError, ValidationError) as e:
        logger.critical(f"Failed to serialize GraphQL body for {path}", exc_info=True)
        raise EnvelopeEncodingError("GraphQL request body", e) from e

    envelope = RequestEnvelope(
        headers=headers,
        path=path,
        http_method="POST",
        body=body,
    )
    return _encode(envelope)


def build_http_envelope(request: httpx.Request, path: str, headers: Dict[str, str]) -> bytes:
    """
    Build the invocation payload for an arbitrary HTTP request.

    Request headers are merged under `headers` (see merge_headers); only the
    first value of a repeated header is forwarded. The whole body is read into
    memory and sent as a string.

    Raises:
        BodyReadError: the body is not a sync stream or could not be read
    """
    raw_headers = (
        (name.decode(request.headers.encoding), value.decode(request.headers.encoding))
        for name, value in request.headers.raw
    )
    merged = merge_headers(headers, raw_headers)

    if not isinstance(request.stream, httpx.SyncByteStream):
        raise BodyReadError(
            TypeError(f"request body must be a sync stream, got {type(request.stream).__name__}")
        )
    try:
        content = request.read()
    except Exception as e:
        raise BodyReadError(e) from e

    envelope = RequestEnvelope(
        headers=merged,
        path=path,
        http_method=request.method,
        body=content.decode("utf-8", errors="replace"),
    )
    return _encode(envelope)
