"""
Pydantic models for the Lambda proxy envelope.

Outbound requests follow the API Gateway v1 proxy event shape (reduced to the
fields the backends read). Inbound responses follow the proxy response shape.
"""

from typing import Any, Dict, List

from pydantic import BaseModel, ConfigDict, Field, field_validator


class RequestEnvelope(BaseModel):
    """
    Invocation payload sent to the function.

    Use model_dump_json(by_alias=True) to serialize with wire field names.
    """

    headers: Dict[str, str]
    path: str
    http_method: str = Field(alias="httpMethod")
    # Always sent empty; query strings are not forwarded.
    query_string_parameters: Dict[str, str] = Field(
        default_factory=dict, alias="queryStringParameters"
    )
    body: str = ""

    model_config = ConfigDict(populate_by_name=True, frozen=True)


class AccessPolicy(BaseModel):
    """Authorization rules serialized into the policy header."""

    rules: Dict[str, bool] = Field(default_factory=dict)


class GraphQLRequestBody(BaseModel):
    query: str
    variables: Dict[str, Any] = Field(default_factory=dict)


def _none_to_empty(value, empty):
    return empty if value is None else value


class ResponsePayload(BaseModel):
    """Proxy response returned by the function. Unknown fields are ignored."""

    body: str = ""
    status_code: int = Field(default=0, alias="statusCode")
    headers: Dict[str, str] = Field(default_factory=dict)

    model_config = ConfigDict(populate_by_name=True)

    @field_validator("body", mode="before")
    @classmethod
    def _body_null(cls, value):
        return _none_to_empty(value, "")

    @field_validator("headers", mode="before")
    @classmethod
    def _headers_null(cls, value):
        return _none_to_empty(value, {})


class GraphQLError(BaseModel):
    message: str = ""

    model_config = ConfigDict(extra="allow")


class GraphQLResponseBody(BaseModel):
    data: Dict[str, Any] = Field(default_factory=dict)
    errors: List[GraphQLError] = Field(default_factory=list)

    @field_validator("data", mode="before")
    @classmethod
    def _data_null(cls, value):
        return _none_to_empty(value, {})

    @field_validator("errors", mode="before")
    @classmethod
    def _errors_null(cls, value):
        return _none_to_empty(value, [])


class Route(BaseModel):
    """A routing string split into the function to invoke and the path it serves."""

    function_name: str
    path: str

    model_config = ConfigDict(frozen=True)
