"""
Lambda-backed service client.

Issues GraphQL queries and HTTP-shaped requests against services deployed as
Lambda functions. Routing strings have the form "<function>/<path>".
"""

import logging
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional

import boto3
import httpx
from botocore.config import Config
from botocore.exceptions import BotoCoreError, NoCredentialsError
from pydantic import ValidationError

from services.common.core.request_context import clear_invocation_id, generate_invocation_id
from services.lambda_client.config import ClientConfig
from services.lambda_client.core.envelope import build_gql_envelope, build_http_envelope
from services.lambda_client.core.exceptions import ConfigurationError
from services.lambda_client.core.headers import build_auth_headers
from services.lambda_client.core.routing import split_route
from services.lambda_client.core.translators import parse_gql_response, parse_http_response
from services.lambda_client.services.invoker import Boto3LambdaInvoker, LambdaInvoker

logger = logging.getLogger("lambda_client.client")


class LambdaClient:
    """
    Client bound to one account, user and rule set.

    Fields are fixed at construction, so one instance can be shared across
    threads as long as the invoker supports concurrent calls.
    """

    def __init__(
        self,
        invoker: LambdaInvoker,
        account: str,
        user: str,
        rules: Optional[Mapping[str, bool]] = None,
    ):
        self._invoker = invoker
        self._account = account
        self._user = user
        self._rules = MappingProxyType(dict(rules or {}))

    @property
    def invoker(self) -> LambdaInvoker:
        return self._invoker

    @property
    def account(self) -> str:
        return self._account

    @property
    def user(self) -> str:
        return self._user

    @property
    def rules(self) -> Mapping[str, bool]:
        return self._rules

    @classmethod
    def build(
        cls,
        account: str,
        user: str,
        rules: Optional[Mapping[str, bool]] = None,
        config: Optional[ClientConfig] = None,
    ) -> "LambdaClient":
        """
        Resolve AWS configuration and credentials and create a client.

        Args:
            account: Account id sent on every call
            user: User id sent on every call
            rules: Authorization rules for the policy header
            config: Transport configuration; loaded from the environment when omitted

        Raises:
            ConfigurationError: configuration, region or credentials could not be resolved
        """
        try:
            config = config or ClientConfig()
            session = boto3.session.Session(
                profile_name=config.AWS_PROFILE, region_name=config.AWS_REGION
            )
            if session.get_credentials() is None:
                raise NoCredentialsError()
            lambda_client = session.client(
                "lambda",
                endpoint_url=config.LAMBDA_ENDPOINT_URL,
                config=Config(
                    connect_timeout=config.LAMBDA_CONNECT_TIMEOUT,
                    read_timeout=config.LAMBDA_READ_TIMEOUT,
                    retries={"total_max_attempts": 1},
                ),
            )
        except (ValidationError, BotoCoreError) as e:
            logger.error(
                "Failed to resolve Lambda client configuration",
                extra={"error_type": type(e).__name__, "error_detail": str(e)},
            )
            raise ConfigurationError(e) from e

        return cls(Boto3LambdaInvoker(lambda_client), account, user, rules)

    def _headers(self) -> Dict[str, str]:
        return build_auth_headers(self._account, self._user, self._rules)

    def gql(
        self, route: str, query: str, variables: Optional[Dict[str, Any]] = None
    ) -> Dict[str, Any]:
        """
        Run a GraphQL query against the function named in `route`.

        Returns:
            The `data` member of the GraphQL response

        Raises:
            InvalidRouteError: route has no '/'
            InvocationError: Invoke failed
            MalformedResponseError: response is not a proxy response with a GraphQL body
            RemoteError: the backend reported errors (first message only)
        """
        target = split_route(route)
        generate_invocation_id()
        try:
            logger.info(
                f"GraphQL call to {target.function_name}",
                extra={"function_name": target.function_name, "path": target.path},
            )

            payload = build_gql_envelope(target.path, query, variables, self._headers())
            raw = self._invoker.invoke(target.function_name, payload)
            return parse_gql_response(raw, target.function_name)
        finally:
            clear_invocation_id()

    def do(self, request: httpx.Request) -> httpx.Response:
        """
        Send an HTTP-shaped request to the function named in the request URL.

        The URL is used as a routing string, e.g.
        httpx.Request("GET", "my-service/v1/items").

        httpx parses a `name:qualifier` prefix as a URL scheme and lowercases
        it, so `MyFunc:prod/items` invokes `myfunc:prod`. Use `gql` or
        lowercase function names when a qualifier is part of the route.

        Raises:
            InvalidRouteError: URL has no '/'
            BodyReadError: request body could not be read
            InvocationError: Invoke failed
            MalformedResponseError: response is not a proxy response
        """
        target = split_route(str(request.url))
        generate_invocation_id()
        try:
            logger.info(
                f"{request.method} call to {target.function_name}",
                extra={
                    "function_name": target.function_name,
                    "path": target.path,
                    "method": request.method,
                },
            )

            payload = build_http_envelope(request, target.path, self._headers())
            raw = self._invoker.invoke(target.function_name, payload)
            return parse_http_response(raw, target.function_name, request)
        finally:
            clear_invocation_id()
