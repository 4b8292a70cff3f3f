"""
Clients bound to a fixed routing prefix.
"""

from typing import Any, Dict, Optional

import httpx

from services.lambda_client.client import LambdaClient
from services.lambda_client.config import ClientConfig
from services.lambda_client.core.exceptions import ConfigurationError


class ServiceClient:
    """LambdaClient wrapper that addresses one backend through a fixed route."""

    def __init__(self, client: LambdaClient, route: str):
        self.client = client
        self.route = route.rstrip("/")

    def gql(self, query: str, variables: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        return self.client.gql(self.route, query, variables)

    def request(self, method: str, path: str = "", **kwargs) -> httpx.Response:
        """Send `method` to `path` below the bound route. kwargs go to httpx.Request."""
        if path and not path.startswith("/"):
            path = f"/{path}"
        return self.client.do(httpx.Request(method, f"{self.route}{path}", **kwargs))


def marketplace_client(client: LambdaClient, config: Optional[ClientConfig] = None) -> ServiceClient:
    config = config or ClientConfig()
    return ServiceClient(client, config.MARKETPLACE_ROUTE)


def accounts_client(client: LambdaClient, config: Optional[ClientConfig] = None) -> ServiceClient:
    """
    Raises:
        ConfigurationError: ACCOUNTS_ROUTE is not set
    """
    config = config or ClientConfig()
    if not config.ACCOUNTS_ROUTE:
        raise ConfigurationError(ValueError("ACCOUNTS_ROUTE is required"))
    return ServiceClient(client, config.ACCOUNTS_ROUTE)
