"""
Lambda client configuration definition.

Loads configuration from environment variables and provides a Pydantic model.
Uses pydantic-settings for type safety and defaults.
"""

from typing import Optional

from pydantic import Field

from services.common.core.config import BaseAppConfig


class ClientConfig(BaseAppConfig):
    """
    Configuration for the Lambda invocation transport.
    """

    # AWS resolution (None defers to the boto3 default chain)
    AWS_REGION: Optional[str] = Field(default=None, description="Region of the target functions")
    AWS_PROFILE: Optional[str] = Field(default=None, description="Shared credentials profile")
    LAMBDA_ENDPOINT_URL: Optional[str] = Field(
        default=None, description="Override Lambda endpoint (local gateways, tests)"
    )

    # Transport timeouts. Lambda allows synchronous runs of up to 900 seconds.
    LAMBDA_CONNECT_TIMEOUT: float = Field(default=10.0, description="Connect timeout (seconds)")
    LAMBDA_READ_TIMEOUT: float = Field(default=900.0, description="Read timeout (seconds)")

    # Routing prefixes for bound service clients
    MARKETPLACE_ROUTE: str = Field(
        default="marketplace-service:deployed/v1/marketplace/authenticated/graphql",
        description="Routing string of the marketplace GraphQL endpoint",
    )
    ACCOUNTS_ROUTE: Optional[str] = Field(
        default=None,
        description="Routing string of the accounts GraphQL endpoint (no default; must be set)",
    )
