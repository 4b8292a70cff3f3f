"""
Custom exception classes.

Represent errors raised while invoking a Lambda-backed service.
"""

from typing import List, Optional


class LambdaClientError(Exception):
    """Base exception class for client calls."""

    pass


class InvalidRouteError(LambdaClientError):
    """Raised when a routing string has no '/' separating function and path."""

    def __init__(self, route: str):
        self.route = route
        super().__init__(f"Invalid route provided: {route!r}")


class BodyReadError(LambdaClientError):
    """Raised when the outgoing request body cannot be read."""

    def __init__(self, cause: Exception):
        self.cause = cause
        super().__init__(f"Failed to read request body: {cause}")


class InvocationError(LambdaClientError):
    """Raised when the Lambda Invoke call fails."""

    def __init__(self, function_name: str, cause: Exception):
        self.function_name = function_name
        self.cause = cause
        super().__init__(f"Lambda invocation failed for {function_name}: {cause}")


class FunctionExecutionError(InvocationError):
    """Raised when the invoked function itself failed (X-Amz-Function-Error)."""

    def __init__(self, function_name: str, error_type: str, message: str):
        self.error_type = error_type
        self.message = message
        super().__init__(function_name, Exception(f"{error_type}: {message}"))


class MalformedResponseError(LambdaClientError):
    """Raised when the response envelope or its body is not valid JSON of the expected shape."""

    def __init__(self, function_name: str, layer: str, cause: Exception):
        self.function_name = function_name
        self.layer = layer
        self.cause = cause
        super().__init__(f"Malformed {layer} from {function_name}: {cause}")


class RemoteError(LambdaClientError):
    """
    Raised when a GraphQL backend reports errors.

    The message is exactly the first reported error message.
    """

    def __init__(self, message: str, errors: Optional[List[str]] = None):
        self.message = message
        self.errors = errors or [message]
        super().__init__(message)


class ConfigurationError(LambdaClientError):
    """Raised when transport configuration or credentials cannot be resolved."""

    def __init__(self, cause: Exception):
        self.cause = cause
        super().__init__(f"Failed to resolve Lambda client configuration: {cause}")


class EnvelopeEncodingError(RuntimeError):
    """
    Raised when an internally built envelope cannot be serialized.

    Signals a programming error: GraphQL variables must be JSON-serializable.
    Not a LambdaClientError.
    """

    def __init__(self, what: str, cause: Exception):
        self.cause = cause
        super().__init__(f"Failed to serialize {what}: {cause}")
