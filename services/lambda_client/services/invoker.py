"""
Lambda Invoker Service

Performs one synchronous Lambda Invoke (InvocationType=RequestResponse) per
call. The LambdaInvoker protocol is the only seam that touches the transport.
"""

import json
import logging
from typing import Any, Protocol

from botocore.exceptions import BotoCoreError, ClientError

from services.lambda_client.core.exceptions import FunctionExecutionError, InvocationError

logger = logging.getLogger("lambda_client.invoker")


class LambdaInvoker(Protocol):
    def invoke(self, function_name: str, payload: bytes) -> bytes:
        """
        Invoke a function synchronously and return its response payload.

        Raises:
            InvocationError: the call failed
        """
        ...


class Boto3LambdaInvoker:
    def __init__(self, client: Any):
        """
        Args:
            client: boto3 Lambda client (boto3.client("lambda"))
        """
        self.client = client

    def invoke(self, function_name: str, payload: bytes) -> bytes:
        """
        Invoke a Lambda function.

        Args:
            function_name: Function name, name:qualifier or ARN
            payload: JSON request envelope

        Returns:
            Raw response payload

        Raises:
            InvocationError: Invoke API call failed
            FunctionExecutionError: the function raised an unhandled error
        """
        logger.debug(f"Invoking {function_name}", extra={"function_name": function_name})

        try:
            response = self.client.invoke(
                FunctionName=function_name,
                InvocationType="RequestResponse",
                Payload=payload,
            )
            body = response["Payload"].read()
        except (ClientError, BotoCoreError) as e:
            logger.error(
                f"Lambda invocation failed for function '{function_name}'",
                extra={
                    "function_name": function_name,
                    "error_type": type(e).__name__,
                    "error_detail": str(e),
                },
            )
            raise InvocationError(function_name, e) from e

        function_error = response.get("FunctionError")
        if function_error:
            error_type, message = _describe_function_error(function_error, body)
            logger.error(
                f"Lambda function '{function_name}' raised {error_type}",
                extra={
                    "function_name": function_name,
                    "error_type": error_type,
                    "error_detail": message,
                },
            )
            raise FunctionExecutionError(function_name, error_type, message)

        return body


def _describe_function_error(function_error: str, body: bytes):
    # Lambda error payloads look like {"errorType": ..., "errorMessage": ...}
    try:
        data = json.loads(body)
    except (json.JSONDecodeError, UnicodeDecodeError):
        return function_error, body.decode("utf-8", errors="replace")
    if not isinstance(data, dict):
        return function_error, str(data)
    return data.get("errorType", function_error), data.get("errorMessage", "")
