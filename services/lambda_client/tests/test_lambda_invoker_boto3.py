"""
Where: services/lambda_client/tests/test_lambda_invoker_boto3.py
What: Unit tests for the boto3-backed invoker.
Why: Transport failures must surface as InvocationError without retries.
"""

import io
import json
from unittest.mock import MagicMock, patch

import boto3
import pytest
from botocore.exceptions import EndpointConnectionError
from botocore.response import StreamingBody
from botocore.stub import Stubber

from services.lambda_client.core.exceptions import FunctionExecutionError, InvocationError
from services.lambda_client.services.invoker import Boto3LambdaInvoker


def _streaming(data: bytes) -> StreamingBody:
    return StreamingBody(io.BytesIO(data), len(data))


@pytest.fixture
def lambda_client():
    return boto3.client(
        "lambda",
        region_name="us-east-1",
        aws_access_key_id="testing",
        aws_secret_access_key="testing",
    )


def test_invoke_returns_payload_bytes(lambda_client):
    # Arrange
    response_body = json.dumps({"statusCode": 200, "body": "ok", "headers": {}}).encode()
    stubber = Stubber(lambda_client)
    stubber.add_response(
        "invoke",
        {"StatusCode": 200, "Payload": _streaming(response_body)},
        {"FunctionName": "svc", "InvocationType": "RequestResponse", "Payload": b"{}"},
    )
    invoker = Boto3LambdaInvoker(lambda_client)

    # Act
    with stubber:
        result = invoker.invoke("svc", b"{}")

    # Assert
    assert result == response_body
    stubber.assert_no_pending_responses()


def test_invoke_client_error_raises_invocation_error(lambda_client):
    stubber = Stubber(lambda_client)
    stubber.add_client_error(
        "invoke",
        service_error_code="ResourceNotFoundException",
        service_message="Function not found: svc",
        http_status_code=404,
    )
    invoker = Boto3LambdaInvoker(lambda_client)

    with stubber, pytest.raises(InvocationError) as exc_info:
        invoker.invoke("svc", b"{}")

    assert exc_info.value.function_name == "svc"
    assert "ResourceNotFoundException" in str(exc_info.value.cause)
    assert exc_info.value.__cause__ is exc_info.value.cause


def test_invoke_function_error_raises_function_execution_error(lambda_client):
    error_body = json.dumps({"errorType": "KeyError", "errorMessage": "'id'"}).encode()
    stubber = Stubber(lambda_client)
    stubber.add_response(
        "invoke",
        {"StatusCode": 200, "FunctionError": "Unhandled", "Payload": _streaming(error_body)},
    )
    invoker = Boto3LambdaInvoker(lambda_client)

    with stubber, pytest.raises(FunctionExecutionError) as exc_info:
        invoker.invoke("svc", b"{}")

    assert isinstance(exc_info.value, InvocationError)
    assert exc_info.value.error_type == "KeyError"
    assert exc_info.value.message == "'id'"


def test_invoke_connection_error_is_logged():
    client = MagicMock()
    client.invoke.side_effect = EndpointConnectionError(endpoint_url="http://lambda.local")
    invoker = Boto3LambdaInvoker(client)

    with patch("services.lambda_client.services.invoker.logger") as mock_logger:
        with pytest.raises(InvocationError):
            invoker.invoke("error-func", b"{}")

        mock_logger.error.assert_called_once()
        call_args = mock_logger.error.call_args
        assert call_args.kwargs["extra"]["function_name"] == "error-func"
        assert call_args.kwargs["extra"]["error_type"] == "EndpointConnectionError"


def test_invoke_is_called_once():
    client = MagicMock()
    client.invoke.return_value = {"StatusCode": 200, "Payload": _streaming(b"{}")}
    invoker = Boto3LambdaInvoker(client)

    assert invoker.invoke("svc:prod", b'{"a": 1}') == b"{}"

    client.invoke.assert_called_once_with(
        FunctionName="svc:prod", InvocationType="RequestResponse", Payload=b'{"a": 1}'
    )
