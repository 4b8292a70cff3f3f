import json

import pytest

from services.common.core.request_context import get_invocation_id
from services.lambda_client.client import LambdaClient


class FakeInvoker:
    """LambdaInvoker test double that records calls and returns a canned payload."""

    def __init__(self, response=None):
        self.response = response
        self.calls = []
        self.invocation_ids = []

    def invoke(self, function_name: str, payload: bytes) -> bytes:
        self.calls.append((function_name, payload))
        self.invocation_ids.append(get_invocation_id())
        if isinstance(self.response, Exception):
            raise self.response
        if isinstance(self.response, (bytes, bytearray)):
            return bytes(self.response)
        return json.dumps(self.response).encode("utf-8")

    @property
    def last_envelope(self) -> dict:
        return json.loads(self.calls[-1][1])


def proxy_response(body, status_code=200, headers=None) -> dict:
    if not isinstance(body, str):
        body = json.dumps(body)
    return {"body": body, "statusCode": status_code, "headers": headers or {}}


@pytest.fixture
def invoker():
    return FakeInvoker(proxy_response({"data": {"x": 1}, "errors": []}))


@pytest.fixture
def client(invoker):
    return LambdaClient(invoker, account="acct-1", user="user-1", rules={"readData": True})


@pytest.fixture
def isolated_aws_env(monkeypatch, tmp_path):
    """Remove ambient AWS configuration so boto3 resolution is deterministic."""
    for key in (
        "AWS_PROFILE",
        "AWS_DEFAULT_PROFILE",
        "AWS_REGION",
        "AWS_DEFAULT_REGION",
        "AWS_ACCESS_KEY_ID",
        "AWS_SECRET_ACCESS_KEY",
        "AWS_SESSION_TOKEN",
        "AWS_CONTAINER_CREDENTIALS_RELATIVE_URI",
        "AWS_CONTAINER_CREDENTIALS_FULL_URI",
        "AWS_WEB_IDENTITY_TOKEN_FILE",
        "LAMBDA_READ_TIMEOUT",
    ):
        monkeypatch.delenv(key, raising=False)
    monkeypatch.setenv("AWS_CONFIG_FILE", str(tmp_path / "missing-config"))
    monkeypatch.setenv("AWS_SHARED_CREDENTIALS_FILE", str(tmp_path / "missing-credentials"))
    monkeypatch.setenv("AWS_EC2_METADATA_DISABLED", "true")
    yield


@pytest.fixture
def make_response():
    return proxy_response


@pytest.fixture
def make_invoker():
    return FakeInvoker
