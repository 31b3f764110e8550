"""Test configuration and fixtures."""

import logging
from dataclasses import dataclass
from typing import Optional

import boto3
import pytest
from botocore.stub import Stubber

from group_assigner import GroupAssignerConfig


@dataclass
class FakeLambdaContext:
    function_name: str = "post-confirmation"
    memory_limit_in_mb: int = 128
    invoked_function_arn: str = "arn:aws:lambda:us-east-1:123456789012:function:post-confirmation"
    aws_request_id: str = "52fdfc07-2182-154f-163f-5f0f9a621d72"
    tenant_id: Optional[str] = None
    remaining_ms: int = 10000

    def get_remaining_time_in_millis(self) -> int:
        return self.remaining_ms


@pytest.fixture(autouse=True)
def aws_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep boto3 away from real credentials and regions."""
    monkeypatch.setenv("AWS_ACCESS_KEY_ID", "testing")
    monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", "testing")
    monkeypatch.setenv("AWS_SESSION_TOKEN", "testing")
    monkeypatch.setenv("AWS_DEFAULT_REGION", "us-east-1")
    for name in ("GROUP_NAME", "USER_POOL_ID", "AWS_PROFILE", "AWS_REGION"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def cognito_client():
    """Provide a real cognito-idp client with dummy credentials."""
    return boto3.client(
        "cognito-idp",
        region_name="us-east-1",
        aws_access_key_id="testing",
        aws_secret_access_key="testing",
    )


@pytest.fixture
def stubber(cognito_client):
    """Provide a Stubber that fails the test on any unexpected Cognito call."""
    with Stubber(cognito_client) as stub:
        yield stub
        stub.assert_no_pending_responses()


@pytest.fixture
def config() -> GroupAssignerConfig:
    """Provide a configuration without a pool id, so the event's is used."""
    return GroupAssignerConfig(group_name="members")


@pytest.fixture
def logger() -> logging.Logger:
    """Provide a standard library logger that caplog can capture."""
    return logging.getLogger("tests.group_assigner")


@pytest.fixture
def lambda_context() -> FakeLambdaContext:
    return FakeLambdaContext()


@pytest.fixture
def confirmation_event() -> dict:
    """Provide a post confirmation event as Cognito sends it."""
    return {
        "version": "1",
        "region": "us-east-1",
        "userPoolId": "pool1",
        "userName": "alice",
        "callerContext": {
            "awsSdkVersion": "aws-sdk-unknown-unknown",
            "clientId": "1example23456789",
        },
        "triggerSource": "PostConfirmation_ConfirmSignUp",
        "request": {
            "userAttributes": {
                "sub": "4a709a36-7d63-4785-829f-4198EXAMPLE",
                "email_verified": "true",
                "cognito:user_status": "CONFIRMED",
                "email": "alice@example.com",
            }
        },
        "response": {},
    }
