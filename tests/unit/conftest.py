"""
Shared fixtures for unit tests.
"""

from __future__ import annotations

import json
import os
import types
import uuid

import pytest


@pytest.fixture(scope="session", autouse=True)
def _env_vars():
    """
    Ensures a deterministic environment for every test run.
    Overwrite *only* the variables needed by the handler.
    """
    original = os.environ.copy()
    os.environ.setdefault("POWERTOOLS_SERVICE_NAME", "echo-handler-test")
    os.environ.setdefault("POWERTOOLS_TRACE_DISABLED", "1")
    yield
    os.environ.clear()
    os.environ.update(original)


# ---------- Minimal, realistic dummy events ---------- #
@pytest.fixture
def apigw_event() -> dict:
    """An API Gateway proxy event, the usual trigger for this function."""
    return {
        "resource": "/hello",
        "path": "/hello",
        "httpMethod": "POST",
        "headers": {"Content-Type": "application/json", "User-Agent": "pytest"},
        "queryStringParameters": {"name": "world"},
        "pathParameters": None,
        "requestContext": {
            "requestId": "c6af9ac6-7b61-11e6-9a41-93e8deadbeef",
            "stage": "prod",
        },
        "body": json.dumps({"greeting": "héllo"}),
        "isBase64Encoded": False,
    }


@pytest.fixture
def lambda_context():
    """A *very* small stand-in for the LambdaContext object."""
    return types.SimpleNamespace(
        function_name="echo-handler",
        function_version="$LATEST",
        memory_limit_in_mb=128,
        aws_request_id="req-" + uuid.uuid4().hex,
        invoked_function_arn="arn:aws:lambda:eu-west-1:000000000000:function:echo-handler",
        log_group_name="/aws/lambda/echo-handler",
        log_stream_name="2024/01/01/[$LATEST]abcdef",
        get_remaining_time_in_millis=lambda: 30000,
    )
