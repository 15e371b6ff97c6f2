# tests/unit/test_app.py

import json
from unittest.mock import MagicMock

import pytest

from echo_handler import app
from echo_handler.core import build_response
from echo_handler.exceptions import SerializationError


def _emitted_lines(capsys) -> list[dict]:
    """Parses every JSON line Powertools printed (logs and EMF metric blobs)."""
    lines = []
    for raw in capsys.readouterr().out.splitlines():
        try:
            lines.append(json.loads(raw))
        except json.JSONDecodeError:
            continue
    return lines


def _metric_blobs(lines: list[dict]) -> list[dict]:
    return [line for line in lines if "_aws" in line]


def test_handler_returns_the_echo_response(apigw_event, lambda_context):
    response = app.handler(apigw_event, lambda_context)

    assert response == build_response(apigw_event, lambda_context)
    assert response["statusCode"] == 200

    body = json.loads(response["body"])
    assert body["event"] == apigw_event
    assert body["context"]["awsRequestId"] == lambda_context.aws_request_id
    assert body["message"] == "Hello World!"


def test_handler_emits_echo_metric(apigw_event, lambda_context, capsys):
    app.handler(apigw_event, lambda_context)

    blobs = _metric_blobs(_emitted_lines(capsys))
    echo_blobs = [blob for blob in blobs if "EchoResponses" in blob]
    assert echo_blobs
    assert echo_blobs[-1]["environment"] == app.CONFIG.environment
    assert echo_blobs[-1]["_aws"]["CloudWatchMetrics"][0]["Namespace"] == app.CONFIG.metrics_namespace


def test_handler_logs_body_length(apigw_event, lambda_context, monkeypatch):
    mock_logger = MagicMock()
    monkeypatch.setattr(app, "logger", mock_logger)

    response = app.handler(apigw_event, lambda_context)

    mock_logger.info.assert_called_once_with(
        "Echo response built",
        extra={"status_code": 200, "body_length": len(response["body"])},
    )


def test_handler_reraises_serialization_error(lambda_context, capsys, monkeypatch):
    mock_logger = MagicMock()
    monkeypatch.setattr(app, "logger", mock_logger)

    event: dict = {}
    event["self"] = event

    with pytest.raises(SerializationError):
        app.handler(event, lambda_context)

    assert any("SerializationErrors" in blob for blob in _metric_blobs(_emitted_lines(capsys)))
    mock_logger.error.assert_called_once()
    extra = mock_logger.error.call_args.kwargs["extra"]
    assert extra["error"]["error_code"] == "SERIALIZATION_FAILED"
    assert extra["error"]["error_type"] == "SerializationError"
    mock_logger.info.assert_not_called()
