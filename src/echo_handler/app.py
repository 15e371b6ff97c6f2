"""
The Lambda Adapter for the Echo Handler service.

This module is the main entry point for the AWS Lambda function
(`echo_handler.app.handler`). It is responsible for:
1.  Initializing and configuring AWS Lambda Powertools (Logger, Tracer and
    Metrics).
2.  Invoking the core logic (`build_response`) that wraps the event and
    invocation context into the echo response.
3.  Reporting the single failure mode, a body that cannot be serialized, before
    letting it propagate to the Lambda service.
"""

from typing import Any

from aws_lambda_powertools import Logger, Metrics, Tracer
from aws_lambda_powertools.metrics import MetricUnit
from aws_lambda_powertools.utilities.typing import LambdaContext

from .config import get_config
from .core import build_response
from .exceptions import SerializationError, get_error_context
from .schemas import EchoResponse

# --- Global & Reusable Components ---
CONFIG = get_config()

logger = Logger(service=CONFIG.service_name, level=CONFIG.log_level)
tracer = Tracer(service=CONFIG.service_name)
metrics = Metrics(
    namespace=CONFIG.metrics_namespace,
    service=CONFIG.service_name,
)


@logger.inject_lambda_context(log_event=CONFIG.log_event)
@tracer.capture_lambda_handler
@metrics.log_metrics(capture_cold_start_metric=True)
def handler(event: Any, context: LambdaContext) -> EchoResponse:
    """Main Lambda handler: echo the event and context back to the caller."""
    metrics.add_dimension("environment", CONFIG.environment)

    try:
        response = build_response(event, context)
    except SerializationError as e:
        metrics.add_metric(name="SerializationErrors", unit=MetricUnit.Count, value=1)
        logger.error(
            f"Failed to serialize echo response: {e}",
            extra={"error": get_error_context(e)},
        )
        raise

    metrics.add_metric(name="EchoResponses", unit=MetricUnit.Count, value=1)
    logger.info(
        "Echo response built",
        extra={
            "status_code": response["statusCode"],
            "body_length": len(response["body"]),
        },
    )
    return response
