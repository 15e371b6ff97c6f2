# src/echo_handler/core.py

"""
Core logic for building the echo response.

`build_response` is the whole behavior of the service: it wraps the incoming
event and invocation context in a JSON body next to a fixed greeting and
returns it with a 200 status code. It performs no I/O and never mutates its
inputs, so it can be called directly from tests or tooling without the Lambda
decorators in `app`.
"""

import json
import logging
from typing import Any

import pydantic

from .exceptions import SerializationError
from .schemas import EchoBody, EchoResponse, InvocationContextModel

logger = logging.getLogger(__name__)

STATUS_CODE = 200
MESSAGE = "Hello World!"

_JSON_NATIVE_TYPES = (dict, list, tuple, str, int, float, bool, type(None))


# --- Helpers ---
def _is_runtime_context(context: Any) -> bool:
    """True for the context object the Lambda runtime passes to a handler."""
    return not isinstance(context, _JSON_NATIVE_TYPES) and hasattr(
        context, "aws_request_id"
    )


def describe_context(context: Any) -> Any:
    """
    Return *context* in a form the JSON encoder accepts.

    Plain values pass through untouched. A Lambda runtime context object is
    projected onto its invocation metadata, since the object itself is not
    JSON-serializable.
    """
    if not _is_runtime_context(context):
        return context

    try:
        return InvocationContextModel.model_validate(context).to_wire()
    except pydantic.ValidationError as e:
        raise SerializationError(
            "invocation context attributes are not plain values",
            cause_type=type(e).__name__,
            context={"validation_errors": e.error_count()},
        ) from e


def serialize_body(body: EchoBody) -> str:
    """
    Encode *body* as compact JSON text.

    Raises SerializationError for values the encoder rejects: unsupported
    types, circular references, non-finite floats and nesting deeper than the
    interpreter's recursion limit.
    """
    try:
        return json.dumps(
            body,
            separators=(",", ":"),
            ensure_ascii=False,
            allow_nan=False,
        )
    except (TypeError, ValueError, RecursionError) as e:
        raise SerializationError(str(e), cause_type=type(e).__name__) from e


# --- Main Entry Point ---
def build_response(event: Any, context: Any) -> EchoResponse:
    """Map an (event, context) pair to the echo response."""
    body: EchoBody = {
        "event": event,
        "context": describe_context(context),
        "message": MESSAGE,
    }
    serialized = serialize_body(body)
    logger.debug("Serialized echo body", extra={"body_length": len(serialized)})
    return {"statusCode": STATUS_CODE, "body": serialized}
