#!/usr/bin/env python

# src/echo_handler/smoke.py

"""
Smoke test for the echo contract.

Invokes the handler, either in-process or as a deployed Lambda function, and
checks that the response carries a 200 status code and a body that echoes the
sent event next to the fixed greeting. Results are rendered as a rich table.

    echo-smoke --event '{"a": 1}'
    echo-smoke --function-name my-echo-fn --event-file event.json
"""

import argparse
import json
import types
import uuid
from pathlib import Path
from typing import Any, Dict, List, Optional, TypedDict

import boto3
from botocore.exceptions import ClientError, NoCredentialsError, NoRegionError
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from .core import MESSAGE, STATUS_CODE, build_response
from .exceptions import RemoteInvocationError, SerializationError

DEFAULT_EVENT: Dict[str, Any] = {"source": "echo-smoke"}


class CheckResult(TypedDict):
    check: str
    status: str  # 'PASS' or 'FAIL'
    details: str


def _result(check: str, passed: bool, details: str) -> CheckResult:
    return {"check": check, "status": "PASS" if passed else "FAIL", "details": details}


def check_echo_response(response: Any, event: Any) -> List[CheckResult]:
    """Validates *response* against the echo contract for the sent *event*."""
    if not isinstance(response, dict):
        return [_result("response", False, f"expected an object, got {type(response).__name__}")]

    status_code = response.get("statusCode")
    results = [
        _result("statusCode", status_code == STATUS_CODE, f"got {status_code!r}")
    ]

    body = response.get("body")
    if not isinstance(body, str):
        results.append(_result("body", False, f"expected a string, got {type(body).__name__}"))
        return results

    try:
        decoded = json.loads(body)
    except json.JSONDecodeError as e:
        results.append(_result("body", False, f"not valid JSON: {e}"))
        return results
    if not isinstance(decoded, dict):
        results.append(_result("body", False, "decoded body is not an object"))
        return results
    results.append(_result("body", True, f"{len(body)} characters of JSON"))

    message = decoded.get("message")
    results.append(_result("message", message == MESSAGE, f"got {message!r}"))
    echoed = "event" in decoded and decoded["event"] == event
    results.append(
        _result("event", echoed, "echoed unchanged" if echoed else "differs from the sent event")
    )
    results.append(
        _result("context", "context" in decoded, "present" if "context" in decoded else "missing")
    )
    return results


def invoke_local(event: Any) -> Dict[str, Any]:
    """Calls the handler in-process with a stand-in invocation context."""
    context = types.SimpleNamespace(
        function_name="echo-handler-local",
        function_version="$LATEST",
        invoked_function_arn="arn:aws:lambda:local:000000000000:function:echo-handler-local",
        memory_limit_in_mb="128",
        aws_request_id=str(uuid.uuid4()),
        log_group_name="/aws/lambda/echo-handler-local",
        log_stream_name="local",
    )
    return dict(build_response(event, context))


def invoke_remote(function_name: str, event: Any, lambda_client: Any) -> Any:
    """
    Invokes a deployed function synchronously and returns its decoded payload.
    Raises SerializationError when *event* is not strict JSON and
    RemoteInvocationError when the function reports an error.
    """
    try:
        request = json.dumps(event, allow_nan=False)
    except (TypeError, ValueError) as e:
        raise SerializationError(str(e), cause_type=type(e).__name__) from e

    response = lambda_client.invoke(
        FunctionName=function_name,
        InvocationType="RequestResponse",
        Payload=request.encode("utf-8"),
    )
    payload = json.loads(response["Payload"].read() or b"null")

    if response.get("FunctionError"):
        details = payload if isinstance(payload, dict) else {}
        raise RemoteInvocationError(
            function_name,
            details.get("errorType", response["FunctionError"]),
            details.get("errorMessage", "no error message returned"),
        )
    return payload


def render_results(results: List[CheckResult], title: str) -> Table:
    table = Table(title=title)
    table.add_column("Check", style="cyan")
    table.add_column("Status")
    table.add_column("Details")
    for result in results:
        style = "green" if result["status"] == "PASS" else "red"
        table.add_row(result["check"], f"[{style}]{result['status']}[/{style}]", result["details"])
    return table


def _load_event(args: argparse.Namespace) -> Any:
    if args.event_file:
        return json.loads(Path(args.event_file).read_text(encoding="utf-8"))
    if args.event is not None:
        return json.loads(args.event)
    return DEFAULT_EVENT


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Smoke test the echo handler contract.")
    parser.add_argument(
        "--function-name",
        help="Name or ARN of a deployed function. Omit to call the handler in-process.",
    )
    parser.add_argument("--region", help="AWS region of the deployed function.")
    event_group = parser.add_mutually_exclusive_group()
    event_group.add_argument("--event", help="Event as a JSON string.")
    event_group.add_argument("--event-file", help="Path to a JSON file holding the event.")
    args = parser.parse_args(argv)

    console = Console()
    try:
        event = _load_event(args)
    except (ValueError, OSError) as e:
        console.print(Panel(f"Could not read the event: {e}", title="Input Error", border_style="red"))
        return 2

    if not args.function_name:
        target = "local handler"
        try:
            response = invoke_local(event)
        except SerializationError as e:
            console.print(Panel(e.message, title="Handler Error", border_style="red"))
            return 1
    else:
        target = args.function_name
        try:
            session = boto3.Session(region_name=args.region)
            response = invoke_remote(args.function_name, event, session.client("lambda"))
        except NoCredentialsError:
            console.print(
                Panel(
                    "AWS credentials not found. Configure them through environment "
                    "variables, a shared credentials file or an attached IAM role.",
                    title="Authentication Error",
                    border_style="red",
                )
            )
            return 2
        except NoRegionError:
            console.print(
                Panel(
                    "An AWS region was not specified. Pass --region or set AWS_DEFAULT_REGION.",
                    title="Configuration Error",
                    border_style="red",
                )
            )
            return 2
        except ClientError as e:
            console.print(Panel(str(e), title="AWS Error", border_style="red"))
            return 2
        except RemoteInvocationError as e:
            console.print(Panel(e.message, title="Function Error", border_style="red"))
            return 1
        except SerializationError as e:
            console.print(Panel(e.message, title="Input Error", border_style="red"))
            return 1

    results = check_echo_response(response, event)
    console.print(render_results(results, f"Echo contract: {target}"))

    if all(result["status"] == "PASS" for result in results):
        console.print("[bold green]✅ All checks passed.[/bold green]")
        return 0
    console.print("[bold red]❌ Echo contract violated.[/bold red]")
    return 1


if __name__ == "__main__":
    raise SystemExit(main())
