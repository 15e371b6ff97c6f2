# In src/echo_handler/schemas.py

from typing import Any, TypedDict

from pydantic import BaseModel, ConfigDict, Field

# --- Static Type Hinting (for mypy and IDEs) ---


class EchoBody(TypedDict):
    """The record serialized into the response body, in wire key order."""

    event: Any
    context: Any
    message: str


class EchoResponse(TypedDict):
    """
    A TypedDict representing the structure returned to the invoking platform.
    `body` holds the JSON text of an `EchoBody`.
    """

    statusCode: int
    body: str


# --- Runtime Projection (using Pydantic) ---


class InvocationContextModel(BaseModel):
    """
    Pydantic model that reads invocation metadata off a Lambda runtime context
    object. Attributes are read by their Python names and dumped under the key
    names the Lambda runtime uses when a context is rendered as JSON.
    """

    model_config = ConfigDict(from_attributes=True)

    function_name: str | None = Field(None, serialization_alias="functionName")
    function_version: str | None = Field(None, serialization_alias="functionVersion")
    invoked_function_arn: str | None = Field(
        None, serialization_alias="invokedFunctionArn"
    )
    # The runtime hands this over as a string; test doubles often use an int.
    memory_limit_in_mb: int | str | None = Field(
        None, serialization_alias="memoryLimitInMB"
    )
    aws_request_id: str | None = Field(None, serialization_alias="awsRequestId")
    log_group_name: str | None = Field(None, serialization_alias="logGroupName")
    log_stream_name: str | None = Field(None, serialization_alias="logStreamName")

    def to_wire(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True)
