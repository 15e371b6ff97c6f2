# src/echo_handler/exceptions.py

"""
Shared custom exceptions for the Echo Handler service.

Centralizing exception definitions in a separate module prevents circular
import errors between other modules that need to raise or catch them.

Exception Hierarchy:
- EchoHandlerError (base)
  - SerializationError
  - ConfigurationError
  - RemoteInvocationError
"""

from typing import Any, Dict, Optional


class EchoHandlerError(Exception):
    """Base exception for all Echo Handler service errors."""

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
        correlation_id: Optional[str] = None,
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.context = dict(context) if context else {}  # Copy context to prevent mutation
        self.correlation_id = correlation_id

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for structured logging."""
        return {
            "error_type": self.__class__.__name__,
            "error_code": self.error_code,
            "message": self.message,
            "context": self.context,
            "correlation_id": self.correlation_id,
        }


# === Response Errors ===

class SerializationError(EchoHandlerError):
    """Raised when the echo record cannot be converted to JSON text."""

    def __init__(self, reason: str, cause_type: Optional[str] = None, **kwargs):
        message = f"Response body could not be serialized: {reason}"
        context = {}
        if "context" in kwargs:
            context.update(kwargs.pop("context"))
        context.update({"reason": reason, "cause_type": cause_type})
        super().__init__(message, error_code="SERIALIZATION_FAILED", context=context, **kwargs)


# === Invocation Errors ===

class RemoteInvocationError(EchoHandlerError):
    """Raised when a deployed function reports an error instead of a response."""

    def __init__(self, function_name: str, error_type: str, error_message: str, **kwargs):
        message = f"Function {function_name} failed with {error_type}: {error_message}"
        context = {"function_name": function_name, "error_type": error_type}
        super().__init__(message, error_code="REMOTE_INVOCATION_FAILED", context=context, **kwargs)


# === Configuration Errors ===

class ConfigurationError(EchoHandlerError):
    """Raised when there's an error in the application configuration."""

    def __init__(self, message: str, **kwargs):
        super().__init__(message, error_code="CONFIGURATION_ERROR", **kwargs)


# === Utility Functions ===

def get_error_context(error: Exception) -> Dict[str, Any]:
    """Extract error context for logging."""
    if isinstance(error, EchoHandlerError):
        return error.to_dict()
    else:
        return {
            "error_type": error.__class__.__name__,
            "message": str(error),
        }
