import logging
import os
from dataclasses import dataclass
from functools import lru_cache

from .exceptions import ConfigurationError

logger = logging.getLogger(__name__)

__all__ = ["AppConfig", "ConfigurationError", "get_config"]

ALLOWED_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def _non_empty(name: str, default: str) -> str:
    value = os.getenv(name, default).strip()
    if not value:
        raise ValueError(f"{name} must not be empty.")
    return value


@dataclass(frozen=True, slots=True)
class AppConfig:
    """Application configuration loaded from environment variables."""

    service_name: str
    environment: str
    log_level: str
    metrics_namespace: str
    log_event: bool

    @classmethod
    def load_from_env(cls) -> "AppConfig":
        """
        Loads configuration from environment variables, performing validation and type casting.
        Every variable is optional. Fails fast with a ConfigurationError if a value is invalid.
        """
        try:
            service_name = _non_empty("SERVICE_NAME", "echo-handler")
            environment = _non_empty("ENVIRONMENT", "dev")
            metrics_namespace = _non_empty("METRICS_NAMESPACE", "EchoHandler")

            log_level = os.getenv("LOG_LEVEL", "INFO").upper()
            if log_level not in ALLOWED_LOG_LEVELS:
                raise ValueError(
                    f"LOG_LEVEL must be one of {ALLOWED_LOG_LEVELS}, not '{log_level}'"
                )

            log_event = os.getenv("LOG_EVENT", "false").lower() in (
                "true",
                "1",
                "yes",
                "on",
            )

        except (ValueError, TypeError) as e:
            raise ConfigurationError(
                f"Invalid value for an environment variable: {e}"
            ) from e

        return cls(
            service_name=service_name,
            environment=environment,
            log_level=log_level,
            metrics_namespace=metrics_namespace,
            log_event=log_event,
        )


# --- Singleton Factory Function (Lazy-loaded and Cached) ---
@lru_cache(maxsize=1)
def get_config() -> AppConfig:
    """
    Loads the application configuration from environment variables.
    The result is cached using lru_cache, so the environment is only read once
    on the first call.
    """
    logger.info("Loading application configuration from environment...")
    return AppConfig.load_from_env()
