"""Configuration management with Pydantic Settings.

Action inputs arrive as environment variables set by the GitHub Actions
runner: an input named ``ecs-cluster`` is exposed as ``INPUT_ECS-CLUSTER``.

Settings are loaded from:
1. Environment variables (highest priority)
2. Defaults (lowest priority)

Only the INPUT_* names are read for action inputs, so unrelated variables
of the calling workflow cannot change them.
"""

from enum import Enum
from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from shared.models import PollRequest

# Defaults of the ECS services_stable waiter: 40 polls 15 seconds apart
DEFAULT_WAITER_DELAY = 15
DEFAULT_WAITER_MAX_ATTEMPTS = 40


class LogLevel(str, Enum):
    """Logging level."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class LogFormat(str, Enum):
    """Logging format."""

    JSON = "json"
    TEXT = "text"


class Settings(BaseSettings):
    """Main application settings.

    All settings can be overridden via environment variables.
    """

    model_config = SettingsConfigDict(
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    # Application metadata
    app_name: str = Field(default="ecs-stability-waiter", description="Application name")
    app_version: str = Field(default="0.1.0", description="Application version")

    # Logging configuration
    log_level: LogLevel = Field(default=LogLevel.INFO, description="Logging level")
    log_format: LogFormat = Field(default=LogFormat.TEXT, description="Logging format")

    # Set to 1 by the runner when a workflow is re-run with debug logging
    runner_debug: bool = Field(
        default=False,
        validation_alias="RUNNER_DEBUG",
        description="Runner debug logging enabled",
    )

    @property
    def effective_log_level(self) -> LogLevel:
        """Log level, forced to DEBUG when the runner asks for debug logs."""
        if self.runner_debug:
            return LogLevel.DEBUG
        return LogLevel(self.log_level)


class AWSSettings(BaseSettings):
    """AWS connection inputs.

    Empty values are passed on as None so boto3 falls back to its
    default credential chain and region resolution.
    """

    model_config = SettingsConfigDict(
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    access_key_id: str = Field(
        default="",
        validation_alias="INPUT_AWS-ACCESS-KEY-ID",
        description="AWS access key ID",
    )
    secret_access_key: str = Field(
        default="",
        validation_alias="INPUT_AWS-SECRET-ACCESS-KEY",
        description="AWS secret access key",
    )
    region: str = Field(
        default="",
        validation_alias="INPUT_AWS-REGION",
        description="AWS region",
    )


class StabilityWaiterSettings(Settings):
    """Inputs of the stability waiter action."""

    aws: AWSSettings = Field(default_factory=AWSSettings)

    ecs_cluster: str = Field(
        min_length=1,
        validation_alias="INPUT_ECS-CLUSTER",
        description="ECS cluster name or ARN",
    )
    # Complex field: decoded from a JSON list by the env source
    ecs_services: list[str] = Field(
        min_length=1,
        validation_alias="INPUT_ECS-SERVICES",
        description="ECS service names or ARNs",
    )
    retries: int = Field(
        default=1,
        ge=0,
        validation_alias="INPUT_RETRIES",
        description="Number of stability checks before giving up",
    )
    verbose: bool = Field(
        default=False,
        validation_alias="INPUT_VERBOSE",
        description="Print one line per attempt",
    )

    # Pacing of a single check, handed to the ECS services_stable waiter
    waiter_delay: int = Field(
        default=DEFAULT_WAITER_DELAY,
        ge=1,
        validation_alias="INPUT_WAITER-DELAY",
        description="Seconds between DescribeServices calls within one check",
    )
    waiter_max_attempts: int = Field(
        default=DEFAULT_WAITER_MAX_ATTEMPTS,
        ge=1,
        validation_alias="INPUT_WAITER-MAX-ATTEMPTS",
        description="DescribeServices calls within one check",
    )

    @field_validator("verbose", mode="before")
    @classmethod
    def validate_verbose(cls, v: Any) -> Any:
        """Only the literal string 'true' turns verbose output on."""
        if isinstance(v, str):
            return v.strip().lower() == "true"
        return v

    def to_poll_request(self) -> PollRequest:
        """Build the poll request for these inputs."""
        return PollRequest(
            cluster=self.ecs_cluster,
            services=self.ecs_services,
            max_retries=self.retries,
            verbose=self.verbose,
        )
