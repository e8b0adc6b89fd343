"""Configuration contract for groupaccess.

Pydantic-validated settings shared by the logging setup and the default
permission/role provider. Direct os.environ/os.getenv usage is limited to
:func:`load_config_from_env`.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, field_validator


class LogLevel(str, Enum):
    """Standard log levels."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class GroupAccessConfig(BaseModel):
    """Settings for group-scoped access control.

    Integrations may extend this model with their own settings.
    """

    # Logging
    log_level: LogLevel = Field(
        default=LogLevel.INFO,
        description="Logging level",
    )
    log_json: bool = Field(
        default=False,
        description="Use JSON log format (default: plain text)",
    )

    # Service identification
    service_name: Optional[str] = Field(
        default=None,
        description="Service name used as logger name by setup_logging()",
    )

    # Default provisioning
    administrator_label: str = Field(
        default="Administrator",
        description="Human readable label of the default administrator role",
    )
    include_group_permissions: bool = Field(
        default=True,
        description="Contribute the 'update group' and 'administer group' permissions",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def validate_log_level(cls, v: str | LogLevel) -> LogLevel:
        """Convert string to LogLevel enum."""
        if isinstance(v, LogLevel):
            return v
        if isinstance(v, str):
            try:
                return LogLevel[v.upper()]
            except KeyError:
                raise ValueError(f"Invalid log level: {v}. Must be one of {[e.value for e in LogLevel]}")
        raise ValueError(f"Log level must be string or LogLevel enum, got {type(v)}")

    @field_validator("administrator_label")
    @classmethod
    def validate_administrator_label(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Administrator label must not be empty")
        return v

    model_config = {
        "use_enum_values": True,
        "extra": "forbid",  # Prevent accidental extra fields
    }


def load_config_from_env() -> GroupAccessConfig:
    """Load configuration from environment variables.

    Environment variables:
    - LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    - LOG_JSON: Use JSON log format (true/false, default: false)
    - SERVICE_NAME: Service name
    - GROUP_ADMINISTRATOR_LABEL: Label of the default administrator role
    - GROUP_INCLUDE_GROUP_PERMISSIONS: Contribute group-level permissions (default: true)

    Returns:
        GroupAccessConfig instance with values from environment or defaults.
    """
    import os

    return GroupAccessConfig(
        log_level=os.getenv("LOG_LEVEL", "INFO"),
        log_json=os.getenv("LOG_JSON", "false").lower() in ("true", "1", "yes"),
        service_name=os.getenv("SERVICE_NAME"),
        administrator_label=os.getenv("GROUP_ADMINISTRATOR_LABEL", "Administrator"),
        include_group_permissions=os.getenv("GROUP_INCLUDE_GROUP_PERMISSIONS", "true").lower()
        in ("true", "1", "yes", "on"),
    )


__all__ = [
    "GroupAccessConfig",
    "LogLevel",
    "load_config_from_env",
]
