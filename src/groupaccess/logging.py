"""Centralized logging utilities for groupaccess.

This module provides:
- Logging configuration from GroupAccessConfig
- Safe preview utility for logged values
- Structured logging with group context (group type, bundle, role id)
"""

from __future__ import annotations

import json
import logging
from typing import Any, Optional

from .config import GroupAccessConfig, LogLevel

# Record attributes carried as group context by the adapter and formatter.
CONTEXT_FIELDS = ("group_type", "group_bundle", "role_id")

_STANDARD_RECORD_FIELDS = frozenset(
    {
        "name", "msg", "args", "created", "filename", "funcName",
        "levelname", "levelno", "lineno", "module", "msecs",
        "message", "pathname", "process", "processName", "relativeCreated",
        "thread", "threadName", "exc_info", "exc_text", "stack_info",
        "taskName",
    }
)


def safe_preview(value: Any, limit: int = 240) -> str:
    """Create a length-bounded, single-line preview of a value for logging.

    Args:
        value: The value to preview (any type)
        limit: Maximum length of the preview (default: 240)

    Returns:
        A truncated string representation
    """
    if value is None:
        return ""

    if isinstance(value, str):
        s = value
    elif isinstance(value, (dict, list, tuple, set, frozenset)):
        try:
            s = json.dumps(sorted(value) if isinstance(value, (set, frozenset)) else value, default=str, ensure_ascii=False)
        except (TypeError, ValueError):
            s = str(value)
    else:
        s = str(value)

    s = " ".join(s.split())

    if len(s) > limit:
        return s[: limit - 1] + "…"

    return s


class GroupAccessFormatter(logging.Formatter):
    """Formatter that includes group context and optional JSON output."""

    def __init__(
        self,
        include_context: bool = True,
        json_format: bool = True,
        *args: Any,
        **kwargs: Any,
    ):
        super().__init__(*args, **kwargs)
        self.include_context = include_context
        self.json_format = json_format

    def format(self, record: logging.LogRecord) -> str:
        """Format a log record."""
        log_data: dict[str, Any] = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        context: dict[str, str] = {}
        if self.include_context:
            for key in CONTEXT_FIELDS:
                value = getattr(record, key, None)
                if value:
                    context[key] = str(value)
            log_data.update(context)

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        for key, value in record.__dict__.items():
            if key in _STANDARD_RECORD_FIELDS or key in CONTEXT_FIELDS:
                continue
            log_data[key] = safe_preview(value)

        if self.json_format:
            return json.dumps(log_data, default=str, ensure_ascii=False)

        parts = [
            f"[{log_data['timestamp']}]",
            f"{log_data['level']}",
            f"{log_data['logger']}",
        ]
        parts.extend(f"{key}={value}" for key, value in context.items())
        parts.append(f": {log_data['message']}")
        return " ".join(parts)


class GroupContextLoggerAdapter(logging.LoggerAdapter):
    """Logger adapter that adds group type, bundle and role id to log records.

    Usage:
        logger = get_group_logger(__name__, group_type="node", group_bundle="club")
        logger.info("Provisioned roles", role_id="node-club-administrator")
    """

    def __init__(
        self,
        logger: logging.Logger,
        group_type: Optional[str] = None,
        group_bundle: Optional[str] = None,
    ):
        super().__init__(logger, {})
        self.group_type = group_type
        self.group_bundle = group_bundle

    def process(self, msg: str, kwargs: dict[str, Any]) -> tuple[str, dict[str, Any]]:
        """Move group context keyword arguments into ``extra``."""
        context = {
            "group_type": kwargs.pop("group_type", self.group_type),
            "group_bundle": kwargs.pop("group_bundle", self.group_bundle),
            "role_id": kwargs.pop("role_id", None),
        }

        extra = dict(kwargs.get("extra") or {})
        for key, value in context.items():
            if value:
                extra[key] = value
        kwargs["extra"] = extra

        return msg, kwargs


def setup_logging(
    config: Optional[GroupAccessConfig] = None,
    json_format: Optional[bool] = None,
) -> None:
    """Configure the root logger.

    Args:
        config: GroupAccessConfig instance (if None, loads from environment)
        json_format: Force JSON (True) or plain text (False); defaults to ``config.log_json``
    """
    if config is None:
        from .config import load_config_from_env

        config = load_config_from_env()

    level_map = {
        LogLevel.DEBUG: logging.DEBUG,
        LogLevel.INFO: logging.INFO,
        LogLevel.WARNING: logging.WARNING,
        LogLevel.ERROR: logging.ERROR,
        LogLevel.CRITICAL: logging.CRITICAL,
    }
    log_level = level_map.get(LogLevel(config.log_level), logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    # Remove existing handlers to avoid duplicates
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(log_level)
    console_handler.setFormatter(
        GroupAccessFormatter(
            include_context=True,
            json_format=config.log_json if json_format is None else json_format,
        )
    )
    root_logger.addHandler(console_handler)

    if config.service_name:
        logging.getLogger(config.service_name).setLevel(log_level)


def get_group_logger(
    name: str,
    group_type: Optional[str] = None,
    group_bundle: Optional[str] = None,
) -> GroupContextLoggerAdapter:
    """Get a logger adapter bound to a group type and bundle.

    Example:
        logger = get_group_logger(__name__, group_type="node", group_bundle="club")
        logger.debug("Resolved %d permissions", 12)
    """
    return GroupContextLoggerAdapter(logging.getLogger(name), group_type=group_type, group_bundle=group_bundle)


__all__ = [
    "CONTEXT_FIELDS",
    "GroupAccessFormatter",
    "GroupContextLoggerAdapter",
    "get_group_logger",
    "safe_preview",
    "setup_logging",
]
