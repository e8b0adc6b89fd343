"""Tests for groupaccess.logging module."""

from __future__ import annotations

import json
import logging

import pytest

from groupaccess import (
    GroupAccessConfig,
    GroupAccessFormatter,
    InMemoryRoleStore,
    LogLevel,
    Role,
    get_group_logger,
    safe_preview,
    setup_logging,
)


def make_record(**extra: object) -> logging.LogRecord:
    record = logging.LogRecord("groupaccess.test", logging.INFO, __file__, 1, "Saved role %s", ("x",), None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestSafePreview:
    """Tests for safe_preview function."""

    def test_none_value(self) -> None:
        assert safe_preview(None) == ""

    def test_whitespace_normalized(self) -> None:
        assert safe_preview("update\n\tgroup") == "update group"

    def test_truncation(self) -> None:
        result = safe_preview("a" * 300, limit=100)
        assert len(result) == 100
        assert result.endswith("…")

    def test_set_is_sorted(self) -> None:
        assert safe_preview({"b", "a"}) == '["a", "b"]'


class TestGroupAccessFormatter:
    """Tests for GroupAccessFormatter."""

    def test_json_output(self) -> None:
        formatter = GroupAccessFormatter(json_format=True)
        data = json.loads(formatter.format(make_record(group_type="node", group_bundle="club")))
        assert data["message"] == "Saved role x"
        assert data["level"] == "INFO"
        assert data["group_type"] == "node"
        assert data["group_bundle"] == "club"
        assert "role_id" not in data

    def test_plain_output(self) -> None:
        formatter = GroupAccessFormatter(json_format=False)
        output = formatter.format(make_record(role_id="node-club-administrator"))
        assert "role_id=node-club-administrator" in output
        assert output.endswith(": Saved role x")

    def test_context_can_be_excluded(self) -> None:
        formatter = GroupAccessFormatter(include_context=False)
        data = json.loads(formatter.format(make_record(group_type="node")))
        assert "group_type" not in data

    def test_extra_fields_previewed(self) -> None:
        formatter = GroupAccessFormatter()
        data = json.loads(formatter.format(make_record(permissions=["b", "a"])))
        assert data["permissions"] == '["b", "a"]'


class TestGroupLogger:
    """Tests for get_group_logger adapter."""

    def test_adds_group_context(self, caplog: pytest.LogCaptureFixture) -> None:
        logger = get_group_logger("groupaccess.test", group_type="node", group_bundle="club")
        with caplog.at_level(logging.INFO, logger="groupaccess.test"):
            logger.info("Provisioned", role_id="node-club-administrator")

        record = caplog.records[-1]
        assert record.group_type == "node"
        assert record.group_bundle == "club"
        assert record.role_id == "node-club-administrator"

    def test_override_per_call(self, caplog: pytest.LogCaptureFixture) -> None:
        logger = get_group_logger("groupaccess.test", group_type="node")
        with caplog.at_level(logging.INFO, logger="groupaccess.test"):
            logger.info("Resolved", group_type="entity_test")
        assert caplog.records[-1].group_type == "entity_test"

    def test_role_save_is_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.INFO, logger="groupaccess.roles.role"):
            Role.create(name="member", group_type="node", group_bundle="club").save(InMemoryRoleStore())
        assert any(getattr(r, "role_id", None) == "node-club-member" for r in caplog.records)


class TestSetupLogging:
    """Tests for setup_logging."""

    @pytest.fixture(autouse=True)
    def restore_root(self):
        root = logging.getLogger()
        handlers, level = root.handlers[:], root.level
        yield
        root.handlers[:] = handlers
        root.setLevel(level)

    def test_level_and_formatter(self) -> None:
        setup_logging(GroupAccessConfig(log_level=LogLevel.DEBUG, log_json=True))
        root = logging.getLogger()
        assert root.level == logging.DEBUG
        assert len(root.handlers) == 1
        formatter = root.handlers[0].formatter
        assert isinstance(formatter, GroupAccessFormatter)
        assert formatter.json_format is True

    def test_json_format_override(self) -> None:
        setup_logging(GroupAccessConfig(log_json=True), json_format=False)
        assert logging.getLogger().handlers[0].formatter.json_format is False

    def test_service_logger_level(self) -> None:
        setup_logging(GroupAccessConfig(log_level="ERROR", service_name="groups"))
        assert logging.getLogger("groups").level == logging.ERROR
