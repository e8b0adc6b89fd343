"""Tests for the error hierarchy."""

from __future__ import annotations

from groupaccess import (
    ConfigurationInvalidError,
    GroupAccessError,
    NotFoundError,
    StorageConflictError,
)


class TestErrorHierarchy:
    """Tests for GroupAccessError subclasses."""

    def test_codes(self) -> None:
        assert ConfigurationInvalidError().code == "CONFIGURATION_INVALID"
        assert StorageConflictError().code == "STORAGE_CONFLICT"
        assert NotFoundError().code == "NOT_FOUND"
        assert GroupAccessError().code == "INTERNAL_ERROR"

    def test_all_inherit_from_base(self) -> None:
        for cls in (ConfigurationInvalidError, StorageConflictError, NotFoundError):
            assert issubclass(cls, GroupAccessError)

    def test_message_and_details(self) -> None:
        error = StorageConflictError("Role 'node-club-member' already exists", role_id="node-club-member")
        assert str(error) == "Role 'node-club-member' already exists"
        assert error.details == {"role_id": "node-club-member"}

    def test_default_message(self) -> None:
        assert NotFoundError().message == "Not found"

    def test_code_override(self) -> None:
        error = GroupAccessError("Membership is closed", code="MEMBERSHIP_CLOSED")
        assert error.code == "MEMBERSHIP_CLOSED"
        assert GroupAccessError().code == "INTERNAL_ERROR"

    def test_custom_subclass(self) -> None:
        class MembershipError(GroupAccessError):
            code = "MEMBERSHIP_ERROR"

        error = MembershipError("Not a member")
        assert error.code == "MEMBERSHIP_ERROR"
        assert isinstance(error, GroupAccessError)

    def test_public_names(self) -> None:
        import groupaccess.exceptions as exceptions

        assert sorted(exceptions.__all__) == sorted(
            ["GroupAccessError", "ConfigurationInvalidError", "StorageConflictError", "NotFoundError"]
        )
