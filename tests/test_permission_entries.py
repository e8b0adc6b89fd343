"""Tests for permission catalog entries and collections."""

from __future__ import annotations

import pytest

from groupaccess import (
    ADMINISTRATOR,
    ConfigurationInvalidError,
    DefaultRoleCollection,
    GroupContentOperationPermission,
    GroupPermission,
    NotFoundError,
    Operation,
    Ownership,
    PermissionCollection,
    Role,
    operation_permission_name,
)


class TestOperationPermissionName:
    """Tests for the generic operation permission format."""

    def test_create_has_no_ownership(self) -> None:
        assert operation_permission_name(Operation.CREATE, "article", "node") == "create article node"

    def test_update_and_delete(self) -> None:
        assert operation_permission_name("update", "article", "node", "own") == "update own article node"
        assert operation_permission_name(Operation.DELETE, "page", "node", Ownership.ANY) == "delete any page node"

    def test_unknown_operation(self) -> None:
        with pytest.raises(ValueError):
            operation_permission_name("publish", "article", "node")


class TestGroupPermission:
    """Tests for GroupPermission."""

    def test_defaults(self) -> None:
        permission = GroupPermission(name="administer group", title="Administer group")
        assert permission.description is None
        assert permission.default_roles == []
        assert permission.restrict_access is False

    def test_fluent_setters(self) -> None:
        permission = (
            GroupPermission()
            .set_name("administer group")
            .set_title("Administer group")
            .set_description("Manage group members and content in the group.")
            .set_default_roles([ADMINISTRATOR, ADMINISTRATOR])
            .set_restrict_access(True)
        )
        assert permission.name == "administer group"
        assert permission.default_roles == [ADMINISTRATOR]
        assert permission.restrict_access is True

    def test_equality_by_attributes(self) -> None:
        first = GroupPermission(name="update group", title="Edit group", default_roles=[ADMINISTRATOR])
        second = GroupPermission(name="update group", title="Edit group", default_roles=[ADMINISTRATOR])
        assert first == second
        second.set_title("Change group")
        assert first != second

    def test_check_requires_name_and_title(self) -> None:
        with pytest.raises(ConfigurationInvalidError, match="requires a name"):
            GroupPermission(title="Untitled").check()
        with pytest.raises(ConfigurationInvalidError, match="requires a title"):
            GroupPermission(name="update group").check()


class TestGroupContentOperationPermission:
    """Tests for GroupContentOperationPermission."""

    def test_name_derived_from_operation(self) -> None:
        permission = (
            GroupContentOperationPermission(title="Edit own Article content items")
            .set_entity_type("node")
            .set_bundle("article")
            .set_operation("update")
            .set_ownership("own")
        )
        assert permission.name == ""
        assert permission.get_name() == "update own article node"
        assert permission.operation is Operation.UPDATE
        assert permission.ownership is Ownership.OWN

    def test_explicit_name_wins(self) -> None:
        permission = GroupContentOperationPermission(
            name="edit own article content",
            title="Article: Edit own content",
            entity_type="node",
            bundle="article",
            operation=Operation.UPDATE,
            ownership=Ownership.OWN,
        )
        assert permission.get_name() == "edit own article content"
        assert permission.canonical_name() == "update own article node"

    def test_incomplete_operation_permission(self) -> None:
        permission = GroupContentOperationPermission(title="Create", entity_type="node")
        with pytest.raises(ConfigurationInvalidError):
            permission.check()

    def test_create_with_ownership_is_invalid(self) -> None:
        permission = GroupContentOperationPermission(
            title="Create own", entity_type="node", bundle="article", operation="create", ownership="own"
        )
        with pytest.raises(ConfigurationInvalidError, match="no ownership"):
            permission.check()

    def test_differs_from_generic_permission(self) -> None:
        generic = GroupPermission(name="create article node", title="Create")
        operation = GroupContentOperationPermission(
            name="create article node", title="Create", entity_type="node", bundle="article", operation="create"
        )
        assert generic != operation


class TestPermissionCollection:
    """Tests for the insert-if-absent merge."""

    def test_first_registration_wins(self) -> None:
        collection = PermissionCollection("node", "club")
        first = GroupPermission(name="update group", title="Edit group")
        second = GroupPermission(name="update group", title="Change group", restrict_access=True)

        assert collection.add_permission(first) is True
        assert collection.add_permission(second) is False
        assert collection.get_permission("update group") is first

    def test_replace_permission(self) -> None:
        collection = PermissionCollection("node", "club")
        collection.add_permission(GroupPermission(name="update group", title="Edit group"))
        collection.replace_permission(GroupPermission(name="update group", title="Change group"))
        assert collection.get_permission("update group").title == "Change group"

    def test_add_permissions_counts_added(self) -> None:
        collection = PermissionCollection("node", "club")
        added = collection.add_permissions(
            [
                GroupPermission(name="a", title="A"),
                GroupPermission(name="b", title="B"),
                GroupPermission(name="a", title="Other A"),
            ]
        )
        assert added == 2
        assert list(collection.get_permissions()) == ["a", "b"]
        assert len(collection) == 2
        assert "a" in collection
        assert [p.name for p in collection] == ["a", "b"]

    def test_operation_permission_keyed_by_derived_name(self) -> None:
        collection = PermissionCollection("node", "club")
        collection.add_permission(
            GroupContentOperationPermission(title="Create", entity_type="node", bundle="article", operation="create")
        )
        assert collection.has_permission("create article node")

    def test_invalid_entry_rejected(self) -> None:
        collection = PermissionCollection("node", "club")
        with pytest.raises(ConfigurationInvalidError):
            collection.add_permission(GroupPermission(name="untitled"))
        assert len(collection) == 0

    def test_get_and_delete_unknown(self) -> None:
        collection = PermissionCollection("node", "club")
        with pytest.raises(NotFoundError):
            collection.get_permission("missing")
        with pytest.raises(NotFoundError):
            collection.delete_permission("missing")

    def test_delete(self) -> None:
        collection = PermissionCollection("node", "club")
        collection.add_permission(GroupPermission(name="a", title="A"))
        collection.delete_permission("a")
        assert not collection.has_permission("a")

    def test_context(self) -> None:
        collection = PermissionCollection("node", "club", {"node": ("article", "page")})
        assert collection.group_entity_type_id == "node"
        assert collection.group_bundle_id == "club"
        assert collection.group_content_bundle_ids == {"node": ["article", "page"]}

    def test_get_permissions_is_a_copy(self) -> None:
        collection = PermissionCollection("node", "club")
        collection.add_permission(GroupPermission(name="a", title="A"))
        collection.get_permissions().clear()
        assert len(collection) == 1


class TestDefaultRoleCollection:
    """Tests for DefaultRoleCollection."""

    def test_add_and_get(self) -> None:
        collection = DefaultRoleCollection("node", "club")
        role = Role.create(name=ADMINISTRATOR, label="Administrator", is_admin=True)
        assert collection.add_role(role) is True
        assert collection.get_role(ADMINISTRATOR) is role
        assert collection.has_role(ADMINISTRATOR)
        assert ADMINISTRATOR in collection

    def test_first_role_wins(self) -> None:
        collection = DefaultRoleCollection("node", "club")
        first = Role.create(name=ADMINISTRATOR, label="Administrator")
        assert collection.add_roles([first, Role.create(name=ADMINISTRATOR, label="Boss")]) == 1
        assert collection.get_role(ADMINISTRATOR).label == "Administrator"

    def test_role_requires_name(self) -> None:
        collection = DefaultRoleCollection("node", "club")
        with pytest.raises(ConfigurationInvalidError):
            collection.add_role(Role.create(label="Nameless"))

    def test_delete_role(self) -> None:
        collection = DefaultRoleCollection("node", "club")
        collection.add_role(Role.create(name="moderator"))
        collection.delete_role("moderator")
        assert len(collection) == 0
        with pytest.raises(NotFoundError):
            collection.delete_role("moderator")
        with pytest.raises(NotFoundError):
            collection.get_role("moderator")
