"""Default permission and role contributions."""

from __future__ import annotations

from typing import Optional

from ..config import GroupAccessConfig
from ..interfaces import DefaultRoleProvider, PermissionProvider
from ..roles.constants import ADMINISTRATOR
from ..roles.role import Role
from .collection import DefaultRoleCollection, PermissionCollection
from .constants import GroupPermissions
from .entries import GroupPermission
from .manager import PermissionManager


class DefaultGroupProvider(PermissionProvider, DefaultRoleProvider):
    """Contributes the built-in group permissions and the administrator role.

    Permissions:
    - ``update group`` and ``administer group`` (unless disabled in config),
    - generic CRUD permissions for every group content bundle of the
      collection.

    Roles:
    - ``administrator`` with ``is_admin`` set, unsaved.
    """

    def __init__(self, manager: PermissionManager, config: Optional[GroupAccessConfig] = None) -> None:
        self.manager = manager
        self.config = config if config is not None else GroupAccessConfig()

    def group_permissions(self) -> list[GroupPermission]:
        return [
            GroupPermission(
                name=GroupPermissions.UPDATE_GROUP,
                title="Edit group",
                description="Edit the group.",
                default_roles=[ADMINISTRATOR],
            ),
            GroupPermission(
                name=GroupPermissions.ADMINISTER_GROUP,
                title="Administer group",
                description="Manage group members and content in the group.",
                default_roles=[ADMINISTRATOR],
                restrict_access=True,
            ),
        ]

    def provide_permissions(self, collection: PermissionCollection) -> None:
        if self.config.include_group_permissions:
            collection.add_permissions(self.group_permissions())

        operation_permissions = self.manager.get_default_entity_operation_permissions(
            collection.group_content_bundle_ids
        )
        collection.add_permissions(operation_permissions.values())

    def provide_default_roles(self, collection: DefaultRoleCollection) -> None:
        collection.add_role(
            Role.create(
                name=ADMINISTRATOR,
                label=self.config.administrator_label,
                is_admin=True,
            )
        )


__all__ = ["DefaultGroupProvider"]
