"""Per-request collections that providers contribute to.

A :class:`PermissionCollection` gathers the permission catalog of one group
type and bundle; a :class:`DefaultRoleCollection` gathers the roles to create
for new groups of that bundle. Both merge insert-if-absent: the first entry
registered under a name is kept, later ones are ignored unless explicitly
replaced.
"""

from __future__ import annotations

import logging
from typing import Iterable, Iterator, Mapping, Optional, Sequence

from ..exceptions import ConfigurationInvalidError, NotFoundError
from ..roles.role import Role
from .entries import GroupPermission

logger = logging.getLogger(__name__)


class PermissionCollection:
    """Ordered permission catalog for one group type and bundle.

    Args:
        group_entity_type_id: Entity type of the group (e.g. ``"node"``).
        group_bundle_id: Bundle of the group (e.g. ``"club"``).
        group_content_bundle_ids: Content bundle ids keyed by content entity
            type id, as returned by the group content index.
    """

    def __init__(
        self,
        group_entity_type_id: str,
        group_bundle_id: str,
        group_content_bundle_ids: Optional[Mapping[str, Sequence[str]]] = None,
    ) -> None:
        self.group_entity_type_id = group_entity_type_id
        self.group_bundle_id = group_bundle_id
        self.group_content_bundle_ids: dict[str, list[str]] = {
            entity_type_id: list(bundle_ids)
            for entity_type_id, bundle_ids in (group_content_bundle_ids or {}).items()
        }
        self._permissions: dict[str, GroupPermission] = {}

    def add_permission(self, permission: GroupPermission) -> bool:
        """Register a permission unless its name is already taken.

        Returns:
            True if the permission was added, False if an entry with the
            same name was already registered.

        Raises:
            ConfigurationInvalidError: the entry has no name or title.
        """
        permission.check()
        name = permission.get_name()
        if name in self._permissions:
            logger.debug("Permission '%s' already registered, keeping the first entry", name)
            return False
        self._permissions[name] = permission
        return True

    def add_permissions(self, permissions: Iterable[GroupPermission]) -> int:
        """Register several permissions. Returns how many were added."""
        return sum(1 for permission in permissions if self.add_permission(permission))

    def replace_permission(self, permission: GroupPermission) -> None:
        """Register a permission, overriding any entry with the same name."""
        permission.check()
        self._permissions[permission.get_name()] = permission

    def get_permission(self, name: str) -> GroupPermission:
        try:
            return self._permissions[name]
        except KeyError:
            raise NotFoundError(f"Permission '{name}' is not registered", permission=name) from None

    def has_permission(self, name: str) -> bool:
        return name in self._permissions

    def delete_permission(self, name: str) -> None:
        if self._permissions.pop(name, None) is None:
            raise NotFoundError(f"Permission '{name}' is not registered", permission=name)

    def get_permissions(self) -> dict[str, GroupPermission]:
        """Registered permissions keyed by name, in registration order."""
        return dict(self._permissions)

    def __len__(self) -> int:
        return len(self._permissions)

    def __contains__(self, name: object) -> bool:
        return name in self._permissions

    def __iter__(self) -> Iterator[GroupPermission]:
        return iter(list(self._permissions.values()))


class DefaultRoleCollection:
    """Roles to provision for new groups of one type and bundle.

    Roles are keyed by name and stay unsaved; the caller scopes and saves them.
    """

    def __init__(self, group_entity_type_id: str, group_bundle_id: str) -> None:
        self.group_entity_type_id = group_entity_type_id
        self.group_bundle_id = group_bundle_id
        self._roles: dict[str, Role] = {}

    def add_role(self, role: Role) -> bool:
        """Register a role unless a role with the same name exists.

        Raises:
            ConfigurationInvalidError: the role has no name.
        """
        if not role.name:
            raise ConfigurationInvalidError("A default role requires a name", role_id=role.id)
        if role.name in self._roles:
            logger.debug("Default role '%s' already registered, keeping the first entry", role.name)
            return False
        self._roles[role.name] = role
        return True

    def add_roles(self, roles: Iterable[Role]) -> int:
        return sum(1 for role in roles if self.add_role(role))

    def get_role(self, name: str) -> Role:
        try:
            return self._roles[name]
        except KeyError:
            raise NotFoundError(f"Default role '{name}' is not registered", role=name) from None

    def has_role(self, name: str) -> bool:
        return name in self._roles

    def delete_role(self, name: str) -> None:
        if self._roles.pop(name, None) is None:
            raise NotFoundError(f"Default role '{name}' is not registered", role=name)

    def get_roles(self) -> dict[str, Role]:
        return dict(self._roles)

    def __len__(self) -> int:
        return len(self._roles)

    def __contains__(self, name: object) -> bool:
        return name in self._roles


__all__ = [
    "DefaultRoleCollection",
    "PermissionCollection",
]
