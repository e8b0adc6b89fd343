"""Resolve the permission catalog and default roles of a group bundle.

The resolver owns the merge. Providers are invoked in the order given, each
adding to one collection per request; the first entry registered under a
name wins.

Example::

    registry = InMemoryGroupRegistry()
    ...
    resolver = PermissionResolver.with_defaults(registry, registry)
    permissions = resolver.resolve_permissions("node", "club")
    records = resolver.provision_default_roles("node", "club", store)
"""

from __future__ import annotations

import logging
from typing import Optional, Sequence, Union

from ..config import GroupAccessConfig
from ..interfaces import (
    BundleInfoProvider,
    DefaultRoleProvider,
    GroupContentIndex,
    PermissionProvider,
    RoleStore,
    TitleFormatter,
)
from ..logging import get_group_logger
from ..roles.role import Role, RoleRecord
from .collection import DefaultRoleCollection, PermissionCollection
from .entries import GroupPermission
from .manager import PermissionManager
from .providers import DefaultGroupProvider

Provider = Union[PermissionProvider, DefaultRoleProvider]


class PermissionResolver:
    """Runs permission and default-role providers for a group type and bundle.

    Args:
        group_content_index: Supplies the content bundles of a group bundle.
        providers: Ordered providers. Objects implementing
            PermissionProvider take part in permission resolution, objects
            implementing DefaultRoleProvider in default role resolution.
    """

    def __init__(self, group_content_index: GroupContentIndex, providers: Sequence[Provider] = ()) -> None:
        self.group_content_index = group_content_index
        self.providers: list[Provider] = list(providers)

    @classmethod
    def with_defaults(
        cls,
        group_content_index: GroupContentIndex,
        bundle_info: BundleInfoProvider,
        *,
        config: Optional[GroupAccessConfig] = None,
        title_formatter: Optional[TitleFormatter] = None,
        before: Sequence[Provider] = (),
        after: Sequence[Provider] = (),
    ) -> "PermissionResolver":
        """Build a resolver around the default provider.

        ``before`` providers register ahead of the defaults and so take
        precedence on name collisions; ``after`` providers only fill gaps.
        """
        manager = PermissionManager(group_content_index, bundle_info, title_formatter)
        default = DefaultGroupProvider(manager, config)
        return cls(group_content_index, [*before, default, *after])

    def add_provider(self, provider: Provider) -> None:
        self.providers.append(provider)

    def build_permission_collection(self, group_entity_type_id: str, group_bundle_id: str) -> PermissionCollection:
        collection = PermissionCollection(
            group_entity_type_id,
            group_bundle_id,
            self.group_content_index.get_group_content_bundle_ids_by_group_bundle(
                group_entity_type_id, group_bundle_id
            ),
        )
        for provider in self.providers:
            if isinstance(provider, PermissionProvider):
                provider.provide_permissions(collection)
        return collection

    def resolve_permissions(self, group_entity_type_id: str, group_bundle_id: str) -> dict[str, GroupPermission]:
        """Return the permission catalog keyed by name, in registration order."""
        permissions = self.build_permission_collection(group_entity_type_id, group_bundle_id).get_permissions()
        get_group_logger(__name__, group_entity_type_id, group_bundle_id).debug(
            "Resolved %d permissions", len(permissions)
        )
        return permissions

    def resolve_default_roles(self, group_entity_type_id: str, group_bundle_id: str) -> dict[str, Role]:
        """Return the unsaved default roles keyed by role name."""
        collection = DefaultRoleCollection(group_entity_type_id, group_bundle_id)
        for provider in self.providers:
            if isinstance(provider, DefaultRoleProvider):
                provider.provide_default_roles(collection)
        return collection.get_roles()

    def get_default_permissions(self, group_entity_type_id: str, group_bundle_id: str, role_name: str) -> list[str]:
        """Names of the permissions granted to ``role_name`` by default."""
        return [
            name
            for name, permission in self.resolve_permissions(group_entity_type_id, group_bundle_id).items()
            if role_name in permission.default_roles
        ]

    def provision_default_roles(
        self, group_entity_type_id: str, group_bundle_id: str, store: RoleStore
    ) -> list[RoleRecord]:
        """Scope the default roles to a bundle, grant their default permissions and save them.

        Raises:
            StorageConflictError: a default role was already provisioned for
                this bundle. Roles saved before the conflict stay saved.
        """
        log = get_group_logger(__name__, group_entity_type_id, group_bundle_id)
        permissions = self.resolve_permissions(group_entity_type_id, group_bundle_id)

        records = []
        for name, role in self.resolve_default_roles(group_entity_type_id, group_bundle_id).items():
            role.set_group_type(group_entity_type_id).set_group_bundle(group_bundle_id)
            role.grant_permissions(
                permission_name
                for permission_name, permission in permissions.items()
                if name in permission.default_roles
            )
            record = role.save(store)
            log.info("Provisioned default role", role_id=record.id)
            records.append(record)
        return records


__all__ = ["PermissionResolver"]
