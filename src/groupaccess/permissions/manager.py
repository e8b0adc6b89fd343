"""Generic CRUD permissions for group content.

Entity permissions are usually human-worded and do not follow a machine
readable scheme, so the manager settles for a generic format per group
content bundle::

    create {bundle} {entity_type}
    update own {bundle} {entity_type}
    update any {bundle} {entity_type}
    delete own {bundle} {entity_type}
    delete any {bundle} {entity_type}

Every generated permission is granted to the administrator role by default.
Providers can contribute better-named permissions ahead of these.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping, Optional, Sequence

from ..interfaces import BundleInfoProvider, DefaultTitleFormatter, GroupContentIndex, TitleFormatter
from ..roles.constants import ADMINISTRATOR
from .constants import CRUD_OPERATIONS
from .entries import GroupContentOperationPermission

logger = logging.getLogger(__name__)


class PermissionManager:
    """Derives operation permissions for the content bundles of a group bundle.

    Args:
        group_content_index: Maps group bundles to their content bundles.
        bundle_info: Bundle labels and entity type plural labels. Unknown
            types or bundles raise NotFoundError, which is not caught here.
        title_formatter: Fills the title templates. Defaults to plain
            ``str.format`` substitution.
    """

    def __init__(
        self,
        group_content_index: GroupContentIndex,
        bundle_info: BundleInfoProvider,
        title_formatter: Optional[TitleFormatter] = None,
    ) -> None:
        self.group_content_index = group_content_index
        self.bundle_info = bundle_info
        self.title_formatter = title_formatter if title_formatter is not None else DefaultTitleFormatter()

    def get_permission_list(self, group_entity_type_id: str, group_bundle_id: str) -> dict[str, dict[str, Any]]:
        """Return the CRUD permission list of all content bundles of a group bundle.

        Returns:
            ``{name: {"title": ..., "default_roles": [...]}}``; the first entry
            generated for a name is kept.
        """
        permissions: dict[str, dict[str, Any]] = {}
        bundle_ids = self.group_content_index.get_group_content_bundle_ids_by_group_bundle(
            group_entity_type_id, group_bundle_id
        )
        for content_entity_type_id, content_bundle_ids in bundle_ids.items():
            for content_bundle_id in content_bundle_ids:
                generated = self.generate_crud_permission_list(content_entity_type_id, content_bundle_id)
                for name, values in generated.items():
                    permissions.setdefault(name, values)

        logger.debug(
            "Generated %d CRUD permissions for %s/%s",
            len(permissions),
            group_entity_type_id,
            group_bundle_id,
        )
        return permissions

    def generate_crud_permission_list(
        self, group_content_entity_type_id: str, group_content_bundle_id: str
    ) -> dict[str, dict[str, Any]]:
        """Return the five CRUD permissions of one group content bundle.

        Returns an empty dict when the bundle is not group content.
        """
        if not self.group_content_index.is_group_content(group_content_entity_type_id, group_content_bundle_id):
            return {}

        return {
            permission.get_name(): {
                "title": permission.title,
                "default_roles": list(permission.default_roles),
            }
            for permission in self._build_operation_permissions(group_content_entity_type_id, group_content_bundle_id)
        }

    def get_default_entity_operation_permissions(
        self, group_content_bundle_ids: Mapping[str, Sequence[str]]
    ) -> dict[str, GroupContentOperationPermission]:
        """Return operation permissions for every (entity type, bundle) pair.

        Args:
            group_content_bundle_ids: Content bundle ids keyed by content
                entity type id.

        Returns:
            Permissions keyed by name. Repeated pairs produce the same names
            and are merged.
        """
        permissions: dict[str, GroupContentOperationPermission] = {}
        for entity_type_id, bundle_ids in group_content_bundle_ids.items():
            for bundle_id in bundle_ids:
                for permission in self._build_operation_permissions(entity_type_id, bundle_id):
                    permissions.setdefault(permission.get_name(), permission)
        return permissions

    def _build_operation_permissions(
        self, entity_type_id: str, bundle_id: str
    ) -> list[GroupContentOperationPermission]:
        args = {
            "bundle": self.bundle_info.get_bundle_label(entity_type_id, bundle_id),
            "entity": self.bundle_info.get_plural_label(entity_type_id),
        }

        permissions = []
        for crud in CRUD_OPERATIONS:
            permission = GroupContentOperationPermission(
                title=self.title_formatter.format(crud.title, **args),
                operation=crud.operation,
                ownership=crud.ownership,
                entity_type=entity_type_id,
                bundle=bundle_id,
                default_roles=[ADMINISTRATOR],
            )
            permission.set_name(permission.canonical_name())
            permissions.append(permission)
        return permissions


__all__ = ["PermissionManager"]
