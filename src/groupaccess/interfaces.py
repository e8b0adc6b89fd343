"""Collaborator contracts.

The core computes role ids and permission catalogs; storage, the group
content index, entity metadata and title translation are supplied by the
host application through these interfaces.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Dict, List, Optional

if TYPE_CHECKING:
    from .permissions.collection import DefaultRoleCollection, PermissionCollection
    from .roles.role import RoleRecord


class RoleStore(ABC):
    """Persistent role storage keyed by role id."""

    @abstractmethod
    def load(self, role_id: str) -> Optional["RoleRecord"]:
        """Return the role saved under ``role_id``, or None."""

    @abstractmethod
    def insert(self, record: "RoleRecord") -> None:
        """Insert a role.

        Must raise StorageConflictError, and leave the stored entry
        untouched, when ``record.id`` already exists. The check and the
        insert must be atomic with respect to concurrent inserts.
        """

    @abstractmethod
    def delete(self, role_id: str) -> bool:
        """Remove a role. Returns False when nothing was stored under ``role_id``."""

    @abstractmethod
    def load_multiple(self) -> Dict[str, "RoleRecord"]:
        """Return all stored roles keyed by id."""


class GroupContentIndex(ABC):
    """Knows which content bundles belong to which group bundles."""

    @abstractmethod
    def get_group_content_bundle_ids_by_group_bundle(
        self, group_entity_type_id: str, group_bundle_id: str
    ) -> Dict[str, List[str]]:
        """Return content bundle ids keyed by content entity type id."""

    @abstractmethod
    def is_group_content(self, entity_type_id: str, bundle_id: str) -> bool:
        """Whether the bundle is registered as group content."""


class BundleInfoProvider(ABC):
    """Human readable labels for entity types and bundles.

    Implementations raise NotFoundError for unknown types or bundles.
    """

    @abstractmethod
    def get_bundle_label(self, entity_type_id: str, bundle_id: str) -> str:
        raise NotImplementedError

    @abstractmethod
    def get_plural_label(self, entity_type_id: str) -> str:
        raise NotImplementedError


class TitleFormatter(ABC):
    """Fills permission title templates (translation hook)."""

    @abstractmethod
    def format(self, template: str, **args: Any) -> str:
        raise NotImplementedError


class DefaultTitleFormatter(TitleFormatter):
    """Plain ``str.format`` substitution without translation."""

    def format(self, template: str, **args: Any) -> str:
        return template.format(**args)


class PermissionProvider(ABC):
    """Contributes permissions to the catalog of one group type and bundle."""

    @abstractmethod
    def provide_permissions(self, collection: "PermissionCollection") -> None:
        raise NotImplementedError


class DefaultRoleProvider(ABC):
    """Contributes roles to be created for new groups of a bundle."""

    @abstractmethod
    def provide_default_roles(self, collection: "DefaultRoleCollection") -> None:
        raise NotImplementedError


__all__ = [
    "BundleInfoProvider",
    "DefaultRoleProvider",
    "DefaultTitleFormatter",
    "GroupContentIndex",
    "PermissionProvider",
    "RoleStore",
    "TitleFormatter",
]
