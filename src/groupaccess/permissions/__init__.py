"""Group permission catalog and resolution.

Defines:
- GroupPermission / GroupContentOperationPermission: catalog entries
- Operation / Ownership / GroupPermissions: permission vocabulary
- PermissionCollection / DefaultRoleCollection: per-request merge targets
- PermissionManager: generic CRUD permissions per group content bundle
- DefaultGroupProvider: built-in permissions and the administrator role
- PermissionResolver: runs providers and owns the merge
"""

from .collection import DefaultRoleCollection, PermissionCollection
from .constants import (
    CRUD_OPERATIONS,
    CrudOperation,
    GroupPermissions,
    Operation,
    Ownership,
    operation_permission_name,
)
from .entries import GroupContentOperationPermission, GroupPermission
from .manager import PermissionManager
from .providers import DefaultGroupProvider
from .resolver import PermissionResolver

__all__ = [
    "CRUD_OPERATIONS",
    "CrudOperation",
    "DefaultGroupProvider",
    "DefaultRoleCollection",
    "GroupContentOperationPermission",
    "GroupPermission",
    "GroupPermissions",
    "Operation",
    "Ownership",
    "PermissionCollection",
    "PermissionManager",
    "PermissionResolver",
    "operation_permission_name",
]
