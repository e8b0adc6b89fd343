"""Permission names, entity operations and CRUD title templates.

Provides:
- ``Operation`` — group content entity operations (create / update / delete).
- ``Ownership`` — whether an operation permission covers own or any content.
- ``GroupPermissions`` — group-level permission names.
- ``CRUD_OPERATIONS`` — the five generated permissions per content bundle.
"""

from __future__ import annotations

from enum import Enum
from typing import NamedTuple, Optional


class Operation(str, Enum):
    """Entity operation covered by a group content permission."""

    CREATE = "create"
    UPDATE = "update"
    DELETE = "delete"


class Ownership(str, Enum):
    """Ownership scope of an update/delete permission."""

    OWN = "own"
    ANY = "any"


class GroupPermissions:
    """Group-level permissions contributed by the default provider."""

    UPDATE_GROUP = "update group"
    ADMINISTER_GROUP = "administer group"


class CrudOperation(NamedTuple):
    operation: Operation
    ownership: Optional[Ownership]
    title: str  # Template with {bundle} and {entity} placeholders


# Order is the order of the generated catalog entries.
CRUD_OPERATIONS: tuple[CrudOperation, ...] = (
    CrudOperation(Operation.CREATE, None, "Create {bundle} {entity}"),
    CrudOperation(Operation.UPDATE, Ownership.OWN, "Edit own {bundle} {entity}"),
    CrudOperation(Operation.UPDATE, Ownership.ANY, "Edit any {bundle} {entity}"),
    CrudOperation(Operation.DELETE, Ownership.OWN, "Delete own {bundle} {entity}"),
    CrudOperation(Operation.DELETE, Ownership.ANY, "Delete any {bundle} {entity}"),
)


def operation_permission_name(
    operation: Operation | str,
    bundle: str,
    entity_type: str,
    ownership: Optional[Ownership | str] = None,
) -> str:
    """Build a generic operation permission name.

    Format: ``{operation}[ {ownership}] {bundle} {entity_type}``

    Example::

        operation_permission_name("create", "article", "node")
        # "create article node"
        operation_permission_name(Operation.UPDATE, "article", "node", Ownership.OWN)
        # "update own article node"
    """
    parts = [Operation(operation).value]
    if ownership is not None:
        parts.append(Ownership(ownership).value)
    parts.extend((bundle, entity_type))
    return " ".join(parts)


__all__ = [
    "CRUD_OPERATIONS",
    "CrudOperation",
    "GroupPermissions",
    "Operation",
    "Ownership",
    "operation_permission_name",
]
