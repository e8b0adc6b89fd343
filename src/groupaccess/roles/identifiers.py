"""Role identifier scheme.

A role id is the dash-joined path ``group_type-group_bundle[-group_id]-name``.
Encoding the full scope in the id lets the same role name exist per group
type, per bundle and per group instance while staying globally unique.
"""

from __future__ import annotations

from typing import Optional, Union

GroupId = Union[str, int]

SEPARATOR = "-"


def normalize_group_id(group_id: Optional[GroupId]) -> Optional[str]:
    """Return ``group_id`` as a string, or None when absent or empty."""
    if group_id is None:
        return None
    value = str(group_id)
    return value or None


def role_id_prefix(group_type: str, group_bundle: str, group_id: Optional[GroupId] = None) -> str:
    """Build the scope prefix of a role id, including the trailing separator.

    Example::

        role_id_prefix("node", "group")          # "node-group-"
        role_id_prefix("entity_test", "group", 1)  # "entity_test-group-1-"
    """
    parts = [group_type, group_bundle]
    gid = normalize_group_id(group_id)
    if gid is not None:
        parts.append(gid)
    return SEPARATOR.join(parts) + SEPARATOR


def role_id(group_type: str, group_bundle: str, name: str, group_id: Optional[GroupId] = None) -> str:
    """Build the canonical role id.

    Example::

        role_id("node", "group", "content_editor")
        # "node-group-content_editor"
        role_id("entity_test", "group", "content_editor", group_id=1)
        # "entity_test-group-1-content_editor"
    """
    return role_id_prefix(group_type, group_bundle, group_id) + name


def role_name_from_id(
    value: str,
    group_type: str,
    group_bundle: str,
    group_id: Optional[GroupId] = None,
) -> str:
    """Derive the role name by stripping the scope prefix from a role id.

    An id that does not carry the expected prefix is returned unchanged, so
    the canonical id built from it will not match and the role is rejected
    on save.
    """
    prefix = role_id_prefix(group_type, group_bundle, group_id)
    if value.startswith(prefix):
        return value[len(prefix) :]
    return value


__all__ = [
    "GroupId",
    "SEPARATOR",
    "normalize_group_id",
    "role_id",
    "role_id_prefix",
    "role_name_from_id",
]
