"""Group-scoped roles.

Provides:
- ``role_id()`` — canonical ``group_type-group_bundle[-group_id]-name`` ids.
- ``Role`` — fluent builder validated on save.
- ``RoleRecord`` — the immutable saved shape.
- ``InMemoryRoleStore`` — insert-or-fail store.
- ``RoleNames`` — well-known role names (``administrator``).
"""

from .constants import ADMINISTRATOR, RoleNames
from .identifiers import normalize_group_id, role_id, role_id_prefix, role_name_from_id
from .role import Role, RoleRecord
from .storage import InMemoryRoleStore

__all__ = [
    "ADMINISTRATOR",
    "InMemoryRoleStore",
    "Role",
    "RoleNames",
    "RoleRecord",
    "normalize_group_id",
    "role_id",
    "role_id_prefix",
    "role_name_from_id",
]
