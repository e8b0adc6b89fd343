"""Group-scoped role builder and its saved record.

A :class:`Role` is built with fluent setters and validated only when saved.
Saving derives the canonical id, enforces the scoping invariants and inserts
an immutable :class:`RoleRecord` into a :class:`~groupaccess.interfaces.RoleStore`.

Example::

    store = InMemoryRoleStore()
    record = (
        Role.create(store=store)
        .set_name("content_editor")
        .set_label("Content editor")
        .set_group_type("node")
        .set_group_bundle("group")
        .grant_permission("administer group")
        .save()
    )
    record.id  # "node-group-content_editor"
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Iterable, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field

from ..exceptions import ConfigurationInvalidError, StorageConflictError
from .identifiers import GroupId, normalize_group_id, role_id, role_name_from_id

if TYPE_CHECKING:
    from ..interfaces import RoleStore

logger = logging.getLogger(__name__)

ROLE_FIELDS = frozenset(
    {"id", "name", "label", "group_type", "group_bundle", "group_id", "is_admin", "permissions"}
)


class RoleRecord(BaseModel):
    """Persisted representation of a role. Immutable."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    id: str
    name: str
    label: str = ""
    group_type: str
    group_bundle: str
    group_id: Optional[str] = None
    is_admin: bool = False
    permissions: frozenset[str] = Field(default_factory=frozenset)

    def has_permission(self, permission: str) -> bool:
        return permission in self.permissions


class Role:
    """Mutable role builder.

    Nothing is validated until :meth:`save`. Setters return ``self`` so calls
    can be chained.
    """

    __slots__ = (
        "_id",
        "_name",
        "_label",
        "_group_type",
        "_group_bundle",
        "_group_id",
        "_is_admin",
        "_permissions",
        "_store",
    )

    def __init__(
        self,
        values: Optional[Mapping[str, Any]] = None,
        *,
        store: Optional["RoleStore"] = None,
        **kwargs: Any,
    ) -> None:
        data = {**(values or {}), **kwargs}
        unknown = set(data) - ROLE_FIELDS
        if unknown:
            raise ConfigurationInvalidError(
                f"Unknown role attributes: {', '.join(sorted(unknown))}",
                attributes=sorted(unknown),
            )

        self._id: str = data.get("id") or ""
        self._name: str = data.get("name") or ""
        self._label: str = data.get("label") or ""
        self._group_type: str = data.get("group_type") or ""
        self._group_bundle: str = data.get("group_bundle") or ""
        self._group_id: Optional[str] = normalize_group_id(data.get("group_id"))
        self._is_admin: bool = bool(data.get("is_admin", False))
        self._permissions: set[str] = set(data.get("permissions") or ())
        self._store = store

    @classmethod
    def create(
        cls,
        values: Optional[Mapping[str, Any]] = None,
        *,
        store: Optional["RoleStore"] = None,
        **kwargs: Any,
    ) -> "Role":
        """Create an unsaved role. No validation is performed."""
        return cls(values, store=store, **kwargs)

    @classmethod
    def load(cls, role_id: str, store: "RoleStore") -> Optional[RoleRecord]:
        """Return the saved role with ``role_id`` or None."""
        return store.load(role_id)

    @classmethod
    def from_record(cls, record: RoleRecord, *, store: Optional["RoleStore"] = None) -> "Role":
        """Rebuild a builder from a saved record, keeping its id."""
        return cls(record.model_dump(), store=store)

    # ── Accessors ───────────────────────────────────────

    @property
    def id(self) -> str:
        return self._id

    @property
    def name(self) -> str:
        return self._name

    @property
    def label(self) -> str:
        return self._label

    @property
    def group_type(self) -> str:
        return self._group_type

    @property
    def group_bundle(self) -> str:
        return self._group_bundle

    @property
    def group_id(self) -> Optional[str]:
        return self._group_id

    @property
    def is_admin(self) -> bool:
        return self._is_admin

    @property
    def permissions(self) -> frozenset[str]:
        return frozenset(self._permissions)

    def get_name(self) -> str:
        return self._name

    def get_permissions(self) -> list[str]:
        """Granted permission names, sorted."""
        return sorted(self._permissions)

    def has_permission(self, permission: str) -> bool:
        return permission in self._permissions

    # ── Fluent mutators ─────────────────────────────────

    def set_id(self, value: str) -> "Role":
        self._id = value
        return self

    def set_name(self, value: str) -> "Role":
        self._name = value
        return self

    def set_label(self, value: str) -> "Role":
        self._label = value
        return self

    def set_group_type(self, value: str) -> "Role":
        self._group_type = value
        return self

    def set_group_bundle(self, value: str) -> "Role":
        self._group_bundle = value
        return self

    def set_group_id(self, value: Optional[GroupId]) -> "Role":
        self._group_id = normalize_group_id(value)
        return self

    def set_is_admin(self, value: bool) -> "Role":
        self._is_admin = bool(value)
        return self

    def grant_permission(self, permission: str) -> "Role":
        self._permissions.add(permission)
        return self

    def grant_permissions(self, permissions: Iterable[str]) -> "Role":
        self._permissions.update(permissions)
        return self

    def revoke_permission(self, permission: str) -> "Role":
        self._permissions.discard(permission)
        return self

    # ── Persistence ─────────────────────────────────────

    def canonical_id(self) -> str:
        """Compute the id this role will be saved under.

        Raises:
            ConfigurationInvalidError: group type or bundle is missing, or
                no name is set and none can be derived from the id.
        """
        if not self._group_type or not self._group_bundle:
            raise ConfigurationInvalidError(
                "The group type and the group bundle of a role are required",
                role_id=self._id,
                name=self._name,
            )
        name = self._resolve_name()
        return role_id(self._group_type, self._group_bundle, name, self._group_id)

    def _resolve_name(self) -> str:
        name = self._name
        if not name and self._id:
            name = role_name_from_id(self._id, self._group_type, self._group_bundle, self._group_id)
        if not name:
            raise ConfigurationInvalidError("A role requires a name", role_id=self._id)
        return name

    def save(self, store: Optional["RoleStore"] = None) -> RoleRecord:
        """Validate, derive the id and insert the role into the store.

        Returns:
            The saved RoleRecord. On success the builder's id and name are
            updated to the saved values.

        Raises:
            ConfigurationInvalidError: missing group scope or name, explicit
                id not matching the canonical id, or no store available.
            StorageConflictError: a role with the same id already exists.
        """
        try:
            canonical = self.canonical_id()
            if self._id and self._id != canonical:
                raise ConfigurationInvalidError(
                    f"The role id '{self._id}' does not match the expected id '{canonical}'",
                    role_id=self._id,
                    expected_id=canonical,
                )
        except ConfigurationInvalidError as e:
            logger.warning("Role not saved: %s", e.message, extra={"role_id": self._id})
            raise

        # An empty store is falsy, compare against None
        target = store if store is not None else self._store
        if target is None:
            raise ConfigurationInvalidError("No role store to save to", role_id=canonical)

        record = RoleRecord(
            id=canonical,
            name=self._resolve_name(),
            label=self._label,
            group_type=self._group_type,
            group_bundle=self._group_bundle,
            group_id=self._group_id,
            is_admin=self._is_admin,
            permissions=frozenset(self._permissions),
        )

        try:
            target.insert(record)
        except StorageConflictError:
            logger.warning("Role %s already exists", canonical, extra={"role_id": canonical})
            raise

        self._id = record.id
        self._name = record.name
        self._store = target
        logger.info("Saved role %s", record.id, extra={"role_id": record.id})
        return record

    def __repr__(self) -> str:
        return (
            f"Role(id={self._id!r}, name={self._name!r}, group_type={self._group_type!r}, "
            f"group_bundle={self._group_bundle!r}, group_id={self._group_id!r})"
        )


__all__ = [
    "Role",
    "RoleRecord",
]
