"""Permission catalog entries.

Two value types:
- ``GroupPermission`` — a generic permission (e.g. ``administer group``).
- ``GroupContentOperationPermission`` — a permission for an entity operation
  on a group content bundle (e.g. ``update own article node``).

Entries compare equal when all attributes are equal. ``set_*`` mutators
return the entry so calls can be chained.
"""

from __future__ import annotations

from typing import Iterable, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..exceptions import ConfigurationInvalidError
from .constants import Operation, Ownership, operation_permission_name


class GroupPermission(BaseModel):
    """A permission that can be granted to a group role."""

    model_config = ConfigDict(validate_assignment=True, extra="forbid")

    name: str = ""
    title: str = ""
    description: Optional[str] = None
    default_roles: list[str] = Field(default_factory=list)
    restrict_access: bool = False

    @field_validator("default_roles")
    @classmethod
    def dedupe_default_roles(cls, v: list[str]) -> list[str]:
        return list(dict.fromkeys(v))

    def get_name(self) -> str:
        return self.name

    def check(self) -> None:
        """Raise ConfigurationInvalidError unless the entry can be registered."""
        if not self.get_name():
            raise ConfigurationInvalidError("A permission requires a name")
        if not self.title:
            raise ConfigurationInvalidError(
                f"Permission '{self.get_name()}' requires a title",
                permission=self.get_name(),
            )

    def set_name(self, name: str) -> "GroupPermission":
        self.name = name
        return self

    def set_title(self, title: str) -> "GroupPermission":
        self.title = title
        return self

    def set_description(self, description: Optional[str]) -> "GroupPermission":
        self.description = description
        return self

    def set_default_roles(self, roles: Iterable[str]) -> "GroupPermission":
        self.default_roles = list(roles)
        return self

    def set_restrict_access(self, restrict: bool) -> "GroupPermission":
        self.restrict_access = restrict
        return self


class GroupContentOperationPermission(GroupPermission):
    """A permission to perform an operation on group content of one bundle.

    When no explicit name is set, the name is derived from the operation:
    ``{operation}[ {ownership}] {bundle} {entity_type}``.
    """

    entity_type: str = ""
    bundle: str = ""
    operation: Optional[Operation] = None
    ownership: Optional[Ownership] = None

    def canonical_name(self) -> str:
        if self.operation is None or not self.bundle or not self.entity_type:
            raise ConfigurationInvalidError(
                "An operation permission requires an entity type, a bundle and an operation",
                permission=self.name,
            )
        return operation_permission_name(self.operation, self.bundle, self.entity_type, self.ownership)

    def get_name(self) -> str:
        return self.name or self.canonical_name()

    def check(self) -> None:
        self.canonical_name()
        if self.operation is Operation.CREATE and self.ownership is not None:
            raise ConfigurationInvalidError(
                "Create permissions have no ownership",
                permission=self.get_name(),
            )
        super().check()

    def set_entity_type(self, entity_type: str) -> "GroupContentOperationPermission":
        self.entity_type = entity_type
        return self

    def set_bundle(self, bundle: str) -> "GroupContentOperationPermission":
        self.bundle = bundle
        return self

    def set_operation(self, operation: Operation | str) -> "GroupContentOperationPermission":
        self.operation = Operation(operation)
        return self

    def set_ownership(self, ownership: Optional[Ownership | str]) -> "GroupContentOperationPermission":
        self.ownership = None if ownership is None else Ownership(ownership)
        return self


__all__ = [
    "GroupContentOperationPermission",
    "GroupPermission",
]
