"""In-memory role store."""

from __future__ import annotations

import logging
import threading
from typing import Any, Mapping, Optional

from ..exceptions import StorageConflictError
from ..interfaces import RoleStore
from .role import Role, RoleRecord

logger = logging.getLogger(__name__)


class InMemoryRoleStore(RoleStore):
    """Thread-safe dict-backed RoleStore.

    Inserts are insert-or-fail: the existence check and the write happen
    under one lock, so of two concurrent saves of the same id exactly one
    succeeds.
    """

    def __init__(self) -> None:
        self._records: dict[str, RoleRecord] = {}
        self._lock = threading.Lock()

    def create(self, values: Optional[Mapping[str, Any]] = None, **kwargs: Any) -> Role:
        """Create an unsaved role bound to this store."""
        return Role.create(values, store=self, **kwargs)

    def load(self, role_id: str) -> Optional[RoleRecord]:
        return self._records.get(role_id)

    def insert(self, record: RoleRecord) -> None:
        with self._lock:
            if record.id in self._records:
                raise StorageConflictError(
                    f"Role '{record.id}' already exists",
                    role_id=record.id,
                )
            self._records[record.id] = record
        logger.debug("Inserted role %s", record.id)

    def delete(self, role_id: str) -> bool:
        with self._lock:
            return self._records.pop(role_id, None) is not None

    def load_multiple(self) -> dict[str, RoleRecord]:
        return dict(self._records)

    def __len__(self) -> int:
        return len(self._records)

    def __contains__(self, role_id: object) -> bool:
        return role_id in self._records


__all__ = ["InMemoryRoleStore"]
