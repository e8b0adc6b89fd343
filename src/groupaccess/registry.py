"""In-memory group registry.

Implements both GroupContentIndex and BundleInfoProvider from plain dicts.
Suitable for tests and for hosts that declare their group setup in code.
"""

from __future__ import annotations

import logging
from typing import Optional

from .exceptions import NotFoundError
from .interfaces import BundleInfoProvider, GroupContentIndex

logger = logging.getLogger(__name__)


class InMemoryGroupRegistry(GroupContentIndex, BundleInfoProvider):
    """Entity types, bundles and their group / group content roles.

    Example::

        registry = InMemoryGroupRegistry()
        registry.add_entity_type("node", plural_label="content items")
        registry.add_bundle("node", "club", label="Club")
        registry.add_bundle("node", "article", label="Article")
        registry.add_group("node", "club")
        registry.add_group_content("node", "article", groups=[("node", "club")])
    """

    def __init__(self) -> None:
        self._plural_labels: dict[str, str] = {}
        self._bundle_labels: dict[str, dict[str, str]] = {}
        self._groups: set[tuple[str, str]] = set()
        # (content type, content bundle) -> ordered group bundles it belongs to
        self._group_content: dict[tuple[str, str], list[tuple[str, str]]] = {}

    def add_entity_type(self, entity_type_id: str, plural_label: Optional[str] = None) -> None:
        self._plural_labels[entity_type_id] = plural_label or entity_type_id
        self._bundle_labels.setdefault(entity_type_id, {})

    def add_bundle(self, entity_type_id: str, bundle_id: str, label: Optional[str] = None) -> None:
        if entity_type_id not in self._plural_labels:
            raise NotFoundError(f"Unknown entity type '{entity_type_id}'", entity_type=entity_type_id)
        self._bundle_labels[entity_type_id][bundle_id] = label or bundle_id

    def add_group(self, entity_type_id: str, bundle_id: str) -> None:
        """Mark a bundle as a group."""
        self._require_bundle(entity_type_id, bundle_id)
        self._groups.add((entity_type_id, bundle_id))

    def is_group(self, entity_type_id: str, bundle_id: str) -> bool:
        return (entity_type_id, bundle_id) in self._groups

    def add_group_content(
        self,
        entity_type_id: str,
        bundle_id: str,
        groups: list[tuple[str, str]],
    ) -> None:
        """Mark a bundle as group content of the given group bundles."""
        self._require_bundle(entity_type_id, bundle_id)
        targets = self._group_content.setdefault((entity_type_id, bundle_id), [])
        for group in groups:
            if group not in self._groups:
                raise NotFoundError(f"'{group[0]}/{group[1]}' is not a group", group=group)
            if group not in targets:
                targets.append(group)

    # ── GroupContentIndex ───────────────────────────────

    def get_group_content_bundle_ids_by_group_bundle(
        self, group_entity_type_id: str, group_bundle_id: str
    ) -> dict[str, list[str]]:
        result: dict[str, list[str]] = {}
        group = (group_entity_type_id, group_bundle_id)
        for (entity_type_id, bundle_id), groups in self._group_content.items():
            if group in groups:
                result.setdefault(entity_type_id, []).append(bundle_id)
        return result

    def is_group_content(self, entity_type_id: str, bundle_id: str) -> bool:
        return bool(self._group_content.get((entity_type_id, bundle_id)))

    # ── BundleInfoProvider ──────────────────────────────

    def get_bundle_label(self, entity_type_id: str, bundle_id: str) -> str:
        self._require_bundle(entity_type_id, bundle_id)
        return self._bundle_labels[entity_type_id][bundle_id]

    def get_plural_label(self, entity_type_id: str) -> str:
        try:
            return self._plural_labels[entity_type_id]
        except KeyError:
            raise NotFoundError(f"Unknown entity type '{entity_type_id}'", entity_type=entity_type_id) from None

    def _require_bundle(self, entity_type_id: str, bundle_id: str) -> None:
        if entity_type_id not in self._plural_labels:
            raise NotFoundError(f"Unknown entity type '{entity_type_id}'", entity_type=entity_type_id)
        if bundle_id not in self._bundle_labels[entity_type_id]:
            raise NotFoundError(
                f"Unknown bundle '{bundle_id}' of entity type '{entity_type_id}'",
                entity_type=entity_type_id,
                bundle=bundle_id,
            )


__all__ = ["InMemoryGroupRegistry"]
