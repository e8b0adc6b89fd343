"""Shared fixtures for groupaccess tests."""

from __future__ import annotations

import pytest

from groupaccess import (
    InMemoryGroupRegistry,
    InMemoryRoleStore,
    PermissionManager,
    PermissionResolver,
)


@pytest.fixture
def registry() -> InMemoryGroupRegistry:
    """node/club and entity_test/group are groups; articles and pages are club content."""
    registry = InMemoryGroupRegistry()
    registry.add_entity_type("node", plural_label="content items")
    registry.add_bundle("node", "club", label="Club")
    registry.add_bundle("node", "article", label="Article")
    registry.add_bundle("node", "page", label="Basic page")
    registry.add_bundle("node", "blog", label="Blog post")
    registry.add_entity_type("entity_test", plural_label="test entities")
    registry.add_bundle("entity_test", "group", label="Group")
    registry.add_bundle("entity_test", "item", label="Item")

    registry.add_group("node", "club")
    registry.add_group("entity_test", "group")
    registry.add_group_content("node", "article", groups=[("node", "club")])
    registry.add_group_content("node", "page", groups=[("node", "club"), ("entity_test", "group")])
    registry.add_group_content("entity_test", "item", groups=[("node", "club")])
    return registry


@pytest.fixture
def store() -> InMemoryRoleStore:
    return InMemoryRoleStore()


@pytest.fixture
def manager(registry: InMemoryGroupRegistry) -> PermissionManager:
    return PermissionManager(registry, registry)


@pytest.fixture
def resolver(registry: InMemoryGroupRegistry) -> PermissionResolver:
    return PermissionResolver.with_defaults(registry, registry)
