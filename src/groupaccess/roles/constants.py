"""Well-known role names."""

from __future__ import annotations


class RoleNames:
    """Role names shared by every group type and bundle.

    The full role id is always scoped, e.g. ``node-club-administrator``;
    these constants are the trailing ``name`` segment.
    """

    ADMINISTRATOR = "administrator"  # Provisioned for every new group bundle


ADMINISTRATOR = RoleNames.ADMINISTRATOR


__all__ = [
    "ADMINISTRATOR",
    "RoleNames",
]
