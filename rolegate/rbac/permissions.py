# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Permission catalogue."""

from collections.abc import Iterable
from enum import Enum


class Permission(str, Enum):
    """Capability keys that can be granted to roles."""

    # Dashboards
    DASHBOARD_VIEW = "dashboard.view"
    ADMIN_DASHBOARD_VIEW = "admin_dashboard.view"
    PLATFORM_STATS_VIEW = "platform_stats.view"
    PROFILE_PAGE_VIEW = "profile_page.view"

    # Role management
    ROLES_VIEW = "roles.view"
    ROLES_CREATE = "roles.create"
    ROLES_EDIT = "roles.edit"
    ROLES_DELETE = "roles.delete"

    # User management
    USERS_VIEW = "users.view"
    USERS_EDIT = "users.edit"
    USERS_DELETE = "users.delete"
    USERS_MANAGE_ROLES = "users.manage_roles"
    VIEW_USER_PROFILE = "users.view_profile"

    # Bundles
    BUNDLES_VIEW = "bundles.view"
    BUNDLES_CREATE = "bundles.create"
    BUNDLES_EDIT = "bundles.edit"
    BUNDLES_DELETE = "bundles.delete"

    # Missions
    MISSIONS_VIEW = "missions.view"
    MISSIONS_CREATE = "missions.create"
    MISSIONS_EDIT = "missions.edit"
    MISSIONS_DELETE = "missions.delete"
    MISSIONS_APPROVE = "missions.approve"

    # Extra work
    EXTRA_WORK_VIEW = "extra_work.view"
    EXTRA_WORK_CREATE = "extra_work.create"
    EXTRA_WORK_EDIT = "extra_work.edit"
    EXTRA_WORK_APPROVE = "extra_work.approve"

    # Payslips
    PAYSLIPS_VIEW_OWN = "payslips.view_own"
    PAYSLIPS_MANAGE = "payslips.manage"

    # Misc
    PROFICIENCIES_MANAGE = "proficiencies.manage"
    REMARKS_MANAGE = "remarks.manage"
    SIDEBAR_MANAGE = "sidebar.manage"
    TUTOR_MATCHMAKING_ACCESS = "matchmaking.access"


PERMISSION_DESCRIPTIONS: dict[Permission, str] = {
    Permission.DASHBOARD_VIEW: "View the personal dashboard",
    Permission.ADMIN_DASHBOARD_VIEW: "View the administration dashboard",
    Permission.PLATFORM_STATS_VIEW: "View platform statistics",
    Permission.PROFILE_PAGE_VIEW: "View the own profile page",
    Permission.ROLES_VIEW: "View the role tree",
    Permission.ROLES_CREATE: "Create roles",
    Permission.ROLES_EDIT: "Edit roles and move them in the tree",
    Permission.ROLES_DELETE: "Delete roles",
    Permission.USERS_VIEW: "List users",
    Permission.USERS_EDIT: "Edit user accounts",
    Permission.USERS_DELETE: "Delete user accounts",
    Permission.USERS_MANAGE_ROLES: "Assign and remove roles within the own subtree",
    Permission.VIEW_USER_PROFILE: "View other users' profiles",
    Permission.BUNDLES_VIEW: "View bundles",
    Permission.BUNDLES_CREATE: "Create bundles",
    Permission.BUNDLES_EDIT: "Edit bundles",
    Permission.BUNDLES_DELETE: "Delete bundles",
    Permission.MISSIONS_VIEW: "View missions",
    Permission.MISSIONS_CREATE: "Create missions",
    Permission.MISSIONS_EDIT: "Edit missions",
    Permission.MISSIONS_DELETE: "Delete missions",
    Permission.MISSIONS_APPROVE: "Approve missions",
    Permission.EXTRA_WORK_VIEW: "View extra work",
    Permission.EXTRA_WORK_CREATE: "Declare extra work",
    Permission.EXTRA_WORK_EDIT: "Edit extra work",
    Permission.EXTRA_WORK_APPROVE: "Approve extra work",
    Permission.PAYSLIPS_VIEW_OWN: "View own payslips",
    Permission.PAYSLIPS_MANAGE: "Manage all payslips",
    Permission.PROFICIENCIES_MANAGE: "Manage proficiencies",
    Permission.REMARKS_MANAGE: "Manage remarks",
    Permission.SIDEBAR_MANAGE: "Manage sidebar entries",
    Permission.TUTOR_MATCHMAKING_ACCESS: "Access tutor matchmaking",
}


def module_of(permission: Permission) -> str:
    """Return the module prefix of a permission code (``roles`` for ``roles.view``)."""
    return permission.value.split(".", 1)[0]


def is_permission_valid(permission_str: str) -> bool:
    """Check if a string is a known permission code."""
    try:
        Permission(permission_str)
        return True
    except ValueError:
        return False


def parse_permissions(
    permission_strings: Iterable[str],
) -> tuple[set[Permission], list[str]]:
    """Parse permission strings into Permission members.

    Args:
        permission_strings: Permission codes, duplicates allowed

    Returns:
        Tuple of (valid permissions set, list of invalid permission strings)
    """
    valid: set[Permission] = set()
    invalid: list[str] = []

    for perm_str in permission_strings:
        try:
            valid.add(Permission(perm_str))
        except ValueError:
            invalid.append(perm_str)

    return valid, invalid
