# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
from .permissions import Permission

# The root role carries every permission
DIRECTION_PERMISSIONS = [p.value for p in Permission]

# Default role tree seeded on first run. Parents are referenced by name and
# must appear earlier in the list. All seeded roles can be edited via the API.
DEFAULT_ROLES = [
    {
        "name": "Direction",
        "parent": None,
        "color": "#b91c1c",
        "permissions": DIRECTION_PERMISSIONS,
    },
    {
        "name": "Manager",
        "parent": "Direction",
        "color": "#1d4ed8",
        "permissions": [
            Permission.DASHBOARD_VIEW.value,
            Permission.PROFILE_PAGE_VIEW.value,
            Permission.ROLES_VIEW.value,
            Permission.USERS_VIEW.value,
            Permission.USERS_MANAGE_ROLES.value,
            Permission.VIEW_USER_PROFILE.value,
            Permission.BUNDLES_VIEW.value,
            Permission.BUNDLES_CREATE.value,
            Permission.BUNDLES_EDIT.value,
            Permission.MISSIONS_VIEW.value,
            Permission.MISSIONS_APPROVE.value,
            Permission.EXTRA_WORK_VIEW.value,
            Permission.EXTRA_WORK_APPROVE.value,
        ],
    },
    {
        "name": "Tutor",
        "parent": "Manager",
        "color": "#15803d",
        "permissions": [
            Permission.DASHBOARD_VIEW.value,
            Permission.PROFILE_PAGE_VIEW.value,
            Permission.MISSIONS_VIEW.value,
            Permission.EXTRA_WORK_VIEW.value,
            Permission.EXTRA_WORK_CREATE.value,
            Permission.PAYSLIPS_VIEW_OWN.value,
        ],
    },
    {
        "name": "Client",
        "parent": "Direction",
        "color": "#a16207",
        "permissions": [
            Permission.DASHBOARD_VIEW.value,
            Permission.PROFILE_PAGE_VIEW.value,
            Permission.BUNDLES_VIEW.value,
        ],
    },
]
