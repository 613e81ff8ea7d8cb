# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Main API router for v1 endpoints."""

from fastapi import APIRouter

from rolegate.api.v1 import auth, permissions, roles, users

api_router = APIRouter()

# Session routes
api_router.include_router(auth.router, prefix="/auth", tags=["auth"])

# Role management routes
api_router.include_router(roles.router, prefix="/roles", tags=["roles"])

# Permission catalogue routes
api_router.include_router(
    permissions.router, prefix="/permissions", tags=["permissions"]
)

# User role assignment routes
api_router.include_router(users.router, prefix="/users", tags=["users"])
