"""Services package."""
from rolegate.services import (
    auth_service,
    authorization_service,
    delegation_service,
    permission_service,
    rbac_seed_service,
    role_service,
    role_store,
    user_service,
)

__all__ = [
    "auth_service",
    "authorization_service",
    "delegation_service",
    "permission_service",
    "rbac_seed_service",
    "role_service",
    "role_store",
    "user_service",
]
