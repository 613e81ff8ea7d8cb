# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
import logging

from sqlalchemy.orm import Session

from rolegate.models import Role
from rolegate.rbac import hierarchy
from rolegate.rbac.roles import DEFAULT_ROLES

from . import role_store

logger = logging.getLogger(__name__)


def seed_rbac_data(db: Session) -> None:
    """Seeds the database with the default role tree.

    This function is idempotent: existing roles are left untouched, missing
    ones are created under their configured parent.
    @param db: SQLAlchemy Session object
    """
    created = 0
    for role_data in DEFAULT_ROLES:
        if role_store.find_role_by_name(db, role_data["name"]):
            continue

        parent_id = None
        if role_data["parent"]:
            parent = role_store.find_role_by_name(db, role_data["parent"])
            parent_id = parent.id if parent else None

        role = Role(
            name=role_data["name"],
            color=role_data["color"],
            parent_id=parent_id,
        )
        role_store.set_role_permissions(db, role, role_data["permissions"])
        role_store.save_role(db, role)
        created += 1

    if not hierarchy.is_forest(role_store.find_all_roles(db)):
        db.rollback()
        raise RuntimeError("Role hierarchy contains a cycle; refusing to seed")

    db.commit()
    if created:
        logger.info(f"Seeded {created} default roles")
