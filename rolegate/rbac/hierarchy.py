# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Graph operations over a snapshot of the role hierarchy.

Every function here is pure: it receives the roles it should reason about
(ORM rows or any object exposing ``id`` and ``parent_id``) and never touches
the database. Callers load the snapshot, ask the question, and decide what
to write.
"""

from __future__ import annotations

import uuid
from collections import defaultdict, deque
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any, Protocol


class RoleLike(Protocol):
    """Minimal shape of a role needed for hierarchy computations."""

    id: uuid.UUID
    parent_id: uuid.UUID | None


@dataclass
class RoleNode:
    """A role with its children populated, used for presenting the tree."""

    id: uuid.UUID
    name: str
    color: str
    parent_id: uuid.UUID | None
    permissions: list[str] = field(default_factory=list)
    children: list[RoleNode] = field(default_factory=list)


def parent_map(roles: Iterable[RoleLike]) -> dict[uuid.UUID, uuid.UUID | None]:
    """Map each role id to its parent id."""
    return {role.id: role.parent_id for role in roles}


def children_map(roles: Iterable[RoleLike]) -> dict[uuid.UUID, list[uuid.UUID]]:
    """Map each role id to the ids of its direct children."""
    children: dict[uuid.UUID, list[uuid.UUID]] = defaultdict(list)
    for role in roles:
        if role.parent_id is not None:
            children[role.parent_id].append(role.id)
    return children


def descendant_ids(
    roles: Iterable[RoleLike], root_ids: Iterable[uuid.UUID]
) -> set[uuid.UUID]:
    """Return every role reachable from ``root_ids`` through child edges.

    The starting roles are part of the result.
    """
    children = children_map(roles)
    result: set[uuid.UUID] = set(root_ids)
    queue = deque(result)

    while queue:
        current = queue.popleft()
        for child_id in children.get(current, ()):
            # Seen ids are skipped so corrupt cyclic data still terminates
            if child_id not in result:
                result.add(child_id)
                queue.append(child_id)

    return result


def ancestor_ids(roles: Iterable[RoleLike], role_id: uuid.UUID) -> list[uuid.UUID]:
    """Return the parent chain of a role, nearest parent first."""
    parents = parent_map(roles)
    chain: list[uuid.UUID] = []
    seen = {role_id}

    current = parents.get(role_id)
    while current is not None and current not in seen:
        chain.append(current)
        seen.add(current)
        current = parents.get(current)

    return chain


def would_create_cycle(
    roles: Iterable[RoleLike],
    role_id: uuid.UUID,
    proposed_parent: uuid.UUID | None,
) -> bool:
    """Check whether making ``proposed_parent`` the parent of ``role_id`` closes a loop.

    True when the proposed parent is the role itself or when the role already
    sits on the proposed parent's ancestor chain.
    """
    if proposed_parent is None:
        return False
    if proposed_parent == role_id:
        return True

    parents = parent_map(roles)
    seen: set[uuid.UUID] = set()
    current: uuid.UUID | None = proposed_parent
    while current is not None:
        if current == role_id:
            return True
        if current in seen:
            # Existing data is already cyclic; refuse to extend it
            return True
        seen.add(current)
        current = parents.get(current)

    return False


def is_forest(roles: Iterable[RoleLike]) -> bool:
    """Return True when no role is its own ancestor."""
    parents = parent_map(roles)
    for start in parents:
        seen = {start}
        current = parents.get(start)
        while current is not None:
            if current in seen:
                return False
            seen.add(current)
            current = parents.get(current)
    return True


def _permission_codes(role: Any) -> list[str]:
    codes = getattr(role, "permission_codes", None)
    if codes is None:
        codes = getattr(role, "permissions", [])
    return sorted(str(getattr(code, "value", code)) for code in codes)


def build_tree(roles: Iterable[Any]) -> list[RoleNode]:
    """Assemble the flat role list into a forest of RoleNode objects.

    Roles without a parent, or whose parent is not part of ``roles``, become
    roots. Siblings are ordered by name.
    """
    nodes: dict[uuid.UUID, RoleNode] = {}
    for role in roles:
        nodes[role.id] = RoleNode(
            id=role.id,
            name=role.name,
            color=role.color,
            parent_id=role.parent_id,
            permissions=_permission_codes(role),
        )

    roots: list[RoleNode] = []
    for node in nodes.values():
        parent = nodes.get(node.parent_id) if node.parent_id is not None else None
        if parent is None or parent is node:
            roots.append(node)
        else:
            parent.children.append(node)

    for node in nodes.values():
        node.children.sort(key=lambda child: child.name)
    roots.sort(key=lambda node: node.name)
    return roots
