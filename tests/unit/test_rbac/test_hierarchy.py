# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Tests for role hierarchy graph operations."""

import uuid
from dataclasses import dataclass, field

import pytest

from rolegate.rbac import hierarchy


@dataclass
class FakeRole:
    """Plain record standing in for a stored role."""

    name: str
    parent_id: uuid.UUID | None = None
    id: uuid.UUID = field(default_factory=uuid.uuid4)
    color: str = "#000000"
    permissions: list[str] = field(default_factory=list)


@pytest.fixture
def tree():
    """Root -> Manager -> Tutor, Root -> Secretary, and a separate Client root."""
    root = FakeRole("Root")
    manager = FakeRole("Manager", parent_id=root.id)
    tutor = FakeRole("Tutor", parent_id=manager.id, permissions=["missions.view"])
    secretary = FakeRole("Secretary", parent_id=root.id)
    client = FakeRole("Client")
    return {
        "root": root,
        "manager": manager,
        "tutor": tutor,
        "secretary": secretary,
        "client": client,
    }


class TestDescendantIds:
    """Tests for descendant_ids."""

    def test_includes_starting_role(self, tree):
        roles = list(tree.values())
        result = hierarchy.descendant_ids(roles, {tree["tutor"].id})
        assert result == {tree["tutor"].id}

    def test_walks_whole_subtree(self, tree):
        roles = list(tree.values())
        result = hierarchy.descendant_ids(roles, {tree["root"].id})
        assert result == {
            tree["root"].id,
            tree["manager"].id,
            tree["tutor"].id,
            tree["secretary"].id,
        }

    def test_does_not_walk_upwards(self, tree):
        roles = list(tree.values())
        result = hierarchy.descendant_ids(roles, {tree["manager"].id})
        assert tree["root"].id not in result
        assert tree["secretary"].id not in result

    def test_multiple_starting_roles(self, tree):
        roles = list(tree.values())
        result = hierarchy.descendant_ids(
            roles, {tree["manager"].id, tree["client"].id}
        )
        assert result == {tree["manager"].id, tree["tutor"].id, tree["client"].id}

    def test_empty_start(self, tree):
        assert hierarchy.descendant_ids(list(tree.values()), set()) == set()

    def test_unknown_start_is_kept(self, tree):
        unknown = uuid.uuid4()
        result = hierarchy.descendant_ids(list(tree.values()), {unknown})
        assert result == {unknown}

    def test_terminates_on_cyclic_data(self):
        a = FakeRole("A")
        b = FakeRole("B", parent_id=a.id)
        a.parent_id = b.id
        assert hierarchy.descendant_ids([a, b], {a.id}) == {a.id, b.id}


class TestAncestorIds:
    """Tests for ancestor_ids."""

    def test_nearest_first(self, tree):
        roles = list(tree.values())
        assert hierarchy.ancestor_ids(roles, tree["tutor"].id) == [
            tree["manager"].id,
            tree["root"].id,
        ]

    def test_root_has_no_ancestors(self, tree):
        assert hierarchy.ancestor_ids(list(tree.values()), tree["root"].id) == []


class TestWouldCreateCycle:
    """Tests for would_create_cycle."""

    def test_self_parent(self, tree):
        roles = list(tree.values())
        assert hierarchy.would_create_cycle(roles, tree["tutor"].id, tree["tutor"].id)

    def test_moving_under_descendant(self, tree):
        roles = list(tree.values())
        assert hierarchy.would_create_cycle(roles, tree["root"].id, tree["tutor"].id)
        assert hierarchy.would_create_cycle(roles, tree["manager"].id, tree["tutor"].id)

    def test_moving_under_sibling_is_fine(self, tree):
        roles = list(tree.values())
        assert not hierarchy.would_create_cycle(
            roles, tree["manager"].id, tree["secretary"].id
        )

    def test_moving_under_other_tree_is_fine(self, tree):
        roles = list(tree.values())
        assert not hierarchy.would_create_cycle(
            roles, tree["manager"].id, tree["client"].id
        )

    def test_moving_to_root_level(self, tree):
        roles = list(tree.values())
        assert not hierarchy.would_create_cycle(roles, tree["tutor"].id, None)

    def test_two_role_swap(self):
        r2 = FakeRole("R2")
        r1 = FakeRole("R1", parent_id=r2.id)
        assert hierarchy.would_create_cycle([r1, r2], r2.id, r1.id)


class TestIsForest:
    """Tests for is_forest."""

    def test_tree_is_forest(self, tree):
        assert hierarchy.is_forest(list(tree.values()))

    def test_cycle_is_not_forest(self):
        a = FakeRole("A")
        b = FakeRole("B", parent_id=a.id)
        c = FakeRole("C", parent_id=b.id)
        a.parent_id = c.id
        assert not hierarchy.is_forest([a, b, c])


class TestBuildTree:
    """Tests for build_tree."""

    def test_roots_and_children(self, tree):
        forest = hierarchy.build_tree(list(tree.values()))

        assert [node.name for node in forest] == ["Client", "Root"]
        root = forest[1]
        assert [child.name for child in root.children] == ["Manager", "Secretary"]
        manager = root.children[0]
        assert [child.name for child in manager.children] == ["Tutor"]
        assert manager.children[0].permissions == ["missions.view"]
        assert manager.children[0].children == []

    def test_dangling_parent_becomes_root(self):
        orphan = FakeRole("Orphan", parent_id=uuid.uuid4())
        forest = hierarchy.build_tree([orphan])
        assert [node.name for node in forest] == ["Orphan"]

    def test_empty(self):
        assert hierarchy.build_tree([]) == []
