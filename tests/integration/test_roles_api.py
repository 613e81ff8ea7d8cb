# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Integration tests for role management endpoints."""

import uuid

FORBIDDEN = "Forbidden: You do not have the necessary permissions."


class TestAuthentication:
    """Tests for the authentication and permission gate."""

    def test_requires_authentication(self, client):
        response = client.get("/api/v1/roles")
        assert response.status_code == 401

    def test_invalid_session(self, client):
        client.cookies.set("session", "not-a-token")
        response = client.get("/api/v1/roles")
        assert response.status_code == 401

    def test_user_without_permission(self, client, login_as, plain_user):
        login_as(plain_user)
        response = client.get("/api/v1/roles")
        assert response.status_code == 403
        assert response.json()["detail"] == FORBIDDEN

    def test_user_with_permission(self, manager_client):
        response = manager_client.get("/api/v1/roles")
        assert response.status_code == 200

    def test_inactive_user(self, client, db_session, login_as, manager_user):
        login_as(manager_user)
        manager_user.is_active = False
        db_session.commit()

        response = client.get("/api/v1/roles")
        assert response.status_code == 401


class TestRoleTree:
    """Tests for GET /api/v1/roles."""

    def test_tree(self, admin_client, role_chain):
        response = admin_client.get("/api/v1/roles")
        assert response.status_code == 200
        data = response.json()

        assert [node["name"] for node in data] == ["Client", "Root"]
        root = data[1]
        assert root["parent_id"] is None
        manager = root["children"][0]
        assert manager["name"] == "Manager"
        assert manager["parent_id"] == str(role_chain["root"].id)
        assert manager["children"][0]["name"] == "Tutor"
        assert manager["children"][0]["children"] == []

    def test_flat_list(self, admin_client, role_chain):
        response = admin_client.get("/api/v1/roles/flat")
        assert response.status_code == 200
        assert [r["name"] for r in response.json()] == ["Client", "Manager", "Root", "Tutor"]

    def test_get_role(self, admin_client, role_chain):
        response = admin_client.get(f"/api/v1/roles/{role_chain['tutor'].id}")
        assert response.status_code == 200
        assert response.json()["permissions"] == ["extra_work.create", "missions.view"]

    def test_get_unknown_role(self, admin_client):
        response = admin_client.get(f"/api/v1/roles/{uuid.uuid4()}")
        assert response.status_code == 404


class TestCreateRole:
    """Tests for POST /api/v1/roles."""

    def test_create(self, admin_client, role_chain):
        response = admin_client.post(
            "/api/v1/roles",
            json={
                "name": "Secretary",
                "permissions": ["users.view"],
                "parent_id": str(role_chain["root"].id),
                "color": "#abcdef",
            },
        )
        assert response.status_code == 201
        data = response.json()
        assert data["name"] == "Secretary"
        assert data["parent_id"] == str(role_chain["root"].id)
        assert data["color"] == "#abcdef"

    def test_missing_fields(self, admin_client):
        response = admin_client.post("/api/v1/roles", json={"name": "Secretary"})
        assert response.status_code == 400
        assert "Missing required fields" in response.json()["detail"]

    def test_unknown_parent(self, admin_client):
        response = admin_client.post(
            "/api/v1/roles",
            json={"name": "Orphan", "permissions": [], "parent_id": str(uuid.uuid4())},
        )
        assert response.status_code == 404

    def test_duplicate_name(self, admin_client, role_chain):
        response = admin_client.post(
            "/api/v1/roles", json={"name": "Tutor", "permissions": []}
        )
        assert response.status_code == 409

    def test_invalid_color(self, admin_client):
        response = admin_client.post(
            "/api/v1/roles", json={"name": "Odd", "permissions": [], "color": "red"}
        )
        assert response.status_code == 422

    def test_manager_cannot_create(self, manager_client):
        response = manager_client.post(
            "/api/v1/roles", json={"name": "Secretary", "permissions": []}
        )
        assert response.status_code == 403


class TestUpdateRole:
    """Tests for PUT /api/v1/roles/{role_id}."""

    def test_update(self, admin_client, role_chain):
        response = admin_client.put(
            f"/api/v1/roles/{role_chain['tutor'].id}",
            json={
                "name": "Tutor",
                "permissions": ["missions.view", "payslips.view_own"],
                "parent_id": str(role_chain["manager"].id),
                "color": "#000000",
            },
        )
        assert response.status_code == 200
        assert response.json()["permissions"] == ["missions.view", "payslips.view_own"]

    def test_update_into_cycle(self, admin_client, role_chain):
        response = admin_client.put(
            f"/api/v1/roles/{role_chain['root'].id}",
            json={
                "name": "Root",
                "permissions": [],
                "parent_id": str(role_chain["tutor"].id),
            },
        )
        assert response.status_code == 400
        assert response.json()["detail"] == "Circular dependency detected"


class TestUpdateRoleParent:
    """Tests for PATCH /api/v1/roles/{role_id}/parent."""

    def test_move(self, admin_client, role_chain):
        response = admin_client.patch(
            f"/api/v1/roles/{role_chain['tutor'].id}/parent",
            json={"new_parent_id": str(role_chain["client"].id)},
        )
        assert response.status_code == 200
        assert response.json()["parent_id"] == str(role_chain["client"].id)

    def test_move_to_root_level(self, admin_client, role_chain):
        response = admin_client.patch(
            f"/api/v1/roles/{role_chain['tutor'].id}/parent",
            json={"new_parent_id": None},
        )
        assert response.status_code == 200
        assert response.json()["parent_id"] is None

    def test_cycle_is_rejected(self, admin_client, role_chain):
        manager_id = str(role_chain["manager"].id)
        root_id = role_chain["root"].id

        response = admin_client.patch(
            f"/api/v1/roles/{root_id}/parent", json={"new_parent_id": manager_id}
        )
        assert response.status_code == 400
        assert response.json()["detail"] == "Circular dependency detected"

        root = admin_client.get(f"/api/v1/roles/{root_id}").json()
        assert root["parent_id"] is None
        manager = admin_client.get(f"/api/v1/roles/{manager_id}").json()
        assert manager["parent_id"] == str(root_id)

    def test_missing_new_parent_field(self, admin_client, role_chain):
        response = admin_client.patch(
            f"/api/v1/roles/{role_chain['tutor'].id}/parent", json={}
        )
        assert response.status_code == 422

    def test_unknown_parent(self, admin_client, role_chain):
        response = admin_client.patch(
            f"/api/v1/roles/{role_chain['tutor'].id}/parent",
            json={"new_parent_id": str(uuid.uuid4())},
        )
        assert response.status_code == 404


class TestDeleteRole:
    """Tests for DELETE /api/v1/roles/{role_id}."""

    def test_delete(self, admin_client, role_chain):
        response = admin_client.delete(f"/api/v1/roles/{role_chain['client'].id}")
        assert response.status_code == 204

        response = admin_client.get(f"/api/v1/roles/{role_chain['client'].id}")
        assert response.status_code == 404

    def test_delete_with_children(self, admin_client, role_chain):
        response = admin_client.delete(f"/api/v1/roles/{role_chain['root'].id}")
        assert response.status_code == 409

    def test_delete_unknown(self, admin_client):
        response = admin_client.delete(f"/api/v1/roles/{uuid.uuid4()}")
        assert response.status_code == 404


class TestPermissionCatalogue:
    """Tests for GET /api/v1/permissions."""

    def test_list(self, manager_client):
        response = manager_client.get("/api/v1/permissions")
        assert response.status_code == 200
        codes = {p["code"]: p for p in response.json()}
        assert codes["roles.view"]["module"] == "roles"
        assert codes["roles.view"]["description"]


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "healthy"}
