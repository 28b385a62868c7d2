"""Unit tests for the project document API endpoints."""

import pytest
from httpx import AsyncClient

from app.models.project import Project


async def _create_document(
    client: AsyncClient,
    headers: dict,
    project_id: int,
    template_type: str = "PROJECT_PLAN",
    name: str = "Rollout Plan",
    **extra,
) -> dict:
    response = await client.post(
        f"/api/projects/{project_id}/documents",
        json={"template_type": template_type, "name": name, **extra},
        headers=headers,
    )
    assert response.status_code == 201, response.text
    return response.json()


@pytest.mark.asyncio
class TestCreateDocument:
    """Tests for creating documents."""

    async def test_create_document(
        self, client: AsyncClient, auth_headers: dict, private_project: Project
    ):
        """A document is created from its template."""
        data = await _create_document(client, auth_headers, private_project.id)

        assert data["version"] == 1
        assert data["status"] == "DRAFT"
        assert data["category"] == "CORE"
        assert data["project_id"] == private_project.id
        assert data["editor"]["name"] == "Olivia Owner"
        assert data["content"]["overview"]["status"] == "Not Started"

    async def test_create_requires_auth(self, client: AsyncClient, private_project: Project):
        """Anonymous requests are rejected."""
        response = await client.post(
            f"/api/projects/{private_project.id}/documents",
            json={"template_type": "PROJECT_PLAN", "name": "Plan"},
        )

        assert response.status_code == 401

    async def test_create_empty_name_is_bad_request(
        self, client: AsyncClient, auth_headers: dict, private_project: Project
    ):
        """Validation errors come back as 400 with field details."""
        response = await client.post(
            f"/api/projects/{private_project.id}/documents",
            json={"template_type": "PROJECT_PLAN", "name": ""},
            headers=auth_headers,
        )

        assert response.status_code == 400
        body = response.json()
        assert body["errors"]
        assert body["errors"][0]["loc"][-1] == "name"

    async def test_create_unknown_template_is_bad_request(
        self, client: AsyncClient, auth_headers: dict, private_project: Project
    ):
        """An unknown template type is rejected."""
        response = await client.post(
            f"/api/projects/{private_project.id}/documents",
            json={"template_type": "NOT_A_TYPE", "name": "Plan"},
            headers=auth_headers,
        )

        assert response.status_code == 400

    async def test_create_forbidden_for_outsider(
        self, client: AsyncClient, outsider_headers: dict, private_project: Project
    ):
        """Outsiders get 403 on private projects."""
        response = await client.post(
            f"/api/projects/{private_project.id}/documents",
            json={"template_type": "PROJECT_PLAN", "name": "Plan"},
            headers=outsider_headers,
        )

        assert response.status_code == 403
        assert response.json()["detail"] == "Access denied"

    async def test_create_in_unknown_project(self, client: AsyncClient, auth_headers: dict):
        """Unknown projects are 404."""
        response = await client.post(
            "/api/projects/999999/documents",
            json={"template_type": "PROJECT_PLAN", "name": "Plan"},
            headers=auth_headers,
        )

        assert response.status_code == 404
        assert response.json()["detail"] == "Project not found"

    async def test_create_without_tenant(
        self, client: AsyncClient, tenantless_headers: dict, private_project: Project
    ):
        """Users without a tenant cannot work with documents."""
        response = await client.post(
            f"/api/projects/{private_project.id}/documents",
            json={"template_type": "PROJECT_PLAN", "name": "Plan"},
            headers=tenantless_headers,
        )

        assert response.status_code == 400
        assert response.json()["detail"] == "Tenant context required"


@pytest.mark.asyncio
class TestListAndStats:
    """Tests for listing documents and statistics."""

    async def test_list_with_filters(
        self, client: AsyncClient, auth_headers: dict, private_project: Project
    ):
        """Query parameters filter the list."""
        await _create_document(client, auth_headers, private_project.id, "PROJECT_PLAN", "Plan")
        await _create_document(client, auth_headers, private_project.id, "KICKOFF_AGENDA", "Kickoff")
        await _create_document(client, auth_headers, private_project.id, "AI_FEASIBILITY", "AI")

        all_docs = await client.get(
            f"/api/projects/{private_project.id}/documents", headers=auth_headers
        )
        lifecycle = await client.get(
            f"/api/projects/{private_project.id}/documents",
            params={"category": "LIFECYCLE"},
            headers=auth_headers,
        )
        drafts = await client.get(
            f"/api/projects/{private_project.id}/documents",
            params={"status": "DRAFT", "search": "kick"},
            headers=auth_headers,
        )

        assert all_docs.status_code == 200
        assert [d["category"] for d in all_docs.json()] == ["CORE", "LIFECYCLE", "AI_SPECIFIC"]
        assert [d["name"] for d in lifecycle.json()] == ["Kickoff"]
        assert [d["name"] for d in drafts.json()] == ["Kickoff"]

    async def test_list_invalid_status_filter(
        self, client: AsyncClient, auth_headers: dict, private_project: Project
    ):
        """An unknown status value is a bad request."""
        response = await client.get(
            f"/api/projects/{private_project.id}/documents",
            params={"status": "PUBLISHED"},
            headers=auth_headers,
        )

        assert response.status_code == 400

    async def test_list_other_tenant_project(
        self, client: AsyncClient, auth_headers: dict, other_tenant_project: Project
    ):
        """Another tenant's project is not found."""
        response = await client.get(
            f"/api/projects/{other_tenant_project.id}/documents", headers=auth_headers
        )

        assert response.status_code == 404

    async def test_stats(self, client: AsyncClient, auth_headers: dict, private_project: Project):
        """Stats count by status and category."""
        plan = await _create_document(client, auth_headers, private_project.id, "PROJECT_PLAN", "Plan")
        await _create_document(client, auth_headers, private_project.id, "ISSUE_LOG", "Issues")
        await client.patch(
            f"/api/project-documents/{plan['id']}/status",
            json={"status": "ARCHIVED"},
            headers=auth_headers,
        )

        response = await client.get(
            f"/api/projects/{private_project.id}/documents/stats", headers=auth_headers
        )

        assert response.status_code == 200
        assert response.json() == {
            "total": 2,
            "by_status": {"DRAFT": 1, "ARCHIVED": 1},
            "by_category": {"CORE": 2},
        }


@pytest.mark.asyncio
class TestDocumentLifecycle:
    """Tests for single-document endpoints."""

    async def test_update_restore_and_history(
        self, client: AsyncClient, auth_headers: dict, member_headers: dict, private_project: Project
    ):
        """Edit, inspect history, restore and inspect again."""
        created = await _create_document(client, auth_headers, private_project.id)
        doc_id = created["id"]

        update = await client.put(
            f"/api/project-documents/{doc_id}",
            json={"content": {"overview": {"projectName": "Relaunch"}}, "expected_version": 1},
            headers=member_headers,
        )
        assert update.status_code == 200
        assert update.json()["version"] == 2
        assert update.json()["editor"]["name"] == "Max Member"

        detail = await client.get(f"/api/project-documents/{doc_id}", headers=auth_headers)
        assert detail.status_code == 200
        detail_data = detail.json()
        assert detail_data["project"]["name"] == "Portal Relaunch"
        assert [v["version"] for v in detail_data["versions"]] == [1]
        assert detail_data["versions"][0]["editor"]["name"] == "Olivia Owner"

        restore = await client.post(
            f"/api/project-documents/{doc_id}/versions/restore",
            json={"version": 1},
            headers=auth_headers,
        )
        assert restore.status_code == 200
        assert restore.json()["version"] == 3
        assert restore.json()["content"] == created["content"]

        history = await client.get(f"/api/project-documents/{doc_id}/versions", headers=auth_headers)
        assert history.status_code == 200
        assert [v["version"] for v in history.json()] == [2, 1]
        assert history.json()[0]["change_log"] == "Before restore to version 1"

        version = await client.get(f"/api/project-documents/{doc_id}/versions/2", headers=auth_headers)
        assert version.status_code == 200
        assert version.json()["content"] == {"overview": {"projectName": "Relaunch"}}

    async def test_stale_update_conflicts(
        self, client: AsyncClient, auth_headers: dict, private_project: Project
    ):
        """A second writer holding an old version gets 409 and nothing changes."""
        created = await _create_document(client, auth_headers, private_project.id)
        doc_id = created["id"]

        first = await client.put(
            f"/api/project-documents/{doc_id}",
            json={"content": {"writer": "first"}, "expected_version": 1},
            headers=auth_headers,
        )
        second = await client.put(
            f"/api/project-documents/{doc_id}",
            json={"content": {"writer": "second"}, "expected_version": 1},
            headers=auth_headers,
        )

        assert first.status_code == 200
        assert second.status_code == 409

        detail = await client.get(f"/api/project-documents/{doc_id}", headers=auth_headers)
        assert detail.json()["content"] == {"writer": "first"}
        assert [v["version"] for v in detail.json()["versions"]] == [1]

    async def test_status_patch_keeps_version(
        self, client: AsyncClient, auth_headers: dict, private_project: Project
    ):
        """Changing status does not bump the version."""
        created = await _create_document(client, auth_headers, private_project.id)

        response = await client.patch(
            f"/api/project-documents/{created['id']}/status",
            json={"status": "IN_REVIEW"},
            headers=auth_headers,
        )

        assert response.status_code == 200
        assert response.json()["status"] == "IN_REVIEW"
        assert response.json()["version"] == 1

    async def test_clone(self, client: AsyncClient, auth_headers: dict, private_project: Project):
        """Cloning creates a fresh DRAFT copy."""
        created = await _create_document(client, auth_headers, private_project.id)

        response = await client.post(
            f"/api/project-documents/{created['id']}/clone",
            json={"new_name": "Rollout Plan (copy)"},
            headers=auth_headers,
        )

        assert response.status_code == 201
        data = response.json()
        assert data["id"] != created["id"]
        assert data["name"] == "Rollout Plan (copy)"
        assert data["content"] == created["content"]
        assert data["version"] == 1

    async def test_delete(self, client: AsyncClient, auth_headers: dict, private_project: Project):
        """Deleted documents are gone, versions included."""
        created = await _create_document(client, auth_headers, private_project.id)
        doc_id = created["id"]
        await client.put(
            f"/api/project-documents/{doc_id}",
            json={"content": {"a": 1}},
            headers=auth_headers,
        )

        response = await client.delete(f"/api/project-documents/{doc_id}", headers=auth_headers)
        assert response.status_code == 204

        detail = await client.get(f"/api/project-documents/{doc_id}", headers=auth_headers)
        versions = await client.get(f"/api/project-documents/{doc_id}/versions", headers=auth_headers)
        assert detail.status_code == 404
        assert versions.status_code == 404
        assert versions.json()["detail"] == "Document not found"

    async def test_missing_version_is_404(
        self, client: AsyncClient, auth_headers: dict, private_project: Project
    ):
        """Unknown versions are 404 on fetch and on restore."""
        created = await _create_document(client, auth_headers, private_project.id)
        doc_id = created["id"]

        fetch = await client.get(f"/api/project-documents/{doc_id}/versions/7", headers=auth_headers)
        restore = await client.post(
            f"/api/project-documents/{doc_id}/versions/restore",
            json={"version": 7},
            headers=auth_headers,
        )

        assert fetch.status_code == 404
        assert fetch.json()["detail"] == "Version not found"
        assert restore.status_code == 404

    async def test_restore_version_must_be_positive(
        self, client: AsyncClient, auth_headers: dict, private_project: Project
    ):
        """Version numbers start at 1."""
        created = await _create_document(client, auth_headers, private_project.id)

        response = await client.post(
            f"/api/project-documents/{created['id']}/versions/restore",
            json={"version": 0},
            headers=auth_headers,
        )

        assert response.status_code == 400


@pytest.mark.asyncio
class TestIsolation:
    """Tests for tenant isolation and project access over HTTP."""

    async def test_other_tenant_gets_404(
        self, client: AsyncClient, auth_headers: dict, other_tenant_headers: dict,
        private_project: Project
    ):
        """A document of another tenant does not exist for the caller."""
        created = await _create_document(client, auth_headers, private_project.id)
        doc_id = created["id"]

        detail = await client.get(f"/api/project-documents/{doc_id}", headers=other_tenant_headers)
        update = await client.put(
            f"/api/project-documents/{doc_id}",
            json={"name": "Stolen"},
            headers=other_tenant_headers,
        )
        delete = await client.delete(f"/api/project-documents/{doc_id}", headers=other_tenant_headers)

        assert detail.status_code == 404
        assert update.status_code == 404
        assert delete.status_code == 404

        still_there = await client.get(f"/api/project-documents/{doc_id}", headers=auth_headers)
        assert still_there.json()["name"] == "Rollout Plan"

    async def test_outsider_forbidden(
        self, client: AsyncClient, auth_headers: dict, outsider_headers: dict,
        private_project: Project
    ):
        """Same-tenant outsiders get 403 on private project documents."""
        created = await _create_document(client, auth_headers, private_project.id)

        detail = await client.get(f"/api/project-documents/{created['id']}", headers=outsider_headers)
        clone = await client.post(
            f"/api/project-documents/{created['id']}/clone",
            json={"new_name": "Mine now"},
            headers=outsider_headers,
        )

        assert detail.status_code == 403
        assert clone.status_code == 403

    async def test_tenant_visible_project_open_to_tenant(
        self, client: AsyncClient, auth_headers: dict, outsider_headers: dict,
        tenant_project: Project
    ):
        """Any tenant user can work with documents of a tenant-visible project."""
        created = await _create_document(client, auth_headers, tenant_project.id, "MEETING_NOTES", "Weekly")

        response = await client.put(
            f"/api/project-documents/{created['id']}",
            json={"content": {"notes": "outsider was here"}},
            headers=outsider_headers,
        )

        assert response.status_code == 200
        assert response.json()["version"] == 2


@pytest.mark.asyncio
class TestHealth:
    """Tests for the health endpoints."""

    async def test_root(self, client: AsyncClient):
        """The root endpoint reports healthy."""
        response = await client.get("/")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    async def test_health_checks_database(self, client: AsyncClient):
        """The health endpoint reaches the database."""
        response = await client.get("/health")

        assert response.status_code == 200
        assert response.json()["database"] == "connected"
