"""Unit tests for the document template registry and its endpoints."""

import pytest
from httpx import AsyncClient

from app.models.project_document import ProjectDocumentCategory, ProjectDocumentType
from app.services import document_templates
from app.services.exceptions import UnknownTemplateTypeError


class TestTemplateRegistry:
    """Tests for the registry lookups."""

    def test_every_type_has_a_template(self):
        """Each document type maps to exactly one template."""
        registered = [template.type for template in document_templates.ALL_TEMPLATES]

        assert len(registered) == len(set(registered))
        assert set(registered) == set(ProjectDocumentType)

    def test_templates_grouped_by_category(self):
        """Templates are listed core first, then lifecycle, then AI-specific."""
        categories = [info.category for info in document_templates.list_all_template_info()]

        assert categories == sorted(categories, key=list(ProjectDocumentCategory).index)
        assert categories.count(ProjectDocumentCategory.CORE) == 7
        assert categories.count(ProjectDocumentCategory.LIFECYCLE) == 4
        assert categories.count(ProjectDocumentCategory.AI_SPECIFIC) == 5

    def test_get_template_accepts_string(self):
        """Lookups accept the raw string value of a type."""
        template = document_templates.get_template("RISK_REGISTER")

        assert template is not None
        assert template.type == ProjectDocumentType.RISK_REGISTER
        assert template.name == "Risk Register"

    def test_get_template_unknown_returns_none(self):
        """An unknown type string yields None rather than an error."""
        assert document_templates.get_template("NOT_A_TYPE") is None
        assert document_templates.get_template_info("NOT_A_TYPE") is None

    def test_category_for_type(self):
        """Category lookups follow the registry."""
        assert document_templates.get_category_for_type(
            ProjectDocumentType.PROJECT_PLAN
        ) == ProjectDocumentCategory.CORE
        assert document_templates.get_category_for_type(
            ProjectDocumentType.CHANGE_REQUEST
        ) == ProjectDocumentCategory.LIFECYCLE
        assert document_templates.get_category_for_type(
            ProjectDocumentType.DATA_REQUIREMENTS
        ) == ProjectDocumentCategory.AI_SPECIFIC

    def test_category_for_unknown_type_raises(self):
        """Category lookup of an unknown type raises."""
        with pytest.raises(UnknownTemplateTypeError) as exc_info:
            document_templates.get_category_for_type("NOT_A_TYPE")

        assert "NOT_A_TYPE" in exc_info.value.message

    def test_default_content_for_unknown_type_raises(self):
        """Default content lookup of an unknown type raises."""
        with pytest.raises(UnknownTemplateTypeError):
            document_templates.get_default_content("NOT_A_TYPE")

    def test_default_content_is_independent_copy(self):
        """Mutating returned default content never leaks into later calls."""
        first = document_templates.get_default_content(ProjectDocumentType.PROJECT_PLAN)
        first["overview"]["projectName"] = "Changed"
        first["phases"].append({"name": "Extra"})

        second = document_templates.get_default_content(ProjectDocumentType.PROJECT_PLAN)

        assert second["overview"]["projectName"] == ""
        assert len(second["phases"]) == 4
        assert first is not second

    def test_template_info_has_category_label(self):
        """Template info carries the human-readable category label."""
        info = document_templates.get_template_info(ProjectDocumentType.AI_FEASIBILITY)

        assert info.category == ProjectDocumentCategory.AI_SPECIFIC
        assert info.category_label == "AI Project-Specific"


@pytest.mark.asyncio
class TestTemplateEndpoints:
    """Tests for the template API endpoints."""

    async def test_list_templates(self, client: AsyncClient, auth_headers: dict):
        """All templates are returned in registry order."""
        response = await client.get("/api/project-documents/templates", headers=auth_headers)

        assert response.status_code == 200
        templates = response.json()
        assert len(templates) == 16
        assert templates[0]["type"] == "PROJECT_PLAN"
        assert templates[0]["category_label"] == "Core Project Documents"
        assert templates[-1]["category"] == "AI_SPECIFIC"
        assert "default_content" not in templates[0]

    async def test_get_template(self, client: AsyncClient, auth_headers: dict):
        """A single template includes its default content."""
        response = await client.get(
            "/api/project-documents/templates/PROJECT_PLAN", headers=auth_headers
        )

        assert response.status_code == 200
        data = response.json()
        assert data["name"] == "Project Plan"
        assert data["category"] == "CORE"
        assert data["default_content"]["overview"]["status"] == "Not Started"

    async def test_get_template_invalid_type(self, client: AsyncClient, auth_headers: dict):
        """An unknown type is a bad request."""
        response = await client.get(
            "/api/project-documents/templates/NOT_A_TYPE", headers=auth_headers
        )

        assert response.status_code == 400
        assert response.json()["detail"] == "Invalid document type"

    async def test_templates_require_authentication(self, client: AsyncClient):
        """Templates are only served to authenticated users."""
        response = await client.get("/api/project-documents/templates")

        assert response.status_code == 401
