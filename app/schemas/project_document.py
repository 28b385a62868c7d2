"""Pydantic schemas for project documents, versions and templates."""

from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field

from ..models.project_document import (
    ProjectDocumentCategory,
    ProjectDocumentStatus,
    ProjectDocumentType,
)


# ============================================================================
# Template schemas
# ============================================================================


class TemplateInfoResponse(BaseModel):
    """Template metadata (no default content)."""

    model_config = ConfigDict(from_attributes=True)

    type: ProjectDocumentType
    name: str
    description: str
    category: ProjectDocumentCategory
    category_label: str


class TemplateResponse(TemplateInfoResponse):
    """Template metadata plus a copy of its default content."""

    default_content: dict[str, Any]


# ============================================================================
# Request schemas
# ============================================================================


class ProjectDocumentCreate(BaseModel):
    """Schema for creating a document from a template."""

    template_type: ProjectDocumentType = Field(
        ...,
        description="Template the document is created from",
        examples=["PROJECT_PLAN"],
    )
    name: str = Field(
        ...,
        min_length=1,
        max_length=255,
        description="Document name",
        examples=["Q3 Rollout Plan"],
    )
    description: Optional[str] = Field(
        None,
        max_length=2000,
        description="Optional description",
    )
    content: Optional[dict[str, Any]] = Field(
        None,
        description="Initial content; defaults to the template's default content",
    )


class ProjectDocumentUpdate(BaseModel):
    """Schema for updating a document.

    All fields are optional. Supplying ``content`` records the previous
    state in the version history and increments ``version``.
    """

    name: Optional[str] = Field(
        None,
        min_length=1,
        max_length=255,
        description="Document name",
    )
    description: Optional[str] = Field(
        None,
        max_length=2000,
        description="Document description",
    )
    content: Optional[dict[str, Any]] = Field(
        None,
        description="New document content",
    )
    status: Optional[ProjectDocumentStatus] = Field(
        None,
        description="New document status",
    )
    expected_version: Optional[int] = Field(
        None,
        ge=1,
        description="Version the client last read; mismatch returns 409",
    )


class ProjectDocumentStatusUpdate(BaseModel):
    """Schema for changing only the status of a document."""

    status: ProjectDocumentStatus


class ProjectDocumentClone(BaseModel):
    """Schema for cloning a document."""

    new_name: str = Field(
        ...,
        min_length=1,
        max_length=255,
        description="Name of the copy",
    )


class RestoreVersionRequest(BaseModel):
    """Schema for restoring a document to an earlier version."""

    version: int = Field(
        ...,
        ge=1,
        description="Version number to restore",
    )
    expected_version: Optional[int] = Field(
        None,
        ge=1,
        description="Version the client last read; mismatch returns 409",
    )


# ============================================================================
# Response schemas
# ============================================================================


class EditorSummary(BaseModel):
    """Identity of the user who last edited a document or version."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: Optional[str] = None
    email: Optional[str] = None


class ProjectSummary(BaseModel):
    """Minimal parent project info."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str


class ProjectDocumentVersionResponse(BaseModel):
    """A snapshot from a document's version history."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    document_id: int
    version: int
    content: dict[str, Any]
    status: ProjectDocumentStatus
    edited_by: Optional[int] = None
    edited_at: Optional[datetime] = None
    change_log: Optional[str] = None
    created_at: datetime
    editor: Optional[EditorSummary] = None


class ProjectDocumentResponse(BaseModel):
    """Schema for a project document."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    tenant_id: int
    project_id: int
    template_type: ProjectDocumentType
    category: ProjectDocumentCategory
    name: str
    description: Optional[str] = None
    content: dict[str, Any]
    status: ProjectDocumentStatus
    version: int
    last_edited_by: Optional[int] = None
    last_edited_at: Optional[datetime] = None
    created_at: datetime
    updated_at: datetime
    editor: Optional[EditorSummary] = None


class ProjectDocumentDetailResponse(ProjectDocumentResponse):
    """A document with its parent project and most recent versions."""

    project: Optional[ProjectSummary] = None
    versions: list[ProjectDocumentVersionResponse] = Field(
        default_factory=list,
        description="Most recent version snapshots, newest first",
    )


class ProjectDocumentStatsResponse(BaseModel):
    """Document counts for a project."""

    total: int
    by_status: dict[str, int]
    by_category: dict[str, int]
