"""Project document API endpoints.

Two routers share this module: one nested under a project for listing,
statistics and creation, and one addressing documents by ID for
everything else. Service errors (not found, access denied, conflict) are
translated to HTTP responses by the exception handlers in ``app.main``.
"""

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from ..database import get_db
from ..models.project_document import (
    ProjectDocumentCategory,
    ProjectDocumentStatus,
    ProjectDocumentType,
)
from ..schemas.project_document import (
    ProjectDocumentClone,
    ProjectDocumentCreate,
    ProjectDocumentDetailResponse,
    ProjectDocumentResponse,
    ProjectDocumentStatsResponse,
    ProjectDocumentStatusUpdate,
    ProjectDocumentUpdate,
    ProjectDocumentVersionResponse,
    RestoreVersionRequest,
)
from ..services import project_document_service
from ..services.tenant_context import TenantContext, get_tenant_context

project_router = APIRouter(
    prefix="/api/projects/{project_id}/documents",
    tags=["project-documents"],
)

router = APIRouter(
    prefix="/api/project-documents",
    tags=["project-documents"],
)


# ============================================================================
# Project-scoped endpoints
# ============================================================================


@project_router.get("", response_model=list[ProjectDocumentResponse])
async def list_project_documents(
    project_id: int,
    template_type: Optional[ProjectDocumentType] = Query(None, description="Filter by template type"),
    category: Optional[ProjectDocumentCategory] = Query(None, description="Filter by category"),
    status_filter: Optional[ProjectDocumentStatus] = Query(
        None, alias="status", description="Filter by status"
    ),
    search: Optional[str] = Query(None, max_length=255, description="Match name or description"),
    ctx: TenantContext = Depends(get_tenant_context),
    db: AsyncSession = Depends(get_db),
) -> list[ProjectDocumentResponse]:
    """
    List a project's documents.

    Ordered by category (core, lifecycle, AI-specific), then most recently
    updated first.
    """
    documents = await project_document_service.list_project_documents(
        db,
        ctx,
        project_id,
        template_type=template_type,
        category=category,
        status=status_filter,
        search=search,
    )
    return [ProjectDocumentResponse.model_validate(doc) for doc in documents]


@project_router.get("/stats", response_model=ProjectDocumentStatsResponse)
async def get_project_document_stats(
    project_id: int,
    ctx: TenantContext = Depends(get_tenant_context),
    db: AsyncSession = Depends(get_db),
) -> ProjectDocumentStatsResponse:
    """Count a project's documents by status and by category."""
    stats = await project_document_service.get_project_document_stats(db, ctx, project_id)
    return ProjectDocumentStatsResponse(
        total=stats.total,
        by_status=stats.by_status,
        by_category=stats.by_category,
    )


@project_router.post(
    "",
    response_model=ProjectDocumentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_project_document(
    project_id: int,
    data: ProjectDocumentCreate,
    ctx: TenantContext = Depends(get_tenant_context),
    db: AsyncSession = Depends(get_db),
) -> ProjectDocumentResponse:
    """Create a document from a template (version 1, DRAFT)."""
    document = await project_document_service.create_project_document(db, ctx, project_id, data)
    return ProjectDocumentResponse.model_validate(document)


# ============================================================================
# Document endpoints
# ============================================================================


@router.get("/{document_id}", response_model=ProjectDocumentDetailResponse)
async def get_project_document(
    document_id: int,
    ctx: TenantContext = Depends(get_tenant_context),
    db: AsyncSession = Depends(get_db),
) -> ProjectDocumentDetailResponse:
    """Get a document with its project and most recent versions."""
    detail = await project_document_service.get_project_document(db, ctx, document_id)

    if detail is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Document not found",
        )

    response = ProjectDocumentDetailResponse.model_validate(detail.document)
    response.versions = [
        ProjectDocumentVersionResponse.model_validate(version) for version in detail.versions
    ]
    return response


@router.put("/{document_id}", response_model=ProjectDocumentResponse)
async def update_project_document(
    document_id: int,
    data: ProjectDocumentUpdate,
    ctx: TenantContext = Depends(get_tenant_context),
    db: AsyncSession = Depends(get_db),
) -> ProjectDocumentResponse:
    """
    Update a document.

    Supplying content snapshots the previous state and bumps the version.
    Returns 409 if ``expected_version`` is stale.
    """
    document = await project_document_service.update_project_document(db, ctx, document_id, data)
    return ProjectDocumentResponse.model_validate(document)


@router.patch("/{document_id}/status", response_model=ProjectDocumentResponse)
async def update_document_status(
    document_id: int,
    data: ProjectDocumentStatusUpdate,
    ctx: TenantContext = Depends(get_tenant_context),
    db: AsyncSession = Depends(get_db),
) -> ProjectDocumentResponse:
    """Change a document's status without touching its version."""
    document = await project_document_service.update_document_status(
        db, ctx, document_id, data.status
    )
    return ProjectDocumentResponse.model_validate(document)


@router.delete("/{document_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_project_document(
    document_id: int,
    ctx: TenantContext = Depends(get_tenant_context),
    db: AsyncSession = Depends(get_db),
) -> None:
    """Delete a document and its version history."""
    await project_document_service.delete_project_document(db, ctx, document_id)


@router.post(
    "/{document_id}/clone",
    response_model=ProjectDocumentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def clone_project_document(
    document_id: int,
    data: ProjectDocumentClone,
    ctx: TenantContext = Depends(get_tenant_context),
    db: AsyncSession = Depends(get_db),
) -> ProjectDocumentResponse:
    """Copy a document under a new name; the copy starts at version 1."""
    document = await project_document_service.clone_project_document(
        db, ctx, document_id, data.new_name
    )
    return ProjectDocumentResponse.model_validate(document)


@router.get("/{document_id}/versions", response_model=list[ProjectDocumentVersionResponse])
async def get_document_version_history(
    document_id: int,
    ctx: TenantContext = Depends(get_tenant_context),
    db: AsyncSession = Depends(get_db),
) -> list[ProjectDocumentVersionResponse]:
    """List a document's version snapshots, newest first."""
    versions = await project_document_service.get_document_version_history(db, ctx, document_id)
    return [ProjectDocumentVersionResponse.model_validate(version) for version in versions]


@router.get(
    "/{document_id}/versions/{version}",
    response_model=ProjectDocumentVersionResponse,
)
async def get_document_version(
    document_id: int,
    version: int,
    ctx: TenantContext = Depends(get_tenant_context),
    db: AsyncSession = Depends(get_db),
) -> ProjectDocumentVersionResponse:
    """Get a single version snapshot."""
    snapshot = await project_document_service.get_document_version(db, ctx, document_id, version)

    if snapshot is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Version not found",
        )

    return ProjectDocumentVersionResponse.model_validate(snapshot)


@router.post("/{document_id}/versions/restore", response_model=ProjectDocumentResponse)
async def restore_document_version(
    document_id: int,
    data: RestoreVersionRequest,
    ctx: TenantContext = Depends(get_tenant_context),
    db: AsyncSession = Depends(get_db),
) -> ProjectDocumentResponse:
    """Restore content and status from an earlier version as a new version."""
    document = await project_document_service.restore_document_version(
        db,
        ctx,
        document_id,
        data.version,
        expected_version=data.expected_version,
    )
    return ProjectDocumentResponse.model_validate(document)
