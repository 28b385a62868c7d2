"""Project document business logic service.

CRUD, status changes, cloning, statistics and version history for
template-based project documents. Every function takes an explicit
TenantContext and scopes all reads and writes to its tenant.

Functions flush but never commit; the caller owns the transaction
(``get_db`` commits once per request), so a snapshot row and the document
update it belongs to land together or not at all.
"""

import copy
import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from sqlalchemy import case, func, or_, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from ..config import settings
from ..models.project_document import (
    ProjectDocument,
    ProjectDocumentCategory,
    ProjectDocumentStatus,
    ProjectDocumentType,
)
from ..models.project_document_version import ProjectDocumentVersion
from ..schemas.project_document import ProjectDocumentCreate, ProjectDocumentUpdate
from . import document_templates
from .exceptions import (
    ConflictError,
    DocumentNotFoundError,
    UnknownTemplateTypeError,
    VersionNotFoundError,
)
from .permission_service import PermissionService
from .tenant_context import TenantContext

logger = logging.getLogger(__name__)

# Category display order for listings: core, lifecycle, AI-specific
_CATEGORY_ORDER = case(
    {category.value: position for position, category in enumerate(ProjectDocumentCategory)},
    value=ProjectDocument.category,
    else_=len(ProjectDocumentCategory),
)


@dataclass
class ProjectDocumentDetail:
    """A document together with its most recent version snapshots."""

    document: ProjectDocument
    versions: list[ProjectDocumentVersion] = field(default_factory=list)


@dataclass
class ProjectDocumentStats:
    """Document counts for a project, grouped by status and category."""

    total: int
    by_status: dict[str, int]
    by_category: dict[str, int]


def _value(member: object) -> object:
    """Return an enum member's value; pass plain values through."""
    return getattr(member, "value", member)


def _escape_like(term: str) -> str:
    return term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


# ============================================================================
# Internal helpers
# ============================================================================


async def _get_document_in_tenant(
    db: AsyncSession,
    document_id: int,
    tenant_id: int,
    refresh: bool = False,
) -> Optional[ProjectDocument]:
    """
    Fetch a document by ID within a tenant.

    With ``refresh=True`` the identity-map copy is overwritten with the
    current row, which is needed after a core UPDATE.
    """
    query = select(ProjectDocument).where(
        ProjectDocument.id == document_id,
        ProjectDocument.tenant_id == tenant_id,
    )
    if refresh:
        query = query.execution_options(populate_existing=True)

    result = await db.execute(query)
    return result.scalar_one_or_none()


async def _require_document(
    db: AsyncSession,
    document_id: int,
    tenant_id: int,
) -> ProjectDocument:
    document = await _get_document_in_tenant(db, document_id, tenant_id)
    if document is None:
        raise DocumentNotFoundError()
    return document


async def _check_read_access(db: AsyncSession, ctx: TenantContext, project_id: int) -> None:
    if settings.document_reads_require_project_access:
        await PermissionService(db).validate_project_access(ctx, project_id)


async def _load_document_for_write(
    db: AsyncSession,
    ctx: TenantContext,
    document_id: int,
) -> ProjectDocument:
    """
    Fetch a document the caller is allowed to modify.

    Raises:
        TenantContextRequiredError: If ctx carries no tenant
        DocumentNotFoundError: If the document does not exist in the tenant
        ProjectNotFoundError: If the parent project is gone
        AccessDeniedError: If the caller has no access to the parent project
    """
    tenant_id = ctx.require_tenant()
    document = await _require_document(db, document_id, tenant_id)
    await PermissionService(db).validate_project_access(ctx, document.project_id)
    return document


async def _append_snapshot(
    db: AsyncSession,
    document: ProjectDocument,
    change_log: Optional[str] = None,
) -> ProjectDocumentVersion:
    """
    Record the document's current state as a version row.

    A duplicate (document_id, version) means another writer snapshotted
    the same version first, so it surfaces as a conflict.
    """
    snapshot = ProjectDocumentVersion(
        document_id=document.id,
        version=document.version,
        content=copy.deepcopy(document.content),
        status=document.status,
        edited_by=document.last_edited_by,
        edited_at=document.last_edited_at,
        change_log=change_log,
    )
    db.add(snapshot)

    try:
        await db.flush()
    except IntegrityError as e:
        logger.warning(
            f"Concurrent snapshot of document {document.id} at version {document.version}: {e}"
        )
        raise ConflictError() from e

    return snapshot


async def _find_version(
    db: AsyncSession,
    document_id: int,
    version: int,
) -> Optional[ProjectDocumentVersion]:
    result = await db.execute(
        select(ProjectDocumentVersion).where(
            ProjectDocumentVersion.document_id == document_id,
            ProjectDocumentVersion.version == version,
        )
    )
    return result.scalar_one_or_none()


def _check_expected_version(document: ProjectDocument, expected_version: Optional[int]) -> None:
    if expected_version is not None and expected_version != document.version:
        raise ConflictError()


# ============================================================================
# Queries
# ============================================================================


async def list_project_documents(
    db: AsyncSession,
    ctx: TenantContext,
    project_id: int,
    template_type: Optional[ProjectDocumentType] = None,
    category: Optional[ProjectDocumentCategory] = None,
    status: Optional[ProjectDocumentStatus] = None,
    search: Optional[str] = None,
) -> list[ProjectDocument]:
    """
    List a project's documents.

    Filters combine with AND; ``search`` is a case-insensitive substring
    match on name or description. Ordered by category (core, lifecycle,
    AI-specific), then most recently updated first.
    """
    tenant_id = ctx.require_tenant()
    await _check_read_access(db, ctx, project_id)

    query = select(ProjectDocument).where(
        ProjectDocument.project_id == project_id,
        ProjectDocument.tenant_id == tenant_id,
    )

    if template_type is not None:
        query = query.where(ProjectDocument.template_type == _value(template_type))
    if category is not None:
        query = query.where(ProjectDocument.category == _value(category))
    if status is not None:
        query = query.where(ProjectDocument.status == _value(status))
    if search:
        pattern = f"%{_escape_like(search)}%"
        query = query.where(
            or_(
                ProjectDocument.name.ilike(pattern, escape="\\"),
                ProjectDocument.description.ilike(pattern, escape="\\"),
            )
        )

    query = query.order_by(
        _CATEGORY_ORDER.asc(),
        ProjectDocument.updated_at.desc(),
        ProjectDocument.id.desc(),
    )

    result = await db.execute(query)
    return list(result.scalars().all())


async def get_project_document(
    db: AsyncSession,
    ctx: TenantContext,
    document_id: int,
) -> Optional[ProjectDocumentDetail]:
    """
    Get a document with its parent project and most recent versions.

    Returns:
        The detail, or None if the document does not exist in the tenant.
    """
    tenant_id = ctx.require_tenant()
    document = await _get_document_in_tenant(db, document_id, tenant_id)
    if document is None:
        return None

    await _check_read_access(db, ctx, document.project_id)

    result = await db.execute(
        select(ProjectDocumentVersion)
        .where(ProjectDocumentVersion.document_id == document.id)
        .order_by(ProjectDocumentVersion.version.desc())
        .limit(settings.document_recent_versions_limit)
    )
    return ProjectDocumentDetail(document=document, versions=list(result.scalars().all()))


async def get_project_document_stats(
    db: AsyncSession,
    ctx: TenantContext,
    project_id: int,
) -> ProjectDocumentStats:
    """Count a project's documents by status and by category."""
    tenant_id = ctx.require_tenant()
    await _check_read_access(db, ctx, project_id)

    result = await db.execute(
        select(
            ProjectDocument.status,
            ProjectDocument.category,
            func.count(ProjectDocument.id),
        )
        .where(
            ProjectDocument.project_id == project_id,
            ProjectDocument.tenant_id == tenant_id,
        )
        .group_by(ProjectDocument.status, ProjectDocument.category)
    )

    total = 0
    by_status: dict[str, int] = {}
    by_category: dict[str, int] = {}
    for doc_status, doc_category, count in result.all():
        total += count
        by_status[doc_status] = by_status.get(doc_status, 0) + count
        by_category[doc_category] = by_category.get(doc_category, 0) + count

    return ProjectDocumentStats(total=total, by_status=by_status, by_category=by_category)


async def get_document_version_history(
    db: AsyncSession,
    ctx: TenantContext,
    document_id: int,
) -> list[ProjectDocumentVersion]:
    """
    List every snapshot of a document, newest first.

    Raises:
        DocumentNotFoundError: If the document does not exist in the tenant
    """
    tenant_id = ctx.require_tenant()
    document = await _require_document(db, document_id, tenant_id)
    await _check_read_access(db, ctx, document.project_id)

    result = await db.execute(
        select(ProjectDocumentVersion)
        .where(ProjectDocumentVersion.document_id == document.id)
        .order_by(ProjectDocumentVersion.version.desc())
    )
    return list(result.scalars().all())


async def get_document_version(
    db: AsyncSession,
    ctx: TenantContext,
    document_id: int,
    version: int,
) -> Optional[ProjectDocumentVersion]:
    """
    Get one snapshot of a document.

    Returns:
        The snapshot, or None if the document has no such version.

    Raises:
        DocumentNotFoundError: If the document does not exist in the tenant
    """
    tenant_id = ctx.require_tenant()
    document = await _require_document(db, document_id, tenant_id)
    await _check_read_access(db, ctx, document.project_id)
    return await _find_version(db, document.id, version)


# ============================================================================
# Mutations
# ============================================================================


async def create_project_document(
    db: AsyncSession,
    ctx: TenantContext,
    project_id: int,
    data: ProjectDocumentCreate,
) -> ProjectDocument:
    """
    Create a document from a template at version 1 in DRAFT status.

    The content defaults to a fresh copy of the template's default content.

    Raises:
        ProjectNotFoundError / AccessDeniedError: See PermissionService
        UnknownTemplateTypeError: If no template is registered for the type
    """
    tenant_id = ctx.require_tenant()
    await PermissionService(db).validate_project_access(ctx, project_id)

    template = document_templates.get_template(data.template_type)
    if template is None:
        raise UnknownTemplateTypeError(data.template_type)

    if data.content is not None:
        content = copy.deepcopy(data.content)
    else:
        content = document_templates.get_default_content(template.type)

    document = ProjectDocument(
        tenant_id=tenant_id,
        project_id=project_id,
        template_type=template.type.value,
        category=template.category.value,
        name=data.name,
        description=data.description,
        content=content,
        status=ProjectDocumentStatus.DRAFT.value,
        version=1,
        last_edited_by=ctx.user_id,
        last_edited_at=datetime.utcnow(),
    )
    db.add(document)
    await db.flush()

    logger.info(
        f"User {ctx.user_id} created {template.type.value} document {document.id} "
        f"in project {project_id}"
    )

    return await _get_document_in_tenant(db, document.id, tenant_id, refresh=True)


async def update_project_document(
    db: AsyncSession,
    ctx: TenantContext,
    document_id: int,
    data: ProjectDocumentUpdate,
) -> ProjectDocument:
    """
    Update a document's fields.

    When ``content`` is supplied, the pre-update state is appended to the
    version history and ``version`` is incremented; name, description or
    status changes alone keep the version. The write is guarded by
    ``version = <read version>`` so a concurrent content update yields a
    ConflictError instead of a lost update.

    Raises:
        DocumentNotFoundError, ProjectNotFoundError, AccessDeniedError
        ConflictError: If ``expected_version`` is stale or a concurrent
            writer changed the document
    """
    tenant_id = ctx.require_tenant()
    document = await _load_document_for_write(db, ctx, document_id)
    _check_expected_version(document, data.expected_version)

    read_version = document.version
    content_changed = data.content is not None
    now = datetime.utcnow()

    if content_changed:
        await _append_snapshot(db, document)

    values: dict = {
        "last_edited_by": ctx.user_id,
        "last_edited_at": now,
        "updated_at": now,
    }
    if data.name is not None:
        values["name"] = data.name
    if "description" in data.model_fields_set:
        values["description"] = data.description
    if data.status is not None:
        values["status"] = data.status.value
    if content_changed:
        values["content"] = data.content
        values["version"] = ProjectDocument.version + 1

    query = update(ProjectDocument).where(ProjectDocument.id == document.id)
    if content_changed or data.expected_version is not None:
        query = query.where(ProjectDocument.version == read_version)

    result = await db.execute(
        query.values(**values).execution_options(synchronize_session=False)
    )
    if result.rowcount == 0:
        raise ConflictError()

    if content_changed:
        logger.info(
            f"User {ctx.user_id} updated content of document {document.id} "
            f"(version {read_version} -> {read_version + 1})"
        )
    else:
        logger.info(f"User {ctx.user_id} updated document {document.id}")

    return await _get_document_in_tenant(db, document.id, tenant_id, refresh=True)


async def update_document_status(
    db: AsyncSession,
    ctx: TenantContext,
    document_id: int,
    new_status: ProjectDocumentStatus,
) -> ProjectDocument:
    """Change only a document's status; the version is unchanged."""
    tenant_id = ctx.require_tenant()
    document = await _load_document_for_write(db, ctx, document_id)

    previous_status = document.status
    document.status = _value(new_status)
    document.last_edited_by = ctx.user_id
    document.last_edited_at = datetime.utcnow()
    await db.flush()

    logger.info(
        f"User {ctx.user_id} changed status of document {document.id} "
        f"from {previous_status} to {document.status}"
    )

    return await _get_document_in_tenant(db, document.id, tenant_id, refresh=True)


async def delete_project_document(
    db: AsyncSession,
    ctx: TenantContext,
    document_id: int,
) -> None:
    """Delete a document; its version rows go with it (ON DELETE CASCADE)."""
    document = await _load_document_for_write(db, ctx, document_id)

    await db.delete(document)
    await db.flush()

    logger.info(f"User {ctx.user_id} deleted document {document_id}")


async def clone_project_document(
    db: AsyncSession,
    ctx: TenantContext,
    document_id: int,
    new_name: str,
) -> ProjectDocument:
    """
    Copy a document into the same project under a new name.

    The copy starts over at version 1 in DRAFT status with no history.
    """
    tenant_id = ctx.require_tenant()
    source = await _load_document_for_write(db, ctx, document_id)

    clone = ProjectDocument(
        tenant_id=tenant_id,
        project_id=source.project_id,
        template_type=source.template_type,
        category=source.category,
        name=new_name,
        description=source.description,
        content=copy.deepcopy(source.content),
        status=ProjectDocumentStatus.DRAFT.value,
        version=1,
        last_edited_by=ctx.user_id,
        last_edited_at=datetime.utcnow(),
    )
    db.add(clone)
    await db.flush()

    logger.info(f"User {ctx.user_id} cloned document {source.id} as {clone.id}")

    return await _get_document_in_tenant(db, clone.id, tenant_id, refresh=True)


async def restore_document_version(
    db: AsyncSession,
    ctx: TenantContext,
    document_id: int,
    version: int,
    expected_version: Optional[int] = None,
) -> ProjectDocument:
    """
    Restore a document's content and status from an earlier snapshot.

    The current state is snapshotted first (change log "Before restore to
    version N"), then the document takes the snapshot's content and status
    under a new, higher version number. History is never rewritten.

    Raises:
        DocumentNotFoundError, ProjectNotFoundError, AccessDeniedError
        VersionNotFoundError: If the document has no such version
        ConflictError: If ``expected_version`` is stale or a concurrent
            writer changed the document
    """
    tenant_id = ctx.require_tenant()
    document = await _load_document_for_write(db, ctx, document_id)

    target = await _find_version(db, document.id, version)
    if target is None:
        raise VersionNotFoundError()

    _check_expected_version(document, expected_version)
    read_version = document.version
    now = datetime.utcnow()

    await _append_snapshot(db, document, change_log=f"Before restore to version {version}")

    result = await db.execute(
        update(ProjectDocument)
        .where(ProjectDocument.id == document.id)
        .where(ProjectDocument.version == read_version)
        .values(
            content=copy.deepcopy(target.content),
            status=target.status,
            version=ProjectDocument.version + 1,
            last_edited_by=ctx.user_id,
            last_edited_at=now,
            updated_at=now,
        )
        .execution_options(synchronize_session=False)
    )
    if result.rowcount == 0:
        raise ConflictError()

    logger.info(
        f"User {ctx.user_id} restored document {document.id} to version {version} "
        f"(now version {read_version + 1})"
    )

    return await _get_document_in_tenant(db, document.id, tenant_id, refresh=True)
