"""Permission service for project access checks.

Access Model:
- Project owner: full access to the project's documents
- Project with TENANT visibility: every user of the tenant has access
- Project member: access regardless of visibility
- Anyone else: denied

Projects are always looked up inside the caller's tenant, so a project of
another tenant is indistinguishable from a missing one.
"""

import logging
from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ..models.project import Project, ProjectVisibility
from .exceptions import AccessDeniedError, ProjectNotFoundError
from .tenant_context import TenantContext

logger = logging.getLogger(__name__)


def has_project_access(project: Project, user_id: int) -> bool:
    """
    Check whether a user may work with a project's documents.

    Args:
        project: Project with its members loaded
        user_id: The user's ID

    Returns:
        True if the user is the owner, the project is tenant-visible,
        or the user is a project member.
    """
    if project.owner_id == user_id:
        return True
    if project.visibility == ProjectVisibility.TENANT.value:
        return True
    return any(member.user_id == user_id for member in project.members)


class PermissionService:
    """
    Service class for project access checks.

    Wraps the tenant-scoped project lookup and the access rule so every
    document operation enforces them the same way.
    """

    def __init__(self, db: AsyncSession):
        """
        Initialize the PermissionService.

        Args:
            db: SQLAlchemy async database session
        """
        self.db = db

    async def get_project_in_tenant(
        self,
        project_id: int,
        tenant_id: int,
    ) -> Optional[Project]:
        """
        Fetch a project (with members) by ID within a tenant.

        Returns:
            The Project, or None if it does not exist in the tenant.
        """
        result = await self.db.execute(
            select(Project).where(
                Project.id == project_id,
                Project.tenant_id == tenant_id,
            )
        )
        return result.scalar_one_or_none()

    async def validate_project_access(
        self,
        ctx: TenantContext,
        project_id: int,
    ) -> Project:
        """
        Ensure the caller may access a project's documents.

        Args:
            ctx: Caller's tenant context
            project_id: The project's ID

        Returns:
            The Project.

        Raises:
            TenantContextRequiredError: If ctx carries no tenant
            ProjectNotFoundError: If the project does not exist in the tenant
            AccessDeniedError: If the caller is neither owner nor member and
                the project is not tenant-visible
        """
        tenant_id = ctx.require_tenant()
        project = await self.get_project_in_tenant(project_id, tenant_id)

        if project is None:
            raise ProjectNotFoundError()

        if not has_project_access(project, ctx.user_id):
            logger.warning(
                f"User {ctx.user_id} denied access to project {project_id} (tenant {tenant_id})"
            )
            raise AccessDeniedError()

        return project


def get_permission_service(db: AsyncSession) -> PermissionService:
    """Factory for PermissionService."""
    return PermissionService(db)
