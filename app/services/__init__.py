"""Business logic services."""

from .auth_service import (
    authenticate_user,
    create_access_token,
    decode_access_token,
    get_current_user,
    get_user_by_email,
    get_user_by_id,
)
from .exceptions import (
    AccessDeniedError,
    ConflictError,
    DocumentNotFoundError,
    NotFoundError,
    ProjectDocumentServiceError,
    ProjectNotFoundError,
    TenantContextRequiredError,
    UnknownTemplateTypeError,
    VersionNotFoundError,
)
from .permission_service import (
    PermissionService,
    get_permission_service,
    has_project_access,
)
from .tenant_context import (
    TenantContext,
    get_tenant_context,
    tenant_context_for,
)

__all__ = [
    # Auth service
    "authenticate_user",
    "create_access_token",
    "decode_access_token",
    "get_current_user",
    "get_user_by_email",
    "get_user_by_id",
    # Service errors
    "AccessDeniedError",
    "ConflictError",
    "DocumentNotFoundError",
    "NotFoundError",
    "ProjectDocumentServiceError",
    "ProjectNotFoundError",
    "TenantContextRequiredError",
    "UnknownTemplateTypeError",
    "VersionNotFoundError",
    # Permission service
    "PermissionService",
    "get_permission_service",
    "has_project_access",
    # Tenant context
    "TenantContext",
    "get_tenant_context",
    "tenant_context_for",
]
