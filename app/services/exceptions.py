"""Errors raised by the project document services.

The HTTP layer maps these to status codes in ``app.main``; services never
raise HTTPException themselves so they stay usable outside a request.
"""


class ProjectDocumentServiceError(Exception):
    """Base class for project document service errors."""

    default_message = "Project document operation failed"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class TenantContextRequiredError(ProjectDocumentServiceError):
    default_message = "Tenant context required"


class NotFoundError(ProjectDocumentServiceError):
    """Base class for the *NotFound errors (HTTP 404)."""

    default_message = "Not found"


class ProjectNotFoundError(NotFoundError):
    default_message = "Project not found"


class DocumentNotFoundError(NotFoundError):
    default_message = "Document not found"


class VersionNotFoundError(NotFoundError):
    default_message = "Version not found"


class AccessDeniedError(ProjectDocumentServiceError):
    default_message = "Access denied"


class UnknownTemplateTypeError(ProjectDocumentServiceError):
    """Raised when no template is registered for a document type."""

    def __init__(self, template_type: object):
        self.template_type = template_type
        value = getattr(template_type, "value", template_type)
        super().__init__(f"Unknown document type: {value}")


class ConflictError(ProjectDocumentServiceError):
    """The document changed since the caller last read it."""

    default_message = "Document was modified. Refresh to get latest version."
