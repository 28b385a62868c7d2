"""SQLAlchemy ORM models package."""

from .project import Project, ProjectMember, ProjectVisibility
from .project_document import (
    ProjectDocument,
    ProjectDocumentCategory,
    ProjectDocumentStatus,
    ProjectDocumentType,
)
from .project_document_version import ProjectDocumentVersion
from .tenant import Tenant
from .user import User

__all__ = [
    "Project",
    "ProjectDocument",
    "ProjectDocumentCategory",
    "ProjectDocumentStatus",
    "ProjectDocumentType",
    "ProjectDocumentVersion",
    "ProjectMember",
    "ProjectVisibility",
    "Tenant",
    "User",
]
