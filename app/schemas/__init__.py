"""Pydantic schemas package for request/response validation."""

from .project_document import (
    EditorSummary,
    ProjectDocumentClone,
    ProjectDocumentCreate,
    ProjectDocumentDetailResponse,
    ProjectDocumentResponse,
    ProjectDocumentStatsResponse,
    ProjectDocumentStatusUpdate,
    ProjectDocumentUpdate,
    ProjectDocumentVersionResponse,
    ProjectSummary,
    RestoreVersionRequest,
    TemplateInfoResponse,
    TemplateResponse,
)
from .user import UserResponse

__all__ = [
    # Project document schemas
    "EditorSummary",
    "ProjectDocumentClone",
    "ProjectDocumentCreate",
    "ProjectDocumentDetailResponse",
    "ProjectDocumentResponse",
    "ProjectDocumentStatsResponse",
    "ProjectDocumentStatusUpdate",
    "ProjectDocumentUpdate",
    "ProjectDocumentVersionResponse",
    "ProjectSummary",
    "RestoreVersionRequest",
    # Template schemas
    "TemplateInfoResponse",
    "TemplateResponse",
    # User schemas
    "UserResponse",
]
