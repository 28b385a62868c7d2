"""API routers package.

This package contains all FastAPI routers for the application.
Each router handles a specific domain of the API.
"""

from .auth import router as auth_router
from .document_templates import router as document_templates_router
from .project_documents import project_router as project_scoped_documents_router
from .project_documents import router as project_documents_router

__all__ = [
    "auth_router",
    "document_templates_router",
    "project_documents_router",
    "project_scoped_documents_router",
]
