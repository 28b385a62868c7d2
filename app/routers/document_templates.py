"""Document template API endpoints.

Read-only access to the template registry. Templates are static, so these
endpoints need authentication but no tenant or project checks.
"""

from fastapi import APIRouter, Depends, HTTPException, status

from ..models.project_document import ProjectDocumentType
from ..models.user import User
from ..schemas.project_document import (
    TemplateInfoResponse,
    TemplateResponse,
)
from ..services import document_templates
from ..services.auth_service import get_current_user

router = APIRouter(
    prefix="/api/project-documents/templates",
    tags=["document-templates"],
)


@router.get("", response_model=list[TemplateInfoResponse])
async def list_templates(
    current_user: User = Depends(get_current_user),
) -> list[TemplateInfoResponse]:
    """List every template: core first, then lifecycle, then AI-specific."""
    return [
        TemplateInfoResponse.model_validate(info)
        for info in document_templates.list_all_template_info()
    ]


@router.get("/{template_type}", response_model=TemplateResponse)
async def get_template(
    template_type: str,
    current_user: User = Depends(get_current_user),
) -> TemplateResponse:
    """
    Get a template's metadata and default content.

    Returns 400 for a string that is not a document type and 404 when a
    valid type has no registered template.
    """
    try:
        doc_type = ProjectDocumentType(template_type)
    except ValueError:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Invalid document type",
        )

    info = document_templates.get_template_info(doc_type)
    if info is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Template not found",
        )

    return TemplateResponse(
        type=info.type,
        name=info.name,
        description=info.description,
        category=info.category,
        category_label=info.category_label,
        default_content=document_templates.get_default_content(doc_type),
    )
