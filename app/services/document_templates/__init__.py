"""Document template registry.

A static catalogue mapping each ProjectDocumentType to its name,
description, category and default content. Pure lookups, no state.
"""

import copy
from typing import Optional

from ...models.project_document import ProjectDocumentCategory, ProjectDocumentType
from ..exceptions import UnknownTemplateTypeError
from .ai_templates import ai_templates
from .core_templates import core_templates
from .lifecycle_templates import lifecycle_templates
from .types import DocumentTemplate, TemplateInfo

CATEGORY_LABELS: dict[ProjectDocumentCategory, str] = {
    ProjectDocumentCategory.CORE: "Core Project Documents",
    ProjectDocumentCategory.LIFECYCLE: "Project Lifecycle",
    ProjectDocumentCategory.AI_SPECIFIC: "AI Project-Specific",
}

# Registration order: core, lifecycle, AI-specific
ALL_TEMPLATES: tuple[DocumentTemplate, ...] = (
    *core_templates,
    *lifecycle_templates,
    *ai_templates,
)

_TEMPLATES_BY_TYPE: dict[ProjectDocumentType, DocumentTemplate] = {
    template.type: template for template in ALL_TEMPLATES
}


def _coerce_type(template_type: ProjectDocumentType | str) -> Optional[ProjectDocumentType]:
    try:
        return ProjectDocumentType(template_type)
    except ValueError:
        return None


def get_template(template_type: ProjectDocumentType | str) -> Optional[DocumentTemplate]:
    """Return the template registered for a type, or None."""
    doc_type = _coerce_type(template_type)
    if doc_type is None:
        return None
    return _TEMPLATES_BY_TYPE.get(doc_type)


def _require_template(template_type: ProjectDocumentType | str) -> DocumentTemplate:
    template = get_template(template_type)
    if template is None:
        raise UnknownTemplateTypeError(template_type)
    return template


def get_default_content(template_type: ProjectDocumentType | str) -> dict:
    """
    Return a deep copy of a template's default content.

    Raises:
        UnknownTemplateTypeError: If no template is registered for the type
    """
    return copy.deepcopy(_require_template(template_type).default_content)


def get_category_for_type(template_type: ProjectDocumentType | str) -> ProjectDocumentCategory:
    """
    Return the category of a template type.

    Raises:
        UnknownTemplateTypeError: If no template is registered for the type
    """
    return _require_template(template_type).category


def _to_info(template: DocumentTemplate) -> TemplateInfo:
    return TemplateInfo(
        type=template.type,
        name=template.name,
        description=template.description,
        category=template.category,
        category_label=CATEGORY_LABELS[template.category],
    )


def get_template_info(template_type: ProjectDocumentType | str) -> Optional[TemplateInfo]:
    """Return client-facing metadata for a template type, or None."""
    template = get_template(template_type)
    if template is None:
        return None
    return _to_info(template)


def list_all_template_info() -> list[TemplateInfo]:
    """List every template's metadata, core first, then lifecycle, then AI-specific."""
    return [_to_info(template) for template in ALL_TEMPLATES]


__all__ = [
    "ALL_TEMPLATES",
    "CATEGORY_LABELS",
    "DocumentTemplate",
    "TemplateInfo",
    "get_category_for_type",
    "get_default_content",
    "get_template",
    "get_template_info",
    "list_all_template_info",
]
