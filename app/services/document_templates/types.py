"""Template definition types for project documents."""

from dataclasses import dataclass
from typing import Any

from ...models.project_document import ProjectDocumentCategory, ProjectDocumentType


@dataclass(frozen=True)
class DocumentTemplate:
    """
    Static definition of a document type.

    ``default_content`` is shared by every caller and must never be handed
    out directly; use ``get_default_content`` which returns a deep copy.
    """

    type: ProjectDocumentType
    name: str
    description: str
    category: ProjectDocumentCategory
    default_content: dict[str, Any]


@dataclass(frozen=True)
class TemplateInfo:
    """Template metadata exposed to clients (no content)."""

    type: ProjectDocumentType
    name: str
    description: str
    category: ProjectDocumentCategory
    category_label: str
