"""ProjectDocument SQLAlchemy model and its enums.

Project documents are structured documents created from a template
(project plan, risk register, ...). The live row carries a monotonically
increasing ``version``; earlier states live in ProjectDocumentVersions.
"""

from datetime import datetime
from enum import Enum
from typing import TYPE_CHECKING

from sqlalchemy import JSON, Column, DateTime, ForeignKey, Index, Integer, String, Text
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import relationship

from ..database import Base

if TYPE_CHECKING:
    from .project import Project
    from .user import User


class ProjectDocumentType(str, Enum):
    """Document template types."""

    # Core
    PROJECT_PLAN = "PROJECT_PLAN"
    STATUS_REPORT = "STATUS_REPORT"
    RISK_REGISTER = "RISK_REGISTER"
    ISSUE_LOG = "ISSUE_LOG"
    MEETING_NOTES = "MEETING_NOTES"
    LESSONS_LEARNED = "LESSONS_LEARNED"
    COMMUNICATION_PLAN = "COMMUNICATION_PLAN"
    # Lifecycle
    KICKOFF_AGENDA = "KICKOFF_AGENDA"
    CHANGE_REQUEST = "CHANGE_REQUEST"
    PROJECT_CLOSURE = "PROJECT_CLOSURE"
    KNOWLEDGE_TRANSFER = "KNOWLEDGE_TRANSFER"
    # AI-specific
    AI_FEASIBILITY = "AI_FEASIBILITY"
    AI_LIMITATIONS = "AI_LIMITATIONS"
    MONITORING_MAINTENANCE = "MONITORING_MAINTENANCE"
    DATA_REQUIREMENTS = "DATA_REQUIREMENTS"
    DELIVERABLE_CHECKLIST = "DELIVERABLE_CHECKLIST"


class ProjectDocumentCategory(str, Enum):
    """Template categories, in display order."""

    CORE = "CORE"
    LIFECYCLE = "LIFECYCLE"
    AI_SPECIFIC = "AI_SPECIFIC"


class ProjectDocumentStatus(str, Enum):
    """Review status of a project document."""

    DRAFT = "DRAFT"
    IN_REVIEW = "IN_REVIEW"
    APPROVED = "APPROVED"
    ARCHIVED = "ARCHIVED"


# JSON on SQLite (tests), JSONB on PostgreSQL
JSONContent = JSON().with_variant(JSONB(), "postgresql")


class ProjectDocument(Base):
    """
    ProjectDocument model.

    Attributes:
        id: Unique identifier
        tenant_id: FK to Tenants; immutable after creation
        project_id: FK to Projects
        template_type: ProjectDocumentType the document was created from
        category: ProjectDocumentCategory derived from the template
        name: Document name
        description: Optional description
        content: Arbitrary JSON object (not validated against the template)
        status: ProjectDocumentStatus
        version: Content revision, starts at 1
        last_edited_by: FK to the last user who changed the document
        last_edited_at: When the document was last changed
        created_at: Timestamp when document was created
        updated_at: Timestamp when document was last updated
    """

    __tablename__ = "ProjectDocuments"
    __allow_unmapped__ = True

    id = Column(
        Integer,
        primary_key=True,
        autoincrement=True,
    )

    tenant_id = Column(
        Integer,
        ForeignKey("Tenants.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    project_id = Column(
        Integer,
        ForeignKey("Projects.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    # Template
    template_type = Column(
        String(50),
        nullable=False,
    )

    category = Column(
        String(50),
        nullable=False,
    )

    # Document details
    name = Column(
        String(255),
        nullable=False,
    )

    description = Column(
        Text,
        nullable=True,
    )

    content = Column(
        JSONContent,
        nullable=False,
    )

    status = Column(
        String(50),
        nullable=False,
        default=ProjectDocumentStatus.DRAFT.value,
    )

    version = Column(
        Integer,
        nullable=False,
        default=1,
    )

    # Audit
    last_edited_by = Column(
        Integer,
        ForeignKey("Users.id", ondelete="SET NULL"),
        nullable=True,
    )

    last_edited_at = Column(
        DateTime,
        nullable=True,
    )

    # Timestamps
    created_at = Column(
        DateTime,
        default=datetime.utcnow,
        nullable=False,
    )

    updated_at = Column(
        DateTime,
        default=datetime.utcnow,
        onupdate=datetime.utcnow,
        nullable=False,
    )

    __table_args__ = (
        Index("ix_project_documents_tenant_project", "tenant_id", "project_id"),
        Index("ix_project_documents_project_category", "project_id", "category"),
    )

    # Relationships
    editor = relationship(
        "User",
        foreign_keys=[last_edited_by],
        lazy="joined",
    )

    project = relationship(
        "Project",
        lazy="joined",
    )

    def __repr__(self) -> str:
        """String representation of ProjectDocument."""
        return f"<ProjectDocument(id={self.id}, type={self.template_type}, version={self.version})>"
