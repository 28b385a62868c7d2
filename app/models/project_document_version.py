"""ProjectDocumentVersion SQLAlchemy model - append-only version history.

A row captures the state of a project document *before* a content update
or a restore. Rows are never updated; they disappear only when the parent
document is deleted (ON DELETE CASCADE).
"""

from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, Text, UniqueConstraint
from sqlalchemy.orm import relationship

from ..database import Base
from .project_document import JSONContent

if TYPE_CHECKING:
    from .user import User


class ProjectDocumentVersion(Base):
    """
    ProjectDocumentVersion model.

    Attributes:
        id: Unique identifier
        document_id: FK to the parent ProjectDocument
        version: The document's version number at snapshot time
        content: Snapshot of the document content
        status: Snapshot of the document status
        edited_by: FK to the user who produced the snapshotted state
        edited_at: When the snapshotted state was produced
        change_log: Optional note (e.g. "Before restore to version 2")
        created_at: Timestamp when the snapshot row was written
    """

    __tablename__ = "ProjectDocumentVersions"
    __allow_unmapped__ = True

    id = Column(
        Integer,
        primary_key=True,
        autoincrement=True,
    )

    document_id = Column(
        Integer,
        ForeignKey("ProjectDocuments.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    version = Column(
        Integer,
        nullable=False,
    )

    # Snapshot content
    content = Column(
        JSONContent,
        nullable=False,
    )

    status = Column(
        String(50),
        nullable=False,
    )

    # Audit
    edited_by = Column(
        Integer,
        ForeignKey("Users.id", ondelete="SET NULL"),
        nullable=True,
    )

    edited_at = Column(
        DateTime,
        nullable=True,
    )

    change_log = Column(
        Text,
        nullable=True,
    )

    created_at = Column(
        DateTime,
        default=datetime.utcnow,
        nullable=False,
    )

    __table_args__ = (
        UniqueConstraint("document_id", "version", name="uq_project_document_versions_document_version"),
    )

    # Relationships
    editor = relationship(
        "User",
        foreign_keys=[edited_by],
        lazy="joined",
    )

    def __repr__(self) -> str:
        """String representation of ProjectDocumentVersion."""
        return f"<ProjectDocumentVersion(document_id={self.document_id}, version={self.version})>"
