"""Project and ProjectMember SQLAlchemy models."""

from datetime import datetime
from enum import Enum

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, UniqueConstraint
from sqlalchemy.orm import relationship

from ..database import Base


class ProjectVisibility(str, Enum):
    """Who besides the owner and members can see a project."""

    PRIVATE = "PRIVATE"
    TEAM = "TEAM"
    TENANT = "TENANT"


class Project(Base):
    """
    Project model. Documents hang off projects.

    Attributes:
        id: Unique identifier
        tenant_id: FK to the owning tenant
        owner_id: FK to the user who owns the project
        name: Project name
        visibility: PRIVATE, TEAM or TENANT (TENANT grants access to the whole tenant)
        created_at: Timestamp when project was created
        updated_at: Timestamp when project was last updated
    """

    __tablename__ = "Projects"
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

    owner_id = Column(
        Integer,
        ForeignKey("Users.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )

    name = Column(
        String(255),
        nullable=False,
    )

    visibility = Column(
        String(20),
        nullable=False,
        default=ProjectVisibility.PRIVATE.value,
    )

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

    # Relationships
    members = relationship(
        "ProjectMember",
        back_populates="project",
        cascade="all, delete-orphan",
        lazy="selectin",
    )

    def __repr__(self) -> str:
        """String representation of Project."""
        return f"<Project(id={self.id}, name={self.name})>"


class ProjectMember(Base):
    """
    Membership of a user in a project.

    Attributes:
        id: Unique identifier
        project_id: FK to Projects
        user_id: FK to Users
        role: Free-form project role (e.g. "member", "admin")
        created_at: Timestamp when the membership was created
    """

    __tablename__ = "ProjectMembers"
    __allow_unmapped__ = True

    id = Column(
        Integer,
        primary_key=True,
        autoincrement=True,
    )

    project_id = Column(
        Integer,
        ForeignKey("Projects.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    user_id = Column(
        Integer,
        ForeignKey("Users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    role = Column(
        String(50),
        nullable=False,
        default="member",
    )

    created_at = Column(
        DateTime,
        default=datetime.utcnow,
        nullable=False,
    )

    __table_args__ = (
        UniqueConstraint("project_id", "user_id", name="uq_project_members_project_user"),
    )

    # Relationships
    project = relationship(
        "Project",
        back_populates="members",
    )

    def __repr__(self) -> str:
        """String representation of ProjectMember."""
        return f"<ProjectMember(project_id={self.project_id}, user_id={self.user_id}, role={self.role})>"
