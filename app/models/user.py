"""User SQLAlchemy model for authentication and user management."""

from datetime import datetime

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String

from ..database import Base


class User(Base):
    """
    User model representing application users.

    A user belongs to at most one tenant; that tenant becomes the tenant
    context of every request the user makes. Users without a tenant can
    authenticate but cannot touch project documents.

    Attributes:
        id: Unique identifier
        tenant_id: FK to Tenants (nullable for platform-level accounts)
        email: User's email address (unique)
        password_hash: Hashed password for authentication
        name: User's display name
        created_at: Timestamp when user was created
        updated_at: Timestamp when user was last updated
    """

    __tablename__ = "Users"
    __allow_unmapped__ = True

    id = Column(
        Integer,
        primary_key=True,
        autoincrement=True,
    )

    tenant_id = Column(
        Integer,
        ForeignKey("Tenants.id", ondelete="CASCADE"),
        nullable=True,
        index=True,
    )

    # Authentication fields
    email = Column(
        String(255),
        unique=True,
        nullable=False,
        index=True,
    )
    password_hash = Column(
        String(255),
        nullable=False,
    )

    # Profile fields
    name = Column(
        String(100),
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

    def __repr__(self) -> str:
        """String representation of User."""
        return f"<User(id={self.id}, email={self.email})>"
