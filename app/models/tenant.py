"""Tenant SQLAlchemy model - the isolation boundary for all PMO data."""

from datetime import datetime

from sqlalchemy import Column, DateTime, Integer, String

from ..database import Base


class Tenant(Base):
    """
    Tenant model representing one customer organisation.

    Every project, document and version row belongs to exactly one tenant,
    and every query issued by the document service is scoped to the
    caller's tenant.

    Attributes:
        id: Unique identifier
        name: Display name of the organisation
        slug: URL-safe unique identifier
        created_at: Timestamp when tenant was created
    """

    __tablename__ = "Tenants"
    __allow_unmapped__ = True

    id = Column(
        Integer,
        primary_key=True,
        autoincrement=True,
    )

    name = Column(
        String(255),
        nullable=False,
    )

    slug = Column(
        String(100),
        unique=True,
        nullable=False,
        index=True,
    )

    created_at = Column(
        DateTime,
        default=datetime.utcnow,
        nullable=False,
    )

    def __repr__(self) -> str:
        """String representation of Tenant."""
        return f"<Tenant(id={self.id}, slug={self.slug})>"
