"""
Seed a demo tenant with users, a project and a few project documents.

Usage:
    python scripts/seed_demo_data.py

This creates (or reuses):
- Tenant "Acme" (slug "acme")
- Users owner@acme.com and member@acme.com (password "password123")
- A private project owned by owner@acme.com with member@acme.com as member
- A PROJECT_PLAN, a RISK_REGISTER and an AI_FEASIBILITY document
"""

import asyncio
import sys

# Add parent directory to path
sys.path.insert(0, ".")

from sqlalchemy import select

from app.database import async_session_maker
from app.models import Project, ProjectDocumentType, ProjectMember, Tenant, User
from app.schemas.project_document import ProjectDocumentCreate
from app.services.project_document_service import create_project_document
from app.services.tenant_context import tenant_context_for
from app.utils.security import get_password_hash

DEMO_PASSWORD = "password123"

DEMO_DOCUMENTS = [
    (ProjectDocumentType.PROJECT_PLAN, "Rollout Plan"),
    (ProjectDocumentType.RISK_REGISTER, "Rollout Risks"),
    (ProjectDocumentType.AI_FEASIBILITY, "Assistant Feasibility"),
]


async def get_or_create_user(db, tenant: Tenant, email: str, name: str) -> User:
    result = await db.execute(select(User).where(User.email == email))
    user = result.scalar_one_or_none()

    if user is None:
        user = User(
            tenant_id=tenant.id,
            email=email,
            password_hash=get_password_hash(DEMO_PASSWORD),
            name=name,
        )
        db.add(user)
        await db.flush()
        print(f"[OK] Created user: {email}")
    else:
        print(f"-> Using existing user: {email}")

    return user


async def seed_demo_data():
    """Create the demo tenant and its data."""

    async with async_session_maker() as db:
        result = await db.execute(select(Tenant).where(Tenant.slug == "acme"))
        tenant = result.scalar_one_or_none()

        if tenant is None:
            tenant = Tenant(name="Acme", slug="acme")
            db.add(tenant)
            await db.flush()
            print(f"[OK] Created tenant: {tenant.name}")
        else:
            print(f"-> Using existing tenant: {tenant.name}")

        owner = await get_or_create_user(db, tenant, "owner@acme.com", "Olivia Owner")
        member = await get_or_create_user(db, tenant, "member@acme.com", "Max Member")

        project = Project(
            tenant_id=tenant.id,
            owner_id=owner.id,
            name="Customer Portal Relaunch",
        )
        db.add(project)
        await db.flush()
        db.add(ProjectMember(project_id=project.id, user_id=member.id))
        await db.flush()
        print(f"[OK] Created project: {project.name} (id={project.id})")

        ctx = tenant_context_for(owner)
        for template_type, name in DEMO_DOCUMENTS:
            document = await create_project_document(
                db,
                ctx,
                project.id,
                ProjectDocumentCreate(template_type=template_type, name=name),
            )
            print(f"[OK] Created {template_type.value} document: {document.name} (id={document.id})")

        await db.commit()

    print("\nDone. Log in with owner@acme.com / password123")


if __name__ == "__main__":
    asyncio.run(seed_demo_data())
