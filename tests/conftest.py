"""Shared pytest fixtures for backend tests.

Tests run against an in-memory SQLite database through aiosqlite. The
fixture data is one tenant ("Acme") with an owner, a project member and
an outsider, plus a second tenant ("Globex") whose user must never see
Acme's data.
"""

import os
import sys
from typing import AsyncGenerator

import bcrypt
import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

# Add app to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from app.database import Base, get_db
from app.main import app
from app.models import Project, ProjectMember, ProjectVisibility, Tenant, User
from app.services.auth_service import create_access_token
from app.services.tenant_context import TenantContext, tenant_context_for

TEST_PASSWORD = "TestPassword123!"


def get_test_password_hash(password: str) -> str:
    """Generate a bcrypt password hash for testing."""
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt()).decode("utf-8")


# Use in-memory SQLite for testing
SQLALCHEMY_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest.fixture(scope="function")
async def engine():
    """Create a test database engine with SQLite."""
    engine = create_async_engine(
        SQLALCHEMY_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    # Enable foreign key support (ON DELETE CASCADE) for SQLite
    @event.listens_for(engine.sync_engine, "connect")
    def set_sqlite_pragma(dbapi_conn, connection_record):
        cursor = dbapi_conn.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    # Clean up
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture(scope="function")
def session_maker(engine) -> async_sessionmaker:
    """Session factory bound to the test engine."""
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )


@pytest.fixture(scope="function")
async def db_session(session_maker) -> AsyncGenerator[AsyncSession, None]:
    """Create a test database session."""
    async with session_maker() as session:
        try:
            yield session
        finally:
            await session.rollback()


@pytest.fixture(scope="function")
async def client(session_maker) -> AsyncGenerator[AsyncClient, None]:
    """
    Create an async test client.

    Each request gets its own session that commits on success and rolls
    back on error, like ``get_db`` does in production.
    """
    async def override_get_db():
        async with session_maker() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db] = override_get_db

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as test_client:
        yield test_client

    app.dependency_overrides.clear()


# ============================================================================
# Tenants and users
# ============================================================================


@pytest.fixture
async def tenant(db_session: AsyncSession) -> Tenant:
    """The main test tenant."""
    tenant = Tenant(name="Acme", slug="acme")
    db_session.add(tenant)
    await db_session.commit()
    return tenant


@pytest.fixture
async def other_tenant(db_session: AsyncSession) -> Tenant:
    """A second tenant whose data must stay invisible to the first."""
    tenant = Tenant(name="Globex", slug="globex")
    db_session.add(tenant)
    await db_session.commit()
    return tenant


async def _create_user(db: AsyncSession, tenant_id, email: str, name: str) -> User:
    user = User(
        tenant_id=tenant_id,
        email=email,
        password_hash=get_test_password_hash(TEST_PASSWORD),
        name=name,
    )
    db.add(user)
    await db.commit()
    return user


@pytest.fixture
async def owner(db_session: AsyncSession, tenant: Tenant) -> User:
    """Owner of the test projects."""
    return await _create_user(db_session, tenant.id, "owner@acme.com", "Olivia Owner")


@pytest.fixture
async def member(db_session: AsyncSession, tenant: Tenant) -> User:
    """Member of the private project."""
    return await _create_user(db_session, tenant.id, "member@acme.com", "Max Member")


@pytest.fixture
async def outsider(db_session: AsyncSession, tenant: Tenant) -> User:
    """Same tenant, but neither owner nor member of any project."""
    return await _create_user(db_session, tenant.id, "outsider@acme.com", "Otto Outsider")


@pytest.fixture
async def other_tenant_user(db_session: AsyncSession, other_tenant: Tenant) -> User:
    """A user of the second tenant."""
    return await _create_user(db_session, other_tenant.id, "user@globex.com", "Gina Globex")


@pytest.fixture
async def tenantless_user(db_session: AsyncSession) -> User:
    """A user without a tenant."""
    return await _create_user(db_session, None, "nobody@acme.com", "No Tenant")


# ============================================================================
# Projects
# ============================================================================


@pytest.fixture
async def private_project(
    db_session: AsyncSession, tenant: Tenant, owner: User, member: User
) -> Project:
    """Private project owned by ``owner`` with ``member`` as a member."""
    project = Project(
        tenant_id=tenant.id,
        owner_id=owner.id,
        name="Portal Relaunch",
        visibility=ProjectVisibility.PRIVATE.value,
        members=[ProjectMember(user_id=member.id, role="member")],
    )
    db_session.add(project)
    await db_session.commit()
    return project


@pytest.fixture
async def tenant_project(db_session: AsyncSession, tenant: Tenant, owner: User) -> Project:
    """Project visible to every user of the tenant."""
    project = Project(
        tenant_id=tenant.id,
        owner_id=owner.id,
        name="Company Handbook",
        visibility=ProjectVisibility.TENANT.value,
        members=[],
    )
    db_session.add(project)
    await db_session.commit()
    return project


@pytest.fixture
async def other_tenant_project(
    db_session: AsyncSession, other_tenant: Tenant, other_tenant_user: User
) -> Project:
    """Project of the second tenant."""
    project = Project(
        tenant_id=other_tenant.id,
        owner_id=other_tenant_user.id,
        name="Globex Secret",
        visibility=ProjectVisibility.TENANT.value,
        members=[],
    )
    db_session.add(project)
    await db_session.commit()
    return project


# ============================================================================
# Contexts and auth
# ============================================================================


@pytest.fixture
def owner_ctx(owner: User) -> TenantContext:
    """Service context for the project owner."""
    return tenant_context_for(owner)


@pytest.fixture
def member_ctx(member: User) -> TenantContext:
    """Service context for the project member."""
    return tenant_context_for(member)


@pytest.fixture
def outsider_ctx(outsider: User) -> TenantContext:
    """Service context for the outsider."""
    return tenant_context_for(outsider)


@pytest.fixture
def other_tenant_ctx(other_tenant_user: User) -> TenantContext:
    """Service context for the second tenant's user."""
    return tenant_context_for(other_tenant_user)


def _auth_headers(user: User) -> dict:
    token = create_access_token(data={"sub": str(user.id), "email": user.email})
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def auth_headers(owner: User) -> dict:
    """Authorization headers for the project owner."""
    return _auth_headers(owner)


@pytest.fixture
def member_headers(member: User) -> dict:
    """Authorization headers for the project member."""
    return _auth_headers(member)


@pytest.fixture
def outsider_headers(outsider: User) -> dict:
    """Authorization headers for the outsider."""
    return _auth_headers(outsider)


@pytest.fixture
def other_tenant_headers(other_tenant_user: User) -> dict:
    """Authorization headers for the second tenant's user."""
    return _auth_headers(other_tenant_user)


@pytest.fixture
def tenantless_headers(tenantless_user: User) -> dict:
    """Authorization headers for the user without a tenant."""
    return _auth_headers(tenantless_user)
