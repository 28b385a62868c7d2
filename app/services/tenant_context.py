"""Explicit tenant/request context for service calls.

Service functions receive a TenantContext argument instead of reading a
request-scoped global, so they can be called (and tested) without a
running request.
"""

from dataclasses import dataclass
from typing import Optional

from fastapi import Depends

from ..models.user import User
from .auth_service import get_current_user
from .exceptions import TenantContextRequiredError


@dataclass(frozen=True)
class TenantContext:
    """The acting user and the tenant every query is scoped to."""

    user_id: int
    tenant_id: Optional[int]

    @property
    def has_tenant(self) -> bool:
        """Whether the context is scoped to a tenant."""
        return self.tenant_id is not None

    def require_tenant(self) -> int:
        """
        Return the tenant ID.

        Raises:
            TenantContextRequiredError: If the context carries no tenant
        """
        if not self.has_tenant:
            raise TenantContextRequiredError()
        return self.tenant_id


def tenant_context_for(user: User) -> TenantContext:
    """Build the context for a user acting inside their own tenant."""
    return TenantContext(user_id=user.id, tenant_id=user.tenant_id)


async def get_tenant_context(
    current_user: User = Depends(get_current_user),
) -> TenantContext:
    """FastAPI dependency resolving the caller's tenant context."""
    return tenant_context_for(current_user)
