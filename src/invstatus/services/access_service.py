from __future__ import annotations

from invstatus.domain.errors import AuthorizationError
from invstatus.domain.models import AccessContext
from invstatus.domain.permissions import ACTIONS, MODULES, has_permission, is_admin


class AccessService:
    """Permission checks against an explicitly injected access context."""

    def __init__(self, access: AccessContext | None):
        self.access = access

    @property
    def role(self) -> str:
        return self.access.role if self.access else ""

    def is_admin(self) -> bool:
        return is_admin(self.access)

    def can(self, module: str, action: str) -> bool:
        return has_permission(self.access, module, action)

    def require(self, module: str, action: str) -> None:
        if not self.can(module, action):
            raise AuthorizationError(f"Role '{self.role or 'anonymous'}' is not allowed to {action} {module}.")

    def matrix(self) -> dict[str, dict[str, bool]]:
        return {m: {a: self.can(m, a) for a in ACTIONS} for m in MODULES}
