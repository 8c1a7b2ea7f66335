from __future__ import annotations

from typing import Optional

from invstatus.domain.models import AccessContext

MODULES = ("products", "materials", "customers", "suppliers", "recipes")
ACTIONS = ("create", "edit", "delete", "view")


def is_admin(ctx: Optional[AccessContext]) -> bool:
    return ctx is not None and ctx.role == "admin"


def has_permission(ctx: Optional[AccessContext], module: str, action: str) -> bool:
    """Admins may do anything; other roles need an explicit ``True`` flag."""
    if ctx is None:
        return False
    if is_admin(ctx):
        return True
    flags = ctx.permissions.get(module) or {}
    return flags.get(action) is True


def can_create(ctx: Optional[AccessContext], module: str) -> bool:
    return has_permission(ctx, module, "create")


def can_edit(ctx: Optional[AccessContext], module: str) -> bool:
    return has_permission(ctx, module, "edit")


def can_delete(ctx: Optional[AccessContext], module: str) -> bool:
    return has_permission(ctx, module, "delete")


def can_view(ctx: Optional[AccessContext], module: str) -> bool:
    return has_permission(ctx, module, "view")
