from invstatus.domain.models import AccessContext
from invstatus.domain.permissions import MODULES, can_create, can_delete, can_edit, can_view, is_admin


def test_admin_can_do_everything_without_permission_flags():
    admin = AccessContext(role="admin")
    assert is_admin(admin)
    for module in MODULES:
        assert can_create(admin, module)
        assert can_edit(admin, module)
        assert can_delete(admin, module)


def test_non_admin_needs_explicit_flag():
    ctx = AccessContext.from_records(
        {"role": "staff"},
        {"recipes": {"create": True, "edit": False}, "suppliers": "garbage"},
    )
    assert not is_admin(ctx)
    assert can_create(ctx, "recipes")
    assert not can_edit(ctx, "recipes")
    assert not can_delete(ctx, "recipes")
    assert not can_view(ctx, "suppliers")


def test_missing_context_denies_everything():
    assert not is_admin(None)
    assert not can_view(None, "products")
    assert not can_delete(AccessContext(), "products")
