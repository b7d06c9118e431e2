import pytest

from scriptlist.access import (
    ROLE_ACCESS,
    CheckAccess,
    PermissionDenied,
    RoleIsNilError,
    check,
    resolve_roles,
    role_to_access,
)


def test_admin_may_delete_score():
    access = check(["admin"], "script", "delete:score")
    assert access.roles == ["admin"]
    assert "delete:score" in access.access_map["script"]


def test_owner_may_manage_access_but_not_delete_score():
    access = check(["owner"], "access", "manage")
    assert "manage" in access.access_map["access"]
    with pytest.raises(PermissionDenied) as info:
        check(["owner"], "script", "delete:score")
    assert info.value.resource == "script"
    assert info.value.action == "delete:score"


def test_guest_only_reads_info():
    assert role_to_access(["guest"]) == {"script": {"read:info"}}
    with pytest.raises(PermissionDenied):
        check(["guest"], "script", "write")


def test_manager_has_no_group_access():
    with pytest.raises(PermissionDenied):
        check(["manager"], "group", "read")


def test_unknown_role_grants_nothing():
    assert role_to_access(["nobody"]) == {}
    with pytest.raises(PermissionDenied):
        check(["nobody"], "script", "read:info")


def test_no_roles_denied():
    with pytest.raises(PermissionDenied):
        check([], "script", "read:info")


def test_role_to_access_is_union_of_roles():
    merged = role_to_access(["manager", "guest", "admin"])
    for role in ("manager", "guest", "admin"):
        for resource, actions in ROLE_ACCESS[role].items():
            assert actions <= merged[resource]
    for resource, actions in merged.items():
        assert actions == set().union(
            *(ROLE_ACCESS[r].get(resource, frozenset()) for r in ("manager", "guest", "admin"))
        )


def test_check_access_method_raises_for_missing_action():
    access = CheckAccess(roles=["owner"], access_map=role_to_access(["owner"]))
    access.check("issue", "delete")
    with pytest.raises(PermissionDenied):
        access.check("issue", "create")


def test_resolve_roles_admin_and_owner_skip_fallback():
    def fallback():
        raise AssertionError("fallback must not be called")

    assert resolve_roles(True, 7, 7, fallback) == ["admin", "owner"]
    assert resolve_roles(True, 7, 8, fallback) == ["admin"]
    assert resolve_roles(False, 7, 7, fallback) == ["owner"]


def test_resolve_roles_uses_fallback():
    assert resolve_roles(False, 7, 8, lambda: ["manager", "guest"]) == ["manager", "guest"]


def test_resolve_roles_empty_fallback_raises():
    with pytest.raises(RoleIsNilError):
        resolve_roles(False, 7, 8, lambda: [])
    with pytest.raises(RoleIsNilError):
        resolve_roles(False, 7, 8)


def test_fallback_error_propagates():
    def fallback():
        raise OSError("database down")

    with pytest.raises(OSError):
        resolve_roles(False, 1, 2, fallback)