"""Script access roles and the resource actions each role may perform."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass, field

ROLE_ADMIN = "admin"
ROLE_OWNER = "owner"
ROLE_MANAGER = "manager"
ROLE_GUEST = "guest"

ROLE_ACCESS: Mapping[str, Mapping[str, frozenset[str]]] = {
    ROLE_ADMIN: {
        "script": frozenset(
            {"write", "delete:score", "delete", "manage", "read:info", "reply:score"}
        ),
        "group": frozenset({"read", "manage"}),
        "access": frozenset({"read"}),
        "issue": frozenset({"manage", "delete"}),
        "statistics": frozenset({"manage"}),
    },
    ROLE_OWNER: {
        "script": frozenset({"write", "delete", "manage", "read:info", "reply:score"}),
        "group": frozenset({"read", "manage"}),
        "access": frozenset({"read", "manage"}),
        "issue": frozenset({"manage", "delete"}),
        "statistics": frozenset({"manage"}),
    },
    ROLE_MANAGER: {
        "script": frozenset({"write", "manage", "read:info"}),
        "issue": frozenset({"manage", "delete"}),
        "statistics": frozenset({"manage"}),
    },
    ROLE_GUEST: {
        "script": frozenset({"read:info"}),
    },
}


class PermissionDenied(PermissionError):
    """The roles held do not allow the action on the resource."""

    def __init__(self, resource: str, action: str) -> None:
        super().__init__(f"no permission for {action} on {resource}")
        self.resource = resource
        self.action = action


class RoleIsNilError(LookupError):
    """The user holds no role at all on the script."""

    def __init__(self) -> None:
        super().__init__("role is nil")


def role_to_access(roles: Iterable[str]) -> dict[str, set[str]]:
    """Merge the resource actions granted by every role; unknown roles grant nothing."""
    merged: dict[str, set[str]] = {}
    for role in roles:
        for resource, actions in ROLE_ACCESS.get(role, {}).items():
            merged.setdefault(resource, set()).update(actions)
    return merged


@dataclass
class CheckAccess:
    """The roles a user holds on a script and the actions they grant."""

    roles: list[str]
    access_map: dict[str, set[str]] = field(default_factory=dict)

    def check(self, resource: str, action: str) -> None:
        """Raise PermissionDenied unless the action on the resource is granted."""
        if action not in self.access_map.get(resource, ()):
            raise PermissionDenied(resource, action)


def resolve_roles(
    is_admin: bool,
    uid: int,
    owner_uid: int,
    fallback: Callable[[], Iterable[str]] | None = None,
) -> list[str]:
    """Work out a user's roles on a script.

    Site admins hold "admin" and the script's author holds "owner"; anyone else
    gets what the fallback lookup returns. RoleIsNilError is raised when no role
    is found.
    """
    roles: list[str] = []
    if is_admin:
        roles.append(ROLE_ADMIN)
    if uid == owner_uid:
        roles.append(ROLE_OWNER)
    if roles:
        return roles
    if fallback is not None:
        roles = list(fallback())
    if not roles:
        raise RoleIsNilError()
    return roles


def check(roles: Iterable[str], resource: str, action: str) -> CheckAccess:
    """Build the access of the given roles and require the action on the resource."""
    role_list = list(roles)
    access = CheckAccess(roles=role_list, access_map=role_to_access(role_list))
    access.check(resource, action)
    return access