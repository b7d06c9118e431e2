"""Version strings: gray-release targets, library bumps, pre-release detection and roles."""

from __future__ import annotations

import re
from collections.abc import Callable, Iterable, Mapping
from enum import Enum
from typing import NamedTuple, Union

from .access import ROLE_GUEST

_INTEGER = re.compile(r"[+-]?\d+")

_IDENT = r"[0-9A-Za-z\-]+(?:\.[0-9A-Za-z\-]+)*"
_SEMVER = re.compile(
    r"v?(?P<major>[0-9]+)(?:\.(?P<minor>[0-9]+))?(?:\.(?P<patch>[0-9]+))?"
    rf"(?:-(?P<pre>{_IDENT}))?(?:\+(?P<meta>{_IDENT}))?"
)


class TargetKind(Enum):
    """How a gray-release target picks its code version."""

    PRE_LATEST = "pre-latest"
    ALL_LATEST = "all-latest"
    LATEST = "latest"
    VERSION = "version"


class TargetVersion(NamedTuple):
    """A parsed target: the kind of lookup, its offset, and the exact version for VERSION."""

    kind: TargetKind
    offset: int = 0
    version: str = ""


def _atoi(text: str) -> int:
    return int(text) if _INTEGER.fullmatch(text) else 0


def parse_target_version(target: str) -> TargetVersion:
    """Parse "latest", "pre-latest^2", "all-latest^1" or an exact version.

    The part after "^" is an offset back from the newest version; a value that
    is not an integer counts as 0. More than one "^" raises ValueError.
    """
    parts = target.split("^")
    if len(parts) == 1:
        parts.append("")
    elif len(parts) != 2:
        raise ValueError("targetVersion格式错误")
    name, offset_text = parts
    offset = _atoi(offset_text)
    if name == TargetKind.PRE_LATEST.value:
        return TargetVersion(TargetKind.PRE_LATEST, offset)
    if name == TargetKind.ALL_LATEST.value:
        return TargetVersion(TargetKind.ALL_LATEST, offset)
    if name == TargetKind.LATEST.value:
        return TargetVersion(TargetKind.LATEST, offset)
    if target == "":
        return TargetVersion(TargetKind.LATEST, 0)
    return TargetVersion(TargetKind.VERSION, 0, target)


def next_library_version(version: str) -> str:
    """Add one to the last dot-separated part; a version without a dot gains ".1".

    A last part that is not an integer counts as 0.
    """
    head, dot, last = version.rpartition(".")
    if not dot:
        return version + ".1"
    return f"{head}.{_atoi(last) + 1}"


def is_prerelease(version: str) -> bool:
    """Return whether a semantic version carries a pre-release part.

    A leading "v" and missing minor or patch numbers are accepted. Anything
    else that is not a semantic version raises ValueError.
    """
    match = _SEMVER.fullmatch(version)
    if match is None:
        raise ValueError(f"invalid semantic version: {version!r}")
    pre = match.group("pre") or ""
    for identifier in pre.split(".") if pre else ():
        if identifier.isdigit() and len(identifier) > 1 and identifier.startswith("0"):
            raise ValueError(f"invalid semantic version: {version!r}")
    return pre != ""


def code_changed(old_code: str, new_code: str) -> bool:
    """Compare two sources, treating CRLF and LF line endings as the same."""
    return old_code.replace("\r\n", "\n") != new_code.replace("\r\n", "\n")


Rank = Union[Callable[[str], int], Mapping[str, int]]


def highest_role(roles: Iterable[str], rank: Rank) -> str:
    """Return the highest-ranked role, the first one on ties; no roles means guest."""
    key = rank.__getitem__ if isinstance(rank, Mapping) else rank
    best: str | None = None
    for role in roles:
        if best is None or key(role) > key(best):
            best = role
    return ROLE_GUEST if best is None else best