import pytest

from scriptlist.access import ROLE_ADMIN, ROLE_GUEST, ROLE_MANAGER, ROLE_OWNER
from scriptlist.versions import (
    TargetKind,
    code_changed,
    highest_role,
    is_prerelease,
    next_library_version,
    parse_target_version,
)

RANKS = {ROLE_GUEST: 1, ROLE_MANAGER: 2, ROLE_OWNER: 3, ROLE_ADMIN: 4}


@pytest.mark.parametrize(
    "target, kind",
    [
        ("latest", TargetKind.LATEST),
        ("pre-latest", TargetKind.PRE_LATEST),
        ("all-latest", TargetKind.ALL_LATEST),
    ],
)
def test_parse_named_targets_without_offset(target, kind):
    parsed = parse_target_version(target)
    assert parsed.kind is kind
    assert parsed.offset == 0


def test_parse_offset():
    parsed = parse_target_version("pre-latest^2")
    assert parsed.kind is TargetKind.PRE_LATEST
    assert parsed.offset == 2


def test_parse_non_numeric_offset_counts_as_zero():
    assert parse_target_version("latest^abc").offset == 0


def test_parse_exact_version_keeps_whole_string():
    parsed = parse_target_version("1.2.3")
    assert parsed.kind is TargetKind.VERSION
    assert parsed.version == "1.2.3"


def test_parse_unknown_name_with_caret_is_exact_version():
    parsed = parse_target_version("1.0^3")
    assert parsed.kind is TargetKind.VERSION
    assert parsed.version == "1.0^3"


def test_parse_empty_is_latest():
    assert parse_target_version("").kind is TargetKind.LATEST


def test_parse_two_carets_raises():
    with pytest.raises(ValueError):
        parse_target_version("latest^1^2")


def test_next_library_version_without_dot():
    assert next_library_version("3") == "3" + ".1"


def test_next_library_version_bumps_last_part():
    assert next_library_version("1.2.9") == "1.2.10"


def test_next_library_version_non_numeric_last_part():
    assert next_library_version("1.2.x") == "1.2.1"


@pytest.mark.parametrize("version", ["1.0", "0.1.5", "2.3.4.7"])
def test_next_library_version_keeps_prefix(version):
    bumped = next_library_version(version)
    assert bumped.rsplit(".", 1)[0] == version.rsplit(".", 1)[0]
    assert bumped != version


@pytest.mark.parametrize("version", ["1.0.0-beta", "v1.2-rc.1", "2.0.0-alpha.1+build.5"])
def test_prerelease_versions(version):
    assert is_prerelease(version) is True


@pytest.mark.parametrize("version", ["1.0.0", "v2", "1.2", "1.0.0+build"])
def test_release_versions(version):
    assert is_prerelease(version) is False


@pytest.mark.parametrize("version", ["", "abc", "1.0.0-", "1.0.0-01"])
def test_invalid_versions_raise(version):
    with pytest.raises(ValueError):
        is_prerelease(version)


def test_code_changed_ignores_line_endings():
    assert code_changed("a\r\nb\r\n", "a\nb\n") is False


def test_code_changed_detects_difference():
    assert code_changed("a\nb", "a\nc") is True


def test_highest_role_with_mapping():
    assert highest_role([ROLE_GUEST, ROLE_OWNER, ROLE_MANAGER], RANKS) == ROLE_OWNER


def test_highest_role_with_callable():
    assert highest_role([ROLE_MANAGER, ROLE_ADMIN], RANKS.get) == ROLE_ADMIN


def test_highest_role_empty_is_guest():
    assert highest_role([], RANKS) == ROLE_GUEST


def test_highest_role_keeps_first_on_tie():
    assert highest_role(["x", "y"], lambda role: 0) == "x"