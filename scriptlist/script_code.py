"""Script code helpers: tags implied by metadata, metadata decoding and gray-release selection."""

from __future__ import annotations

import json
import logging
from collections.abc import Callable, Iterable, Mapping, Sequence
from typing import Any, Optional, TypeVar

from .gray_control import And, Control, Cookie, PreRelease, RequestContext, Weight

logger = logging.getLogger(__name__)

USERSCRIPT_TYPE = 1
SUBSCRIBE_TYPE = 2
LIBRARY_TYPE = 3

BACKGROUND_TAG = "后台脚本"
CRONTAB_TAG = "定时脚本"

GRAY_WEIGHT = "weight"
GRAY_COOKIE = "cookie"
GRAY_PRE_RELEASE = "pre-release"

CodeT = TypeVar("CodeT")


def derive_tags(meta: Mapping[str, Sequence[str]], tags: Iterable[str] | None) -> list[str]:
    """Return the tags with those implied by @background and @crontab appended."""
    result = list(tags or ())
    has_background = bool(meta.get("background"))
    has_crontab = bool(meta.get("crontab"))
    if has_background or has_crontab:
        result.append(BACKGROUND_TAG)
    if has_crontab:
        result.append(CRONTAB_TAG)
    return result


def decode_meta(script_type: int, meta_json: str) -> dict[str, Any]:
    """Decode the stored metadata of a user script; other types have none.

    Metadata that is not a JSON object is logged and treated as empty.
    """
    if script_type != USERSCRIPT_TYPE:
        return {}
    try:
        decoded = json.loads(meta_json)
    except (ValueError, TypeError):
        logger.exception("json解析失败: meta=%r", meta_json)
        return {}
    if decoded is None:
        return {}
    if not isinstance(decoded, dict):
        logger.error("json解析失败: meta=%r is not an object", meta_json)
        return {}
    return decoded


def _build_control(rule: Mapping[str, Any], is_pre_user: bool) -> Control | None:
    kind = rule.get("type")
    params = rule.get("params") or {}
    if kind == GRAY_WEIGHT:
        return Weight(int(params.get("weight", 0)), float(params.get("weight_day", 0.0)))
    if kind == GRAY_COOKIE:
        return Cookie(str(params.get("cookie_regex", "")))
    if kind == GRAY_PRE_RELEASE:
        return PreRelease(is_pre_user)
    return None


def select_code(
    controls: Iterable[Mapping[str, Any]],
    ctx: RequestContext,
    is_pre_user: bool,
    find_target: Callable[[str], Optional[CodeT]],
    latest: Callable[[], Optional[CodeT]],
    all_latest: Callable[[], Optional[CodeT]],
) -> Optional[CodeT]:
    """Pick the code version a request gets under the script's gray-release rules.

    Each entry names a "target_version" and a list of "controls"; the first
    entry whose target exists and whose controls all match wins. Otherwise
    pre-release users get the newest version of any kind and everyone else
    the newest release.
    """
    for entry in controls:
        code = find_target(str(entry.get("target_version", "")))
        if code is None:
            continue
        condition = And()
        for rule in entry.get("controls") or ():
            control = _build_control(rule, is_pre_user)
            if control is not None:
                condition.append(control)
        if condition.match(ctx, code):
            return code
    if is_pre_user:
        return all_latest()
    return latest()