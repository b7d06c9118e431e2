"""Gray-release controls that decide whether a request gets a given code version."""

from __future__ import annotations

import random
import re
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Protocol

GRAY_WEIGHT_COOKIE = "gray_weight"

_INTEGER = re.compile(r"[+-]?\d+")


class CodeVersion(Protocol):
    """Anything that carries the creation time of a code version."""

    createtime: int


@dataclass
class RequestContext:
    """The parts of an HTTP request and response that the controls look at."""

    headers: dict[str, str] = field(default_factory=dict)
    cookies: dict[str, str] = field(default_factory=dict)
    response_cookies: dict[str, tuple[str, int]] = field(default_factory=dict)

    def header(self, name: str) -> str:
        """Return a request header, matched case-insensitively, or an empty string."""
        wanted = name.lower()
        return next((value for key, value in self.headers.items() if key.lower() == wanted), "")

    def cookie(self, name: str) -> str | None:
        """Return a request cookie, or None if the request has none of that name."""
        return self.cookies.get(name)

    def set_cookie(self, name: str, value: str, max_age: int) -> None:
        """Record a cookie to be sent back with the response."""
        self.response_cookies[name] = (value, max_age)


class Control(ABC):
    """A rule deciding whether a target version applies to a request."""

    @abstractmethod
    def match(self, ctx: RequestContext, target: CodeVersion) -> bool:
        """Return True if the target version applies to this request."""


class And(Control):
    """Matches when every inner control matches; an empty And always matches."""

    def __init__(self, *controls: Control) -> None:
        self.controls: list[Control] = list(controls)

    def match(self, ctx: RequestContext, target: CodeVersion) -> bool:
        return all(control.match(ctx, target) for control in self.controls)

    def append(self, control: Control) -> And:
        self.controls.append(control)
        return self


class Or(Control):
    """Matches when any inner control matches; an empty Or never matches."""

    def __init__(self, *controls: Control) -> None:
        self.controls: list[Control] = list(controls)

    def match(self, ctx: RequestContext, target: CodeVersion) -> bool:
        return any(control.match(ctx, target) for control in self.controls)

    def append(self, control: Control) -> Or:
        self.controls.append(control)
        return self


class Cookie(Control):
    """Matches when the raw Cookie header contains the regular expression."""

    def __init__(self, regex: str) -> None:
        self.regex = regex

    def match(self, ctx: RequestContext, target: CodeVersion) -> bool:
        return re.search(self.regex, ctx.header("cookie")) is not None


class PreRelease(Control):
    """Matches exactly when the requesting user opted into pre-releases."""

    def __init__(self, is_pre_release: bool) -> None:
        self.is_pre_release = is_pre_release

    def match(self, ctx: RequestContext, target: CodeVersion) -> bool:
        return self.is_pre_release


def _atoi(text: str) -> int:
    return int(text) if _INTEGER.fullmatch(text) else 0


def _go_mod(x: int, m: int) -> int:
    remainder = abs(x) % m
    return -remainder if x < 0 else remainder


class Weight(Control):
    """Matches a percentage of users, optionally ramped up over a number of days."""

    def __init__(self, weight: int, weight_day: float = 0.0) -> None:
        self.weight = weight
        self.weight_day = weight_day

    def match(self, ctx: RequestContext, target: CodeVersion) -> bool:
        weight = ctx.cookie(GRAY_WEIGHT_COOKIE) or ""
        if not weight:
            ctx.set_cookie(GRAY_WEIGHT_COOKIE, str(random.randrange(100)), 0)
        # The bucket is taken from the incoming cookie only; a freshly issued one counts from the next request.
        n = _atoi(weight)
        return self.match_at(datetime.now(timezone.utc), n, target.createtime)

    def match_at(self, now: datetime, n: int, createtime: int) -> bool:
        """Decide for bucket n at time now, given the version's creation time."""
        weight = self.weight
        if self.weight_day != 0:
            elapsed_days = abs(now.timestamp() - createtime) / 86400
            ramp = elapsed_days / self.weight_day
            if ramp < 1:
                weight = int(weight * ramp)
        # Offsetting by the creation time keeps low buckets from always getting every update.
        return _go_mod(int(createtime) + n, 100) <= weight