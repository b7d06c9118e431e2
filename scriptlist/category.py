"""Tag normalisation and link differencing for script categories and tags."""

from __future__ import annotations

from collections.abc import Iterable
from typing import NamedTuple


class LinkDiff(NamedTuple):
    """Category ids whose links must be removed, and those that must be added."""

    remove: list[int]
    add: list[int]


def normalize_tags(tags: Iterable[str]) -> list[str]:
    """Split each tag on ", ", strip blanks and drop duplicates, keeping first-seen order."""
    seen: dict[str, None] = {}
    for tag in tags:
        for part in tag.split(", "):
            part = part.strip()
            if part:
                seen.setdefault(part, None)
    return list(seen)


def diff_links(existing: Iterable[int], wanted: Iterable[int]) -> LinkDiff:
    """Compare a script's linked category ids with the wanted ones."""
    pending = dict.fromkeys(wanted)
    remove: list[int] = []
    for category_id in existing:
        if category_id in pending:
            # Already linked: keep it and do not link it again.
            del pending[category_id]
        else:
            remove.append(category_id)
    return LinkDiff(remove=remove, add=list(pending))