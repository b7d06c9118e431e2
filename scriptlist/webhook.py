"""GitHub webhook handling: signature checks and the sync URLs a push touches."""

from __future__ import annotations

import hashlib
import hmac
import json
from typing import Any

SIGNATURE_PREFIX = "sha256="
RAW_PREFIX = "https://raw.githubusercontent.com/"
REPOSITORY_PREFIX = "https://github.com/"


class WebhookError(Exception):
    """A webhook request that cannot be accepted.

    `reason` is "secret" when the signature does not match and "repository"
    when the payload names no repository.
    """

    def __init__(self, reason: str, message: str) -> None:
        super().__init__(message)
        self.reason = reason


def verify_github_signature(secret: str, body: bytes, signature: str) -> str:
    """Check an X-Hub-Signature-256 value against the HMAC-SHA256 of the body.

    Returns the signature on success and raises WebhookError on a mismatch.
    """
    digest = hmac.new(secret.encode("utf-8"), body, hashlib.sha256).hexdigest()
    expected = SIGNATURE_PREFIX + digest
    if not hmac.compare_digest(expected.encode("utf-8"), signature.encode("utf-8")):
        raise WebhookError("secret", "webhook signature does not match")
    return expected


def _field(obj: dict[str, Any], name: str) -> Any:
    if name in obj:
        return obj[name]
    lowered = name.lower()
    return next((value for key, value in obj.items() if key.lower() == lowered), None)


def _object(value: Any, path: str) -> dict[str, Any]:
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ValueError(f"{path}: expected an object")
    return value


def _string(value: Any, path: str) -> str:
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ValueError(f"{path}: expected a string")
    return value


def github_repository(body: bytes | str) -> str:
    """Return the repository full name from a GitHub webhook payload.

    Malformed JSON or fields of the wrong type raise ValueError; a payload
    without a repository name raises WebhookError.
    """
    payload = _object(json.loads(body), "payload")
    hook = _object(_field(payload, "hook"), "hook")
    _string(_field(hook, "type"), "hook.type")
    repository = _object(_field(payload, "repository"), "repository")
    full_name = _string(_field(repository, "full_name"), "repository.full_name")
    if not full_name:
        raise WebhookError("repository", "webhook payload names no repository")
    return full_name


def sync_prefixes(full_name: str) -> tuple[str, str]:
    """The sync URL prefixes under which scripts of the repository are found."""
    return RAW_PREFIX + full_name, REPOSITORY_PREFIX + full_name