"""Download the text behind a sync URL."""

from __future__ import annotations

import urllib.error
import urllib.request

DEFAULT_TIMEOUT = 10.0


def fetch_url(url: str, timeout: float = DEFAULT_TIMEOUT) -> str:
    """GET the URL and return its body as text, whatever the status code.

    Raises ValueError for a malformed URL and OSError when the request fails.
    """
    request = urllib.request.Request(url, method="GET")
    try:
        with urllib.request.urlopen(request, timeout=timeout) as response:
            body = response.read()
    except urllib.error.HTTPError as error:
        with error:
            body = error.read()
    return body.decode("utf-8", errors="replace")