"""Novu client — entry point owning the shared HTTP transport."""

from __future__ import annotations

import os

from ._exceptions import AuthenticationError
from ._http import HTTPClient
from ._resources import Changes

DEFAULT_BASE_URL = "https://api.novu.co/v1"


class Novu:
    """Client for the Novu API.

    Usage:
        client = Novu(api_key="...")
        page = client.changes.list(limit=10, promoted=False)
        for change in page.auto_paging_iter():
            print(change.id, change.type)
    """

    def __init__(
        self,
        api_key: str | None = None,
        base_url: str | None = None,
        timeout: int = 30,
    ):
        api_key = api_key or os.environ.get("NOVU_API_KEY")
        if not api_key:
            raise AuthenticationError(
                "No API key provided. Pass api_key= or set NOVU_API_KEY env var."
            )
        if base_url is None:
            base_url = os.environ.get("NOVU_BASE_URL") or DEFAULT_BASE_URL

        self._http = HTTPClient(api_key=api_key, base_url=base_url, timeout=timeout)
        self.changes = Changes(self._http)

    def close(self) -> None:
        """Release the underlying HTTP session."""
        self._http.close()

    def __enter__(self) -> Novu:
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()
