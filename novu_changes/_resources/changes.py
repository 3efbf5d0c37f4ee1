"""Changes resource — list pending/promoted changes and apply them across environments."""

from __future__ import annotations

from typing import TYPE_CHECKING
from urllib.parse import quote

from .._envelope import unwrap
from .._exceptions import DecodeError
from .._types import Change, ChangesResponse
from ._utils import _build_query, _unwrap_data

_list = list  # preserve builtin; shadowed by .list() method

if TYPE_CHECKING:
    from .._http import HTTPClient


def _non_negative(name: str, value: int | None) -> int | None:
    if value is not None and value < 0:
        raise ValueError(f"{name} must be >= 0, got {value}")
    return value


class Changes:
    """client.changes — environment changes awaiting or past promotion."""

    def __init__(self, http: HTTPClient):
        self._http = http

    def list(
        self,
        page: int | None = None,
        limit: int | None = None,
        promoted: bool = False,
    ) -> ChangesResponse:
        """Fetch one page of changes filtered by promotion status.

        Issues a single request. Use ``auto_paging_iter()`` on the result to walk
        the remaining pages.
        """
        params = {
            "page": _non_negative("page", page),
            "limit": _non_negative("limit", limit),
            "promoted": "true" if promoted else "false",
        }
        path = f"/changes/?{_build_query(params)}"
        payload = unwrap(self._http.get(path), method="GET", path=path)

        def _fetch_next(**kw: object) -> ChangesResponse:
            return self.list(limit=limit, promoted=promoted, **kw)  # type: ignore[arg-type]

        try:
            return ChangesResponse.from_dict(_unwrap_data(payload), _fetch_next=_fetch_next)
        except DecodeError as e:
            e.method, e.path = "GET", path
            raise

    def count(self) -> int:
        """Number of changes still waiting to be promoted."""
        path = "/changes/count"
        data = _unwrap_data(unwrap(self._http.get(path), method="GET", path=path))
        if isinstance(data, bool) or not isinstance(data, int):
            raise DecodeError(
                f"Expected an integer count, got {data!r}", method="GET", path=path
            )
        return data

    def apply(self, change_id: str) -> _list[Change]:
        """Promote a single change to the next environment."""
        if not change_id:
            raise ValueError("change_id must not be empty")
        path = f"/changes/{quote(change_id, safe='')}/apply"
        return self._changes(
            unwrap(self._http.post(path), method="POST", path=path), method="POST", path=path
        )

    def apply_bulk(self, change_ids: _list[str]) -> _list[Change]:
        """Promote several changes in one request."""
        if not change_ids:
            raise ValueError("change_ids must not be empty")
        path = "/changes/bulk/apply"
        envelope = self._http.post(path, json={"changeIds": _list(change_ids)})
        return self._changes(unwrap(envelope, method="POST", path=path), method="POST", path=path)

    @staticmethod
    def _changes(payload: object, *, method: str, path: str) -> _list[Change]:
        data = _unwrap_data(payload)
        if not isinstance(data, _list):
            raise DecodeError(
                f"Expected a list of changes, got {data!r}", method=method, path=path
            )
        try:
            return [Change.from_dict(d) for d in data]
        except DecodeError as e:
            e.method, e.path = method, path
            raise
