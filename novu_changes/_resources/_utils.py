"""Shared helpers for resource modules."""

from typing import Any


def _build_query(params: dict[str, Any]) -> str:
    """Join params as ``k=v&k=v``, omitting None values. Values are not URL-escaped."""
    return "&".join(f"{k}={v}" for k, v in params.items() if v is not None)


def _unwrap_data(payload: Any) -> Any:
    """Strip the ``{"data": ...}`` wrapper some endpoints put around their result."""
    if isinstance(payload, dict) and set(payload) == {"data"}:
        return payload["data"]
    return payload
