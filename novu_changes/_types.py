"""Dataclass models mirroring the /changes response schemas."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from dataclasses import dataclass, field
from enum import Enum

from ._exceptions import DecodeError

logger = logging.getLogger(__name__)


class ChangeType(str, Enum):
    """Kind of platform object a change applies to. Wire value is the member name."""

    FEED = "Feed"
    MESSAGE_TEMPLATE = "MessageTemplate"
    LAYOUT = "Layout"
    DEFAULT_LAYOUT = "DefaultLayout"
    NOTIFICATION_TEMPLATE = "NotificationTemplate"
    NOTIFICATION_GROUP = "NotificationGroup"

    @classmethod
    def from_wire(cls, value: object) -> ChangeType:
        if not isinstance(value, str):
            raise DecodeError(f"Change type must be a string, got {type(value).__name__}")
        try:
            return cls(value)
        except ValueError:
            raise DecodeError(f"Unknown change type: {value!r}") from None


def _string(data: dict, key: str) -> str:
    value = data[key]
    if not isinstance(value, str):
        raise DecodeError(f"Field {key!r} must be a string, got {type(value).__name__}")
    return value


def _count(data: dict, key: str) -> int:
    value = data[key]
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise DecodeError(f"Field {key!r} must be a non-negative integer, got {value!r}")
    return value


@dataclass(frozen=True)
class Change:
    """A recorded modification to a platform object, pending or promoted."""

    id: str
    creator_id: str
    environment_id: str
    organization_id: str
    entity_id: str
    parent_id: str
    enabled: bool
    created_at: str
    type: ChangeType

    @classmethod
    def from_dict(cls, data: dict) -> Change:
        if not isinstance(data, dict):
            raise DecodeError(f"Change must be an object, got {type(data).__name__}")
        try:
            enabled = data["enabled"]
            if not isinstance(enabled, bool):
                raise DecodeError(f"Field 'enabled' must be a boolean, got {enabled!r}")
            return cls(
                id=_string(data, "_id"),
                creator_id=_string(data, "_creatorId"),
                environment_id=_string(data, "_environmentId"),
                organization_id=_string(data, "_organizationId"),
                entity_id=_string(data, "_entityId"),
                parent_id=_string(data, "_parentId"),
                enabled=enabled,
                created_at=_string(data, "createdAt"),
                type=ChangeType.from_wire(data["type"]),
            )
        except KeyError as e:
            raise DecodeError(f"Change is missing field {e.args[0]!r}") from None

    def to_dict(self) -> dict:
        return {
            "_id": self.id,
            "_creatorId": self.creator_id,
            "_environmentId": self.environment_id,
            "_organizationId": self.organization_id,
            "_entityId": self.entity_id,
            "_parentId": self.parent_id,
            "enabled": self.enabled,
            "createdAt": self.created_at,
            "type": self.type.value,
        }


@dataclass
class ChangesResponse:
    """One page of changes plus the pagination metadata the server reported."""

    page: int
    total_count: int
    page_size: int
    data: list[Change]
    _fetch_next: Callable[..., ChangesResponse] | None = field(
        default=None, repr=False, compare=False
    )

    @classmethod
    def from_dict(
        cls, data: dict, _fetch_next: Callable[..., ChangesResponse] | None = None
    ) -> ChangesResponse:
        if not isinstance(data, dict):
            raise DecodeError(f"Changes page must be an object, got {type(data).__name__}")
        try:
            items = data["data"]
            if not isinstance(items, list):
                raise DecodeError(f"Field 'data' must be a list, got {type(items).__name__}")
            return cls(
                page=_count(data, "page"),
                total_count=_count(data, "totalCount"),
                page_size=_count(data, "pageSize"),
                data=[Change.from_dict(d) for d in items],
                _fetch_next=_fetch_next,
            )
        except KeyError as e:
            raise DecodeError(f"Changes page is missing field {e.args[0]!r}") from None

    def to_dict(self) -> dict:
        return {
            "page": self.page,
            "totalCount": self.total_count,
            "pageSize": self.page_size,
            "data": [c.to_dict() for c in self.data],
        }

    def auto_paging_iter(self) -> Iterator[Change]:
        """Yield changes from this page and every following one.

        Stops once ``total_count`` items have been seen or a page comes back empty.
        """
        page = self
        seen = 0
        while True:
            yield from page.data
            seen += len(page.data)
            if not page.data or seen >= page.total_count or page._fetch_next is None:
                return
            logger.debug(
                "Fetching changes page %d (%d/%d seen)", page.page + 1, seen, page.total_count
            )
            page = page._fetch_next(page=page.page + 1)
