"""Test data factories for novu_changes."""

from typing import Any


class ChangeDataFactory:
    """Factory for wire-format /changes payloads."""

    @staticmethod
    def create_change_data(
        change_id: str = "chg_1",
        change_type: str = "NotificationTemplate",
        enabled: bool = False,
        **overrides: Any,
    ) -> dict[str, Any]:
        """Create a single change record as the API returns it."""
        change = {
            "_id": change_id,
            "_creatorId": "usr_1",
            "_environmentId": "env_dev",
            "_organizationId": "org_1",
            "_entityId": f"ent_{change_id}",
            "_parentId": "par_1",
            "enabled": enabled,
            "createdAt": "2024-01-01T00:00:00.000Z",
            "type": change_type,
        }
        change.update(overrides)
        return change

    @staticmethod
    def create_page_data(
        changes: list[dict[str, Any]] | None = None,
        page: int = 0,
        total_count: int | None = None,
        page_size: int = 10,
    ) -> dict[str, Any]:
        """Create a paginated list body."""
        changes = changes or []
        return {
            "page": page,
            "totalCount": len(changes) if total_count is None else total_count,
            "pageSize": page_size,
            "data": changes,
        }
