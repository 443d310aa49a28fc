"""Per-backend cache of list responses, used for id suggestions."""

from __future__ import annotations

from dataclasses import dataclass, field
import time
from typing import Any

CACHED_RESOURCES: tuple[str, ...] = ("labels", "threads", "messages", "drafts")


@dataclass(slots=True)
class Suggestion:
    id: str
    name: str
    raw_item: dict[str, Any]

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "name": self.name}


@dataclass(slots=True)
class ResponseCache:
    """Last list payload per resource for one backend.

    Instances are owned by the caller; nothing here is process-global.
    """

    items: dict[str, list[dict[str, Any]]] = field(
        default_factory=lambda: {resource: [] for resource in CACHED_RESOURCES}
    )
    last_updated: float | None = None

    def cache_response_data(self, body: Any) -> bool:
        """Store any resource lists found at the top level of ``body``."""
        if not isinstance(body, dict):
            return False
        updated = False
        for resource in CACHED_RESOURCES:
            value = body.get(resource)
            if isinstance(value, list):
                self.items[resource] = [item for item in value if isinstance(item, dict)]
                updated = True
        if updated:
            self.last_updated = time.time()
        return updated

    def suggestions(self, resource: str) -> list[Suggestion]:
        output: list[Suggestion] = []
        for item in self.items.get(resource, []):
            item_id = str(item.get("id", ""))
            if not item_id:
                continue
            name = item.get("name") or item.get("snippet") or f"{item_id[:30]}..."
            output.append(Suggestion(id=item_id, name=str(name), raw_item=item))
        return output


@dataclass(slots=True)
class DualResponseCache:
    """Separate caches for the reference and candidate backends."""

    real: ResponseCache = field(default_factory=ResponseCache)
    clone: ResponseCache = field(default_factory=ResponseCache)

    def for_side(self, side: str) -> ResponseCache:
        if side == "real":
            return self.real
        if side == "clone":
            return self.clone
        raise ValueError(f"Unknown side: {side}")
