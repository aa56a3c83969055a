"""Todo domain entity."""

import re
from dataclasses import dataclass, field, replace
from datetime import datetime, timezone
from typing import Any

from ulid import ULID

# datetime.fromisoformat stops at microseconds; other writers may store nanoseconds
_FRACTION = re.compile(r"(\.\d{6})\d+")


def _new_id() -> str:
    return str(ULID())


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class Todo:
    """Domain entity for a single todo entry.

    ``id``, ``task`` and ``created_at`` never change after creation; only
    ``completed`` is flipped, by building a new instance with ``toggled``.
    """

    task: str
    id: str = field(default_factory=_new_id)
    created_at: datetime = field(default_factory=_utcnow)
    completed: bool = False

    def toggled(self) -> "Todo":
        """Return a copy with ``completed`` flipped."""
        return replace(self, completed=not self.completed)

    def to_document(self) -> dict[str, Any]:
        """Serialize to the JSON shape stored in the collection document."""
        return {
            "id": self.id,
            "task": self.task,
            "created_at": self.created_at.isoformat().replace("+00:00", "Z"),
            "completed": self.completed,
        }

    @classmethod
    def from_document(cls, document: dict[str, Any]) -> "Todo":
        """Build a Todo from its stored JSON shape.

        Raises:
            KeyError: If a field is missing.
            ValueError: If ``created_at`` is not an ISO-8601 timestamp or
                ``completed`` is not a boolean.
        """
        completed = document["completed"]
        if not isinstance(completed, bool):
            raise ValueError(f"completed must be a boolean, got {completed!r}")

        raw = _FRACTION.sub(r"\1", document["created_at"].replace("Z", "+00:00"))
        created_at = datetime.fromisoformat(raw)
        if created_at.tzinfo is None:
            created_at = created_at.replace(tzinfo=timezone.utc)
        return cls(
            id=document["id"],
            task=document["task"],
            created_at=created_at,
            completed=completed,
        )
