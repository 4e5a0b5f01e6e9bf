"""Append-only activity feed of favorite-list changes."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Iterator, List, Optional, Tuple


class ActivityType(str, Enum):
    FAVORITE_ADDED = "favorite_added"
    FAVORITE_REMOVED = "favorite_removed"


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class ActivityEntry:
    """One favorite-list change."""
    type: ActivityType
    value: int
    timestamp: datetime = field(default_factory=_utcnow)

    @classmethod
    def favorite_added(cls, value: int) -> "ActivityEntry":
        return cls(ActivityType.FAVORITE_ADDED, value)

    @classmethod
    def favorite_removed(cls, value: int) -> "ActivityEntry":
        return cls(ActivityType.FAVORITE_REMOVED, value)

    def to_dict(self) -> dict:
        return {
            "type": self.type.value,
            "value": self.value,
            "timestamp": self.timestamp.isoformat(),
        }


class ActivityLog:
    """Chronological record of entries. There is no way to remove one."""

    def __init__(self) -> None:
        self._entries: List[ActivityEntry] = []

    def append(self, entry: ActivityEntry) -> None:
        self._entries.append(entry)

    def entries(self) -> Tuple[ActivityEntry, ...]:
        """Snapshot of all entries, oldest first."""
        return tuple(self._entries)

    def latest(self) -> Optional[ActivityEntry]:
        return self._entries[-1] if self._entries else None

    def __iter__(self) -> Iterator[ActivityEntry]:
        return iter(self.entries())

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"ActivityLog({len(self)} entries)"
