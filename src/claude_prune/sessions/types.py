"""Types for transcript pruning and backup selection."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum


class MessageKind(str, Enum):
    """Record types that count toward the retention quota."""

    USER = "user"
    ASSISTANT = "assistant"
    SYSTEM = "system"


MESSAGE_TYPES: frozenset[str] = frozenset(kind.value for kind in MessageKind)


@dataclass
class PruneResult:
    """Outcome of pruning a transcript.

    kept_count and dropped_count only count message lines; non-message
    lines are always part of kept_lines but never counted.
    """

    kept_lines: list[str] = field(default_factory=list)
    kept_count: int = 0
    dropped_count: int = 0
    assistant_message_count: int = 0


@dataclass(frozen=True)
class BackupEntry:
    name: str
    timestamp: int  # Unix milliseconds

    @property
    def created_at(self) -> datetime:
        """Local time the backup was taken."""
        return datetime.fromtimestamp(self.timestamp / 1000)
