"""
Activity feed and event logging.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Callable, Dict, List, Optional


class Severity(Enum):
    """Polarity of an activity entry as shown to players."""

    GOOD = "good"
    WARN = "warn"
    INFO = "info"


class EventType(Enum):
    """Types of game events."""

    DICE_ROLL = "dice_roll"
    MOVE = "move"
    PASS_GO = "pass_go"

    PURCHASE = "purchase"
    RENT_PAYMENT = "rent_payment"
    TAX_PAYMENT = "tax_payment"

    CARD_DRAW = "card_draw"
    CARD_EFFECT = "card_effect"

    BUILD_HOUSE = "build_house"
    BUILD_HOTEL = "build_hotel"

    MORTGAGE = "mortgage"
    UNMORTGAGE = "unmortgage"
    TRANSFER = "transfer"

    GO_TO_JAIL = "go_to_jail"
    JAIL_RELEASE = "jail_release"

    END_TURN = "end_turn"
    REJECTED = "rejected"


def _clock() -> str:
    return datetime.now().strftime("%H:%M")


@dataclass
class ActivityEntry:
    """One line of the activity feed."""

    severity: Severity
    title: str
    body: str
    timestamp: str
    event_type: Optional[EventType] = None
    player_id: Optional[str] = None
    details: Dict[str, Any] = field(default_factory=dict)

    def as_tuple(self) -> tuple:
        return (self.severity.value, self.title, self.body, self.timestamp)

    def __repr__(self) -> str:
        return f"[{self.severity.value}] {self.title}: {self.body}"


class ActivityLog:
    """
    Bounded, newest-first feed of human-readable game events.

    Only the most recent ``limit`` entries are retained.
    """

    def __init__(self, limit: int = 25, clock: Callable[[], str] = _clock):
        self.limit = limit
        self.clock = clock
        self.entries: List[ActivityEntry] = []
        self.total_logged = 0

    def log(
        self,
        severity: Severity,
        title: str,
        body: str = "",
        event_type: Optional[EventType] = None,
        player_id: Optional[str] = None,
        **details: Any,
    ) -> ActivityEntry:
        """Prepend an entry, dropping the oldest beyond the limit."""
        entry = ActivityEntry(severity, title, body, self.clock(), event_type, player_id, details)
        self.entries.insert(0, entry)
        self.total_logged += 1
        del self.entries[self.limit:]
        return entry

    def get_entries(self) -> List[ActivityEntry]:
        """Get all retained entries, newest first."""
        return self.entries.copy()

    def get_recent_entries(self, count: int = 10) -> List[ActivityEntry]:
        return self.entries[:count]

    def __len__(self) -> int:
        return len(self.entries)

    def clear(self) -> None:
        self.entries.clear()
