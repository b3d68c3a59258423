"""Booking status value object and transition rules."""

from enum import Enum
from typing import Dict, FrozenSet, Union

from ..errors import InvalidStatus


class BookingStatus(Enum):
    """Booking lifecycle status enumeration."""
    PENDING = "pending"
    CONFIRMED = "confirmed"
    CANCELED = "canceled"
    EXPIRED = "expired"
    FAILED = "failed"
    COMPLETED = "completed"

    def __str__(self) -> str:
        """Display name, e.g. ``Pending``."""
        return self.value.capitalize()

    @property
    def is_terminal(self) -> bool:
        """Check if no further transition is permitted."""
        return self in TERMINAL_STATUSES

    @property
    def is_active(self) -> bool:
        """Check if the booking is still in progress."""
        return self in ACTIVE_STATUSES

    def can_transition_to(self, proposed: "BookingStatus") -> bool:
        """Check whether moving from this status to ``proposed`` is legal.

        Explicit rules are consulted first; terminal statuses reject every
        target, themselves included. Any pair not covered by a rule is legal
        only when it is a no-op (same status).
        """
        allowed = _ALLOWED_TRANSITIONS.get(self)
        if allowed is not None and proposed in allowed:
            return True
        if self in TERMINAL_STATUSES:
            return False
        return self == proposed

    @classmethod
    def parse(cls, value: Union["BookingStatus", str]) -> "BookingStatus":
        """Resolve a status from a member, its value or its name."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            key = value.strip().lower()
            for status in cls:
                if status.value == key:
                    return status
        raise InvalidStatus(value)


TERMINAL_STATUSES: FrozenSet[BookingStatus] = frozenset({
    BookingStatus.CANCELED,
    BookingStatus.EXPIRED,
    BookingStatus.FAILED,
    BookingStatus.COMPLETED,
})

ACTIVE_STATUSES: FrozenSet[BookingStatus] = frozenset({
    BookingStatus.PENDING,
    BookingStatus.CONFIRMED,
})

_ALLOWED_TRANSITIONS: Dict[BookingStatus, FrozenSet[BookingStatus]] = {
    BookingStatus.PENDING: frozenset({
        BookingStatus.CONFIRMED,
        BookingStatus.CANCELED,
        BookingStatus.EXPIRED,
        BookingStatus.FAILED,
    }),
    BookingStatus.CONFIRMED: frozenset({
        BookingStatus.COMPLETED,
        BookingStatus.CANCELED,
    }),
    BookingStatus.COMPLETED: frozenset(),
    BookingStatus.CANCELED: frozenset(),
    BookingStatus.EXPIRED: frozenset(),
    BookingStatus.FAILED: frozenset(),
}


def can_transition_to(current: BookingStatus, proposed: BookingStatus) -> bool:
    """Check whether ``current`` may move to ``proposed``."""
    return current.can_transition_to(proposed)
