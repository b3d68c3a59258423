"""Business rules validated against a booking.

Rules are applied by the application layer after a booking is built; the
manager never runs them.
"""

from abc import ABC, abstractmethod
from typing import Iterable

from .entities.booking import Booking
from .errors import RuleValidationFailed


class BookingRule(ABC):
    """Validation rule for bookings."""

    name: str = "booking_rule"

    @abstractmethod
    def validate(self, booking: Booking) -> None:
        """Validate the booking.

        Raises:
            RuleValidationFailed: the booking breaks the rule.
        """
        raise NotImplementedError


class RequireUserRule(BookingRule):
    """Booking must name the requesting user."""

    name = "require_user"

    def validate(self, booking: Booking) -> None:
        if booking.user_id is None:
            raise RuleValidationFailed("Booking must have a user.", rule=self.name)


class ExpiryAfterCreationRule(BookingRule):
    """Expiration, when set, must come strictly after creation."""

    name = "expiry_after_creation"

    def validate(self, booking: Booking) -> None:
        if booking.expires_at is None:
            return
        if not booking.expires_at > booking.created_at:
            raise RuleValidationFailed("Booking must expire after it is created.", rule=self.name)


def validate_booking(booking: Booking, rules: Iterable[BookingRule]) -> None:
    """Run rules in order, stopping at the first failure."""
    for rule in rules:
        rule.validate(booking)
