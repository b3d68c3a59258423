"""Booking error taxonomy."""

from typing import Any, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from .value_objects.booking_status import BookingStatus


class BookingError(Exception):
    """Base class for every booking-related failure."""


class ItemUnavailable(BookingError):
    """The bookable item reported itself unavailable."""

    def __init__(self, item_id: str):
        self.item_id = item_id
        super().__init__(f"Booking item with ID {item_id} is unavailable.")


class InvalidStatusTransition(BookingError):
    """The status model rejected a lifecycle move."""

    def __init__(self, from_status: "BookingStatus", to_status: "BookingStatus"):
        self.from_status = from_status
        self.to_status = to_status
        super().__init__(f"Invalid status transition from {from_status} to {to_status}")


class InvalidStatus(BookingError, ValueError):
    """A value that does not name any registered status."""

    def __init__(self, status: Any):
        self.status = status
        super().__init__(f"Booking status is invalid: {status}")


class CreationFailed(BookingError):
    """Booking could not be created."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(f"Failed to create booking: {message}")


class RuleValidationFailed(BookingError):
    """A business rule rejected the booking."""

    def __init__(self, message: str, rule: Optional[str] = None):
        self.message = message
        self.rule = rule
        super().__init__(f"Booking rule validation failed: {message}")


class QuantityExceeded(BookingError):
    """Requested quantity is above the available limit."""

    def __init__(self):
        super().__init__("Booking item quantity exceeds available limit.")


class GeneralError(BookingError):
    """Failure that fits no other category."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(f"General error: {message}")
