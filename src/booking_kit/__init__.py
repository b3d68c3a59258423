"""Generic booking lifecycle toolkit."""

from .application.ports.bookable import Bookable
from .application.services.booking_manager import BookingManager
from .domain.entities.booking import Booking
from .domain.errors import (
    BookingError,
    CreationFailed,
    GeneralError,
    InvalidStatus,
    InvalidStatusTransition,
    ItemUnavailable,
    QuantityExceeded,
    RuleValidationFailed,
)
from .domain.value_objects.booking_status import BookingStatus, can_transition_to

__all__ = [
    "Bookable",
    "Booking",
    "BookingError",
    "BookingManager",
    "BookingStatus",
    "CreationFailed",
    "GeneralError",
    "InvalidStatus",
    "InvalidStatusTransition",
    "ItemUnavailable",
    "QuantityExceeded",
    "RuleValidationFailed",
    "can_transition_to",
]
