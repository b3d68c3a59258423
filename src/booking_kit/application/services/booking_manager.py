"""Stateless manager applying the booking lifecycle rules."""

from ..ports.bookable import Bookable
from ...domain.entities.booking import Booking
from ...domain.errors import InvalidStatusTransition, ItemUnavailable
from ...domain.value_objects.booking_status import BookingStatus


class BookingManager:
    """Stateless facade for creating bookings and moving them through their lifecycle.

    Every operation is a static method working on the booking passed in;
    the manager keeps no state between calls and performs no I/O.
    """

    @staticmethod
    def create(
        booking_id,
        user_id,
        item: Bookable,
        created_at,
        expires_at=None,
        metadata=None
    ) -> Booking:
        """Create a pending booking without checking item availability.

        Use when availability has already been validated elsewhere.
        """
        return Booking(
            booking_id=booking_id,
            user_id=user_id,
            item=item,
            status=BookingStatus.PENDING,
            created_at=created_at,
            expires_at=expires_at,
            metadata=metadata
        )

    @staticmethod
    def try_create(
        booking_id,
        user_id,
        item: Bookable,
        created_at,
        expires_at=None,
        metadata=None
    ) -> Booking:
        """Create a pending booking if the item is available.

        Raises:
            ItemUnavailable: the item reported itself unavailable.
        """
        if not item.is_available():
            raise ItemUnavailable(item.id())

        return BookingManager.create(booking_id, user_id, item, created_at, expires_at, metadata)

    @staticmethod
    def transition(booking: Booking, to: BookingStatus) -> None:
        """Move the booking to ``to`` if the status model allows it.

        A move to the status the booking already has is rejected; the booking
        is left untouched on failure.

        Raises:
            InvalidStatusTransition: the move is not permitted.
        """
        from_status = booking.status
        if from_status == to or not from_status.can_transition_to(to):
            raise InvalidStatusTransition(from_status, to)
        booking._set_status(to)

    @staticmethod
    def confirm(booking: Booking) -> None:
        """Mark a booking as confirmed, typically after payment or approval."""
        BookingManager.transition(booking, BookingStatus.CONFIRMED)

    @staticmethod
    def complete(booking: Booking) -> None:
        """Mark a confirmed booking as completed."""
        BookingManager.transition(booking, BookingStatus.COMPLETED)

    @staticmethod
    def fail(booking: Booking) -> None:
        """Mark a pending booking as failed."""
        BookingManager.transition(booking, BookingStatus.FAILED)

    @staticmethod
    def cancel(booking: Booking) -> None:
        """Mark a booking as canceled.

        Unconditional: no transition check is made, terminal statuses included.
        """
        booking._set_status(BookingStatus.CANCELED)

    @staticmethod
    def expire(booking: Booking) -> None:
        """Mark a booking as expired. Unconditional, like ``cancel``."""
        booking._set_status(BookingStatus.EXPIRED)
