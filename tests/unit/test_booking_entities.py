"""Unit tests for the booking entity."""

import pytest

from booking_kit.application.ports.bookable import Bookable
from booking_kit.domain.entities.booking import Booking
from booking_kit.domain.value_objects.booking_status import BookingStatus


class Room(Bookable):
    """Bookable room used by the tests."""

    def __init__(self, room_id: str, available: bool = True):
        self._room_id = room_id
        self._available = available

    def id(self) -> str:
        return self._room_id

    def is_available(self) -> bool:
        return self._available


class TestBooking:
    """Test cases for Booking entity."""

    def test_booking_defaults(self):
        """Test basic booking creation."""
        booking = Booking(booking_id="b1", item=Room("room-1"), created_at="t0")

        assert booking.id == "b1"
        assert booking.user_id is None
        assert booking.status == BookingStatus.PENDING
        assert booking.created_at == "t0"
        assert booking.expires_at is None
        assert booking.metadata is None

    def test_item_id_delegates_to_item(self):
        """Test item identifier comes from the bookable item."""
        booking = Booking(booking_id=1, item=Room("room-7"), created_at=0)

        assert booking.item_id() == "room-7"

    def test_status_is_read_only(self):
        """Test status cannot be assigned directly."""
        booking = Booking(booking_id=1, item=Room("room-1"), created_at=0)

        with pytest.raises(AttributeError):
            booking.status = BookingStatus.CONFIRMED

    def test_metadata_is_opaque(self):
        """Test arbitrary metadata is stored as given."""
        meta = {"special_request": "Late check-in", "breakfast_included": True}
        booking = Booking(booking_id="b", item=Room("room-888"), created_at="2025-05-14T10:00:00Z", metadata=meta)

        assert booking.metadata is meta

    @pytest.mark.parametrize("status,predicate", [
        (BookingStatus.PENDING, "is_pending"),
        (BookingStatus.CONFIRMED, "is_confirmed"),
        (BookingStatus.CANCELED, "is_canceled"),
        (BookingStatus.EXPIRED, "is_expired"),
        (BookingStatus.FAILED, "is_failed"),
        (BookingStatus.COMPLETED, "is_completed"),
    ])
    def test_status_predicates(self, status, predicate):
        """Test each predicate matches exactly one status."""
        booking = Booking(booking_id=1, item=Room("r"), created_at=0, status=status)
        predicates = ["is_pending", "is_confirmed", "is_canceled", "is_expired", "is_failed", "is_completed"]

        for name in predicates:
            assert getattr(booking, name)() is (name == predicate)

    @pytest.mark.parametrize("status", list(BookingStatus))
    def test_active_and_final_partition(self, status):
        """Test is_active and is_final are complementary."""
        booking = Booking(booking_id=1, item=Room("r"), created_at=0, status=status)

        assert booking.is_active() != booking.is_final()
        assert booking.is_active() is (status in (BookingStatus.PENDING, BookingStatus.CONFIRMED))

    def test_equality_by_id(self):
        """Test bookings are equal when their IDs match."""
        first = Booking(booking_id="b1", item=Room("r1"), created_at=0)
        second = Booking(booking_id="b1", item=Room("r2"), created_at=5)
        third = Booking(booking_id="b2", item=Room("r1"), created_at=0)

        assert first == second
        assert hash(first) == hash(second)
        assert first != third
        assert first != "b1"

    def test_str(self):
        """Test string representation."""
        booking = Booking(booking_id="b1", item=Room("room-1"), created_at=0)

        assert str(booking) == "Booking(b1, room-1, pending)"
