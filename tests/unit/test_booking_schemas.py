"""Unit tests for booking serialization schemas."""

import pytest
from pydantic import ValidationError

from booking_kit.application.ports.bookable import Bookable
from booking_kit.application.services.booking_manager import BookingManager
from booking_kit.presentation.schemas.booking_schemas import BookingSchema, TransitionRequest
from booking_kit.domain.value_objects.booking_status import BookingStatus


class Room(Bookable):
    def __init__(self, room_id: str):
        self._room_id = room_id

    def id(self) -> str:
        return self._room_id

    def is_available(self) -> bool:
        return True


class TestBookingSchema:
    """Test cases for BookingSchema."""

    def test_from_booking_omits_absent_fields(self):
        """Test absent optional fields are left out of the output."""
        booking = BookingManager.create("b2", None, Room("room-2"), "t0")

        data = BookingSchema.from_booking(booking).to_dict()

        assert data == {"id": "b2", "item_id": "room-2", "status": "pending", "created_at": "t0"}

    def test_from_booking_with_all_fields(self):
        """Test every field is carried over."""
        booking = BookingManager.create(
            "b1", "u1", Room("room-888"), "2025-05-14T10:00:00Z", "2025-05-15T10:00:00Z",
            {"voucher_code": "PROMO2025"}
        )
        BookingManager.confirm(booking)

        data = BookingSchema.from_booking(booking).to_dict()

        assert data["user_id"] == "u1"
        assert data["status"] == "confirmed"
        assert data["expires_at"] == "2025-05-15T10:00:00Z"
        assert data["metadata"] == {"voucher_code": "PROMO2025"}

    def test_status_parsed_from_name(self):
        """Test status given by name is accepted."""
        schema = BookingSchema(id=1, item_id="r", status="EXPIRED", created_at=0)

        assert schema.status == BookingStatus.EXPIRED.value

    def test_unknown_status_rejected(self):
        """Test an unregistered status fails validation."""
        with pytest.raises(ValidationError, match="Booking status is invalid"):
            BookingSchema(id=1, item_id="r", status="archived", created_at=0)

    def test_empty_item_id_rejected(self):
        """Test item identifier must be non-empty."""
        with pytest.raises(ValidationError):
            BookingSchema(id=1, item_id="", status="pending", created_at=0)


class TestTransitionRequest:
    """Test cases for TransitionRequest."""

    def test_target_status_parsed(self):
        """Test target status parsing."""
        request = TransitionRequest(booking_id="b1", target_status="Confirmed")

        assert request.target_status is BookingStatus.CONFIRMED

    def test_invalid_target_status(self):
        """Test invalid target status fails validation."""
        with pytest.raises(ValidationError):
            TransitionRequest(booking_id="b1", target_status="refunded")
