"""Pydantic schemas for exchanging bookings with external representations."""

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ...domain.entities.booking import Booking
from ...domain.value_objects.booking_status import BookingStatus


class BookingSchema(BaseModel):
    """External representation of a booking."""

    model_config = ConfigDict(use_enum_values=True, arbitrary_types_allowed=True)

    id: Any
    user_id: Optional[Any] = None
    item_id: str = Field(..., min_length=1, description="Identifier of the booked item")
    status: BookingStatus
    created_at: Any
    expires_at: Optional[Any] = None
    metadata: Optional[Any] = None

    @field_validator('status', mode='before')
    @classmethod
    def parse_status(cls, v):
        """Accept status members, values or names."""
        return BookingStatus.parse(v)

    @classmethod
    def from_booking(cls, booking: Booking) -> "BookingSchema":
        """Build the schema from a booking entity."""
        return cls(
            id=booking.id,
            user_id=booking.user_id,
            item_id=booking.item_id(),
            status=booking.status,
            created_at=booking.created_at,
            expires_at=booking.expires_at,
            metadata=booking.metadata
        )

    def to_dict(self) -> Dict[str, Any]:
        """Serialize, leaving out optional fields that are absent."""
        return self.model_dump(exclude_none=True)


class TransitionRequest(BaseModel):
    """Request to move a booking to another status."""

    booking_id: Any
    target_status: BookingStatus

    @field_validator('target_status', mode='before')
    @classmethod
    def parse_target_status(cls, v):
        """Validate the requested status."""
        return BookingStatus.parse(v)
