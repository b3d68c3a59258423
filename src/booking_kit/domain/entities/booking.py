"""Booking entity wrapping an arbitrary bookable item."""

from typing import Generic, Optional, TypeVar, TYPE_CHECKING

from ..value_objects.booking_status import BookingStatus

if TYPE_CHECKING:
    from ...application.ports.bookable import Bookable

ItemT = TypeVar("ItemT", bound="Bookable")
IdT = TypeVar("IdT")
TimestampT = TypeVar("TimestampT")
MetadataT = TypeVar("MetadataT")


class Booking(Generic[ItemT, IdT, TimestampT, MetadataT]):
    """Booking aggregate tracking one reservation and its lifecycle status.

    Identifier, timestamp and metadata types are chosen by the caller and
    never interpreted here. The status is read-only from the outside; it is
    changed by ``BookingManager`` operations only.
    """

    def __init__(
        self,
        booking_id: IdT,
        item: ItemT,
        created_at: TimestampT,
        user_id: Optional[IdT] = None,
        status: BookingStatus = BookingStatus.PENDING,
        expires_at: Optional[TimestampT] = None,
        metadata: Optional[MetadataT] = None
    ):
        self._id = booking_id
        self._user_id = user_id
        self._item = item
        self._status = status
        self._created_at = created_at
        self._expires_at = expires_at
        self._metadata = metadata

    @property
    def id(self) -> IdT:
        """Get booking ID."""
        return self._id

    @property
    def user_id(self) -> Optional[IdT]:
        """Get ID of the requesting user, if any."""
        return self._user_id

    @property
    def item(self) -> ItemT:
        """Get the booked item."""
        return self._item

    @property
    def status(self) -> BookingStatus:
        """Get booking status."""
        return self._status

    @property
    def created_at(self) -> TimestampT:
        """Get creation timestamp."""
        return self._created_at

    @property
    def expires_at(self) -> Optional[TimestampT]:
        """Get expiration timestamp."""
        return self._expires_at

    @property
    def metadata(self) -> Optional[MetadataT]:
        """Get caller-defined metadata."""
        return self._metadata

    def item_id(self) -> str:
        """Get the identifier of the booked item."""
        return self._item.id()

    def is_pending(self) -> bool:
        return self._status == BookingStatus.PENDING

    def is_confirmed(self) -> bool:
        return self._status == BookingStatus.CONFIRMED

    def is_canceled(self) -> bool:
        return self._status == BookingStatus.CANCELED

    def is_expired(self) -> bool:
        return self._status == BookingStatus.EXPIRED

    def is_failed(self) -> bool:
        return self._status == BookingStatus.FAILED

    def is_completed(self) -> bool:
        return self._status == BookingStatus.COMPLETED

    def is_active(self) -> bool:
        """Check if booking is pending or confirmed."""
        return self._status.is_active

    def is_final(self) -> bool:
        """Check if booking reached a terminal status."""
        return self._status.is_terminal

    def _set_status(self, status: BookingStatus) -> None:
        # Only BookingManager calls this.
        self._status = status

    def __eq__(self, other: object) -> bool:
        """Check equality based on booking ID."""
        if not isinstance(other, Booking):
            return False
        return self._id == other._id

    def __hash__(self) -> int:
        """Hash based on booking ID."""
        return hash(self._id)

    def __str__(self) -> str:
        """String representation."""
        return f"Booking({self._id}, {self.item_id()}, {self._status.value})"
