"""Booking service layering rules, configuration and logging over the manager."""

import logging
from functools import partial
from typing import Callable, Iterable, Optional

from .booking_manager import BookingManager
from ..ports.bookable import Bookable
from ...config import Settings, get_settings
from ...domain.entities.booking import Booking
from ...domain.errors import InvalidStatusTransition, ItemUnavailable, RuleValidationFailed
from ...domain.rules import BookingRule, validate_booking
from ...domain.value_objects.booking_status import BookingStatus
from ...infrastructure.logging import (
    get_logger,
    log_business_rule_violation,
    log_status_transition,
    log_with_extra,
)


class BookingService:
    """Application service for the booking lifecycle."""

    def __init__(
        self,
        settings: Optional[Settings] = None,
        rules: Optional[Iterable[BookingRule]] = None,
        logger: Optional[logging.Logger] = None
    ):
        self._settings = settings or get_settings()
        self._rules = list(rules or [])
        self._logger = logger or get_logger(__name__)

    @property
    def settings(self) -> Settings:
        return self._settings

    def open_booking(
        self,
        booking_id,
        item: Bookable,
        created_at,
        user_id=None,
        expires_at=None,
        metadata=None
    ) -> Booking:
        """Create a pending booking and validate it against the configured rules.

        Availability is checked unless ``check_availability`` is turned off.
        A booking failing a rule is discarded.
        """
        create = BookingManager.try_create if self._settings.check_availability else BookingManager.create

        try:
            booking = create(booking_id, user_id, item, created_at, expires_at, metadata)
        except ItemUnavailable as exc:
            log_business_rule_violation(
                self._logger, "item_available", str(exc),
                booking_id=booking_id, item_id=exc.item_id
            )
            raise

        try:
            validate_booking(booking, self._rules)
        except RuleValidationFailed as exc:
            log_business_rule_violation(
                self._logger, exc.rule or "unknown", exc.message,
                booking_id=booking_id, item_id=booking.item_id()
            )
            raise

        log_with_extra(
            self._logger, logging.INFO, f"Booking {booking_id} created",
            booking_id=booking_id, item_id=booking.item_id(), status=str(booking.status)
        )
        return booking

    def confirm(self, booking: Booking) -> None:
        """Confirm a pending booking."""
        self._apply(booking, BookingStatus.CONFIRMED, BookingManager.confirm)

    def complete(self, booking: Booking) -> None:
        """Complete a confirmed booking."""
        self._apply(booking, BookingStatus.COMPLETED, BookingManager.complete)

    def fail(self, booking: Booking) -> None:
        """Mark a pending booking as failed."""
        self._apply(booking, BookingStatus.FAILED, BookingManager.fail)

    def cancel(self, booking: Booking) -> None:
        """Cancel a booking; checked against the status rules in strict mode."""
        self._apply(booking, BookingStatus.CANCELED, self._unguarded_or_strict(BookingManager.cancel, BookingStatus.CANCELED))

    def expire(self, booking: Booking) -> None:
        """Expire a booking; checked against the status rules in strict mode."""
        self._apply(booking, BookingStatus.EXPIRED, self._unguarded_or_strict(BookingManager.expire, BookingStatus.EXPIRED))

    def transition_to(self, booking: Booking, target: BookingStatus) -> None:
        """Dispatch to the operation that moves a booking to ``target``.

        Raises:
            InvalidStatusTransition: no operation leads to ``target``.
        """
        operations = {
            BookingStatus.CONFIRMED: self.confirm,
            BookingStatus.COMPLETED: self.complete,
            BookingStatus.FAILED: self.fail,
            BookingStatus.CANCELED: self.cancel,
            BookingStatus.EXPIRED: self.expire,
        }
        operation = operations.get(target)
        if operation is None:
            raise InvalidStatusTransition(booking.status, target)
        operation(booking)

    def _unguarded_or_strict(
        self,
        operation: Callable[[Booking], None],
        to: BookingStatus
    ) -> Callable[[Booking], None]:
        if self._settings.strict_transitions:
            return partial(BookingManager.transition, to=to)
        return operation

    def _apply(self, booking: Booking, to: BookingStatus, operation: Callable[[Booking], None]) -> None:
        from_status = booking.status
        try:
            operation(booking)
        except InvalidStatusTransition as exc:
            log_business_rule_violation(
                self._logger, "status_transition", str(exc),
                booking_id=booking.id, from_status=str(exc.from_status), to_status=str(exc.to_status)
            )
            raise
        log_status_transition(self._logger, booking.id, from_status, to)
