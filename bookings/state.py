"""Booking status transitions.

Every status change goes through :func:`transition`, which refuses moves
that are not listed in ``TRANSITIONS`` and writes a history row.
"""
import logging

from rest_framework.exceptions import ValidationError

logger = logging.getLogger(__name__)

PENDING = 'pending'
APPROVED = 'approved'
ACTIVE = 'active'
COMPLETED = 'completed'
CANCELLED = 'cancelled'

STATUSES = (PENDING, APPROVED, ACTIVE, COMPLETED, CANCELLED)

TRANSITIONS = {
    PENDING: {APPROVED, ACTIVE, CANCELLED},
    APPROVED: {ACTIVE, CANCELLED},
    ACTIVE: {COMPLETED, CANCELLED},
    COMPLETED: set(),
    CANCELLED: set(),
}


class InvalidTransition(ValidationError):
    default_code = 'invalid_transition'

    def __init__(self, from_status, to_status):
        if to_status not in STATUSES:
            message = f"Unknown booking status '{to_status}'."
        else:
            message = f"Cannot move booking from '{from_status}' to '{to_status}'."
        super().__init__({'status': message})
        self.message = message
        self.from_status = from_status
        self.to_status = to_status


def can_transition(from_status, to_status):
    return to_status in TRANSITIONS.get(from_status, ())


def transition(booking, to_status, actor=None, note=''):
    from .models import BookingStatusChange

    from_status = booking.status
    if not can_transition(from_status, to_status):
        raise InvalidTransition(from_status, to_status)

    booking.status = to_status
    booking.save(update_fields=['status', 'updated_at'])
    BookingStatusChange.objects.create(
        booking=booking,
        from_status=from_status,
        to_status=to_status,
        changed_by=actor,
        note=note,
    )
    logger.info("Booking %s moved %s -> %s", booking.pk, from_status, to_status)
    return booking
