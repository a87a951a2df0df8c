"""Simulated M-Pesa payments.

There is no gateway: a payment is recorded as completed straight away and
the booking becomes active in the same transaction.
"""
import logging
import random

from django.conf import settings
from django.db import transaction
from rest_framework.exceptions import NotFound, PermissionDenied, ValidationError

from bookings.services import get_booking
from bookings.state import ACTIVE, InvalidTransition, can_transition, transition
from users.services import is_admin
from .models import Payment

logger = logging.getLogger(__name__)

MPESA = 'mpesa'


def generate_transaction_id():
    # Not unique, not secret: simulated receipts only.
    return f"MPS{random.randrange(1000000):06d}"


def _check_payer(user, booking):
    if booking.customer_id != user.id and not is_admin(user):
        logger.warning("User %s may not pay for booking %s", user.pk, booking.pk)
        raise PermissionDenied("Forbidden")


@transaction.atomic
def simulate_payment(user, booking_id, phone_number):
    booking = get_booking(booking_id)
    _check_payer(user, booking)

    if not phone_number or not phone_number.strip():
        raise ValidationError({"phone_number": "Phone number is required."})
    if not can_transition(booking.status, ACTIVE):
        raise InvalidTransition(booking.status, ACTIVE)

    payment = Payment.objects.create(
        booking=booking,
        amount=booking.total_price,
        method=MPESA,
        transaction_id=generate_transaction_id(),
        status='completed',
    )
    transition(booking, ACTIVE, actor=user, note=f"payment {payment.transaction_id}")

    if getattr(settings, 'CARHIRE_MARK_BOOKING_PAID', False):
        booking.payment_status = 'paid'
        booking.save(update_fields=['payment_status', 'updated_at'])

    logger.info("Payment %s (%s) completed for booking %s, amount %s",
                payment.pk, payment.transaction_id, booking.pk, payment.amount)
    return payment


def process_payment(user, payment_id, status):
    """Record the outcome of a payment, as a gateway callback would."""
    try:
        payment = Payment.objects.select_related('booking').get(id=payment_id)
    except Payment.DoesNotExist:
        raise NotFound("Payment not found")
    _check_payer(user, payment.booking)

    payment.status = status
    payment.save(update_fields=['status'])
    logger.info("Payment %s marked %s", payment.pk, status)
    return payment
